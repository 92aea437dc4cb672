from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import httpx
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from jupiter_sdk.client import JupiterClient
from jupiter_sdk.config import JupiterSettings, load_settings
from jupiter_sdk.core.exceptions import JupiterClientError
from jupiter_sdk.schemas import (
    QuoteRequest,
    QuoteResponse,
    Router,
    Shield,
    SwapMode,
    TokenBalances,
    TokenPriceRequest,
    TokenPriceResponse,
)

logger = logging.getLogger(__name__)


def quote_table(quote: QuoteResponse) -> Table:
    table = Table(title=f"Quote {quote.swap_mode.value}")
    table.add_column("Label")
    table.add_column("In", justify="right")
    table.add_column("Out", justify="right")
    table.add_column("Percent", justify="right")
    for step in quote.route_plan:
        info = step.swap_info
        table.add_row(info.label or info.amm_key, info.in_amount, info.out_amount, str(step.percent))
    table.caption = (
        f"in={quote.in_amount} out={quote.out_amount} "
        f"threshold={quote.other_amount_threshold} slippage={quote.slippage_bps}bps"
    )
    return table


def price_table(prices: TokenPriceResponse, mints: Iterable[str]) -> Table:
    table = Table(title="Token Prices")
    table.add_column("Mint")
    table.add_column("Price", justify="right")
    for mint in mints:
        price = prices.price_of(mint)
        table.add_row(mint, price.price if price is not None else "n/a")
    return table


def routers_table(routers: List[Router]) -> Table:
    table = Table(title="Ultra Routers")
    table.add_column("Id")
    table.add_column("Name")
    for router in routers:
        table.add_row(router.id, router.name)
    return table


def shield_table(shield: Shield, mints: Iterable[str]) -> Table:
    table = Table(title="Shield Warnings")
    table.add_column("Mint")
    table.add_column("Type")
    table.add_column("Severity")
    for mint in mints:
        for warning in shield.for_mint(mint):
            table.add_row(mint, warning.warning_type, warning.severity)
    return table


def balances_table(balances: TokenBalances) -> Table:
    table = Table(title="Balances")
    table.add_column("Mint")
    table.add_column("Amount", justify="right")
    table.add_column("UI Amount", justify="right")
    for mint in balances:
        balance = balances[mint]
        table.add_row(mint, balance.amount, str(balance.ui_amount))
    return table


async def run_command(
    args: argparse.Namespace,
    settings: JupiterSettings,
    async_client: Optional[httpx.AsyncClient] = None,
) -> Table:
    async with JupiterClient.from_settings(settings, async_client=async_client) as client:
        if args.command == "quote":
            request = QuoteRequest(
                input_mint=args.input_mint,
                output_mint=args.output_mint,
                amount=args.amount,
                slippage_bps=args.slippage_bps,
                swap_mode=SwapMode(args.swap_mode) if args.swap_mode else None,
            )
            return quote_table(await client.get_quote(request))
        if args.command == "price":
            prices = await client.get_token_price(TokenPriceRequest.for_mints(args.mints))
            return price_table(prices, args.mints)
        if args.command == "routers":
            return routers_table(await client.routers())
        if args.command == "shield":
            return shield_table(await client.shield(args.mints), args.mints)
        if args.command == "balances":
            return balances_table(await client.get_token_balances(args.address))
    raise ValueError(f"Unknown command: {args.command}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Jupiter API CLI")
    parser.add_argument("--config", type=str, default=None, help="YAML file with a 'jupiter' section")
    parser.add_argument("--base-url", type=str, default=None, help="Override the Jupiter base URL")
    parser.add_argument("--api-key", type=str, default=None, help="Override the Jupiter API key")
    parser.add_argument("--verbose", action="store_true", help="Log requests at debug level")
    sub = parser.add_subparsers(dest="command", required=True)

    quote = sub.add_parser("quote", help="Fetch a swap quote")
    quote.add_argument("--input-mint", required=True)
    quote.add_argument("--output-mint", required=True)
    quote.add_argument("--amount", type=int, required=True, help="Raw amount before decimals")
    quote.add_argument("--slippage-bps", type=int, default=None)
    quote.add_argument("--swap-mode", choices=[mode.value for mode in SwapMode], default=None)

    price = sub.add_parser("price", help="Look up token prices")
    price.add_argument("mints", nargs="+")

    sub.add_parser("routers", help="List ultra routers")

    shield = sub.add_parser("shield", help="Show token safety warnings")
    shield.add_argument("mints", nargs="+")

    balances = sub.add_parser("balances", help="Show wallet balances")
    balances.add_argument("address")
    return parser


def resolve_settings(args: argparse.Namespace) -> JupiterSettings:
    settings = load_settings(Path(args.config) if args.config else None)
    overrides = {}
    if args.base_url:
        overrides["base_url"] = args.base_url
    if args.api_key:
        overrides["api_key"] = args.api_key
    if overrides:
        settings = replace(settings, **overrides)
    return settings


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = resolve_settings(args)
        table = asyncio.run(run_command(args, settings))
    except (JupiterClientError, ValidationError, FileNotFoundError) as exc:
        logger.debug("command %s failed", args.command, exc_info=True)
        Console(stderr=True).print(f"[red]{type(exc).__name__}[/red]: {exc}")
        return 1
    Console().print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
