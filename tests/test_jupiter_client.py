import asyncio
import json
from pathlib import Path

import httpx
import pytest

from jupiter_sdk import JupiterClient, JupiterSettings
from jupiter_sdk.core.exceptions import ConfigurationError, DecodingError, ProtocolError, TransportError
from jupiter_sdk.core.fixtures import load_fixture, load_fixture_text
from jupiter_sdk.schemas import (
    CancelRecurringOrderRequest,
    CancelTriggerOrder,
    CancelTriggerOrders,
    CreateRecurringOrderRequest,
    CreateTriggerOrder,
    ExecuteRecurringRequest,
    ExecuteTriggerOrder,
    GetRecurringOrders,
    GetTriggerOrders,
    OrderStatus,
    PriceDeposit,
    PriceWithdraw,
    QuoteRequest,
    QuoteResponse,
    RecurringOrderType,
    SwapMode,
    SwapRequest,
    TokenPriceRequest,
    UltraExecuteOrderRequest,
    UltraOrderRequest,
    WithdrawSide,
)

FIXTURES = Path(__file__).parent / "fixtures" / "jupiter"
BASE_URL = "https://lite-api.jup.ag"
SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
JUP_MINT = "JUPyiwrYJFskUPiHa7hkeR8VUtAeFoSYbKedZNsDvCN"
USER = "EXBdeRCdiNChKyD7akt64n9HgSXEpUtpPEhmbnm4L6iH"


class _Recorder:
    """Serves one fixture per path and remembers every request."""

    def __init__(self, routes, status_code=200):
        self.routes = routes
        self.status_code = status_code
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        name = self.routes.get(request.url.path)
        if name is None:
            return httpx.Response(404, text="not found")
        return httpx.Response(self.status_code, text=load_fixture_text(FIXTURES, name))

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def _client(async_client, **kwargs) -> JupiterClient:
    return JupiterClient(base_url=BASE_URL, async_client=async_client, **kwargs)


@pytest.mark.asyncio
async def test_get_quote_sends_camel_case_query():
    recorder = _Recorder({"/swap/v1/quote": "quote_exact_out.json"})
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as async_client:
        client = _client(async_client)
        quote = await client.get_quote(
            QuoteRequest(input_mint=SOL_MINT, output_mint=USDC_MINT, amount=1_000_000, swap_mode=SwapMode.EXACT_OUT)
        )

    request = recorder.last
    assert request.method == "GET"
    assert str(request.url).startswith(f"{BASE_URL}/swap/v1/quote?")
    assert dict(request.url.params) == {
        "inputMint": SOL_MINT,
        "outputMint": USDC_MINT,
        "amount": "1000000",
        "swapMode": "ExactOut",
    }
    assert request.headers["accept"] == "application/json"
    assert "x-api-key" not in request.headers
    assert quote.swap_mode is SwapMode.EXACT_OUT
    assert quote.out_amount == "1000000"


@pytest.mark.asyncio
async def test_list_parameters_are_sent_once_comma_joined():
    recorder = _Recorder({"/swap/v1/quote": "quote_ok.json", "/ultra/v1/order": "ultra_order_ok.json"})
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as async_client:
        client = _client(async_client)
        await client.get_quote(
            QuoteRequest(input_mint=SOL_MINT, output_mint=USDC_MINT, amount=1).with_dexes(["Orca", "Meteora DLMM"])
        )
        dex_params = recorder.last.url.params.get_list("dexes")
        await client.get_ultra_order(
            UltraOrderRequest(input_mint=SOL_MINT, output_mint=JUP_MINT, amount=1).with_exclude_routers(
                ["metis", "hashflow"]
            )
        )
        router_params = recorder.last.url.params.get_list("excludeRouters")

    assert dex_params == ["Orca,Meteora DLMM"]
    assert router_params == ["metis,hashflow"]


@pytest.mark.asyncio
async def test_swap_round_trip_posts_quote_and_api_key():
    recorder = _Recorder({"/swap/v1/quote": "quote_ok.json", "/swap/v1/swap": "swap_ok.json"})
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as async_client:
        client = _client(async_client, api_key="test-key")
        quote = await client.get_quote(QuoteRequest(input_mint=SOL_MINT, output_mint=USDC_MINT, amount=1_000_000))
        swap = await client.get_swap_transaction(
            SwapRequest(user_public_key=USER, quote_response=quote).with_wrap_and_unwrap_sol()
        )

    request = recorder.last
    body = json.loads(request.content)
    assert request.method == "POST"
    assert request.headers["content-type"] == "application/json"
    assert request.headers["x-api-key"] == "test-key"
    assert body["userPublicKey"] == USER
    assert body["wrapAndUnwrapSol"] is True
    assert body["quoteResponse"]["inAmount"] == "1000000"
    assert swap.last_valid_block_height == 987654


@pytest.mark.asyncio
async def test_swap_instructions():
    recorder = _Recorder({"/swap/v1/swap-instructions": "swap_instructions_ok.json"})
    quote = QuoteResponse.model_validate(load_fixture(FIXTURES, "quote_ok.json"))
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as async_client:
        client = _client(async_client)
        instructions = await client.get_swap_instructions(SwapRequest(user_public_key=USER, quote_response=quote))
    assert instructions.compute_budget_instructions[0].data == "AsBcFQA="


@pytest.mark.asyncio
async def test_ultra_flow():
    recorder = _Recorder(
        {
            "/ultra/v1/order": "ultra_order_ok.json",
            "/ultra/v1/execute": "ultra_execute_ok.json",
            f"/ultra/v1/balances/{USER}": "balances_ok.json",
            "/ultra/v1/shield": "shield_ok.json",
            "/ultra/v1/order/routers": "routers_ok.json",
        }
    )
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as async_client:
        client = _client(async_client)
        order = await client.get_ultra_order(
            UltraOrderRequest(input_mint=SOL_MINT, output_mint=JUP_MINT, amount=10_000_000).with_taker(USER)
        )
        executed = await client.ultra_execute_order(
            UltraExecuteOrderRequest(signed_transaction="c2lnbmVk", request_id=order.request_id)
        )
        execute_body = json.loads(recorder.last.content)
        balances = await client.get_token_balances(USER)
        shield = await client.shield([USDC_MINT])
        shield_params = dict(recorder.last.url.params)
        routers = await client.routers()

    assert execute_body == {"signedTransaction": "c2lnbmVk", "requestId": "0196e7a8-24c3-7c4b-9a52-1b5f8d7a1a55"}
    assert executed.status == "Success"
    assert balances["SOL"].ui_amount == 0.02
    assert shield_params == {"mints": USDC_MINT}
    assert shield.for_mint(USDC_MINT)[0].warning_type == "HAS_FREEZE_AUTHORITY"
    assert len(routers) == 4
    assert [r.method for r in recorder.requests] == ["GET", "POST", "GET", "GET", "GET"]


@pytest.mark.asyncio
async def test_trigger_flow():
    recorder = _Recorder(
        {
            "/trigger/v1/createOrder": "trigger_create_ok.json",
            "/trigger/v1/cancelOrder": "trigger_create_ok.json",
            "/trigger/v1/cancelOrders": "trigger_create_ok.json",
            "/trigger/v1/getTriggerOrders": "trigger_orders_ok.json",
        }
    )
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as async_client:
        client = _client(async_client)
        created = await client.create_trigger_order(
            CreateTriggerOrder.from_amounts(SOL_MINT, USDC_MINT, USER, USER, 1_000_000_000, 200_000_000)
        )
        cancelled = await client.cancel_trigger_order(CancelTriggerOrder(maker=USER, order=created.order))
        cancel_body = json.loads(recorder.last.content)
        await client.cancel_trigger_orders(CancelTriggerOrders(maker=USER))
        cancel_all_body = json.loads(recorder.last.content)
        listing = await client.get_trigger_orders(GetTriggerOrders(user=USER, order_status=OrderStatus.ACTIVE))

    assert created.request_id == "370100dd-1a85-421b-9278-27f0961ae5f4"
    assert cancel_body == {"maker": USER, "order": "CFG9Bmppz7eZbna96UizACJPYT3UgVgps3KkMNNo6P4k"}
    assert cancelled.transaction
    assert cancel_all_body == {"maker": USER}
    assert listing.orders[0].order_key == created.order


@pytest.mark.asyncio
async def test_execute_trigger_order_decodes_status():
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/trigger/v1/execute"
        return httpx.Response(200, json={"status": "Success", "signature": "sig", "code": 0})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as async_client:
        client = JupiterClient(base_url=BASE_URL, async_client=async_client)
        result = await client.execute_trigger_order(ExecuteTriggerOrder(request_id="req", signed_transaction="tx"))
    assert result.status == "Success"
    assert result.signature == "sig"


@pytest.mark.asyncio
async def test_recurring_flow():
    seen = []
    seen_bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        seen_bodies.append(request.content)
        if request.url.path == "/recurring/v1/getRecurringOrders":
            return httpx.Response(200, text=load_fixture_text(FIXTURES, "recurring_orders_ok.json"))
        if request.url.path == "/recurring/v1/execute":
            return httpx.Response(200, json={"status": "Success", "signature": "sig", "error": None})
        return httpx.Response(200, json={"requestId": "req-1", "transaction": "dHg="})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as async_client:
        client = JupiterClient(base_url=BASE_URL, async_client=async_client)
        created = await client.create_recurring_order(
            CreateRecurringOrderRequest.time_order(USER, USDC_MINT, SOL_MINT, 104_000_000, 2, 86_400)
        )
        deposit = await client.price_deposit(PriceDeposit(amount=1_000_000, order="order-1", user=USER))
        withdraw = await client.price_withdraw(
            PriceWithdraw(order="order-1", user=USER, input_or_output=WithdrawSide.IN).with_amount(500_000)
        )
        withdraw_body = json.loads(seen_bodies[-1])
        cancelled = await client.cancel_recurring_order(
            CancelRecurringOrderRequest(order="order-1", recurring_type=RecurringOrderType.PRICE, user=USER)
        )
        executed = await client.execute_recurring_order(
            ExecuteRecurringRequest(request_id=cancelled.request_id, signed_transaction="c2lnbmVk")
        )
        orders = await client.get_recurring_orders(
            GetRecurringOrders(recurring_type=RecurringOrderType.TIME, order_status=OrderStatus.HISTORY, user=USER)
        )

    assert created.request_id == "req-1"
    assert deposit.transaction == "dHg="
    assert withdraw.request_id == "req-1"
    assert withdraw_body == {"order": "order-1", "user": USER, "inputOrOutput": "In", "amount": 500_000}
    assert executed.status == "Success"
    assert executed.error is None
    assert orders.order_status is OrderStatus.HISTORY
    assert seen == [
        ("POST", "/recurring/v1/createOrder"),
        ("POST", "/recurring/v1/priceDeposit"),
        ("POST", "/recurring/v1/priceWithdraw"),
        ("POST", "/recurring/v1/cancelOrder"),
        ("POST", "/recurring/v1/execute"),
        ("GET", "/recurring/v1/getRecurringOrders"),
    ]


@pytest.mark.asyncio
async def test_token_price_lookup():
    recorder = _Recorder({"/price/v2": "price_ok.json"})
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as async_client:
        client = _client(async_client)
        prices = await client.get_token_price(TokenPriceRequest.for_mints([SOL_MINT, USDC_MINT]))

    assert recorder.last.url.params["ids"] == f"{SOL_MINT},{USDC_MINT}"
    assert SOL_MINT in prices.data
    assert 0.9 <= prices.price_of(USDC_MINT).as_float() <= 1.1


@pytest.mark.asyncio
async def test_error_status_surfaces_protocol_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, text='{"error":"invalid mint"}')

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as async_client:
        client = JupiterClient(base_url=BASE_URL, async_client=async_client)
        with pytest.raises(ProtocolError) as excinfo:
            await client.get_quote(QuoteRequest(input_mint="bad", output_mint=USDC_MINT, amount=1))
    assert excinfo.value.status_code == 400
    assert excinfo.value.body == '{"error":"invalid mint"}'


@pytest.mark.asyncio
async def test_non_json_success_is_decoding_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>maintenance</html>")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as async_client:
        client = JupiterClient(base_url=BASE_URL, async_client=async_client)
        with pytest.raises(DecodingError) as excinfo:
            await client.routers()
    assert excinfo.value.body == "<html>maintenance</html>"


@pytest.mark.asyncio
async def test_unreachable_host_is_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("no route to host", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as async_client:
        client = JupiterClient(base_url=BASE_URL, async_client=async_client)
        with pytest.raises(TransportError):
            await client.get_token_balances(USER)


@pytest.mark.asyncio
async def test_invalid_api_key_fails_before_sending():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, text="[]")

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as async_client:
        client = JupiterClient(base_url=BASE_URL, api_key="line\nbreak", async_client=async_client)
        with pytest.raises(ConfigurationError):
            await client.routers()
    assert calls == []


def test_invalid_base_url_fails_at_construction():
    with pytest.raises(ConfigurationError):
        JupiterClient(base_url="ftp://lite-api.jup.ag")


@pytest.mark.asyncio
async def test_concurrent_calls_share_one_client():
    recorder = _Recorder({"/swap/v1/quote": "quote_ok.json", "/price/v2": "price_ok.json"})
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as async_client:
        client = _client(async_client)
        quote, prices = await asyncio.gather(
            client.get_quote(QuoteRequest(input_mint=SOL_MINT, output_mint=USDC_MINT, amount=1_000_000)),
            client.get_token_price(TokenPriceRequest.for_mints([USDC_MINT])),
        )
    assert quote.in_amount == "1000000"
    assert prices.price_of(USDC_MINT) is not None
    assert len(recorder.requests) == 2


@pytest.mark.asyncio
async def test_from_settings_uses_configured_values():
    recorder = _Recorder({"/ultra/v1/order/routers": "routers_ok.json"})
    settings = JupiterSettings(base_url="https://api.jup.ag/", api_key="settings-key", timeout=3.0)
    async with httpx.AsyncClient(transport=httpx.MockTransport(recorder)) as async_client:
        client = JupiterClient.from_settings(settings, async_client=async_client)
        await client.routers()
    assert client.base_url == "https://api.jup.ag"
    assert str(recorder.last.url) == "https://api.jup.ag/ultra/v1/order/routers"
    assert recorder.last.headers["x-api-key"] == "settings-key"


@pytest.mark.asyncio
async def test_owned_client_closes_on_exit():
    async with JupiterClient(base_url=BASE_URL) as client:
        http = client._http
        assert http._client is not None
    assert http._client is None
