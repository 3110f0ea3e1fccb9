"""Tests for the storefront script wiring."""

import io

import httpx
import pytest
from rich.console import Console

from src.shopnest.core.clock import FixedClock
from src.shopnest.core.errors import NetworkFailure
from src.shopnest.core.services import ApiClient
from src.shopnest.entities.service.product import Product, ProductCatalog
from src.shopnest.runtime.config.config_data import (
    ApiConfig,
    ConfigData,
    StorefrontConfig,
)
from src.shopnest.runtime.context import with_context
from src.shopnest.storefront import (
    API_FAILURE_PREFIX,
    API_SUCCESS_PREFIX,
    StorefrontResult,
    build_cart,
    call_api,
    run_storefront,
)


class TestBuildCart:
    """Tests for the cart assembly step."""

    def test_found_product_then_first_item(self, catalog: ProductCatalog):
        """Should add the searched product followed by the first catalog item."""
        cart = build_cart(catalog)

        assert [p.name for p in cart.items()] == ["Playera local", "Pulsera artesanal"]
        assert cart.total() == 370.0

    def test_missing_product_is_skipped(self, catalog: ProductCatalog):
        """Should only add the first item when the search finds nothing."""
        cart = build_cart(catalog, product_id="P999")
        assert [p.id for p in cart.items()] == ["P001"]

    def test_searching_first_item_adds_it_twice(self, catalog: ProductCatalog):
        """Should keep the duplicate when the search target is the first item."""
        cart = build_cart(catalog, product_id="P001")

        assert [p.id for p in cart.items()] == ["P001", "P001"]
        assert cart.items()[0] is cart.items()[1]
        assert cart.total() == 240.0

    def test_search_uses_given_catalog(self):
        catalog = ProductCatalog(
            [
                Product(id="X1", name="Uno", price=1.0),
                Product(id="P002", name="Dos", price=2.0),
            ]
        )
        assert [p.name for p in build_cart(catalog).items()] == ["Dos", "Uno"]


class TestCallApi:
    """Tests for the API step and its error boundary."""

    def test_success_line(self, console: Console, output: io.StringIO, mock_http_client_factory):
        result, error = call_api(console, ApiClient(mock_http_client_factory(text="{}")))

        assert error is None
        assert output.getvalue() == f"{API_SUCCESS_PREFIX}{result}\n"

    def test_failure_line(self, console: Console, output: io.StringIO, unreachable_http_client: httpx.Client):
        result, error = call_api(console, ApiClient(unreachable_http_client))

        assert result is None
        assert isinstance(error, NetworkFailure)
        assert output.getvalue() == f"{API_FAILURE_PREFIX}{error}\n"

    def test_body_printed_verbatim(self, console: Console, output: io.StringIO, mock_http_client_factory):
        """Should print tabs and carriage returns from the body unchanged."""
        body = 'a\tb\rc{"x":1}'
        result, _ = call_api(console, ApiClient(mock_http_client_factory(text=body)))

        assert result.endswith('a\tb\rc{"x":1}...')
        assert output.getvalue() == f"{API_SUCCESS_PREFIX}{result}\n"


class TestRunStorefront:
    """End-to-end tests of the script against simulated HTTP."""

    def test_successful_run_output(self, console: Console, output: io.StringIO, fixed_clock: FixedClock, mock_http_client_factory):
        """Should print cart, summary and the API line in order."""
        body = '{"id":1,"title":"Essence Mascara Lash Princess"}'
        result = run_storefront(
            console,
            mock_http_client_factory(status_code=200, text=body),
            clock=fixed_clock,
            config=ConfigData(),
        )

        assert output.getvalue() == (
            "Current cart: [Playera local ($250.0), Pulsera artesanal ($120.0)]\n"
            "Cart total: $370.0\n"
            "=== ShopNest ORDER SUMMARY ===\n"
            "Date/Time: 2024-03-05 09:07:02\n"
            "Products:\n"
            " - Playera local $250.0\n"
            " - Pulsera artesanal $120.0\n"
            "TOTAL: $370.0\n"
            "\n"
            f"{API_SUCCESS_PREFIX}HTTP 200 | Body (primeros 120 chars): {body}...\n"
        )
        assert isinstance(result, StorefrontResult)
        assert result.order.total == 370.0
        assert result.api_error is None
        assert result.api_result == f"HTTP 200 | Body (primeros 120 chars): {body}..."

    def test_network_failure_is_reported_not_raised(self, console: Console, output: io.StringIO, fixed_clock: FixedClock, unreachable_http_client: httpx.Client):
        """Should print the fallback message and return normally."""
        result = run_storefront(console, unreachable_http_client, clock=fixed_clock, config=ConfigData())

        last_line = output.getvalue().splitlines()[-1]
        assert last_line == f"{API_FAILURE_PREFIX}[Errno -2] Name or service not known"
        assert last_line.startswith("No se pudo llamar a la API")
        assert isinstance(result.api_error, NetworkFailure)
        assert result.api_result is None
        assert "TOTAL: $370.0" in output.getvalue()

    def test_undecodable_body_is_reported_not_raised(self, console: Console, output: io.StringIO, fixed_clock: FixedClock, mock_http_client_factory):
        """Should treat a corrupt gzip body as a failed call."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                headers={"Content-Encoding": "gzip"},
                stream=httpx.ByteStream(b"definitely not gzip"),
            )

        result = run_storefront(console, mock_http_client_factory(handler=handler), clock=fixed_clock, config=ConfigData())

        assert isinstance(result.api_error, NetworkFailure)
        assert isinstance(result.api_error.__cause__, httpx.DecodingError)
        assert output.getvalue().splitlines()[-1].startswith(API_FAILURE_PREFIX)

    def test_long_body_preview_in_output(self, console: Console, output: io.StringIO, fixed_clock: FixedClock, mock_http_client_factory):
        """Should print exactly 120 body characters then the ellipsis."""
        body = "x" * 119 + "Y" + "z" * 200
        run_storefront(console, mock_http_client_factory(text=body), clock=fixed_clock, config=ConfigData())

        last_line = output.getvalue().splitlines()[-1]
        assert last_line.endswith("x" * 119 + "Y...")
        assert "z" not in last_line

    def test_uses_configured_url_and_language(self, console: Console, output: io.StringIO, fixed_clock: FixedClock, mock_http_client_factory):
        """Should honour the configured API URL and Spanish labels."""
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(str(request.url))
            return httpx.Response(200, text="{}")

        override = ConfigData(
            api=ApiConfig(sample_product_url="https://mirror.test/products/1"),
            storefront=StorefrontConfig(language="es"),
        )
        with with_context(override):
            run_storefront(console, mock_http_client_factory(handler=handler), clock=fixed_clock)

        text = output.getvalue()
        assert seen == ["https://mirror.test/products/1"]
        assert text.startswith("Carrito actual: [Playera local ($250.0), Pulsera artesanal ($120.0)]\n")
        assert "Total carrito: $370.0\n" in text
        assert "=== RESUMEN PEDIDO ShopNest ===\n" in text
        assert "Fecha/Hora: 2024-03-05 09:07:02\n" in text
        assert "Productos:\n" in text

    def test_cart_mutation_after_run_keeps_order(self, console: Console, fixed_clock: FixedClock, mock_http_client_factory):
        result = run_storefront(console, mock_http_client_factory(), clock=fixed_clock, config=ConfigData())
        result.cart.add(Product(id="P003", name="Taza ShopNest", price=99.0))

        assert result.cart.total() == pytest.approx(469.0)
        assert result.order.total == 370.0
