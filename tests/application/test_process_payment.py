"""Tests for the checkout use cases (client token and payment).

Uses the fake gateway and in-memory fake repositories, no network.
"""

from decimal import Decimal

import pytest

from storefront.application.dto import CartItemSpec
from storefront.application.issue_client_token import IssueClientTokenHandler
from storefront.application.process_payment import ProcessPaymentHandler
from storefront.domain.exceptions import (
    EntityNotFoundError,
    GatewayError,
    OrderPersistenceError,
    PaymentDeclinedError,
    ValidationError,
)
from storefront.domain.model.value_objects import Actor, Money
from storefront.infrastructure.gateway.fake_gateway import FakeGateway
from tests.fakes import FakeOrderRepository, FakeProductRepository, make_product

BUYER = Actor("u-buyer", "Buyer")
CART = [CartItemSpec("10"), CartItemSpec("25.00"), CartItemSpec(3)]


def _trusting():
    gateway = FakeGateway()
    order_repo = FakeOrderRepository()
    return ProcessPaymentHandler(gateway, order_repo), gateway, order_repo


class TestClientToken:

    def test_returns_gateway_token(self):
        gateway = FakeGateway()
        token = IssueClientTokenHandler(gateway).handle()
        assert token.startswith("fake_client_token_")
        assert gateway.calls == [{"method": "generate_client_token"}]

    def test_gateway_failure_propagates(self):
        gateway = FakeGateway()
        gateway.configure(should_raise=True)
        with pytest.raises(GatewayError):
            IssueClientTokenHandler(gateway).handle()


class TestPaymentApproved:

    def test_charges_sum_of_unit_prices(self):
        handler, gateway, _ = _trusting()
        receipt = handler.handle("nonce-ok", CART, BUYER)

        sale = gateway.calls[-1]
        assert sale["amount"] == Money.of("38")
        assert sale["nonce"] == "nonce-ok"
        assert sale["submit_for_settlement"] is True
        assert receipt.amount == Decimal("38.00")
        assert receipt.status == "submitted_for_settlement"

    def test_records_one_order_with_gateway_payload(self):
        handler, _, order_repo = _trusting()
        receipt = handler.handle("nonce-ok", CART, BUYER)

        orders = order_repo.all()
        assert len(orders) == 1
        order = orders[0]
        assert order.id == receipt.order_id
        assert order.buyer_id == "u-buyer"
        assert len(order.items) == 3
        assert order.payment["id"] == receipt.transaction_id
        assert order.amount == Money.of("38")

    def test_repeated_entries_each_count_once(self):
        handler, gateway, _ = _trusting()
        handler.handle("n", [CartItemSpec("5"), CartItemSpec("5")], BUYER)
        assert gateway.calls[-1]["amount"] == Money.of("10")


class TestPaymentDeclined:

    def test_raises_with_gateway_payload_and_writes_nothing(self):
        handler, gateway, order_repo = _trusting()
        gateway.configure(should_succeed=False, failure_reason="Insufficient Funds")

        with pytest.raises(PaymentDeclinedError, match="Insufficient Funds") as excinfo:
            handler.handle("nonce-bad", CART, BUYER)

        assert excinfo.value.detail["message"] == "Insufficient Funds"
        assert order_repo.all() == []

    def test_gateway_error_writes_nothing(self):
        handler, gateway, order_repo = _trusting()
        gateway.configure(should_raise=True)
        with pytest.raises(GatewayError):
            handler.handle("nonce", CART, BUYER)
        assert order_repo.all() == []


class TestPaymentValidation:

    @pytest.mark.parametrize("nonce", [None, "", "   "])
    def test_missing_nonce_rejected(self, nonce):
        handler, gateway, _ = _trusting()
        with pytest.raises(ValidationError, match="Payment nonce is Required"):
            handler.handle(nonce, CART, BUYER)
        assert gateway.calls == []

    def test_empty_cart_rejected(self):
        handler, gateway, _ = _trusting()
        with pytest.raises(ValidationError, match="Cart is empty"):
            handler.handle("nonce", [], BUYER)
        assert gateway.calls == []

    def test_item_without_price_rejected(self):
        handler, gateway, _ = _trusting()
        with pytest.raises(ValidationError, match="Cart item price is Required"):
            handler.handle("nonce", [CartItemSpec("10"), CartItemSpec(None)], BUYER)
        assert gateway.calls == []

    def test_negative_price_rejected(self):
        handler, gateway, _ = _trusting()
        with pytest.raises(ValidationError):
            handler.handle("nonce", [CartItemSpec("-1")], BUYER)
        assert gateway.calls == []

    def test_sub_cent_price_rejected_before_charging(self):
        handler, gateway, order_repo = _trusting()
        with pytest.raises(ValidationError, match="more than two decimal places"):
            handler.handle("nonce", [CartItemSpec("10.005")], BUYER)
        assert gateway.calls == []
        assert order_repo.all() == []

    def test_oversized_price_is_a_validation_error(self):
        handler, gateway, _ = _trusting()
        with pytest.raises(ValidationError, match="out of range"):
            handler.handle("nonce", [CartItemSpec("1e30")], BUYER)
        assert gateway.calls == []

    def test_charged_amount_equals_recorded_amount(self):
        handler, gateway, order_repo = _trusting()
        receipt = handler.handle("nonce", [CartItemSpec("10.10"), CartItemSpec("0.05")], BUYER)
        charged = gateway.calls[-1]["amount"].to_gateway_amount()
        assert charged == "10.15"
        assert Decimal(charged) == receipt.amount == order_repo.all()[0].amount.amount


class TestCatalogPricing:

    def _setup(self):
        gateway = FakeGateway()
        order_repo = FakeOrderRepository()
        product_repo = FakeProductRepository([
            make_product("p1", "Kettle", price="10.00"),
            make_product("p2", "Teapot", price="25.00"),
        ])
        return ProcessPaymentHandler(gateway, order_repo, product_repo), gateway

    def test_client_prices_are_ignored(self):
        handler, gateway = self._setup()
        cart = [CartItemSpec("0.01", "p1"), CartItemSpec("0.01", "p2")]
        receipt = handler.handle("nonce", cart, BUYER)
        assert gateway.calls[-1]["amount"] == Money.of("35")
        assert receipt.amount == Decimal("35.00")

    def test_item_without_product_id_rejected(self):
        handler, gateway = self._setup()
        with pytest.raises(ValidationError, match="Cart item product ID is Required"):
            handler.handle("nonce", [CartItemSpec("10")], BUYER)
        assert gateway.calls == []

    def test_unknown_product_not_found(self):
        handler, gateway = self._setup()
        with pytest.raises(EntityNotFoundError):
            handler.handle("nonce", [CartItemSpec("10", "ghost")], BUYER)
        assert gateway.calls == []


class TestOrderWriteFailure:

    def test_reports_captured_transaction(self):
        handler, gateway, order_repo = _trusting()
        order_repo.fail_on_add = True

        with pytest.raises(OrderPersistenceError) as excinfo:
            handler.handle("nonce", CART, BUYER)

        sale_calls = [c for c in gateway.calls if c["method"] == "sale"]
        assert len(sale_calls) == 1
        assert excinfo.value.transaction_id.startswith("fake_txn_")
