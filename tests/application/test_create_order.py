"""Integration tests for the CreateOrder use case."""

from shop.application.create_order import CreateOrderHandler
from tests.builders import make_shop


class TestCreateOrder:

    def test_creates_empty_order(self):
        shop = make_shop()
        dto = CreateOrderHandler(shop).handle()
        assert dto.id == 1
        assert dto.is_empty
        assert dto.total == "0.00 ₴"

    def test_persists_order(self):
        shop = make_shop()
        dto = CreateOrderHandler(shop).handle()
        assert shop.get_order_by_id(dto.id) is not None

    def test_sequential_ids(self):
        handler = CreateOrderHandler(make_shop())
        dto1 = handler.handle()
        dto2 = handler.handle()
        assert dto2.id == dto1.id + 1

    def test_created_at_formatted(self):
        dto = CreateOrderHandler(make_shop()).handle()
        # dd.mm.yyyy HH:MM
        assert len(dto.created_at) == 16
        assert dto.created_at[2] == "." and dto.created_at[5] == "."
