"""Unit tests for the Shop domain service."""

from shop.domain.model.value_objects import Money
from tests.builders import make_product, make_shop


class TestCatalogLookup:

    def test_get_product_by_id(self):
        shop = make_shop()
        product = shop.get_product_by_id(2)
        assert product is not None
        assert product.name == "Mouse"

    def test_unknown_product_is_none(self):
        assert make_shop().get_product_by_id(99) is None

    def test_products_in_catalog_order(self):
        assert [p.id for p in make_shop().products] == [1, 2, 3]


class TestOrderLifecycle:

    def test_create_order_appends_and_returns(self):
        shop = make_shop()
        order = shop.create_order()
        assert order.id == 1
        assert shop.list_orders() == [order]

    def test_ids_are_sequential(self):
        shop = make_shop()
        ids = [shop.create_order().id for _ in range(3)]
        assert ids == [1, 2, 3]

    def test_ids_never_reissued_after_delete(self):
        shop = make_shop()
        shop.create_order()
        shop.create_order()
        assert shop.delete_order(2) is True

        assert shop.create_order().id == 3
        assert [o.id for o in shop.list_orders()] == [1, 3]

    def test_get_order_by_id(self):
        shop = make_shop()
        order = shop.create_order()
        assert shop.get_order_by_id(order.id) is order

    def test_never_created_order_is_none(self):
        shop = make_shop()
        shop.create_order()
        assert shop.get_order_by_id(42) is None

    def test_delete_removes_exactly_that_order(self):
        shop = make_shop()
        first, second, third = (shop.create_order() for _ in range(3))
        assert shop.delete_order(second.id) is True
        assert shop.list_orders() == [first, third]

    def test_delete_unknown_reports_failure(self):
        shop = make_shop()
        order = shop.create_order()
        assert shop.delete_order(7) is False
        assert shop.list_orders() == [order]


class TestGrandTotal:

    def test_no_orders_is_zero(self):
        assert make_shop().grand_total() == Money.zero()

    def test_sums_all_orders(self):
        shop = make_shop()
        mouse = shop.get_product_by_id(2)
        keyboard = shop.get_product_by_id(3)

        shop.create_order().add_product(mouse, 3)
        shop.create_order().add_product(keyboard, 1)

        assert shop.grand_total() == Money.of("2700")

    def test_catalog_in_other_currency(self):
        shop = make_shop(
            products=[make_product(1, "Mouse", "20", currency="USD")],
            currency="USD",
        )
        order = shop.create_order()
        order.add_product(shop.get_product_by_id(1), 3)

        assert order.currency == "USD"
        assert order.total == Money.of("60", "USD")
        assert shop.grand_total() == Money.of("60", "USD")
