"""Interactive menu: the read-dispatch-render loop over a Shop.

Each action recovers from its own failures: malformed input and unknown
IDs are printed and control returns to the menu. Only the exit code ends
the loop.
"""

from __future__ import annotations

import logging
from enum import Enum

import click

from shop.application.create_order import CreateOrderHandler
from shop.application.delete_order import DeleteOrderHandler
from shop.application.dto import OrderDTO
from shop.application.edit_order import EditOrderHandler
from shop.application.list_orders import ListOrdersHandler
from shop.application.list_products import ListProductsHandler
from shop.application.show_order import ShowOrderHandler
from shop.application.show_product import ShowProductHandler
from shop.domain.exceptions import DomainException
from shop.domain.service.shop import Shop
from shop.infrastructure.cli.prompts import (
    ask_choice,
    ask_int,
    ask_positive_int,
    confirm,
)
from shop.infrastructure.cli.rendering import (
    display_order,
    display_orders_report,
    display_products,
)

logger = logging.getLogger(__name__)

# Errors an action reports to the user instead of propagating.
_REPORTABLE = (DomainException, click.ClickException)


class MainMenuChoice(Enum):
    CREATE_ORDER = "1"
    EDIT_ORDER = "2"
    VIEW_ORDER = "3"
    DELETE_ORDER = "4"
    VIEW_ALL_ORDERS = "5"
    EXIT = "0"


class EditMenuChoice(Enum):
    ADD_PRODUCT = "1"
    CHANGE_QUANTITY = "2"
    REMOVE_PRODUCT = "3"
    DONE = "0"


def _report(exc: Exception) -> None:
    message = exc.message if isinstance(exc, click.ClickException) else str(exc)
    click.echo(f"\n{message}")


class Menu:

    def __init__(self, shop: Shop) -> None:
        self._list_products = ListProductsHandler(shop)
        self._show_product = ShowProductHandler(shop)
        self._create_order = CreateOrderHandler(shop)
        self._edit_order = EditOrderHandler(shop)
        self._show_order = ShowOrderHandler(shop)
        self._delete_order = DeleteOrderHandler(shop)
        self._list_orders = ListOrdersHandler(shop)

        self._actions = {
            MainMenuChoice.CREATE_ORDER: self.create_order,
            MainMenuChoice.EDIT_ORDER: self.edit_order,
            MainMenuChoice.VIEW_ORDER: self.view_order,
            MainMenuChoice.DELETE_ORDER: self.delete_order,
            MainMenuChoice.VIEW_ALL_ORDERS: self.view_all_orders,
        }
        self._edit_actions = {
            EditMenuChoice.ADD_PRODUCT: self._add_products,
            EditMenuChoice.CHANGE_QUANTITY: self._change_quantity,
            EditMenuChoice.REMOVE_PRODUCT: self._remove_product,
        }

    def run(self) -> None:
        while True:
            self._show_main_menu()
            choice = ask_choice("\nYour choice", MainMenuChoice)

            if choice is MainMenuChoice.EXIT:
                click.echo("\nGoodbye!")
                return

            if choice is None:
                click.echo("\nInvalid choice!")
            else:
                logger.debug("Main menu: %s", choice.name)
                self._actions[choice]()

            click.pause("\nPress any key to continue...")

    # --- Main menu actions ----------------------------------------------------

    def create_order(self) -> None:
        click.clear()
        click.echo("    NEW ORDER")

        dto = self._create_order.handle()
        click.echo(f"\nCreated order #{dto.id}")

        self._add_products(dto.id)

        click.echo(f"\nOrder #{dto.id} created successfully!")
        display_order(self._show_order.handle(dto.id))

    def edit_order(self) -> None:
        click.clear()
        click.echo("    EDIT ORDER")

        dto = self._select_order("\nEnter the order number to edit")
        if dto is None:
            return
        display_order(dto)

        while True:
            click.echo("\n1. Add product")
            click.echo("2. Change product quantity")
            click.echo("3. Remove product")
            click.echo("0. Finish editing")
            choice = ask_choice("\nYour choice", EditMenuChoice)

            if choice is EditMenuChoice.DONE:
                break
            if choice is None:
                click.echo("\nInvalid choice!")
            else:
                self._edit_actions[choice](dto.id)

            display_order(self._show_order.handle(dto.id))

        click.echo("\nOrder updated!")

    def view_order(self) -> None:
        click.clear()
        click.echo("    VIEW ORDER")

        dto = self._select_order("\nEnter the order number")
        if dto is not None:
            display_order(dto)

    def delete_order(self) -> None:
        click.clear()
        click.echo("    DELETE ORDER")

        dto = self._select_order("\nEnter the order number to delete")
        if dto is None:
            return
        display_order(dto)

        if not confirm("\nAre you sure? (y/n)"):
            click.echo("\nDeletion cancelled!")
            return

        try:
            self._delete_order.handle(dto.id)
        except DomainException as exc:
            _report(exc)
            return
        click.echo(f"\nOrder #{dto.id} deleted successfully!")

    def view_all_orders(self) -> None:
        click.clear()
        display_orders_report(self._list_orders.handle())

    # --- Order editing steps --------------------------------------------------

    def _add_products(self, order_id: int) -> None:
        while True:
            display_products(self._list_products.handle())

            try:
                product_id = ask_int("\nEnter product ID (0 to finish)", "product ID")
            except click.BadParameter as exc:
                _report(exc)
            else:
                if product_id == 0:
                    return
                self._add_product(order_id, product_id)

            if not confirm("\nAdd another product? (y/n)"):
                return

    def _add_product(self, order_id: int, product_id: int) -> None:
        try:
            product = self._show_product.handle(product_id)
            quantity = ask_positive_int("Enter quantity", "quantity")
            line = self._edit_order.add_product(order_id, product.id, quantity)
        except _REPORTABLE as exc:
            _report(exc)
            return
        click.echo(f"\nAdded: {line.product_name} x{quantity} (now {line.quantity} in the order)")

    def _change_quantity(self, order_id: int) -> None:
        display_products(self._list_products.handle())
        try:
            product_id = ask_int("\nEnter product ID", "product ID")
            if not self._show_order.handle(order_id).has_product(product_id):
                click.echo("\nProduct not found in the order!")
                return
            quantity = ask_int("Enter new quantity (0 to remove)", "quantity")
            self._edit_order.change_quantity(order_id, product_id, quantity)
        except _REPORTABLE as exc:
            _report(exc)
            return
        click.echo("\nQuantity updated!")

    def _remove_product(self, order_id: int) -> None:
        display_products(self._list_products.handle())
        try:
            product_id = ask_int("\nEnter product ID to remove", "product ID")
            self._edit_order.remove_product(order_id, product_id)
        except _REPORTABLE as exc:
            _report(exc)
            return
        click.echo("\nProduct removed from the order!")

    # --- Helpers --------------------------------------------------------------

    def _show_main_menu(self) -> None:
        click.clear()
        click.echo("              MENU")
        click.echo()
        click.echo("  1. Create order")
        click.echo("  2. Edit order")
        click.echo("  3. View order")
        click.echo("  4. Delete order")
        click.echo("  5. View all orders")
        click.echo("  0. Exit")

    def _select_order(self, text: str) -> OrderDTO | None:
        """Show the all-orders report and resolve the order number typed in."""
        display_orders_report(self._list_orders.handle())
        try:
            order_id = ask_int(text, "order number")
            return self._show_order.handle(order_id)
        except _REPORTABLE as exc:
            _report(exc)
            return None
