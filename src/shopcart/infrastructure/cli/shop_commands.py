"""Interactive shopping menu.

Everything typed here is glue: the menu reads a choice, calls one
use-case handler and prints the outcome.  ``click.prompt`` re-asks on
non-numeric input, so a typo never reaches the cart.
"""

from __future__ import annotations

import click

from shopcart.application.add_to_cart import AddToCartHandler
from shopcart.application.apply_discount import ApplyDiscountHandler
from shopcart.application.change_discount import ChangeDiscountHandler
from shopcart.application.dto import CartDTO, DiscountChoice
from shopcart.application.list_products import ListProductsHandler
from shopcart.application.remove_from_cart import RemoveFromCartHandler
from shopcart.application.session import ShoppingSession
from shopcart.application.show_cart import ShowCartHandler
from shopcart.application.show_eligible_products import ShowEligibleProductsHandler
from shopcart.application.update_cart_item import UpdateCartItemHandler
from shopcart.domain.model.outcome import CartOutcome
from shopcart.infrastructure.cli.product_commands import echo_products, open_session
from shopcart.infrastructure.config import Settings

MENU = (
    "1. Display Products",
    "2. Add to Cart",
    "3. Update Quantity in Cart",
    "4. Remove from Cart",
    "5. Display Cart",
    "6. Apply Discount",
    "7. Change Discount Strategy",
    "8. Display Buy One Get One Free Products",
    "9. Exit",
)
EXIT_CHOICE = 9


def _echo_outcome(outcome: CartOutcome) -> None:
    click.secho(outcome.message, fg=None if outcome.ok else "yellow")


def _prompt_discount_choice() -> DiscountChoice | None:
    click.echo("1. Percentage Discount")
    click.echo("2. Buy One Get One Free Discount")
    raw = click.prompt("Enter your choice", type=int)
    try:
        return DiscountChoice(raw)
    except ValueError:
        click.echo("Invalid discount type choice.")
        return None


def _display_cart(dto: CartDTO) -> None:
    if dto.is_empty:
        click.echo("Cart Items: Your cart is empty.")
    else:
        lines = ", ".join(f"{line.quantity} {line.product_name}" for line in dto.lines)
        click.echo(f"Cart Items: You have {lines} in your cart.")
    if dto.discount is not None:
        click.echo(f"Discount: {dto.discount}")
    click.echo(f"Total Bill: Your total bill is {dto.total}.")


# --- Menu actions -------------------------------------------------------------


def _display_products(session: ShoppingSession) -> None:
    click.echo("Available Products:")
    echo_products(ListProductsHandler(session).handle())


def _add_to_cart(session: ShoppingSession) -> None:
    _display_products(session)
    name = click.prompt("Enter the product name to add to the cart")
    quantity = click.prompt("Enter the quantity", type=click.IntRange(min=1))
    _echo_outcome(AddToCartHandler(session).handle(name, quantity))


def _update_quantity(session: ShoppingSession) -> None:
    name = click.prompt("Enter the product name to update quantity")
    quantity = click.prompt("Enter the new quantity", type=click.IntRange(min=0))
    _echo_outcome(UpdateCartItemHandler(session).handle(name, quantity))


def _remove_from_cart(session: ShoppingSession) -> None:
    name = click.prompt("Enter the product name to remove from the cart")
    _echo_outcome(RemoveFromCartHandler(session).handle(name))


def _show_cart(session: ShoppingSession) -> None:
    _display_cart(ShowCartHandler(session).handle())


def _apply_discount(session: ShoppingSession) -> None:
    handler = ApplyDiscountHandler(session)
    taken = handler.check_slot()
    if taken is not None:
        _echo_outcome(taken)
        return

    choice = _prompt_discount_choice()
    if choice is not None:
        _echo_outcome(handler.handle(choice))


def _change_discount(session: ShoppingSession) -> None:
    choice = _prompt_discount_choice()
    if choice is not None:
        for outcome in ChangeDiscountHandler(session).handle(choice):
            _echo_outcome(outcome)


def _show_eligible_products(session: ShoppingSession) -> None:
    click.echo("Eligible Products for Buy One Get One Free Discount:")
    echo_products(ShowEligibleProductsHandler(session).handle())


ACTIONS = {
    1: _display_products,
    2: _add_to_cart,
    3: _update_quantity,
    4: _remove_from_cart,
    5: _show_cart,
    6: _apply_discount,
    7: _change_discount,
    8: _show_eligible_products,
}


@click.command("shop")
@click.pass_obj
def shop(settings: Settings) -> None:
    """Start an interactive shopping session."""
    session = open_session(settings)

    while True:
        click.echo()
        click.echo("----- Menu -----")
        for entry in MENU:
            click.echo(entry)
        choice = click.prompt("Enter your choice", type=int)

        if choice == EXIT_CHOICE:
            click.echo("Exiting the program. Thank you!")
            return

        action = ACTIONS.get(choice)
        if action is None:
            click.echo("Invalid choice. Please enter a valid option.")
            continue
        action(session)
