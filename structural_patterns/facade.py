"""A restaurant whose staff and guests are coordinated through one facade."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass, field


def _say(message: str) -> str:
    print(message)
    return message


class Waiter:
    """Serves the dining room."""

    def cleans_table(self) -> str:
        return _say("Waiter cleans tables")

    def places_utensils(self) -> str:
        return _say("Waiter places utensils down")

    def gives_menu(self) -> str:
        return _say("Waiter gives menus to guests")

    def receives_customer_orders(self) -> str:
        return _say("Waiter receives food orders from guests")

    def writes_order(self) -> str:
        return _say("Waiter writes down orders")

    def sends_order_to_kitchen(self) -> str:
        return _say("Waiter sends ticket to kitchen")

    def serves_customers(self) -> str:
        return _say("Waiter serves customer")

    def gives_bill(self) -> str:
        return _say("Waiter gives bill to guests")


class Chef:
    """Works the kitchen."""

    def prepares_food(self) -> str:
        return _say("Chef prepares food")

    def cuts_food(self) -> str:
        return _say("Chef cuts food")

    def cooks_food(self) -> str:
        return _say("Chef cooks food")

    def plates_food(self) -> str:
        return _say("Chef plates food")

    def order_ready(self) -> str:
        return _say("'Order is Ready' the Chef yells")

    def washes_dishes(self) -> str:
        return _say("Chef washes dishes")


class Customer:
    """A guest of the restaurant."""

    def calls_for_reservation(self) -> str:
        return _say("Customer calls restaurant to make a reservation")

    def enters_restaurant(self) -> str:
        return _say("Customer enters restaurant and wait for a table")

    def goes_to_table(self) -> str:
        return _say("Customer is seated")

    def places_food_order(self) -> str:
        return _say("Customer places order")

    def starts_eating(self) -> str:
        return _say("Customer eats food")

    def finishes_eating(self) -> str:
        return _say("Customer finishes eating")

    def pays_bill(self) -> str:
        return _say("Customer pays bill")

    def leaves_table(self) -> str:
        return _say("Customer leaves table")

    def leaves_restaurant(self) -> str:
        return _say("Customer leaves restaurant")

    def rates_restaurant_review(self) -> str:
        return _say("Customer reviews restaurant")


@dataclass(eq=False)
class FrontOfHouse:
    """The dining-room subsystem, staffed by a waiter."""

    waiter: Waiter = field(default_factory=Waiter)

    def writes_reserve_time(self) -> str:
        return _say("FrontOfHouse writes down guests reservation time")

    def seats_guests(self, number: int) -> list[str]:
        """Seat ``number`` guests, one message each."""
        return [_say("Guest seated") for _ in range(number)]

    def receives_bill(self) -> str:
        return _say("FrontOfHouse receives guests bill")


@dataclass(eq=False)
class BackOfHouse:
    """The kitchen subsystem, staffed by a chef."""

    chef: Chef = field(default_factory=Chef)

    def receives_order(self) -> list[str]:
        """Have the chef prepare, cut, cook and plate the food."""
        return [
            self.chef.prepares_food(),
            self.chef.cuts_food(),
            self.chef.cooks_food(),
            self.chef.plates_food(),
        ]

    def calls_waiter(self) -> list[str]:
        """Announce the order and clean up."""
        return [self.chef.order_ready(), self.chef.washes_dishes()]


@dataclass(eq=False)
class RestaurantFacade:
    """One simple interface over the front of house, kitchen and guests.

    Every step returns the messages it produced, in order.
    """

    front_of_house: FrontOfHouse = field(default_factory=FrontOfHouse)
    back_of_house: BackOfHouse = field(default_factory=BackOfHouse)
    _queue: deque[Customer] = field(default_factory=deque, init=False, repr=False)

    @property
    def customer_queue(self) -> tuple[Customer, ...]:
        """The customers waiting for a table, first in line first."""
        return tuple(self._queue)

    def add_customer(self, customer: Customer) -> None:
        """Put a customer at the back of the waiting line."""
        self._queue.append(customer)

    def remove_customer(self) -> Customer:
        """Take the customer at the front of the waiting line."""
        if not self._queue:
            raise IndexError("no customers are waiting")
        return self._queue.popleft()

    def checks_for_reservation(self, customer: Customer) -> list[str]:
        return [
            customer.calls_for_reservation(),
            self.front_of_house.writes_reserve_time(),
            _say("RestaurantFacade confirms reservation"),
        ]

    def seats_customers(self, number: int) -> list[str]:
        """Seat the first ``number`` waiting customers and set their table."""
        if number > len(self._queue):
            raise IndexError(
                f"cannot seat {number} customers, only {len(self._queue)} waiting"
            )
        lines: list[str] = []
        for _ in range(number):
            customer = self._queue[0]
            lines.append(customer.enters_restaurant())
            lines.append(customer.goes_to_table())
            self.remove_customer()
        waiter = self.front_of_house.waiter
        lines.extend(self.front_of_house.seats_guests(number))
        lines.append(waiter.places_utensils())
        lines.append(waiter.gives_menu())
        return lines

    def requests_customers_order(self, customer: Customer) -> list[str]:
        waiter = self.front_of_house.waiter
        return [
            customer.places_food_order(),
            waiter.receives_customer_orders(),
            waiter.writes_order(),
        ]

    def create_order(self) -> list[str]:
        return [
            self.front_of_house.waiter.sends_order_to_kitchen(),
            *self.back_of_house.receives_order(),
            *self.back_of_house.calls_waiter(),
        ]

    def customer_consumes(self, customer: Customer) -> list[str]:
        return [
            self.front_of_house.waiter.serves_customers(),
            customer.starts_eating(),
            customer.finishes_eating(),
        ]

    def customer_checkout(self, customer: Customer) -> list[str]:
        return [
            self.front_of_house.waiter.gives_bill(),
            customer.pays_bill(),
            self.front_of_house.receives_bill(),
        ]

    def thank_customers(self, customer: Customer) -> list[str]:
        return [
            customer.leaves_table(),
            _say("Thank you! Come again."),
            customer.leaves_restaurant(),
            self.front_of_house.waiter.cleans_table(),
            customer.rates_restaurant_review(),
        ]


def serve_customers(
    restaurant: RestaurantFacade, first: Customer, second: Customer
) -> list[str]:
    """Take two customers through a whole visit; return every message."""
    restaurant.add_customer(first)
    restaurant.add_customer(second)

    guests = (first, second)
    lines: list[str] = []
    for guest in guests:
        lines.extend(restaurant.checks_for_reservation(guest))
    lines.extend(restaurant.seats_customers(len(guests)))
    for guest in guests:
        lines.extend(restaurant.requests_customers_order(guest))
    lines.extend(restaurant.create_order())
    for step in (
        restaurant.customer_consumes,
        restaurant.customer_checkout,
        restaurant.thank_customers,
    ):
        for guest in guests:
            lines.extend(step(guest))
    return lines


def main(argv: list[str] | None = None) -> int:
    """Serve a couple dinner through the restaurant facade."""
    if argv is None:
        argv = sys.argv[1:]
    restaurant = RestaurantFacade(FrontOfHouse(Waiter()), BackOfHouse(Chef()))
    serve_customers(restaurant, Customer(), Customer())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())