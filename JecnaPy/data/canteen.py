import re

#: The millisecond timestamp canteen links carry in their ``time`` parameter
TIME_REPLACE_EXP = re.compile('(?<=time=)\\d{13}')


class ItemDescription:
    def __init__(self, soup: str, rest: str):
        self.soup = soup
        self.rest = rest

    def __eq__(self, other):
        if isinstance(other, ItemDescription):
            return self.soup == other.soup and self.rest == other.rest
        return NotImplemented

    def __hash__(self):
        return hash((self.soup, self.rest))

    def __str__(self):
        return f'{self.soup}, {self.rest}' if self.soup else self.rest


class MenuItem:
    """
    A lunch which can be ordered from the canteen.
    Unlike the other entities this one is mutable, as its links expire and have to be refreshed.

    :param description: What is served, ``None`` when unknown
    :param price: Price of the lunch
    :param enabled: Whether the lunch can still be (un)ordered
    :param ordered: Whether the lunch is ordered
    :param order_path: Link which toggles the order
    :param put_on_exchange_path: Link which offers the lunch on the exchange, if possible
    :param allergens: Allergen list, if known
    """

    def __init__(self, description: ItemDescription, price: float, enabled: bool, ordered: bool, order_path: str,
                 put_on_exchange_path: str = None, allergens: list = None):
        self.description = description
        self.price = price
        self.enabled = enabled
        self.ordered = ordered
        self.order_path = order_path
        self.put_on_exchange_path = put_on_exchange_path
        self.allergens = allergens

    def update_time(self, time: int):
        """
        Replaces the timestamp in the order and exchange links.

        :param time: Timestamp in milliseconds
        """
        self.order_path = TIME_REPLACE_EXP.sub(str(time), self.order_path)
        if self.put_on_exchange_path is not None:
            self.put_on_exchange_path = TIME_REPLACE_EXP.sub(str(time), self.put_on_exchange_path)

    def __str__(self):
        return f'{self.description} ({self.price} Kč{", ordered" if self.ordered else ""})'
