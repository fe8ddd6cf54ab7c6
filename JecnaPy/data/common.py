from datetime import date


class Name:
    """
    A name which can also be known under a shorter alias (such as ``Matematika`` and ``M``).
    Two names are the same when their full forms are, the short form is only supplementary.
    """

    def __init__(self, full: str, short: str = None):
        if full is None:
            raise ValueError("A name must have its full form")
        self.full = full
        self.short = short

    @staticmethod
    def of(name) -> 'Name':
        """
        :param name: Either a :py:class:`Name` or a full name string
        :return: The matching :py:class:`Name`
        """
        return name if isinstance(name, Name) else Name(name)

    def __str__(self):
        return self.full

    def __repr__(self):
        return f'Name({self.full!r}, {self.short!r})'

    def __hash__(self):
        return hash(self.full)

    def __eq__(self, other):
        if isinstance(other, Name):
            return self.full == other.full
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Name):
            return self.full < other.full
        return NotImplemented


class SchoolYear:
    """
    A school year, spanning from September of its first calendar year to June of the second one.
    """
    #: Month on which a new school year begins
    FIRST_MONTH = 9

    def __init__(self, first_calendar_year: int):
        self.first_calendar_year = first_calendar_year

    @property
    def second_calendar_year(self):
        return self.first_calendar_year + 1

    @staticmethod
    def from_date(day: date) -> 'SchoolYear':
        if day.month >= SchoolYear.FIRST_MONTH:
            return SchoolYear(day.year)
        return SchoolYear(day.year - 1)

    def contains(self, day: date) -> bool:
        return SchoolYear.from_date(day) == self

    def __str__(self):
        return f'{self.first_calendar_year}/{self.second_calendar_year}'

    def __repr__(self):
        return f'SchoolYear({self.first_calendar_year})'

    def __hash__(self):
        return hash(self.first_calendar_year)

    def __eq__(self, other):
        if isinstance(other, SchoolYear):
            return self.first_calendar_year == other.first_calendar_year
        return NotImplemented
