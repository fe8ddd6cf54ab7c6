from ..data import SchoolYear
from .. import urls


def encode_school_year(school_year: SchoolYear) -> (str, int):
    """
    :return: ``parameter, value`` query pair selecting the school year
    """
    return urls.SCHOOL_YEAR_PARAM, school_year.first_calendar_year - urls.SCHOOL_YEAR_ID_OFFSET


def encode_school_year_half(first_half: bool) -> (str, int):
    """
    :return: ``parameter, value`` query pair selecting either half of a school year
    """
    return urls.SCHOOL_YEAR_HALF_PARAM, urls.FIRST_HALF_ID if first_half else urls.SECOND_HALF_ID


def encode_month(month: int) -> (str, int):
    """
    :param month: Calendar month, 1 to 12
    :return: ``parameter, value`` query pair selecting the month
    """
    if not 1 <= month <= 12:
        raise ValueError(f"Invalid month {month}")
    return urls.MONTH_PARAM, month
