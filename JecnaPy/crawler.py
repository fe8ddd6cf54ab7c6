import logging

from . import parser
from . import urls
from .data import SchoolYear, GradesPage
from .session import Session as WebSession
from .utils import encode_school_year, encode_school_year_half, encode_month

log = logging.getLogger(__name__)


def fetch_grades_page(session: WebSession, school_year: SchoolYear = None, first_half: bool = None) -> GradesPage:
    """
    Fetches and parses the grades table.
    Without a school year the current one is shown. The first half is picked when only the year is given.

    :param session: Web session
    :param school_year: (Optional) School year filter
    :param first_half: (Optional) Half of the school year. Needs the school year.
    :return: The parsed :py:class:`JecnaPy.data.GradesPage`
    """
    params = {}
    if school_year is not None:
        params.update([encode_school_year(school_year),
                       encode_school_year_half(True if first_half is None else first_half)])
    elif first_half is not None:
        raise ValueError("The school year half requires a school year")
    log.info(f"Fetching grades (params: {params})")
    return parser.parse_grades_page(session.fetch_page(urls.GRADES, params=params))


def fetch_attendances_html(session: WebSession, school_year: SchoolYear = None, month: int = None) -> str:
    """
    Fetches the raw passing records page.

    :param session: Web session
    :param school_year: (Optional) School year filter
    :param month: (Optional) Month filter. Needs the school year.
    :return: The page's HTML
    """
    params = {}
    if school_year is not None:
        params.update([encode_school_year(school_year)])
        if month is not None:
            params.update([encode_month(month)])
    elif month is not None:
        raise ValueError("The month requires a school year")
    log.info(f"Fetching attendances (params: {params})")
    return session.fetch_page(urls.ATTENDANCES, params=params)
