import logging

from . import crawler
from .data import SchoolYear
from .session import Session

logging.basicConfig(level=logging.INFO)
log = logging.getLogger(__name__)


class Jecna:
    """
    Entry point to the school web, scraping it through a logged in session.
    """

    def __init__(self, username: str = None, password: str = None, cookies: str = None):
        self.session = Session(username=username, password=password, cookies=cookies)

    def fetch_grades_page(self, school_year: SchoolYear = None, first_half: bool = None):
        return crawler.fetch_grades_page(self.session, school_year=school_year, first_half=first_half)

    def fetch_attendances_html(self, school_year: SchoolYear = None, month: int = None):
        return crawler.fetch_attendances_html(self.session, school_year=school_year, month=month)

    def close(self):
        log.debug("Closing the session")
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
