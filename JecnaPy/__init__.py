"""
JecnaPy
~~~~~~~~~~~~~~~~~~~

A client scraping grades and other student records out of the SPŠE Ječná school web (spsejecna.cz)

:license: GPL, see LICENSE for more details.

"""

from .interface import Jecna
from .parser import ParseError, parse_grades_page
from .session import AuthenticationFailure, Session
