"""
JecnaPy data
~~~~~~~~~~~~

Entities scraped out of the school web

:license: GPL, see LICENSE for more details.

"""

from .common import Name, SchoolYear
from .grades import Grade, FinalGrade, Behaviour, Subject, GradesPage
from .canteen import ItemDescription, MenuItem
