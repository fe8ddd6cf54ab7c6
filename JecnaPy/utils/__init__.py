"""
JecnaPy Utils
~~~~~~~~~~~~~

Utils auxiliary to the JecnaPy module

:license: GPL, see LICENSE for more details.

"""

from .utils import encode_school_year, encode_school_year_half, encode_month
