"""
Package-wide constants.

Centralizes the absent marker, pagination defaults and the field names
recognised on pagination containers so they are not repeated as magic
strings across the helpers.
"""
from enum import Enum


class Absent(Enum):
    """
    Marker for "no value" as opposed to an explicit ``None``.

    Conditional helpers return it when a field should be left out of the
    output; ``clean`` strips it. It is falsy so it can be used in plain
    truthiness checks.
    """

    ABSENT = 'ABSENT'

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return 'ABSENT'


ABSENT = Absent.ABSENT


# Pagination defaults
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 15
DEFAULT_MAX_PER_PAGE = 100


class OptionKey:
    """Option keys interpreted by paginate itself"""

    PAGE = 'page'
    PER_PAGE = 'per_page'
    PER_PAGE_ALIAS = 'perPage'


class EnvelopeKey:
    """Keys of the response envelopes"""

    DATA = 'data'
    META = 'meta'

    CURRENT_PAGE = 'current_page'
    PER_PAGE = 'per_page'
    TOTAL = 'total'
    LAST_PAGE = 'last_page'


# Container fields checked in order when locating the item sequence:
# Objection-style `results`, generic `data`, Sequelize-style `rows`.
SEQUENCE_FIELDS = ('results', 'data', 'rows')

# Container fields checked in order when locating the total count.
TOTAL_FIELDS = ('total', 'count')


class EnvVar:
    """Environment variables read by reshaper.config"""

    DEFAULT_PER_PAGE = 'RESHAPER_DEFAULT_PER_PAGE'
    MAX_PER_PAGE = 'RESHAPER_MAX_PER_PAGE'


class HTTPStatus:
    """HTTP status codes used by the HTTP integration"""

    OK = 200
    INTERNAL_SERVER_ERROR = 500
