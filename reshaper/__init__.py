"""
reshaper - shape backend entities into API response payloads.

Resource classes (or define()) turn entities into dicts; conditional
helpers decide which fields appear; shaping helpers pick, omit, rename and
merge records; wrap() and paginate() build the response envelopes.
"""

import logging

from reshaper.accessors import as_record, get_field
from reshaper.conditionals import when, when_loaded, when_not_null, when_or_else
from reshaper.constants import ABSENT
from reshaper.exceptions import ReshaperError, TransformNotImplementedError
from reshaper.pagination import paginate_result, wrap
from reshaper.resource import DefinedResource, Resource, define
from reshaper.shaping import clean, merge, omit, pick, rename

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "ABSENT",
    "DefinedResource",
    "Resource",
    "ReshaperError",
    "TransformNotImplementedError",
    "as_record",
    "clean",
    "define",
    "get_field",
    "merge",
    "omit",
    "paginate_result",
    "pick",
    "rename",
    "when",
    "when_loaded",
    "when_not_null",
    "when_or_else",
    "wrap",
]
