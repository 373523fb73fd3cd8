"""Field normalization for irregular wire values.

The API sends dates, URLs and enumerations as plain strings, using the empty
string for "not set". Wire models keep those raw strings; the helpers here
turn them into typed values in one explicit pass after structural decoding:

- ``parse_date_only``: ``"YYYY-MM-DD"`` -> UTC midnight, ``""`` -> ``None``
- ``parse_optional_url``: URL string checked as a URL and kept as given,
  ``""`` -> ``None``
- ``normalize_enum``: known value -> member, anything else -> ``UNKNOWN``
"""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, TypeVar

from pydantic import AfterValidator, AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from bonusly_cli.client.errors import InvalidDateFormatError, InvalidURLError

logger = logging.getLogger(__name__)

_DATE_ONLY_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _validated_url(value: str) -> str:
    """Check *value* is a URL and return it exactly as given."""
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError as exc:
        raise ValueError(_first_error(exc)) from exc
    return value


def _first_error(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    return errors[0]["msg"] if errors else "not a URL"


# Validated like ``AnyUrl`` but kept verbatim, so it serializes unchanged.
WireUrl = Annotated[str, AfterValidator(_validated_url)]


class NormalizedEnum(str, Enum):
    """String enumeration whose subclasses define an ``UNKNOWN`` member."""

    def __str__(self) -> str:
        return str(self.value)


E = TypeVar("E", bound=NormalizedEnum)


def parse_date_only(value: str | None, *, field: str) -> datetime | None:
    """Parse a ``YYYY-MM-DD`` string into a UTC midnight datetime."""
    if not value:
        return None
    if not _DATE_ONLY_RE.fullmatch(value):
        raise InvalidDateFormatError(field, value, "expected YYYY-MM-DD")
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d")
    except ValueError as exc:
        raise InvalidDateFormatError(field, value, str(exc)) from exc
    return parsed.replace(tzinfo=timezone.utc)


def parse_optional_url(value: str | None, *, field: str) -> str | None:
    """Check a URL string; empty or missing values mean "no URL"."""
    if not value:
        return None
    try:
        _URL_ADAPTER.validate_python(value)
    except PydanticValidationError as exc:
        raise InvalidURLError(field, value, _first_error(exc)) from exc
    return value


def normalize_enum(enum_cls: type[E], value: str | None) -> E:
    """Map a wire string onto *enum_cls*, falling back to ``UNKNOWN``."""
    try:
        return enum_cls(value)
    except ValueError:
        if value:
            logger.debug("Unrecognized %s value %r", enum_cls.__name__, value)
        return enum_cls["UNKNOWN"]
