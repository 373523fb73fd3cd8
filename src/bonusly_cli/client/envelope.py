"""Decoding of the ``{success, message, result}`` response envelope."""

from __future__ import annotations

import functools
from typing import Any, get_origin

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from bonusly_cli.client.errors import APIError, MalformedResponseError
from bonusly_cli.models.common import Envelope


@functools.lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def _summarize(exc: PydanticValidationError, *prefix: str) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    location = ".".join([*prefix, *(str(part) for part in first.get("loc", ()))])
    summary = f"{location}: {first['msg']}" if location else first["msg"]
    if len(errors) > 1:
        summary += f" (+{len(errors) - 1} more)"
    return summary


def decode_envelope(
    body: bytes,
    operation: str,
    result_type: Any = None,
    *,
    status_code: int | None = None,
) -> Any:
    """Decode *body* and return its ``result`` validated as *result_type*.

    Raises ``MalformedResponseError`` when the body is not an envelope or the
    result does not have the expected shape, and ``APIError`` when the API
    reports ``success: false``. With *result_type* ``None`` the result is
    ignored. A missing result for a list type decodes as an empty list.
    """
    try:
        envelope = Envelope.model_validate_json(body)
    except PydanticValidationError as exc:
        raise MalformedResponseError(operation, _summarize(exc), status_code) from exc

    if not envelope.success:
        raise APIError(operation, envelope.message or "")

    if result_type is None:
        return None
    result = envelope.result
    if result is None and get_origin(result_type) is list:
        result = []
    try:
        return _adapter(result_type).validate_python(result)
    except PydanticValidationError as exc:
        raise MalformedResponseError(
            operation, _summarize(exc, "result"), status_code,
        ) from exc
