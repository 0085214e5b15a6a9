from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError

from spotify_catalog.errors import DecodeError

T = TypeVar("T")

VALIDATOR_REQUEST_HEADER = "If-None-Match"
VALIDATOR_RESPONSE_HEADER = "ETag"


@dataclass(frozen=True, slots=True)
class ConditionalFetchResult(Generic[T]):
    """Outcome of a conditional GET.

    ``data`` is ``None`` when the resource is unchanged. ``validator`` is the
    tag the server returned and should be presented on the next fetch.
    """

    data: T | None
    validator: str | None

    @property
    def changed(self) -> bool:
        return self.data is not None


def is_not_modified(
    status_code: int,
    response_validator: str | None,
    request_validator: str | None,
    *,
    prevent_stale_replay: bool = True,
) -> bool:
    """Decide whether a response means "unchanged since ``request_validator``".

    A 304 always does. A 200 whose tag equals the one we sent is treated the
    same way when ``prevent_stale_replay`` is set, covering intermediaries that
    replay a cached full response instead of honouring ``If-None-Match``.
    Without a request validator there is nothing to compare, so a 200 is
    always a change.
    """

    if status_code == 304:
        return True
    return (
        prevent_stale_replay
        and status_code == 200
        and request_validator is not None
        and response_validator == request_validator
    )


@lru_cache(maxsize=128)
def _adapter(model: Any) -> TypeAdapter[Any]:
    return TypeAdapter(model)


def type_name(model: Any) -> str:
    return getattr(model, "__name__", None) or repr(model)


def decode_body(model: type[T], content: bytes) -> T:
    """Validate a JSON body against ``model``, raising :class:`DecodeError`."""

    try:
        return _adapter(model).validate_json(content)
    except ValidationError as exc:
        errors = exc.errors()
        first = errors[0] if errors else {}
        path = ".".join(str(part) for part in first.get("loc", ())) or None
        raise DecodeError(
            type_name(model),
            path,
            detail=first.get("msg"),
            inner_error=exc,
        ) from exc


__all__ = [
    "ConditionalFetchResult",
    "VALIDATOR_REQUEST_HEADER",
    "VALIDATOR_RESPONSE_HEADER",
    "decode_body",
    "is_not_modified",
    "type_name",
]
