from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..errors import ApiError, DataTypeError, ResponseJsonError


logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RawResponse:
    """Transport-neutral response handed back by both clients."""

    status_code: int
    content: bytes
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        try:
            return json.loads(self.content)
        except ValueError as e:
            raise ResponseJsonError(
                f"Invalid JSON returned (HTTP {self.status_code})",
                status_code=self.status_code,
            ) from e


def unwrap_envelope(payload: Any) -> Any:
    """Return the ``data`` member of a success envelope."""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    raise ApiError.from_payload(payload)


def decode_response(response: RawResponse, target: Type[T] = Any) -> T:  # type: ignore[assignment]
    """
    Decode a raw response into ``target``.

    - error status, or no ``data`` envelope => ApiError / UnknownApiError
    - otherwise the unwrapped payload is validated against ``target``
    """
    payload = response.json()

    if not response.ok or not _is_envelope(payload):
        logger.debug("Error payload returned (HTTP %s)", response.status_code)
        raise ApiError.from_payload(payload, status_code=response.status_code)

    data = payload["data"]
    if target is Any:
        return data

    try:
        return TypeAdapter(target).validate_python(data)
    except ValidationError as e:
        raise DataTypeError(_typename(target), str(e)) from e


def _is_envelope(payload: Any) -> bool:
    return isinstance(payload, dict) and "data" in payload


def _typename(target: Any) -> str:
    module = getattr(target, "__module__", None)
    name = getattr(target, "__qualname__", None)
    if name and module and module != "builtins":
        return f"{module}.{name}"
    return name or repr(target)
