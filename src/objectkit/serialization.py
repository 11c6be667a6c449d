"""JSON text helpers that restore behaviour onto decoded data."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

__all__ = ["MalformedJsonError", "to_json_text", "from_json_text"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Malformed input propagates the standard decoder error unchanged.
MalformedJsonError = json.JSONDecodeError


def _encode_object(obj: Any) -> Any:
    """Fallback encoder for objects ``json`` does not know about."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    # Functions and classes carry a __dict__ but are not data.
    if hasattr(obj, "__dict__") and not callable(obj):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json_text(value: Any, *, indent: int | None = None) -> str:
    """Return the JSON text for *value*.

    Keys keep insertion order. Dataclasses and plain objects are encoded
    from their instance attributes; methods are never part of the output.
    """
    if indent is None:
        return json.dumps(value, separators=(",", ":"), default=_encode_object)
    return json.dumps(value, indent=indent, default=_encode_object)


def from_json_text(prototype: type[T] | T, json_text: str) -> T:
    """Decode *json_text* and attach *prototype*'s behaviour to the result.

    *prototype* is a class, or an instance whose class is used. The decoded
    JSON object becomes an instance of that class, created without calling
    ``__init__``, with the decoded keys set as instance attributes.

    Raises:
        MalformedJsonError: *json_text* is not valid JSON.
        TypeError: the decoded value is not a JSON object, or instances of
            the prototype class cannot hold attributes.
    """
    cls = prototype if isinstance(prototype, type) else type(prototype)
    try:
        data = json.loads(json_text)
    except MalformedJsonError as exc:
        logger.debug("Cannot decode %s from JSON: %s", cls.__name__, exc)
        raise

    if not isinstance(data, dict):
        raise TypeError(
            f"Cannot restore {cls.__name__} from a JSON {type(data).__name__}"
        )

    obj = cls.__new__(cls)
    if not hasattr(obj, "__dict__"):
        raise TypeError(f"Cannot set attributes on {cls.__name__} instances")
    obj.__dict__.update(data)
    return obj
