"""JSON text conversion for plain values and field-only objects.

``to_json_text`` emits canonical JSON (sorted keys, compact separators by
default).  ``from_json_text`` goes the other way: it parses a JSON object and
attaches the parsed fields to a new instance of a caller-supplied class, so
the result carries that class's methods without its constructor being run.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selectorkit.config import DEFAULT_SERIALIZER_CONFIG, SerializerConfig

__all__ = ["to_json_text", "from_json_text"]

log = logging.getLogger("selectorkit.objects")

T = TypeVar("T")


def _encode_default(value: Any) -> Any:
    """Fallback for values the json module cannot encode natively."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if hasattr(value, "__dict__") and not isinstance(value, type):
        return {k: v for k, v in vars(value).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json_text(value: Any, config: SerializerConfig | None = None) -> str:
    """Serialize *value* to JSON text."""
    cfg = config or DEFAULT_SERIALIZER_CONFIG
    return json.dumps(
        value,
        sort_keys=cfg.sort_keys,
        indent=cfg.indent,
        separators=cfg.separators,
        ensure_ascii=cfg.ensure_ascii,
        default=_encode_default,
    )


def from_json_text(cls: type[T], json_text: str) -> T:
    """Build an instance of *cls* whose attributes are the fields of *json_text*.

    ``cls.__init__`` is not called.  Parsed fields become instance
    attributes, shadowing same-named class attributes; methods of *cls*
    stay reachable.

    Raises ``json.JSONDecodeError`` for malformed text and ``TypeError`` when
    the document is not a JSON object.
    """
    data = json.loads(json_text)
    if not isinstance(data, dict):
        raise TypeError(
            f"Expected a JSON object to populate {cls.__name__}, "
            f"got {type(data).__name__}"
        )
    obj = cls.__new__(cls)
    for key, value in data.items():
        # bypass __setattr__ so frozen dataclasses can be populated too
        object.__setattr__(obj, key, value)
    log.debug("Deserialized %s with %d field(s)", cls.__name__, len(data))
    return obj
