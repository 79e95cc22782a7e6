from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SerializerConfig:
    sort_keys: bool = True
    indent: int | None = None
    separators: tuple[str, str] = (",", ":")
    ensure_ascii: bool = False


DEFAULT_SERIALIZER_CONFIG = SerializerConfig()
