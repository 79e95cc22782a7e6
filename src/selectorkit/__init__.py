"""selectorkit -- CSS selector builder and small object utilities."""

from selectorkit.config import DEFAULT_SERIALIZER_CONFIG, SerializerConfig
from selectorkit.objects import Rectangle, from_json_text, make_rectangle, to_json_text
from selectorkit.selector import (
    KIND_RANK,
    SINGLETON_KINDS,
    BuilderFacade,
    Combinator,
    OrderError,
    PartKind,
    SelectorBuilder,
    SelectorError,
    SupportsStringify,
    UniquenessError,
    css_selector_builder,
)

__all__ = [
    # selector
    "SelectorBuilder",
    "SupportsStringify",
    "BuilderFacade",
    "css_selector_builder",
    "PartKind",
    "Combinator",
    "KIND_RANK",
    "SINGLETON_KINDS",
    "SelectorError",
    "OrderError",
    "UniquenessError",
    # objects
    "Rectangle",
    "make_rectangle",
    "to_json_text",
    "from_json_text",
    # config
    "SerializerConfig",
    "DEFAULT_SERIALIZER_CONFIG",
]
