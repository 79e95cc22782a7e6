"""CSS selector builder: fluent construction with part-order validation."""

from selectorkit.selector.builder import SelectorBuilder, SupportsStringify
from selectorkit.selector.errors import OrderError, SelectorError, UniquenessError
from selectorkit.selector.facade import BuilderFacade, css_selector_builder
from selectorkit.selector.kinds import KIND_RANK, SINGLETON_KINDS, Combinator, PartKind

__all__ = [
    # builder
    "SelectorBuilder",
    "SupportsStringify",
    "BuilderFacade",
    "css_selector_builder",
    # kinds
    "PartKind",
    "Combinator",
    "KIND_RANK",
    "SINGLETON_KINDS",
    # errors
    "SelectorError",
    "OrderError",
    "UniquenessError",
]
