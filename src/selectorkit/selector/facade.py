"""Stateless entry points that start a new selector chain per call."""

from __future__ import annotations

from selectorkit.selector.builder import SelectorBuilder, SupportsStringify
from selectorkit.selector.kinds import Combinator

__all__ = ["BuilderFacade", "css_selector_builder"]


class BuilderFacade:
    """Each method creates a fresh :class:`SelectorBuilder` and delegates to it."""

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self,
        left: SupportsStringify | str,
        combinator: Combinator | str,
        right: SupportsStringify | str,
    ) -> SelectorBuilder:
        return SelectorBuilder().combine(left, combinator, right)

    def stringify(self) -> str:
        """Text of a builder with no parts, i.e. the empty string."""
        return SelectorBuilder().stringify()


css_selector_builder = BuilderFacade()
