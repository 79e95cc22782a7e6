"""Fluent builder for CSS selector strings.

A compound selector is written as::

    element#id.class[attr]:pseudo-class::pseudo-element

where class, attribute and pseudo-class parts may repeat.  Compound
selectors are joined into complex ones with combinators (``' '``, ``'+'``,
``'~'``, ``'>'``) through :meth:`SelectorBuilder.combine`.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from selectorkit.selector.errors import OrderError, UniquenessError
from selectorkit.selector.kinds import KIND_RANK, SINGLETON_KINDS, Combinator, PartKind

__all__ = ["SelectorBuilder", "SupportsStringify"]

log = logging.getLogger("selectorkit.selector")


@runtime_checkable
class SupportsStringify(Protocol):
    """Anything that renders itself as selector text."""

    def stringify(self) -> str: ...


def _render(operand: SupportsStringify | str) -> str:
    if isinstance(operand, str):
        return operand
    return operand.stringify()


class SelectorBuilder:
    """Mutable accumulator of selector text.

    Every part method validates the new part against the parts already
    applied, appends its rendering and returns ``self`` so calls chain::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")
    """

    def __init__(self) -> None:
        self._text = ""
        self._parts: list[PartKind] = []

    @property
    def text(self) -> str:
        return self._text

    @property
    def parts(self) -> tuple[PartKind, ...]:
        """Part kinds applied so far, in call order."""
        return tuple(self._parts)

    # --- validation -----------------------------------------------------------

    def check_structure(self, kind: PartKind) -> None:
        """Reject *kind* if it breaks uniqueness or ordering, else record it."""
        if kind in SINGLETON_KINDS and kind in self._parts:
            raise UniquenessError(kind, self.parts)
        if self._parts and KIND_RANK[kind] < KIND_RANK[self._parts[-1]]:
            raise OrderError(kind, self.parts)
        self._parts.append(kind)

    def _append(self, kind: PartKind, rendered: str) -> SelectorBuilder:
        self.check_structure(kind)
        self._text += rendered
        log.debug("Selector part: kind=%s text=%r", kind, rendered)
        return self

    # --- parts ----------------------------------------------------------------

    def element(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ID, f"#{value}")

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.CLASS, f".{value}")

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.ATTR, f"[{value}]")

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_CLASS, f":{value}")

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(PartKind.PSEUDO_ELEMENT, f"::{value}")

    # --- composition ----------------------------------------------------------

    def combine(
        self,
        left: SupportsStringify | str,
        combinator: Combinator | str,
        right: SupportsStringify | str,
    ) -> SelectorBuilder:
        """Append ``left <combinator> right``.

        Combination does not touch :attr:`parts`; the operands were validated
        when they were built.
        """
        # str() on a Combinator member yields its value
        token = str(combinator)
        self._text += f"{_render(left)} {token} {_render(right)}"
        log.debug("Selector combine: combinator=%r", token)
        return self

    def stringify(self) -> str:
        """Return the selector text built so far."""
        return self._text

    # --- dunder helpers -------------------------------------------------------

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SelectorBuilder(text={self._text!r}, parts={[str(p) for p in self._parts]})"
