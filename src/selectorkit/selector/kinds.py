"""Selector part kinds, combinators, and the ordering rules between parts."""

from __future__ import annotations

from enum import StrEnum


class PartKind(StrEnum):
    """A category of compound-selector fragment."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTR = "attr"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"


class Combinator(StrEnum):
    """CSS combinators joining two selectors."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


# Required left-to-right order of parts inside a compound selector.
KIND_RANK: dict[PartKind, int] = {
    PartKind.ELEMENT: 1,
    PartKind.ID: 2,
    PartKind.CLASS: 3,
    PartKind.ATTR: 4,
    PartKind.PSEUDO_CLASS: 5,
    PartKind.PSEUDO_ELEMENT: 6,
}

# Kinds allowed at most once per selector.
SINGLETON_KINDS: frozenset[PartKind] = frozenset(
    {PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT}
)
