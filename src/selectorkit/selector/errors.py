"""Selector builder error types."""

from __future__ import annotations

from selectorkit.selector.kinds import PartKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
UNIQUENESS_MESSAGE = (
    "Element, id and pseudo-element should not occur more than one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base error for rejected selector parts."""

    def __init__(
        self, message: str, *, kind: PartKind, parts: tuple[PartKind, ...] = ()
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.parts = parts


class OrderError(SelectorError):
    """A part was appended after a part that must follow it."""

    def __init__(self, kind: PartKind, parts: tuple[PartKind, ...] = ()) -> None:
        super().__init__(ORDER_MESSAGE, kind=kind, parts=parts)


class UniquenessError(SelectorError):
    """An element, id or pseudo-element was appended a second time."""

    def __init__(self, kind: PartKind, parts: tuple[PartKind, ...] = ()) -> None:
        super().__init__(UNIQUENESS_MESSAGE, kind=kind, parts=parts)
