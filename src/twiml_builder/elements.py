"""Base classes for TwiML elements.

Every verb, noun and SSML element is a frozen dataclass that describes its
own wire shape through class variables:

``TAG``
    The element name written to the document.
``TEXT_FIELD``
    Name of the field holding the element's text content, or ``None``.
``CHILDREN_FIELD``
    Name of the field holding the ordered tuple of child elements, or
    ``None``.
``ATTRIBUTES_FIELD``
    Name of the field holding an :class:`AttributeRecord`.  When ``None``
    the element itself carries its attribute fields.
``INLINE``
    ``True`` for elements written in the text flow of their parent (SSML)
    rather than on a line of their own.

Attribute emission order is the literal ``WIRE_ATTRIBUTES`` tuple of
``(field_name, wire_name)`` pairs on whichever object owns the fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, ClassVar

from .enums import HttpMethod

WireAttributes = tuple[tuple[str, str], ...]


class AttributeSource:
    """Mixin for anything that declares an ordered attribute table."""

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = ()
    # Separator used when a tuple-valued field is written; default is a space.
    JOINERS: ClassVar[dict[str, str]] = {}

    def attribute_items(self) -> list[tuple[str, Any]]:
        """Return ``(wire_name, value)`` pairs for every present attribute.

        ``None`` values and empty tuples are absent from the result; tuple
        values are returned as tuples and joined by the serializer.
        """
        items: list[tuple[str, Any]] = []
        for field_name, wire_name in self.WIRE_ATTRIBUTES:
            value = getattr(self, field_name)
            if value is None or value == ():
                continue
            items.append((wire_name, value))
        return items

    def joiner_for(self, wire_name: str) -> str:
        for field_name, name in self.WIRE_ATTRIBUTES:
            if name == wire_name:
                return self.JOINERS.get(field_name, " ")
        return " "


class AttributeRecord(AttributeSource):
    """Base for the ``*Attributes`` records carried by top-level verbs."""


class Element(AttributeSource):
    """Base for every serializable TwiML element."""

    TAG: ClassVar[str] = ""
    TEXT_FIELD: ClassVar[str | None] = None
    CHILDREN_FIELD: ClassVar[str | None] = None
    ATTRIBUTES_FIELD: ClassVar[str | None] = None
    INLINE: ClassVar[bool] = False

    @property
    def tag(self) -> str:
        return self.TAG

    def text_content(self) -> str | None:
        if self.TEXT_FIELD is None:
            return None
        return getattr(self, self.TEXT_FIELD)

    def children(self) -> tuple[Element, ...]:
        if self.CHILDREN_FIELD is None:
            return ()
        return tuple(getattr(self, self.CHILDREN_FIELD))

    def attribute_owner(self) -> AttributeSource:
        if self.ATTRIBUTES_FIELD is None:
            return self
        return getattr(self, self.ATTRIBUTES_FIELD)

    def attribute_items(self) -> list[tuple[str, Any]]:
        owner = self.attribute_owner()
        if owner is self:
            return super().attribute_items()
        return owner.attribute_items()

    def joiner_for(self, wire_name: str) -> str:
        owner = self.attribute_owner()
        if owner is self:
            return super().joiner_for(wire_name)
        return owner.joiner_for(wire_name)

    def with_child(self, child: Element) -> Element:
        """Return a copy with ``child`` appended to the ordered child tuple."""
        return replace(self, **{self.CHILDREN_FIELD: self.children() + (child,)})

    @property
    def is_empty(self) -> bool:
        """True when the element has neither text content nor children."""
        return self.text_content() is None and not self.children()


# ---------------------------------------------------------------------------
# Elements shared by more than one document kind
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RedirectAttributes(AttributeRecord):
    """Attributes for ``<Redirect>``."""

    method: HttpMethod | None = None

    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("method", "method"),)


@dataclass(frozen=True)
class Redirect(Element):
    """A ``<Redirect>`` verb -- transfers control to another TwiML document.

    Valid in both voice and messaging documents.  Nothing after a Redirect
    is ever executed.
    """

    url: str
    attributes: RedirectAttributes = field(default_factory=RedirectAttributes)

    TAG: ClassVar[str] = "Redirect"
    TEXT_FIELD: ClassVar[str | None] = "url"
    ATTRIBUTES_FIELD: ClassVar[str | None] = "attributes"


@dataclass(frozen=True)
class Parameter(Element):
    """A ``<Parameter>`` noun -- a name/value pair passed to a nested service."""

    name: str | None = None
    value: str | None = None

    TAG: ClassVar[str] = "Parameter"
    WIRE_ATTRIBUTES: ClassVar[WireAttributes] = (("name", "name"), ("value", "value"))
