"""Render a TwiML document to an XML string.

Output shape::

    <?xml version="1.0" encoding="UTF-8"?>
    <!-- before-comment -->
    <Response>
      <!-- inside-comment -->
      <Say voice="alice">Hello</Say>
      <Dial>
        <Number>+15551234567</Number>
      </Dial>
    </Response>
    <!-- after-comment -->

Voice documents use the indented layout above; messaging and fax
documents are compact, with verbs directly after ``<Response>``.

Serialization is total: it never raises and never modifies the document.
Every caller-supplied string passes through :mod:`twiml_builder.escape`.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from .elements import Element
from .escape import escape_attr, escape_comment, escape_text

if TYPE_CHECKING:
    from .response import TwiMLResponse

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'
INDENT = "  "


# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------


def render_value(value: Any) -> str:
    """Render a single attribute value.

    Booleans are checked before integers since ``bool`` is an ``int``.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return escape_attr(value.value)
    if isinstance(value, int):
        return str(value)
    return escape_attr(str(value))


def render_attributes(element: Element) -> str:
    parts: list[str] = []
    for name, value in element.attribute_items():
        if isinstance(value, tuple):
            rendered = element.joiner_for(name).join(render_value(v) for v in value)
        else:
            rendered = render_value(value)
        parts.append(f' {name}="{rendered}"')
    return "".join(parts)


# ---------------------------------------------------------------------------
# Elements
# ---------------------------------------------------------------------------


def render_element(element: Element, depth: int = 1, pretty: bool = True) -> str:
    """Render ``element`` and its descendants.

    ``depth`` is the nesting level of ``element`` below ``<Response>``; the
    caller is responsible for any indentation before the open tag.
    """
    attrs = render_attributes(element)
    if element.is_empty:
        return f"<{element.tag}{attrs} />"

    text = element.text_content()
    children = element.children()

    parts = [f"<{element.tag}{attrs}>"]
    if text is not None:
        parts.append(escape_text(text))

    wrote_block = False
    for child in children:
        rendered = render_element(child, depth + 1, pretty)
        if pretty and not child.INLINE:
            parts.append("\n" + INDENT * (depth + 1) + rendered)
            wrote_block = True
        else:
            parts.append(rendered)

    if wrote_block:
        parts.append("\n" + INDENT * depth)
    parts.append(f"</{element.tag}>")
    return "".join(parts)


def render_comment(text: str) -> str:
    return f"<!-- {escape_comment(text)} -->"


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


def serialize(document: TwiMLResponse) -> str:
    """Serialize a voice, messaging or fax document to XML."""
    pretty = document.PRETTY
    out: list[str] = [XML_DECLARATION]

    for comment in document.comments_before:
        out.append(render_comment(comment) + "\n")

    if pretty:
        out.append("<Response>\n")
        for comment in document.comments:
            out.append(INDENT + render_comment(comment) + "\n")
        for verb in document.verbs:
            out.append(INDENT + render_element(verb, 1, pretty=True) + "\n")
    else:
        out.append("<Response>")
        for comment in document.comments:
            out.append("\n" + INDENT + render_comment(comment))
        for verb in document.verbs:
            out.append(render_element(verb, 1, pretty=False))

    out.append("</Response>")

    for comment in document.comments_after:
        out.append("\n" + render_comment(comment))

    return "".join(out)
