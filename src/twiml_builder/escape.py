"""XML escaping for caller-supplied text.

Every string that ends up in serialized TwiML passes through one of these
functions.  Text content keeps quotes as-is; attribute values escape them
too, so a value can never terminate its own quoting.
"""

from __future__ import annotations

_TEXT_ENTITIES: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
}

_ATTR_ENTITIES: dict[str, str] = {
    **_TEXT_ENTITIES,
    '"': "&quot;",
    "'": "&apos;",
}

_TEXT_TABLE = str.maketrans(_TEXT_ENTITIES)
_ATTR_TABLE = str.maketrans(_ATTR_ENTITIES)


def escape_text(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for use as element text content.

    >>> escape_text("Hello <script>alert('x')</script>")
    "Hello &lt;script&gt;alert('x')&lt;/script&gt;"
    """
    return text.translate(_TEXT_TABLE)


def escape_attr(text: str) -> str:
    """Escape ``&``, ``<``, ``>``, ``"`` and ``'`` for use in an attribute value.

    >>> escape_attr('value with "quotes" and <tags>')
    'value with &quot;quotes&quot; and &lt;tags&gt;'
    """
    return text.translate(_ATTR_TABLE)


def escape_comment(text: str) -> str:
    """Escape the body of an XML comment.

    Comments use the text-content rules.  A ``--`` sequence is not
    rewritten, so comment text containing it yields a comment that strict
    XML parsers reject.
    """
    return escape_text(text)
