"""HTML tag rendering.

Content is inserted as-is (it is already markup); attribute values are escaped.
"""

from collections.abc import Iterable, Mapping
from html import escape
from typing import Any

# Attributes that always lead, in this order; the rest keep insertion order.
ATTRIBUTE_ORDER = ("type", "id", "class", "name", "value", "href", "src")


def encode(text: Any) -> str:
    """Escape text for use as element content."""
    return escape(str(text), quote=False)


def render_attributes(attributes: Mapping[str, Any] | None) -> str:
    """
    Serialize an attribute mapping.

    - ``None`` and ``False`` values are omitted
    - ``True`` renders a bare attribute (``disabled``)
    - lists/tuples are joined with spaces (``class``)
    """
    if not attributes:
        return ""

    ordered = [key for key in ATTRIBUTE_ORDER if key in attributes]
    ordered += [key for key in attributes if key not in ATTRIBUTE_ORDER]

    parts = []
    for key in ordered:
        value = attributes[key]
        if value is None or value is False:
            continue
        if value is True:
            parts.append(f" {key}")
            continue
        if isinstance(value, (list, tuple)):
            if not value:
                continue
            value = " ".join(str(v) for v in value)
        parts.append(f' {key}="{escape(str(value), quote=True)}"')
    return "".join(parts)


def render_tag(name: str, content: str = "", attributes: Mapping[str, Any] | None = None) -> str:
    """Render ``<name attrs>content</name>``."""
    return f"<{name}{render_attributes(attributes)}>{content}</{name}>"


def a(text: str, url: str | None = None, attributes: Mapping[str, Any] | None = None) -> str:
    """Render an anchor; ``href`` is set from url when given."""
    attrs = dict(attributes or {})
    if url is not None:
        attrs["href"] = url
    return render_tag("a", text, attrs)


def _split_classes(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        return value.split()
    return [str(v) for v in value]


def add_css_class(attributes: Mapping[str, Any] | None, *classes: str | Iterable[str] | None) -> dict[str, Any]:
    """
    Return a copy of attributes with classes appended to its ``class`` list.

    Caller-supplied classes are kept first; duplicates and empty values are skipped.
    """
    result = dict(attributes or {})
    merged = _split_classes(result.get("class"))
    for cls in classes:
        for name in _split_classes(cls):
            if name not in merged:
                merged.append(name)
    if merged:
        result["class"] = " ".join(merged)
    return result
