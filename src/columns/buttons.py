"""Button definitions, visibility rules and the builtin button set."""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from markup import render_tag

# (url, row, key) -> markup
ButtonRenderer = Callable[[str, Any, Any], str]

NAME_PATTERN = r"^[\w\-/]+$"

DELETE_CONFIRM_MESSAGE = "Are you sure you want to delete this item?"


class ButtonDefinition(BaseModel):
    """A named button factory."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., pattern=NAME_PATTERN, description="Placeholder name, e.g. 'view' or 'admin/custom'")
    render: ButtonRenderer = Field(..., description="Produces the button markup from (url, row, key)")


# ============================================================================
# Visibility
# ============================================================================

@dataclass(frozen=True)
class Constant:
    """Visibility fixed for every row."""

    visible: bool

    def resolve(self, row: Any, key: Any, index: int) -> bool:
        return self.visible


@dataclass(frozen=True)
class Predicate:
    """Visibility decided per row by ``test(row, key, index)``."""

    test: Callable[[Any, Any, int], Any]

    def resolve(self, row: Any, key: Any, index: int) -> bool:
        return bool(self.test(row, key, index))


VisibilityRule = Constant | Predicate

ALWAYS_VISIBLE = Constant(True)


def to_visibility_rule(value: Any) -> VisibilityRule:
    """Convert a bool, callable or rule into a VisibilityRule."""
    if isinstance(value, (Constant, Predicate)):
        return value
    if callable(value):
        return Predicate(value)
    return Constant(bool(value))


# ============================================================================
# Builtin buttons
# ============================================================================

def make_default_button(
    name: str,
    icon: str,
    options: Mapping[str, Any] | None = None,
    extra: Mapping[str, Any] | None = None,
) -> ButtonDefinition:
    """
    Build an icon anchor button.

    Args:
        name: Button name; the title and aria-label are derived from it
        icon: Icon markup placed in a span (not encoded)
        options: Caller anchor attributes, these win over the defaults
        extra: Button specific attributes (e.g. delete confirmation)
    """
    title = name.capitalize()
    defaults = {"title": title, "aria-label": title, "data-name": name, **(extra or {})}

    def render(url: str, row: Any, key: Any) -> str:
        attributes: dict[str, Any] = {**(options or {}), "href": url}
        for attr, value in defaults.items():
            attributes.setdefault(attr, value)
        return render_tag("a", render_tag("span", icon), attributes)

    return ButtonDefinition(name=name, render=render)


def default_buttons(options: Mapping[str, Any] | None = None) -> dict[str, ButtonDefinition]:
    """The view/update/delete buttons, in that order."""
    return {
        "view": make_default_button("view", "&#128065;", options),
        "update": make_default_button("update", "&#128393;", options),
        "delete": make_default_button(
            "delete",
            "&#128465;",
            options,
            extra={"data-confirm": DELETE_CONFIRM_MESSAGE, "data-method": "post"},
        ),
    }


# Built once at import; columns copy it and merge their own buttons on top.
DEFAULT_BUTTONS: Mapping[str, ButtonDefinition] = MappingProxyType(default_buttons())
