"""Grid columns: action buttons resolved from a template."""

from .action_column import ActionColumn, UrlCreator, extract_key
from .buttons import (
    ALWAYS_VISIBLE,
    DEFAULT_BUTTONS,
    ButtonDefinition,
    Constant,
    Predicate,
    VisibilityRule,
    default_buttons,
    make_default_button,
    to_visibility_rule,
)
from .template import parse_placeholders, render_buttons, select_buttons, visible_buttons

__all__ = [
    # Column
    "ActionColumn",
    "UrlCreator",
    "extract_key",
    # Buttons
    "ButtonDefinition",
    "DEFAULT_BUTTONS",
    "default_buttons",
    "make_default_button",
    # Visibility
    "ALWAYS_VISIBLE",
    "Constant",
    "Predicate",
    "VisibilityRule",
    "to_visibility_rule",
    # Template stages
    "parse_placeholders",
    "select_buttons",
    "visible_buttons",
    "render_buttons",
]
