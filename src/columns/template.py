"""
Action template resolution.

A template such as ``"{view} {update} {delete}"`` selects and orders buttons
from a registry. Resolution runs in four stages, each usable on its own:

    parse_placeholders -> select_buttons -> visible_buttons -> render_buttons
"""

import re
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any

from .buttons import ALWAYS_VISIBLE, ButtonDefinition, VisibilityRule

PLACEHOLDER = re.compile(r"\{([\w\-/]+)\}")


def parse_placeholders(template: str) -> list[str]:
    """Placeholder names in order of first appearance."""
    names: list[str] = []
    for match in PLACEHOLDER.finditer(template):
        name = match.group(1)
        if name not in names:
            names.append(name)
    return names


def select_buttons(
    registry: Mapping[str, ButtonDefinition], names: Iterable[str]
) -> dict[str, ButtonDefinition]:
    """Registry entries for names, in the order of names. Unknown names are skipped."""
    return {name: registry[name] for name in names if name in registry}


def visible_buttons(
    buttons: Mapping[str, ButtonDefinition],
    visibility: Mapping[str, VisibilityRule],
    row: Any,
    key: Any,
    index: int,
) -> Iterator[ButtonDefinition]:
    """Yield the buttons whose rule resolves true for this row."""
    for name, button in buttons.items():
        if visibility.get(name, ALWAYS_VISIBLE).resolve(row, key, index):
            yield button


def render_buttons(
    buttons: Iterable[ButtonDefinition],
    url_for: Callable[[str], str],
    row: Any,
    key: Any,
) -> str:
    """Render each button with its URL and join them with a space."""
    return " ".join(button.render(url_for(button.name), row, key) for button in buttons)
