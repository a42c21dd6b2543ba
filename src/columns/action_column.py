"""Action column - per-row buttons selected by a template."""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from core import get_logger, LogContext
from markup import render_tag
from routing import RouteUrlGenerator, UrlGenerator
from .buttons import (
    DEFAULT_BUTTONS,
    ButtonDefinition,
    ButtonRenderer,
    VisibilityRule,
    default_buttons,
    to_visibility_rule,
)
from .template import parse_placeholders, render_buttons, select_buttons, visible_buttons

logger = get_logger(__name__)

# (action, row, key, index) -> url
UrlCreator = Callable[[str, Any, Any, int], str]

DEFAULT_TEMPLATE = "{view} {update} {delete}"


def extract_key(row: Any, primary_key: str, key: Any = None) -> Any:
    """Primary key of a row: the named field for mappings, else the caller's key."""
    if isinstance(row, Mapping) and primary_key in row:
        return row[primary_key]
    return key


class ActionColumn:
    """
    Renders the action cell of a grid row.

    Buttons come from a registry (the builtin view/update/delete set plus
    anything registered); the template picks which of them appear and in
    which order. Visibility rules are looked up on every render, so
    replacing ``visible_buttons`` affects the next call.
    """

    def __init__(
        self,
        url_generator: UrlGenerator | None = None,
        *,
        template: str = DEFAULT_TEMPLATE,
        buttons: Mapping[str, ButtonDefinition | ButtonRenderer] | None = None,
        visible_buttons: Mapping[str, Any] | None = None,
        url_creator: UrlCreator | None = None,
        primary_key: str = "id",
        controller: str | None = None,
        button_options: Mapping[str, Any] | None = None,
        content_options: Mapping[str, Any] | None = None,
    ):
        self.url_generator = url_generator or RouteUrlGenerator()
        self.template = template
        self.url_creator = url_creator
        self.primary_key = primary_key
        self.controller = controller
        self._button_options = dict(button_options or {})
        self.content_options = dict(content_options or {})

        if self._button_options:
            self._buttons = default_buttons(self._button_options)
        else:
            self._buttons = dict(DEFAULT_BUTTONS)
        self._visibility: dict[str, VisibilityRule] = {}

        if buttons:
            self.register_buttons(buttons)
        if visible_buttons:
            self.visible_buttons = visible_buttons

    @property
    def button_options(self) -> Mapping[str, Any]:
        """Anchor attributes of the builtin buttons, fixed at construction."""
        return MappingProxyType(self._button_options)

    @property
    def buttons(self) -> Mapping[str, ButtonDefinition]:
        """Read-only view of the registry, in registration order."""
        return MappingProxyType(self._buttons)

    def register_buttons(self, definitions: Mapping[str, ButtonDefinition | ButtonRenderer]) -> None:
        """Merge buttons into the registry, replacing same-named entries."""
        for name, definition in definitions.items():
            if isinstance(definition, ButtonDefinition):
                if definition.name != name:
                    definition = definition.model_copy(update={"name": name})
            else:
                definition = ButtonDefinition(name=name, render=definition)
            self._buttons[name] = definition
        logger.debug("buttons_registered", names=list(definitions))

    @property
    def visible_buttons(self) -> Mapping[str, VisibilityRule]:
        return MappingProxyType(self._visibility)

    @visible_buttons.setter
    def visible_buttons(self, rules: Mapping[str, Any]) -> None:
        self._visibility = {name: to_visibility_rule(rule) for name, rule in rules.items()}

    def get_active_buttons(self, template: str | None = None) -> dict[str, ButtonDefinition]:
        """Buttons named in the template, in template order."""
        template = self.template if template is None else template
        active = select_buttons(self._buttons, parse_placeholders(template))
        logger.debug("active_buttons", template=template, matched=list(active))
        return active

    def create_url(self, action: str, row: Any, key: Any, index: int) -> str:
        """
        URL for a button.

        Uses ``url_creator`` when one is configured. Otherwise the route is
        ``controller/action`` and the row key is passed as the primary-key
        parameter; how it lands in the URL (path or query) is up to the
        URL generator.
        """
        if self.url_creator is not None:
            return self.url_creator(action, row, key, index)

        route = f"{self.controller}/{action}" if self.controller else action
        key = extract_key(row, self.primary_key, key)
        if isinstance(key, Mapping):
            params = {name: value for name, value in key.items() if value is not None}
        else:
            params = {} if key is None else {self.primary_key: key}
        return self.url_generator.generate(route, params)

    def render_buttons(self, row: Any, key: Any, index: int, template: str | None = None) -> str:
        """Rendered buttons for one row, without the cell wrapper."""
        active = self.get_active_buttons(template)
        shown = visible_buttons(active, self._visibility, row, key, index)
        return render_buttons(
            shown, lambda action: self.create_url(action, row, key, index), row, key
        )

    def render_row(self, row: Any, key: Any, index: int, template: str | None = None) -> str:
        """Rendered action cell (``<td>``) for one row."""
        with LogContext(row_index=index):
            content = self.render_buttons(row, key, index, template)
        return render_tag("td", content, self.content_options)

    render_data_cell = render_row
