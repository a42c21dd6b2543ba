"""Link pager - page navigation markup."""

from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from core import get_logger
from core.validate import InvalidConfigError, require_pagination
from markup import a, add_css_class, render_tag
from .window import PaginationState, compute_window

logger = get_logger(__name__)

# page index -> url
PageUrl = Callable[[int], str]


class PagerConfig(BaseModel):
    """
    Labels, CSS classes and tags of a pager.

    Labels are inserted without HTML encoding. ``False`` hides a control;
    ``True`` is accepted for the first/last labels only and means "use the
    page number".
    """

    model_config = ConfigDict(frozen=True)

    # Container
    container_tag: str = Field(default="ul")
    container_options: dict[str, Any] = Field(default_factory=lambda: {"class": "pagination"})

    # Per control
    link_container_tag: str = Field(default="li")
    link_container_options: dict[str, Any] = Field(default_factory=dict)
    link_options: dict[str, Any] = Field(default_factory=dict)
    disabled_tag: str = Field(default="span")
    disabled_tag_options: dict[str, Any] = Field(default_factory=dict)

    # CSS classes
    page_css_class: str | None = Field(default=None)
    first_page_css_class: str = Field(default="first")
    last_page_css_class: str = Field(default="last")
    prev_page_css_class: str = Field(default="prev")
    next_page_css_class: str = Field(default="next")
    active_page_css_class: str = Field(default="active")
    disabled_page_css_class: str = Field(default="disabled")

    # Labels
    first_page_label: str | bool = Field(default=False)
    prev_page_label: str | Literal[False] = Field(default="&laquo;")
    next_page_label: str | Literal[False] = Field(default="&raquo;")
    last_page_label: str | bool = Field(default=False)

    # Behaviour
    max_button_count: int = Field(default=10, ge=1)
    disable_current_page_button: bool = Field(default=False)
    hide_on_single_page: bool = Field(default=False)


class LinkPager:
    """Renders first/prev, a window of numbered pages, and next/last."""

    def __init__(self, page_url: PageUrl, config: PagerConfig | None = None) -> None:
        self.page_url = page_url
        self.config = config or PagerConfig()

    def state(self, page: int, page_count: int) -> PaginationState:
        """Pagination state using this pager's window size."""
        return PaginationState(
            page=page, page_count=page_count, max_button_count=self.config.max_button_count
        )

    def render(self, state: PaginationState | None) -> str:
        """
        Full pager markup.

        Raises:
            InvalidConfigError: If no pagination state is given
        """
        try:
            state = require_pagination(state)
        except InvalidConfigError as e:
            logger.error("pager_config", error=str(e))
            raise

        if self.config.hide_on_single_page and state.page_count < 2:
            return ""

        return render_tag(
            self.config.container_tag,
            "\n".join(self.render_controls(state)),
            self.config.container_options,
        )

    def render_controls(self, state: PaginationState) -> list[str]:
        """Controls in display order: first, prev, pages, next, last."""
        cfg = self.config
        page = state.page
        last_page = max(0, state.page_count - 1)
        controls = []

        first_label = "1" if cfg.first_page_label is True else cfg.first_page_label
        if first_label is not False:
            controls.append(
                self._render_button(first_label, 0, cfg.first_page_css_class, state.is_first, False)
            )

        if cfg.prev_page_label is not False:
            controls.append(
                self._render_button(
                    cfg.prev_page_label, max(0, page - 1), cfg.prev_page_css_class, state.is_first, False
                )
            )

        window = compute_window(state)
        logger.debug("pager_window", page=page, begin=window.begin, end=window.end)
        for i in window.pages:
            controls.append(
                self._render_button(
                    str(i + 1),
                    i,
                    None,
                    cfg.disable_current_page_button and i == page,
                    i == page,
                )
            )

        if cfg.next_page_label is not False:
            controls.append(
                self._render_button(
                    cfg.next_page_label,
                    min(last_page, page + 1),
                    cfg.next_page_css_class,
                    state.is_last,
                    False,
                )
            )

        last_label = str(state.page_count) if cfg.last_page_label is True else cfg.last_page_label
        if last_label is not False:
            controls.append(
                self._render_button(last_label, last_page, cfg.last_page_css_class, state.is_last, False)
            )

        return controls

    def links(self, state: PaginationState) -> dict[str, str]:
        """Relational links (self, first, prev, next, last) for ``<link rel>`` tags."""
        links = {"self": self.page_url(state.page)}
        if state.page > 0:
            links["first"] = self.page_url(0)
            links["prev"] = self.page_url(state.page - 1)
        if state.page < state.page_count - 1:
            links["next"] = self.page_url(state.page + 1)
            links["last"] = self.page_url(state.page_count - 1)
        return links

    def _render_button(
        self, label: str, page: int, css_class: str | None, disabled: bool, active: bool
    ) -> str:
        cfg = self.config
        options = add_css_class(cfg.link_container_options, css_class or cfg.page_css_class)

        if active:
            options = add_css_class(options, cfg.active_page_css_class)

        if disabled:
            options = add_css_class(options, cfg.disabled_page_css_class)
            inner = render_tag(cfg.disabled_tag, label, cfg.disabled_tag_options)
            return render_tag(cfg.link_container_tag, inner, options)

        link_options = {**cfg.link_options, "data-page": page}
        return render_tag(
            cfg.link_container_tag, a(label, self.page_url(page), link_options), options
        )
