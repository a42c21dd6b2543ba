"""Page window arithmetic."""

import math
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class PaginationState(BaseModel):
    """Current page, page total and window size for one render."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0, description="Current page, 0-indexed")
    page_count: int = Field(default=0, ge=0, description="Total number of pages")
    max_button_count: int = Field(default=10, ge=1, description="Max numbered page buttons")

    @classmethod
    def from_total(
        cls, total_count: int, page_size: int, page: int = 0, max_button_count: int = 10
    ) -> "PaginationState":
        """State for total_count items split into pages of page_size."""
        if page_size < 1:
            raise ValueError("page_size must be positive")
        page_count = math.ceil(total_count / page_size) if total_count > 0 else 0
        return cls(page=page, page_count=page_count, max_button_count=max_button_count)

    @property
    def is_first(self) -> bool:
        return self.page <= 0

    @property
    def is_last(self) -> bool:
        return self.page >= self.page_count - 1


@dataclass(frozen=True)
class PageWindow:
    """Inclusive range of page indices shown as numbered buttons."""

    begin: int
    end: int

    @property
    def pages(self) -> range:
        return range(self.begin, self.end + 1)

    def __len__(self) -> int:
        return len(self.pages)


def compute_window(state: PaginationState) -> PageWindow:
    """
    Window of at most ``max_button_count`` pages around the current page.

    The window is centered first and then slid left if it runs past the
    last page. ``end < begin`` (an empty window) when there are no pages.
    """
    begin = max(0, state.page - state.max_button_count // 2)
    end = begin + state.max_button_count - 1
    if end >= state.page_count:
        end = state.page_count - 1
        begin = max(0, end - state.max_button_count + 1)
    return PageWindow(begin, end)
