"""Pagination: page window arithmetic and the link pager."""

from .link_pager import LinkPager, PagerConfig, PageUrl
from .window import PageWindow, PaginationState, compute_window

__all__ = [
    "LinkPager",
    "PagerConfig",
    "PageUrl",
    "PageWindow",
    "PaginationState",
    "compute_window",
]
