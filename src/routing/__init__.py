"""URL generation for action buttons."""

from .generator import RouteUrlGenerator, UrlGenerator

__all__ = ["RouteUrlGenerator", "UrlGenerator"]
