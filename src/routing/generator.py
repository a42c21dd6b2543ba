"""Route to URL generation."""

from collections.abc import Mapping
from typing import Any, Protocol
from urllib.parse import quote, urlencode


class UrlGenerator(Protocol):
    """Anything that turns a route name and parameters into a URL."""

    def generate(self, route: str, params: Mapping[str, Any]) -> str: ...


class RouteUrlGenerator:
    """
    Path-style URL generator.

    The route is appended to the base path; the ``path_param`` parameter
    becomes a trailing path segment and all others go to the query string:

        >>> gen = RouteUrlGenerator()
        >>> gen.generate("admin/view", {"id": 1})
        '/admin/view/1'
        >>> gen.generate("admin/view", {"user_id": 1})
        '/admin/view?user_id=1'
    """

    def __init__(self, base_path: str = "/", path_param: str = "id") -> None:
        self.base_path = base_path.rstrip("/")
        self.path_param = path_param

    def generate(self, route: str, params: Mapping[str, Any] | None = None) -> str:
        url = f"{self.base_path}/{route.strip('/')}"
        query = dict(params or {})

        if self.path_param in query:
            url += "/" + quote(str(query.pop(self.path_param)), safe="")

        if query:
            url += "?" + urlencode(query)
        return url
