"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from columns import ActionColumn
from pager import PagerConfig
from routing import RouteUrlGenerator
from .config import Settings, get_settings
from .logging_config import configure_logging


class GridModule(Module):
    """Renderer dependencies built from settings."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide the settings the container was created with."""
        return self.settings

    @singleton
    @provider
    def provide_url_generator(self, settings: Settings) -> RouteUrlGenerator:
        """Provide the route URL generator."""
        return RouteUrlGenerator(base_path=settings.url_base_path)

    @singleton
    @provider
    def provide_pager_config(self, settings: Settings) -> PagerConfig:
        """Provide pager configuration."""
        return PagerConfig(max_button_count=settings.max_button_count)

    @provider
    def provide_action_column(
        self, settings: Settings, url_generator: RouteUrlGenerator
    ) -> ActionColumn:
        """Provide a fresh action column with the default buttons."""
        return ActionColumn(
            url_generator,
            template=settings.action_template,
            primary_key=settings.primary_key,
            controller=settings.controller,
        )


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector; logging is configured from the same settings."""
    settings = settings if settings is not None else get_settings()
    configure_logging(settings.log_level, settings.json_logs)
    return Injector([GridModule(settings)])
