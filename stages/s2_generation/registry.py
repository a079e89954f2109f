"""Renderer registry"""

from typing import Iterator, Optional

from config import settings
from core.interfaces import ArtifactRenderer
from .renderers import (
    FormSchemaRenderer, FormRenderer, DataTableRenderer, RoutesRenderer,
    SidebarRenderer, HeaderRenderer, DashboardLayoutRenderer, DashboardRenderer,
    AuthContextRenderer, LoginRenderer, I18nRenderer, LanguageSwitcherRenderer,
    IndexCssRenderer, ThemeProviderRenderer, AppEntryRenderer, ApiServiceRenderer,
    ReduxStoreRenderer,
)


class RendererRegistry:
    """Ordered collection of renderers keyed by name"""

    def __init__(self, renderers: Optional[list[ArtifactRenderer]] = None):
        self._renderers: dict[str, ArtifactRenderer] = {}
        for renderer in renderers or []:
            self.register(renderer)

    def register(self, renderer: ArtifactRenderer, replace: bool = False) -> None:
        if renderer.name in self._renderers and not replace:
            raise ValueError(f"Renderer already registered: {renderer.name}")
        self._renderers[renderer.name] = renderer

    def unregister(self, name: str) -> ArtifactRenderer:
        try:
            return self._renderers.pop(name)
        except KeyError:
            raise KeyError(f"Unknown renderer: {name}") from None

    def get(self, name: str) -> Optional[ArtifactRenderer]:
        return self._renderers.get(name)

    def names(self) -> list[str]:
        return list(self._renderers)

    def __iter__(self) -> Iterator[ArtifactRenderer]:
        return iter(list(self._renderers.values()))

    def __len__(self) -> int:
        return len(self._renderers)

    def __contains__(self, name: str) -> bool:
        return name in self._renderers


def default_registry() -> RendererRegistry:
    """Registry with every built-in renderer, configured from settings"""
    languages = settings.get_languages()
    return RendererRegistry([
        FormSchemaRenderer(),
        FormRenderer(),
        DataTableRenderer(
            max_columns=settings.MAX_LISTING_COLUMNS,
            mock_rows=settings.MOCK_ROW_COUNT,
        ),
        RoutesRenderer(),
        SidebarRenderer(app_title=settings.APP_TITLE),
        HeaderRenderer(),
        DashboardLayoutRenderer(),
        DashboardRenderer(),
        AuthContextRenderer(),
        LoginRenderer(app_title=settings.APP_TITLE),
        I18nRenderer(languages=languages, default_language=settings.DEFAULT_LANGUAGE),
        LanguageSwitcherRenderer(languages=languages),
        IndexCssRenderer(),
        ThemeProviderRenderer(),
        AppEntryRenderer(),
        ApiServiceRenderer(base_url=settings.API_BASE_URL),
        ReduxStoreRenderer(),
    ])
