"""Template renderers for the generated admin front end"""

from .base import ModelArtifactRenderer
from .forms import FormSchemaRenderer, FormRenderer
from .tables import DataTableRenderer
from .routes import RoutesRenderer
from .layout import SidebarRenderer, HeaderRenderer, DashboardLayoutRenderer, DashboardRenderer
from .auth import AuthContextRenderer, LoginRenderer
from .i18n import I18nRenderer, LanguageSwitcherRenderer
from .theme import IndexCssRenderer, ThemeProviderRenderer
from .app import AppEntryRenderer, ApiServiceRenderer
from .store import ReduxStoreRenderer

__all__ = [
    "ModelArtifactRenderer",
    "FormSchemaRenderer",
    "FormRenderer",
    "DataTableRenderer",
    "RoutesRenderer",
    "SidebarRenderer",
    "HeaderRenderer",
    "DashboardLayoutRenderer",
    "DashboardRenderer",
    "AuthContextRenderer",
    "LoginRenderer",
    "I18nRenderer",
    "LanguageSwitcherRenderer",
    "IndexCssRenderer",
    "ThemeProviderRenderer",
    "AppEntryRenderer",
    "ApiServiceRenderer",
    "ReduxStoreRenderer",
]
