"""i18n renderers: translation catalogs, i18next setup, language switcher"""

import copy
import json

from core.interfaces import ArtifactRenderer
from core.models import GeneratedFile
from utils.naming import pascal_case, sanitize_identifier
from .base import dedent_block, js


RTL_LANGUAGES = {"ar", "he", "fa", "ur"}

LANGUAGE_NAMES = {
    "en": "English",
    "fr": "Français",
    "ar": "العربية",
    "es": "Español",
    "de": "Deutsch",
}

BASE_CATALOG = {
    "common": {
        "dashboard": "Dashboard",
        "cancel": "Cancel",
        "continue": "Continue",
        "fieldCount": "{{count}} fields",
    },
    "sidebar": {
        "dashboard": "Dashboard",
        "all": "All {{model}}",
        "create": "Create {{model}}",
    },
    "table": {
        "actions": "Actions",
        "delete": "Delete",
        "new": "New",
        "noResults": "No results.",
        "confirmTitle": "Are you absolutely sure?",
        "confirmBody": "This action cannot be undone.",
    },
    "form": {
        "create": "Create",
        "edit": "Edit",
        "save": "Save Changes",
    },
    "login": {
        "email": "Email",
        "password": "Password",
        "submit": "Sign in",
        "failed": "Invalid email or password",
    },
}


class I18nRenderer(ArtifactRenderer):
    """
    One translation.json per configured language plus the i18next setup.

    Every catalog carries the same keys; non-default languages start from
    the default-language text and are meant to be translated in place.
    """

    def __init__(self, languages: list[str] = None, default_language: str = "en"):
        self.languages = languages or ["en", "fr", "ar"]
        self.default_language = default_language

    @property
    def name(self) -> str:
        return "i18n"

    def catalog(self, models) -> dict:
        catalog = copy.deepcopy(BASE_CATALOG)
        catalog["models"] = {
            pascal_case(model.name): {
                "label": model.name,
                "fields": {
                    sanitize_identifier(field.field_name): field.label
                    for field in model.field_map().values()
                },
            }
            for model in models.values()
        }
        return catalog

    def render(self, models):
        catalog = json.dumps(self.catalog(models), indent=2, ensure_ascii=False) + "\n"
        files = [
            GeneratedFile(path=f"src/i18n/locales/{lang}/translation.json", content=catalog)
            for lang in self.languages
        ]
        files.append(GeneratedFile(path="src/i18n/index.ts", content=self._config()))
        return files

    def _config(self) -> str:
        imports = "\n".join(
            f"import {self._var(lang)} from './locales/{lang}/translation.json';"
            for lang in self.languages
        )
        resources = "\n".join(
            f"  {js(lang)}: {{ translation: {self._var(lang)} }},"
            for lang in self.languages
        )
        rtl = js(sorted(RTL_LANGUAGES & set(self.languages)))
        return dedent_block(f"""
import i18n from 'i18next';
import {{ initReactI18next }} from 'react-i18next';
import LanguageDetector from 'i18next-browser-languagedetector';
{imports}

const resources = {{
{resources}
}};

const RTL_LANGUAGES: string[] = {rtl};

function applyDirection(lng: string) {{
  if (typeof document === 'undefined') return;
  document.documentElement.dir = RTL_LANGUAGES.includes(lng) ? 'rtl' : 'ltr';
  document.documentElement.lang = lng;
}}

i18n
  .use(LanguageDetector)
  .use(initReactI18next)
  .init({{
    resources,
    fallbackLng: {js(self.default_language)},
    supportedLngs: {js(self.languages)},
    interpolation: {{
      escapeValue: false,
    }},
  }});

i18n.on('languageChanged', applyDirection);
applyDirection(i18n.language || {js(self.default_language)});

export default i18n;
""")

    def _var(self, lang: str) -> str:
        return sanitize_identifier(lang) + "Translation"


class LanguageSwitcherRenderer(ArtifactRenderer):

    def __init__(self, languages: list[str] = None):
        self.languages = languages or ["en", "fr", "ar"]

    @property
    def name(self) -> str:
        return "language_switcher"

    def render(self, models):
        options = js([
            {"code": lang, "label": LANGUAGE_NAMES.get(lang, lang.upper())}
            for lang in self.languages
        ])
        content = dedent_block(f"""
import {{ useTranslation }} from "react-i18next";
import {{ Select, SelectContent, SelectItem, SelectTrigger, SelectValue }} from "@/components/ui/select";

const languages: {{ code: string; label: string }}[] = {options};

export function LanguageSwitcher() {{
  const {{ i18n }} = useTranslation();
  return (
    <Select value={{i18n.resolvedLanguage}} onValueChange={{(lng) => i18n.changeLanguage(lng)}}>
      <SelectTrigger className="w-[130px]">
        <SelectValue />
      </SelectTrigger>
      <SelectContent>
        {{languages.map((lang) => (
          <SelectItem key={{lang.code}} value={{lang.code}}>{{lang.label}}</SelectItem>
        ))}}
      </SelectContent>
    </Select>
  );
}}
""")
        return [GeneratedFile(path="src/components/language-switcher.tsx", content=content)]
