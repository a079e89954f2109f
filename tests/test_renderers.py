import json

import pytest

from core.enums import UIType, ValidationRuleType, ZodType
from core.exceptions import StageError, TemplateRenderError
from core.interfaces import ArtifactRenderer
from core.models import Field, GeneratedFile, ModelConfig, ParseResult, ValidationRule
from stages.s2_generation import CodeGenerator, RendererRegistry, default_registry
from stages.s2_generation.renderers import (
    DataTableRenderer,
    FormRenderer,
    FormSchemaRenderer,
    AppEntryRenderer,
    ApiServiceRenderer,
    I18nRenderer,
    ReduxStoreRenderer,
    RoutesRenderer,
    SidebarRenderer,
)


@pytest.fixture
def models() -> dict[str, ModelConfig]:
    user = ModelConfig(
        name="User",
        fields=[
            Field(field_name="id", label="Id", zod_type=ZodType.NUMBER),
            Field(
                field_name="name",
                label="Name",
                required=True,
                sortable=True,
                validation_rules=[
                    ValidationRule(type=ValidationRuleType.REQUIRED, message="Name is required"),
                    ValidationRule(type=ValidationRuleType.MIN_LENGTH, value=3,
                                   message="Name must be at least 3 characters"),
                ],
            ),
            Field(field_name="email", label="Email", validation_rules=[
                ValidationRule(type=ValidationRuleType.EMAIL, message="Email must be a valid email address"),
            ]),
            Field(field_name="status", label="Status", ui_type=UIType.SELECT, required=True,
                  options=["Active", "Inactive"]),
            Field(field_name="active", label="Active", ui_type=UIType.SWITCH, zod_type=ZodType.BOOLEAN),
            Field(field_name="password", label="Password", is_remove_in_edit_form=True),
            Field(field_name="notes", label="Notes", hidden=True),
        ],
    )
    tag = ModelConfig(
        name="Tag",
        is_popup=True,
        fields=[Field(field_name="label", label="Label", required=True)],
    )
    return {"User": user, "Tag": tag}


def render_paths(renderer, models) -> dict[str, str]:
    return {f.path: f.content for f in renderer.render(models)}


def test_routes_popup_models_get_listing_only(models):
    content = render_paths(RoutesRenderer(), models)["src/routes/routes.tsx"]

    assert 'path: "/users"' in content
    assert 'path: "/user/create"' in content
    assert 'path: "/user/edit/:id"' in content
    assert 'path: "/tags"' in content
    assert "/tag/create" not in content
    assert "/tag/edit" not in content
    assert 'path: "/login"' in content
    assert "<RequireAuth>" in content


def test_sidebar_create_child_only_for_page_models(models):
    items = SidebarRenderer().nav_items(models)

    by_label = {item["label"]: item for item in items}
    assert items[0]["href"] == "/"
    assert [c["href"] for c in by_label["User"]["children"]] == ["/users", "/user/create"]
    assert [c["href"] for c in by_label["Tag"]["children"]] == ["/tags"]


def test_schema_reflects_types_and_rules(models):
    files = render_paths(FormSchemaRenderer(), models)
    schema = files["src/components/forms/User/userSchema.ts"]

    assert "export const userSchema = z.object({" in schema
    assert 'name: z.string().min(1, "Name is required").min(3, "Name must be at least 3 characters"),' in schema
    assert '.email("Email must be a valid email address")' in schema
    assert 'status: z.enum(["Active", "Inactive"]),' in schema
    assert "active: z.boolean().optional()," in schema
    assert "id: z.coerce.number().optional()," in schema
    # hidden fields stay out of the form
    assert "notes" not in schema
    assert "src/components/forms/Tag/tagSchema.ts" in files


def test_form_create_only_fields_and_popup_props(models):
    files = render_paths(FormRenderer(), models)
    user_form = files["src/pages/User/UserForm.tsx"]
    tag_form = files["src/pages/Tag/TagForm.tsx"]

    assert "{!isEdit && (" in user_form
    assert 'name="password"' in user_form
    assert "<Switch" in user_form
    assert 'SelectItem value={"Active"}' in user_form
    assert "onSuccess" in tag_form


def test_edit_schema_omits_create_only_fields(models):
    files = render_paths(FormRenderer(), models)
    user_form = files["src/pages/User/UserForm.tsx"]
    tag_form = files["src/pages/Tag/TagForm.tsx"]

    assert "const editSchema = userSchema.omit({ password: true }).partial();" in user_form
    assert "zodResolver(isEdit ? editSchema : userSchema)" in user_form
    assert "const editSchema = tagSchema.partial();" in tag_form


def test_redux_store_slice_per_model(models):
    files = render_paths(ReduxStoreRenderer(), models)

    assert set(files) == {
        "src/store/thunks/apiThunk.ts",
        "src/store/slices/userSlice.ts",
        "src/store/slices/tagSlice.ts",
        "src/store/index.ts",
    }
    assert "export const createApiThunk" in files["src/store/thunks/apiThunk.ts"]

    user_slice = files["src/store/slices/userSlice.ts"]
    assert '"users/fetchAll"' in user_slice
    assert 'api.get("/users")' in user_slice
    assert "export const selectAllUsers" in user_slice
    assert "export type UserRecord = UserFormValues" in user_slice

    store = files["src/store/index.ts"]
    assert 'import usersReducer from "./slices/userSlice";' in store
    assert "    tags: tagsReducer," in store
    assert "export type RootState" in store


def test_app_wraps_router_in_redux_provider(models):
    app_tsx = render_paths(AppEntryRenderer(), models)["src/App.tsx"]

    assert 'import store from "@/store";' in app_tsx
    assert "<Provider store={store}>" in app_tsx
    assert app_tsx.index("<Provider") < app_tsx.index("<RouterProvider")


def test_api_service_writes_env_example(models):
    files = render_paths(ApiServiceRenderer(base_url="http://api.local/api"), models)

    assert "VITE_API_BASE_URL=http://api.local/api" in files[".env.example"]


def test_data_table_popup_vs_page(models):
    files = render_paths(DataTableRenderer(max_columns=3, mock_rows=2), models)
    user_table = files["src/pages/User/UserDataTable.tsx"]
    tag_table = files["src/pages/Tag/TagDataTable.tsx"]

    assert '<Link to="/user/create">' in user_table
    assert "recordId={formState.id}" not in user_table
    assert "<TagForm recordId={formState.id}" in tag_table
    assert "setFormState" in tag_table
    assert '"/tag/create"' not in tag_table


def test_i18n_catalog_per_language(models):
    renderer = I18nRenderer(languages=["en", "ar"], default_language="en")
    files = render_paths(renderer, models)

    assert set(files) == {
        "src/i18n/locales/en/translation.json",
        "src/i18n/locales/ar/translation.json",
        "src/i18n/index.ts",
    }
    catalog = json.loads(files["src/i18n/locales/en/translation.json"])
    assert catalog["models"]["User"]["fields"]["email"] == "Email"
    assert catalog["models"]["Tag"]["label"] == "Tag"
    assert '["ar"]' in files["src/i18n/index.ts"]


def test_default_registry_covers_output_layout(models):
    project = CodeGenerator(default_registry()).generate(ParseResult(models=models))

    expected = {
        "src/components/forms/User/userSchema.ts",
        "src/pages/User/UserForm.tsx",
        "src/pages/User/UserDataTable.tsx",
        "src/pages/Tag/TagDataTable.tsx",
        "src/routes/routes.tsx",
        "src/components/layout/Sidebar.tsx",
        "src/components/layout/Header.tsx",
        "src/layout/DashboardLayout.tsx",
        "src/pages/Dashboard.tsx",
        "src/pages/Auth/LoginPage.tsx",
        "src/context/AuthContext.tsx",
        "src/i18n/index.ts",
        "src/i18n/locales/en/translation.json",
        "src/components/language-switcher.tsx",
        "src/index.css",
        "src/components/theme-provider.tsx",
        "src/components/theme-toggle.tsx",
        "src/main.tsx",
        "src/App.tsx",
        "src/lib/api.ts",
        "src/services/apiService.ts",
        ".env.example",
        "src/store/index.ts",
        "src/store/thunks/apiThunk.ts",
        "src/store/slices/userSlice.ts",
    }
    assert expected <= set(project.files)
    assert project.model_names == ["User", "Tag"]
    assert "routes" in project.renderers


class _StaticRenderer(ArtifactRenderer):
    def __init__(self, name: str, path: str):
        self._name = name
        self.path = path

    @property
    def name(self) -> str:
        return self._name

    def render(self, models):
        return [GeneratedFile(path=self.path, content=self._name)]


class _BrokenRenderer(ArtifactRenderer):
    @property
    def name(self) -> str:
        return "broken"

    def render(self, models):
        raise ValueError("template exploded")


def test_registry_register_and_unregister():
    registry = RendererRegistry([_StaticRenderer("a", "a.txt"), _StaticRenderer("b", "b.txt")])

    assert registry.names() == ["a", "b"]
    with pytest.raises(ValueError):
        registry.register(_StaticRenderer("a", "other.txt"))

    registry.unregister("a")
    assert registry.names() == ["b"]
    assert "a" not in registry
    with pytest.raises(KeyError):
        registry.unregister("a")


def test_duplicate_output_path_is_an_error():
    registry = RendererRegistry([_StaticRenderer("a", "same.txt"), _StaticRenderer("b", "same.txt")])

    with pytest.raises(TemplateRenderError) as exc_info:
        CodeGenerator(registry).generate(ParseResult())

    assert exc_info.value.renderer == "b"


def test_renderer_failure_names_renderer():
    generator = CodeGenerator(RendererRegistry([_BrokenRenderer()]))

    with pytest.raises(TemplateRenderError, match="broken"):
        generator.generate(ParseResult())


@pytest.mark.asyncio
async def test_execute_wraps_render_errors_as_stage_error():
    generator = CodeGenerator(RendererRegistry([_BrokenRenderer()]))

    with pytest.raises(StageError) as exc_info:
        await generator.execute(ParseResult())

    assert exc_info.value.stage == 2
