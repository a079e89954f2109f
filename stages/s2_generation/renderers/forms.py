"""Form renderers: zod schema and react-hook-form component per model"""

from core.enums import UIType, ZodType, ValidationRuleType
from core.models import Field, GeneratedFile, ModelConfig
from utils.naming import camel_case, pascal_case, plural_route_segment, sanitize_identifier
from .base import ModelArtifactRenderer, dedent_block, js, model_key, t_call


def schema_path(model: ModelConfig) -> str:
    pascal = pascal_case(model.name)
    return f"src/components/forms/{pascal}/{camel_case(model.name)}Schema.ts"


def schema_name(model: ModelConfig) -> str:
    return f"{camel_case(model.name)}Schema"


class FormSchemaRenderer(ModelArtifactRenderer):
    """zod schema built from semantic types and validation rules"""

    @property
    def name(self) -> str:
        return "form_schema"

    def render_model(self, model, models):
        pascal = pascal_case(model.name)
        entries = "\n".join(
            f"  {sanitize_identifier(field.field_name)}: {self.zod_expression(field)},"
            for field in model.form_fields()
        )
        content = dedent_block(f"""
import {{ z }} from "zod";

export const {schema_name(model)} = z.object({{
{entries}
}});

export type {pascal}FormValues = z.infer<typeof {schema_name(model)}>;
""")
        return [GeneratedFile(path=schema_path(model), content=content)]

    def zod_expression(self, field: Field) -> str:
        """Chain of zod calls for one field"""
        if field.zod_type == ZodType.BOOLEAN:
            return "z.boolean()" if field.required else "z.boolean().optional()"
        if field.zod_type == ZodType.ANY:
            return "z.any()"
        if field.zod_type == ZodType.DATE:
            expr = "z.coerce.date()"
            return expr if field.required else f"{expr}.optional()"
        if field.zod_type == ZodType.NUMBER:
            return self._number_expression(field)
        return self._string_expression(field)

    def _number_expression(self, field: Field) -> str:
        expr = "z.coerce.number()"
        for rule in field.validation_rules:
            if rule.type == ValidationRuleType.MIN:
                expr += f".min({rule.value}, {js(rule.message)})"
            elif rule.type == ValidationRuleType.MAX:
                expr += f".max({rule.value}, {js(rule.message)})"
        return expr if field.required else f"{expr}.optional()"

    def _string_expression(self, field: Field) -> str:
        if field.options and field.ui_type in (UIType.SELECT, UIType.RADIO):
            expr = f"z.enum({js(field.options)})"
            return expr if field.required else f"{expr}.optional()"

        expr = "z.string()"
        if field.required:
            message = f"{field.label} is required"
            for rule in field.validation_rules:
                if rule.type == ValidationRuleType.REQUIRED:
                    message = rule.message
            expr += f".min(1, {js(message)})"

        for rule in field.validation_rules:
            if rule.type in (ValidationRuleType.MIN_LENGTH, ValidationRuleType.MIN):
                expr += f".min({rule.value}, {js(rule.message)})"
            elif rule.type in (ValidationRuleType.MAX_LENGTH, ValidationRuleType.MAX):
                expr += f".max({rule.value}, {js(rule.message)})"
            elif rule.type == ValidationRuleType.EMAIL:
                expr += f".email({js(rule.message)})"
            elif rule.type == ValidationRuleType.URL:
                expr += f".url({js(rule.message)})"
            elif rule.type == ValidationRuleType.REGEX:
                expr += f".regex(new RegExp({js(rule.value)}), {js(rule.message)})"

        if not field.required:
            expr += '.optional().or(z.literal(""))'
        return expr


class FormRenderer(ModelArtifactRenderer):
    """Create/edit form page; popup models embed it in a dialog"""

    @property
    def name(self) -> str:
        return "form"

    def render_model(self, model, models):
        pascal = pascal_case(model.name)
        component = f"{pascal}Form"
        listing = plural_route_segment(model.name)
        fields = "\n\n".join(self.field_jsx(model, field) for field in model.form_fields())
        defaults = ",\n".join(
            f"      {sanitize_identifier(field.field_name)}: {self.default_value(field)}"
            for field in model.form_fields()
        )
        schema_import = schema_path(model)[len("src/"):-len(".ts")]
        edit_schema = self.edit_schema(model)

        content = dedent_block(f"""
import {{ useForm }} from "react-hook-form";
import {{ zodResolver }} from "@hookform/resolvers/zod";
import {{ useNavigate, useParams }} from "react-router-dom";
import {{ useTranslation }} from "react-i18next";
import {{ Button }} from "@/components/ui/button";
import {{ Form, FormControl, FormDescription, FormField, FormItem, FormLabel, FormMessage }} from "@/components/ui/form";
import {{ Input }} from "@/components/ui/input";
import {{ Select, SelectContent, SelectItem, SelectTrigger, SelectValue }} from "@/components/ui/select";
import {{ RadioGroup, RadioGroupItem }} from "@/components/ui/radio-group";
import {{ Checkbox }} from "@/components/ui/checkbox";
import {{ Switch }} from "@/components/ui/switch";
import {{ Textarea }} from "@/components/ui/textarea";
import {{ apiService }} from "@/services/apiService";
import {{ {schema_name(model)}, type {pascal}FormValues }} from "@/{schema_import}";

// create-only fields are not validated on edit
const editSchema = {edit_schema};

interface {component}Props {{
  recordId?: string | number;
  onSuccess?: () => void;
}}

export function {component}({{ recordId, onSuccess }}: {component}Props) {{
  const {{ t }} = useTranslation();
  const navigate = useNavigate();
  const params = useParams();
  const id = recordId ?? params.id;
  const isEdit = id !== undefined;

  const form = useForm<{pascal}FormValues>({{
    resolver: zodResolver(isEdit ? editSchema : {schema_name(model)}),
    defaultValues: {{
{defaults}
    }} as {pascal}FormValues,
  }});

  async function onSubmit(values: {pascal}FormValues) {{
    const [, error] = isEdit
      ? await apiService.put(`/{listing}/${{id}}`, values)
      : await apiService.post("/{listing}", values);
    if (error) return;
    if (onSuccess) {{
      onSuccess();
    }} else {{
      navigate("/{listing}");
    }}
  }}

  return (
    <div className="w-full bg-card border rounded-xl shadow-sm">
      <div className="p-6 md:p-8 border-b">
        <h1 className="text-2xl font-bold text-foreground">
          {{isEdit ? {t_call("form.edit", "Edit")} : {t_call("form.create", "Create")}}} {{{t_call(f"{model_key(model)}.label", model.name)}}}
        </h1>
      </div>
      <Form {{...form}}>
        <form onSubmit={{form.handleSubmit(onSubmit)}} className="p-6 md:p-8 space-y-8">
          <div className="grid grid-cols-1 md:grid-cols-3 gap-6">
{fields}
          </div>
          <div className="flex justify-center md:justify-end pt-8">
            <Button type="submit" size="lg">
              {{{t_call("form.save", "Save Changes")}}}
            </Button>
          </div>
        </form>
      </Form>
    </div>
  );
}}
""")
        return [GeneratedFile(path=f"src/pages/{pascal}/{component}.tsx", content=content)]

    def edit_schema(self, model: ModelConfig) -> str:
        """Edit resolver: all fields optional, create-only fields omitted"""
        removed = [
            sanitize_identifier(field.field_name)
            for field in model.form_fields()
            if field.is_remove_in_edit_form
        ]
        if not removed:
            return f"{schema_name(model)}.partial()"
        keys = ", ".join(f"{name}: true" for name in removed)
        return f"{schema_name(model)}.omit({{ {keys} }}).partial()"

    def default_value(self, field: Field) -> str:
        if field.zod_type == ZodType.BOOLEAN:
            return "false"
        if field.zod_type == ZodType.STRING and not field.options:
            return '""'
        return "undefined"

    def field_jsx(self, model: ModelConfig, field: Field) -> str:
        """JSX for one FormField, wrapped for create-only fields"""
        name = sanitize_identifier(field.field_name)
        label = f"<FormLabel>{{{t_call(f'{model_key(model)}.fields.{name}', field.label)}}}</FormLabel>"
        description = (
            f"<FormDescription>{{{js(field.description)}}}</FormDescription>"
            if field.description else ""
        )
        placeholder = js(field.placeholder or "")
        options = field.options or []

        if field.ui_type == UIType.TEXTAREA:
            control = f"<Textarea placeholder={{{placeholder}}} {{...field}} />"
        elif field.ui_type == UIType.SELECT:
            items = "".join(
                f"<SelectItem value={{{js(opt)}}}>{{{js(opt)}}}</SelectItem>" for opt in options
            )
            control = (
                "<Select onValueChange={field.onChange} defaultValue={field.value}>"
                "<SelectTrigger className=\"w-full\"><SelectValue placeholder=\"Select an option\" /></SelectTrigger>"
                f"<SelectContent>{items}</SelectContent></Select>"
            )
        elif field.ui_type == UIType.RADIO:
            items = "".join(
                "<FormItem className=\"flex items-center space-x-2 space-y-0\">"
                f"<FormControl><RadioGroupItem value={{{js(opt)}}} /></FormControl>"
                f"<FormLabel className=\"font-normal\">{{{js(opt)}}}</FormLabel></FormItem>"
                for opt in options
            )
            control = (
                "<RadioGroup onValueChange={field.onChange} defaultValue={field.value} "
                f"className=\"flex space-x-4 pt-2\">{items}</RadioGroup>"
            )
        elif field.ui_type == UIType.CHECKBOX:
            control = (
                "<div className=\"h-10 flex items-center\">"
                "<Checkbox checked={field.value} onCheckedChange={field.onChange} /></div>"
            )
        elif field.ui_type == UIType.SWITCH:
            control = (
                "<div className=\"h-10 flex items-center\">"
                "<Switch checked={field.value} onCheckedChange={field.onChange} /></div>"
            )
        elif field.ui_type == UIType.FILE:
            control = (
                "<Input type=\"file\" onChange={(e) => field.onChange(e.target.files?.[0])} />"
            )
        elif field.ui_type == UIType.COLOR:
            control = "<Input type=\"color\" className=\"h-10 w-20 p-1\" {...field} />"
        elif field.ui_type == UIType.DATEPICKER:
            control = (
                "<Input type=\"date\" value={field.value ? String(field.value).slice(0, 10) : \"\"} "
                "onChange={field.onChange} />"
            )
        elif field.zod_type == ZodType.NUMBER:
            control = f"<Input type=\"number\" placeholder={{{placeholder}}} {{...field}} />"
        else:
            control = f"<Input placeholder={{{placeholder}}} {{...field}} />"

        jsx = (
            f"            <FormField control={{form.control}} name={js(name)} render={{({{ field }}) => (\n"
            f"              <FormItem>\n"
            f"                {label}\n"
            f"                <FormControl>{control}</FormControl>\n"
            + (f"                {description}\n" if description else "")
            + f"                <FormMessage />\n"
            f"              </FormItem>\n"
            f"            )}} />"
        )
        if field.is_remove_in_edit_form:
            return f"            {{!isEdit && (\n{jsx}\n            )}}"
        return jsx
