"""Data table (listing page) renderer"""

from core.enums import ZodType
from core.models import Field, GeneratedFile, ModelConfig
from utils.naming import pascal_case, plural_route_segment, route_segment, sanitize_identifier
from .base import ModelArtifactRenderer, dedent_block, js, model_key, t_call


TS_TYPES = {
    ZodType.NUMBER: "number",
    ZodType.BOOLEAN: "boolean",
    ZodType.DATE: "string",
    ZodType.ANY: "any",
    ZodType.STRING: "string",
}


class DataTableRenderer(ModelArtifactRenderer):
    """tanstack-table listing page with mock rows"""

    def __init__(self, max_columns: int = 7, mock_rows: int = 13):
        self.max_columns = max_columns
        self.mock_rows = mock_rows

    @property
    def name(self) -> str:
        return "data_table"

    def render_model(self, model, models):
        pascal = pascal_case(model.name)
        component = f"{pascal}DataTable"
        columns = model.listing_fields(self.max_columns)
        primary = self.primary_field(model, columns)
        primary_key = sanitize_identifier(primary.field_name) if primary else "id"
        primary_label = primary.label.lower() if primary else "id"

        content = dedent_block(f"""
import * as React from "react";
import {{
  flexRender,
  getCoreRowModel,
  getFilteredRowModel,
  getPaginationRowModel,
  getSortedRowModel,
  useReactTable,
  type ColumnDef,
  type ColumnFiltersState,
  type SortingState,
}} from "@tanstack/react-table";
import {{ ArrowUpDown, ChevronLeft, ChevronRight, Eye, Pencil, Plus, Trash2 }} from "lucide-react";
import {{ Link }} from "react-router-dom";
import {{ useTranslation }} from "react-i18next";
import {{ Button }} from "@/components/ui/button";
import {{ Checkbox }} from "@/components/ui/checkbox";
import {{ Input }} from "@/components/ui/input";
import {{ Table, TableBody, TableCell, TableHead, TableHeader, TableRow }} from "@/components/ui/table";
import {{ Dialog, DialogContent, DialogHeader, DialogTitle }} from "@/components/ui/dialog";
import {{ AlertDialog, AlertDialogAction, AlertDialogCancel, AlertDialogContent, AlertDialogDescription, AlertDialogFooter, AlertDialogHeader, AlertDialogTitle }} from "@/components/ui/alert-dialog";
{self._form_import(model)}
{self.type_definition(model)}

{self.mock_data(model)}

export function {component}() {{
  const {{ t }} = useTranslation();
  const [data, setData] = React.useState<{pascal}[]>(mockData);
  const [sorting, setSorting] = React.useState<SortingState>([]);
  const [columnFilters, setColumnFilters] = React.useState<ColumnFiltersState>([]);
  const [rowSelection, setRowSelection] = React.useState({{}});
  const [viewingRow, setViewingRow] = React.useState<{pascal} | null>(null);
  const [itemToDelete, setItemToDelete] = React.useState<null | number | string | (number | string)[]>(null);
{self._popup_state(model)}
  const confirmDelete = () => {{
    if (itemToDelete === null) return;
    const ids = new Set(Array.isArray(itemToDelete) ? itemToDelete : [itemToDelete]);
    setData((current) => current.filter((item) => !ids.has(item.id)));
    table.resetRowSelection();
    setItemToDelete(null);
  }};

  const columns: ColumnDef<{pascal}>[] = React.useMemo(() => [
    {{
      id: "select",
      header: ({{ table }}) => <Checkbox checked={{table.getIsAllPageRowsSelected()}} onCheckedChange={{(value) => table.toggleAllPageRowsSelected(!!value)}} aria-label="Select all" />,
      cell: ({{ row }}) => <Checkbox checked={{row.getIsSelected()}} onCheckedChange={{(value) => row.toggleSelected(!!value)}} aria-label="Select row" />,
      enableSorting: false,
    }},
    {{ accessorKey: "id", header: "ID", enableSorting: true }},
{self.column_definitions(model, columns)}
    {{
      id: "actions",
      enableSorting: false,
      header: () => <div className="text-right">{{{t_call("table.actions", "Actions")}}}</div>,
      cell: ({{ row }}) => (
        <div className="flex items-center justify-end gap-1">
          <Button variant="ghost" size="icon" title="View" onClick={{() => setViewingRow(row.original)}}>
            <Eye className="h-4 w-4" />
          </Button>
{self._edit_action(model)}
          <Button variant="ghost" size="icon" title="Delete" className="text-red-600 hover:text-red-500" onClick={{() => setItemToDelete(row.original.id)}}>
            <Trash2 className="h-4 w-4" />
          </Button>
        </div>
      ),
    }},
  ], [t]);

  const table = useReactTable({{
    data,
    columns,
    onSortingChange: setSorting,
    onColumnFiltersChange: setColumnFilters,
    onRowSelectionChange: setRowSelection,
    getCoreRowModel: getCoreRowModel(),
    getPaginationRowModel: getPaginationRowModel(),
    getSortedRowModel: getSortedRowModel(),
    getFilteredRowModel: getFilteredRowModel(),
    state: {{ sorting, columnFilters, rowSelection }},
  }});

  const selectedCount = table.getFilteredSelectedRowModel().rows.length;

  return (
    <>
      <div className="w-full rounded-xl border bg-card shadow-sm p-4 md:p-6">
        <div className="flex flex-col md:flex-row items-center justify-between gap-4 py-4">
          <Input
            placeholder={{{js(f"Filter by {primary_label}...")}}}
            value={{(table.getColumn({js(primary_key)})?.getFilterValue() as string) ?? ""}}
            onChange={{(e) => table.getColumn({js(primary_key)})?.setFilterValue(e.target.value)}}
            className="w-full md:max-w-sm"
          />
          <div className="flex items-center gap-2">
            {{selectedCount > 0 && (
              <Button variant="destructive" size="sm" onClick={{() => setItemToDelete(table.getFilteredSelectedRowModel().rows.map((row) => row.original.id))}}>
                {{{t_call("table.delete", "Delete")}}} ({{selectedCount}})
              </Button>
            )}}
{self._create_action(model)}
          </div>
        </div>

        <div className="rounded-md border">
          <Table>
            <TableHeader>
              {{table.getHeaderGroups().map((hg) => (
                <TableRow key={{hg.id}}>
                  {{hg.headers.map((header) => (
                    <TableHead key={{header.id}}>
                      {{header.isPlaceholder ? null : header.column.getCanSort() ? (
                        <Button variant="ghost" onClick={{() => header.column.toggleSorting(header.column.getIsSorted() === "asc")}}>
                          {{flexRender(header.column.columnDef.header, header.getContext())}}
                          <ArrowUpDown className="ml-2 h-4 w-4" />
                        </Button>
                      ) : (
                        flexRender(header.column.columnDef.header, header.getContext())
                      )}}
                    </TableHead>
                  ))}}
                </TableRow>
              ))}}
            </TableHeader>
            <TableBody>
              {{table.getRowModel().rows.length ? (
                table.getRowModel().rows.map((row) => (
                  <TableRow key={{row.id}} data-state={{row.getIsSelected() && "selected"}}>
                    {{row.getVisibleCells().map((cell) => (
                      <TableCell key={{cell.id}}>{{flexRender(cell.column.columnDef.cell, cell.getContext())}}</TableCell>
                    ))}}
                  </TableRow>
                ))
              ) : (
                <TableRow>
                  <TableCell colSpan={{columns.length}} className="h-24 text-center">{{{t_call("table.noResults", "No results.")}}}</TableCell>
                </TableRow>
              )}}
            </TableBody>
          </Table>
        </div>

        <div className="flex items-center justify-end gap-2 py-4">
          <Button variant="outline" size="icon" onClick={{() => table.previousPage()}} disabled={{!table.getCanPreviousPage()}}>
            <ChevronLeft className="h-4 w-4" />
          </Button>
          <span className="text-sm text-muted-foreground">
            {{table.getState().pagination.pageIndex + 1}} / {{Math.max(table.getPageCount(), 1)}}
          </span>
          <Button variant="outline" size="icon" onClick={{() => table.nextPage()}} disabled={{!table.getCanNextPage()}}>
            <ChevronRight className="h-4 w-4" />
          </Button>
        </div>
      </div>

      <Dialog open={{!!viewingRow}} onOpenChange={{(isOpen) => !isOpen && setViewingRow(null)}}>
        <DialogContent className="sm:max-w-md">
          <DialogHeader>
            <DialogTitle>{{{t_call(f"{model_key(model)}.label", model.name)}}}</DialogTitle>
          </DialogHeader>
          {{viewingRow && (
            <div className="grid auto-rows-min gap-y-4">
{self.detail_rows(model)}
            </div>
          )}}
        </DialogContent>
      </Dialog>
{self._popup_dialog(model)}
      <AlertDialog open={{itemToDelete !== null}} onOpenChange={{(isOpen) => !isOpen && setItemToDelete(null)}}>
        <AlertDialogContent>
          <AlertDialogHeader>
            <AlertDialogTitle>{{{t_call("table.confirmTitle", "Are you absolutely sure?")}}}</AlertDialogTitle>
            <AlertDialogDescription>
              {{{t_call("table.confirmBody", "This action cannot be undone.")}}}
            </AlertDialogDescription>
          </AlertDialogHeader>
          <AlertDialogFooter>
            <AlertDialogCancel>{{{t_call("common.cancel", "Cancel")}}}</AlertDialogCancel>
            <AlertDialogAction onClick={{confirmDelete}}>{{{t_call("common.continue", "Continue")}}}</AlertDialogAction>
          </AlertDialogFooter>
        </AlertDialogContent>
      </AlertDialog>
    </>
  );
}}
""")
        return [GeneratedFile(path=f"src/pages/{pascal}/{component}.tsx", content=content)]

    def primary_field(self, model: ModelConfig, columns: list[Field]):
        """Column used by the filter box: 'name' if present, else the first listed column"""
        for field in model.fields:
            if field.field_name.lower() == "name" and not field.hidden:
                return field
        return columns[0] if columns else None

    def type_definition(self, model: ModelConfig) -> str:
        lines = ["  id: number | string;"]
        for field in model.field_map().values():
            if field.is_id:
                continue
            lines.append(f"  {sanitize_identifier(field.field_name)}: {TS_TYPES[field.zod_type]};")
        body = "\n".join(lines)
        return f"export type {pascal_case(model.name)} = {{\n{body}\n}};"

    def mock_data(self, model: ModelConfig) -> str:
        rows = []
        fields = [f for f in model.field_map().values() if not f.is_id]
        for i in range(self.mock_rows):
            values = [f"id: {i + 1}"]
            for field in fields:
                values.append(f"{sanitize_identifier(field.field_name)}: {self._mock_value(field, i)}")
            rows.append("  { " + ", ".join(values) + " }")
        return f"const mockData: {pascal_case(model.name)}[] = [\n" + ",\n".join(rows) + "\n];"

    def _mock_value(self, field: Field, index: int) -> str:
        if field.zod_type == ZodType.NUMBER:
            return str(index + 10)
        if field.zod_type == ZodType.BOOLEAN:
            return "true" if index % 2 == 0 else "false"
        if field.zod_type == ZodType.DATE:
            return js(f"2024-01-{(index % 28) + 1:02d}")
        if field.zod_type == ZodType.ANY:
            return "null"
        if field.options:
            return js(field.options[index % len(field.options)])
        return js(f"{field.label} {index + 1}")

    def column_definitions(self, model: ModelConfig, columns: list[Field]) -> str:
        definitions = []
        for field in columns:
            key = sanitize_identifier(field.field_name)
            header = t_call(f"{model_key(model)}.fields.{key}", field.label)
            cell = ""
            if field.zod_type == ZodType.BOOLEAN:
                cell = ' cell: ({ row }) => (row.getValue(' + js(key) + ') ? "Yes" : "No"),'
            definitions.append(
                f"    {{ accessorKey: {js(key)}, header: () => {header},{cell} "
                f"enableSorting: {'true' if field.sortable else 'false'} }},"
            )
        return "\n".join(definitions)

    def detail_rows(self, model: ModelConfig) -> str:
        rows = []
        for field in model.form_fields():
            key = sanitize_identifier(field.field_name)
            rows.append(
                "              <div className=\"grid grid-cols-2 items-start gap-x-4\">\n"
                f"                <span className=\"text-muted-foreground\">{{{t_call(f'{model_key(model)}.fields.{key}', field.label)}}}</span>\n"
                f"                <p className=\"text-foreground font-medium break-words\">{{String(viewingRow.{key} ?? \"\")}}</p>\n"
                "              </div>"
            )
        return "\n".join(rows)

    # Popup models keep create/edit inside this page instead of routing away

    def _form_import(self, model: ModelConfig) -> str:
        if not model.is_popup:
            return ""
        pascal = pascal_case(model.name)
        return f'import {{ {pascal}Form }} from "./{pascal}Form";\n'

    def _popup_state(self, model: ModelConfig) -> str:
        if not model.is_popup:
            return ""
        return "  const [formState, setFormState] = React.useState<{ open: boolean; id?: number | string }>({ open: false });\n"

    def _edit_action(self, model: ModelConfig) -> str:
        if model.is_popup:
            return (
                "          <Button variant=\"ghost\" size=\"icon\" title=\"Edit\" "
                "onClick={() => setFormState({ open: true, id: row.original.id })}>\n"
                "            <Pencil className=\"h-4 w-4\" />\n"
                "          </Button>"
            )
        return (
            "          <Button asChild variant=\"ghost\" size=\"icon\" title=\"Edit\">\n"
            f"            <Link to={{`/{route_segment(model.name)}/edit/${{row.original.id}}`}}>\n"
            "              <Pencil className=\"h-4 w-4\" />\n"
            "            </Link>\n"
            "          </Button>"
        )

    def _create_action(self, model: ModelConfig) -> str:
        label = t_call("table.new", "New")
        if model.is_popup:
            return (
                "            <Button size=\"sm\" onClick={() => setFormState({ open: true })}>\n"
                f"              <Plus className=\"h-4 w-4 mr-2\" /> {{{label}}}\n"
                "            </Button>"
            )
        return (
            "            <Button asChild size=\"sm\">\n"
            f"              <Link to=\"/{route_segment(model.name)}/create\"><Plus className=\"h-4 w-4 mr-2\" /> {{{label}}}</Link>\n"
            "            </Button>"
        )

    def _popup_dialog(self, model: ModelConfig) -> str:
        if not model.is_popup:
            return ""
        pascal = pascal_case(model.name)
        return (
            "\n      <Dialog open={formState.open} onOpenChange={(isOpen) => setFormState({ open: isOpen })}>\n"
            "        <DialogContent className=\"sm:max-w-4xl p-0\">\n"
            f"          <{pascal}Form recordId={{formState.id}} onSuccess={{() => setFormState({{ open: false }})}} />\n"
            "        </DialogContent>\n"
            "      </Dialog>\n"
        )
