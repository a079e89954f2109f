"""Core data models for the PanelForge pipeline"""

from pydantic import BaseModel
from typing import Optional, Union
from .enums import FileType, ZodType, UIType, ValidationRuleType


# ─────────────────────────────────────────────────────────────
# Stage 0: Workbook Loading
# ─────────────────────────────────────────────────────────────

class RawRow(BaseModel):
    """One data row of a model sheet, cells kept as raw strings"""
    row_number: int
    column: Optional[str] = None
    type: Optional[str] = None
    ui_component: Optional[str] = None
    is_null: Optional[str] = None
    comments: Optional[str] = None
    validation_rule: Optional[str] = None
    sortable: Optional[str] = None
    hidden: Optional[str] = None
    is_in_listing: Optional[str] = None
    is_remove_in_edit_form: Optional[str] = None


class RawSheet(BaseModel):
    """A single sheet after header/flag detection"""
    sheet_name: str
    display_name: str
    is_popup: bool = False
    no_crud: bool = False
    headers: list[str] = []
    rows: list[RawRow] = []


class WorkbookMetadata(BaseModel):
    """Source file information"""
    file_path: str
    file_name: str
    file_type: FileType
    file_size_bytes: int
    sheets: list[str] = []


class WorkbookResult(BaseModel):
    """Complete Stage 0 output"""
    metadata: WorkbookMetadata
    sheets: list[RawSheet] = []
    skipped_sheets: list[str] = []


# ─────────────────────────────────────────────────────────────
# Stage 1: Normalization
# ─────────────────────────────────────────────────────────────

class ValidationRule(BaseModel):
    """A validation constraint extracted from the validation_rule cell"""
    type: ValidationRuleType
    value: Optional[Union[int, str]] = None
    message: str


class Field(BaseModel):
    """One form field derived from one spreadsheet row"""
    field_name: str
    label: str
    data_type: str = ""
    zod_type: ZodType = ZodType.STRING
    ui_type: UIType = UIType.INPUT
    required: bool = False
    options: Optional[list[str]] = None
    description: Optional[str] = None
    placeholder: Optional[str] = None
    validation_rules: list[ValidationRule] = []
    sortable: bool = False
    hidden: bool = False
    is_in_listing: bool = False
    is_remove_in_edit_form: bool = False

    @property
    def is_id(self) -> bool:
        return self.field_name.lower() == "id"


class ModelConfig(BaseModel):
    """One data model, built from one spreadsheet sheet"""
    name: str
    sheet_name: str = ""
    fields: list[Field] = []
    is_popup: bool = False
    no_crud: bool = False

    def field_map(self) -> dict[str, Field]:
        """Fields keyed by name; later duplicates overwrite earlier ones"""
        mapping: dict[str, Field] = {}
        for field in self.fields:
            mapping[field.field_name] = field
        return mapping

    def form_fields(self) -> list[Field]:
        return [f for f in self.field_map().values() if not f.hidden]

    def listing_fields(self, limit: int = 7) -> list[Field]:
        """Columns shown in the data table"""
        visible = [f for f in self.field_map().values() if not f.hidden and not f.is_id]
        flagged = [f for f in visible if f.is_in_listing]
        if flagged:
            return flagged
        return visible[:limit]


class ParseResult(BaseModel):
    """Complete Stage 1 output"""
    models: dict[str, ModelConfig] = {}
    dropped_sheets: list[str] = []

    @property
    def model_names(self) -> list[str]:
        return list(self.models.keys())


# ─────────────────────────────────────────────────────────────
# Stage 2: Code Generation
# ─────────────────────────────────────────────────────────────

class GeneratedFile(BaseModel):
    """A single rendered artifact"""
    path: str  # relative to the frontend root
    content: str


class GeneratedProject(BaseModel):
    """Complete Stage 2 output"""
    files: dict[str, str] = {}
    model_names: list[str] = []
    renderers: list[str] = []


# ─────────────────────────────────────────────────────────────
# Stage 3 / 4: Output & Scaffolding
# ─────────────────────────────────────────────────────────────

class WriteResult(BaseModel):
    """Complete Stage 3 output"""
    output_dir: str
    written_files: list[str] = []


class ScaffoldResult(BaseModel):
    """Complete Stage 4 output"""
    project_path: str
    created_project: bool = False
    steps_run: list[str] = []
    steps_skipped: list[str] = []
