"""Stage 1: Normalization - raw sheet rows to Field / ModelConfig"""

from typing import Optional, Union

import structlog

from config import settings
from core.interfaces import Stage
from core.models import Field, ModelConfig, ParseResult, RawRow, RawSheet, WorkbookResult
from core.enums import EmptyWidgetPolicy, UIType
from utils.naming import create_label
from .rules import (
    map_ui_type,
    infer_zod_type,
    parse_options_from_comments,
    parse_validation_rules,
    is_required,
    is_yes,
)


logger = structlog.get_logger(__name__)


class ModelNormalizer(Stage[WorkbookResult, ParseResult]):
    """Stage 1: Turn raw sheets into normalized model configurations"""

    def __init__(self, empty_widget_policy: Optional[Union[EmptyWidgetPolicy, str]] = None):
        policy = empty_widget_policy or settings.EMPTY_UI_COMPONENT_POLICY
        self.empty_widget_policy = EmptyWidgetPolicy(policy)

    @property
    def name(self) -> str:
        return "Normalization"

    @property
    def stage_number(self) -> int:
        return 1

    def validate_input(self, input_data: WorkbookResult) -> bool:
        return isinstance(input_data, WorkbookResult)

    async def execute(self, input_data: WorkbookResult) -> ParseResult:
        return self.normalize(input_data)

    def normalize(self, workbook: WorkbookResult) -> ParseResult:
        """Build the model mapping keyed by display name"""
        result = ParseResult()
        for sheet in workbook.sheets:
            model = self.build_model(sheet)
            if model is None:
                result.dropped_sheets.append(sheet.sheet_name)
                continue
            if model.name in result.models:
                logger.warning("Duplicate model name, the later sheet wins", model=model.name)
            result.models[model.name] = model
        return result

    def build_model(self, sheet: RawSheet) -> Optional[ModelConfig]:
        """Assemble one ModelConfig, or None when the sheet yields no fields"""
        if sheet.no_crud:
            logger.info("Sheet is marked no_crud, skipping", sheet=sheet.display_name)
            return None

        fields = []
        for row in sheet.rows:
            field = self.normalize_row(row)
            if field is not None:
                fields.append(field)

        if not fields:
            logger.warning(
                "No valid column values found, no form will be generated",
                sheet=sheet.display_name,
            )
            return None

        logger.info("Parsed model", model=sheet.display_name, fields=len(fields))
        return ModelConfig(
            name=sheet.display_name,
            sheet_name=sheet.sheet_name,
            fields=fields,
            is_popup=sheet.is_popup,
            no_crud=sheet.no_crud,
        )

    def normalize_row(self, row: RawRow) -> Optional[Field]:
        """Convert one raw row to a Field; rows without a column name are dropped"""
        field_name = (row.column or "").strip()
        if not field_name:
            logger.debug("Row has no column value, dropping", row=row.row_number)
            return None

        raw_widget = (row.ui_component or "").strip()
        if not raw_widget and self.empty_widget_policy == EmptyWidgetPolicy.OMIT:
            logger.debug("Field has no ui_component, omitting", field=field_name)
            return None

        ui_type = map_ui_type(raw_widget)
        if raw_widget and ui_type == UIType.INPUT and raw_widget.lower() not in ("input", "text"):
            logger.debug("Unmapped ui_component, using input", ui_component=raw_widget, field=field_name)

        data_type = (row.type or "").strip().lower()
        label = create_label(field_name)
        comments = (row.comments or "").strip()
        options = parse_options_from_comments(comments)

        return Field(
            field_name=field_name,
            label=label,
            data_type=data_type,
            zod_type=infer_zod_type(data_type, ui_type),
            ui_type=ui_type,
            required=is_required(row.is_null),
            options=options,
            description=comments if comments and not options else None,
            placeholder=f"Enter {label}...",
            validation_rules=parse_validation_rules(row.validation_rule, label),
            sortable=is_yes(row.sortable),
            hidden=is_yes(row.hidden),
            is_in_listing=is_yes(row.is_in_listing),
            is_remove_in_edit_form=is_yes(row.is_remove_in_edit_form),
        )
