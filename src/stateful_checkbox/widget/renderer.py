"""CheckboxRenderer: per-row checkbox markup and header description."""

from __future__ import annotations

import html
from typing import Any

from ..config import CheckboxColumnConfig
from ..core.selection_set import SelectionSet
from ..core.validation import validate_header_position

# Always applied before any user header style.
BASE_HEADER_STYLE = "padding-left: 13px;"
HEADER_CHECKED_CSS = "grid-hd-checker-on"


def resolve_header_position(position: int | str, column_count: int) -> int:
    """Turn 'first' / 'last' / an index into an insert position.

    Indexes past the end are clamped to ``column_count``.
    """
    position = validate_header_position(position)
    if position == "first":
        return 0
    if position == "last":
        return column_count
    return min(position, column_count)


class CheckboxRenderer:
    """Renders the checked/unchecked marker for each row.

    Without a snapshot, membership is read from the controller on every
    call, so rows always reflect the persisted selection.
    """

    def __init__(self, controller: Any, config: CheckboxColumnConfig | None = None) -> None:
        self.controller = controller
        if config is None:
            config = controller.config if controller.config is not None else CheckboxColumnConfig()
        self.config = config

    def marker(self, record: Any, selection: SelectionSet | None = None) -> bool:
        """Checked state of a row."""
        return self.controller.is_selected(record, selection)

    def render(self, record: Any, selection: SelectionSet | None = None) -> str:
        """HTML checkbox for one row.

        When rendering many rows, pass one ``selection`` snapshot so the
        store is read once instead of once per row.
        """
        classes = html.escape(" ".join(self.config.additional_classes), quote=True)
        input_css = html.escape(self.config.input_css, quote=True)
        checked = " checked" if self.marker(record, selection) else ""
        return (
            f'<div class="{classes}">'
            f'<input class="{input_css}" type="checkbox"{checked}/>'
            f"</div>"
        )

    def header_config(self) -> dict[str, Any]:
        """Describe the checkbox header column for a grid."""
        style = BASE_HEADER_STYLE
        if self.config.header_style:
            style = f"{self.config.header_style} {BASE_HEADER_STYLE}"
        css = ["column-header-checkbox"]
        if self.controller.header_checked:
            css.append(HEADER_CHECKED_CSS)
        return {
            "is_checker_header": True,
            "text": " ",
            "width": self.config.header_width,
            "sortable": False,
            "draggable": False,
            "resizable": False,
            "hideable": False,
            "align": "center",
            "style": style,
            "menu_disabled": True,
            "css_classes": css,
        }
