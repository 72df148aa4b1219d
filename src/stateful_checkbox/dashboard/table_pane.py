"""StatefulCheckboxTable: Panel Tabulator wired to a SelectionController."""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd
import panel as pn

from ..config import CheckboxColumnConfig
from ..controller import SelectionController
from ..core.identity import iter_records, record_at
from ..widget.renderer import CheckboxRenderer, resolve_header_position

logger = logging.getLogger(__name__)

DEFAULT_CHECK_COLUMN = "__checked__"


class StatefulCheckboxTable:
    """Paginated Tabulator grid with a persistent checkbox column.

    The grid only forwards events; all selection logic lives in the
    controller:

    - header checkbox click  -> controller.on_header_click(visible records)
    - checkbox cell click    -> controller.on_row_click(record)
    - value/page/sort/filter -> controller.on_view_refresh(visible records)

    The visible records are the table's ``current_view`` (filtered and
    sorted, every page), so select-all covers rows on other pages too.
    The controller must be initialized before the table is built.
    """

    def __init__(
        self,
        data: pd.DataFrame,
        controller: SelectionController,
        column: str = DEFAULT_CHECK_COLUMN,
        page_size: int = 20,
        **tabulator_kwargs: Any,
    ) -> None:
        if column in data.columns:
            raise ValueError(
                f"Column '{column}' already exists in data; pick another checkbox column name."
            )
        self.controller = controller
        self.config: CheckboxColumnConfig = (
            controller.config if controller.config is not None else CheckboxColumnConfig()
        )
        self.renderer = CheckboxRenderer(controller, self.config)
        self.column = column
        self._syncing = False

        self.header = pn.widgets.Checkbox(
            label="Select all",
            value=controller.header_checked,
            css_classes=self.renderer.header_config()["css_classes"],
        )
        self.table = pn.widgets.Tabulator(
            self._with_markers(data),
            pagination="local",
            page_size=page_size,
            formatters={column: {"type": "html"}},
            editors={column: None},
            widths={column: self.config.header_width},
            titles={column: ""},
            text_align={column: "center"},
            stylesheets=self._stylesheets(),
            **tabulator_kwargs,
        )

        self.table.on_click(self._on_cell_click, column=column)
        self.table.param.watch(self._on_view_change, ["value", "page", "sorters", "filters"])
        self.header.param.watch(self._on_header_toggle, "value")
        controller.param.watch(self._on_header_state, "header_checked")
        # Every mutation emits one change notification; redraw on that alone.
        controller.on_change(lambda ids: self.refresh())

        controller.on_view_refresh(self.visible_records())

    def _stylesheets(self) -> list[str]:
        header = self.renderer.header_config()
        return [
            f".tabulator-col[tabulator-field='{self.column}'] {{ {header['style']} }}"
        ]

    def _markers(self, df: pd.DataFrame) -> list[str]:
        selection = self.controller.selection
        return [self.renderer.render(record, selection) for record in iter_records(df)]

    def _with_markers(self, data: pd.DataFrame) -> pd.DataFrame:
        df = data.copy()
        position = resolve_header_position(self.config.header_position, len(df.columns))
        df.insert(position, self.column, self._markers(data))
        return df

    def visible_records(self) -> pd.DataFrame:
        """Records currently in the view, without the checkbox column."""
        return self.table.current_view.drop(columns=[self.column])

    def refresh(self) -> None:
        """Re-render the checkbox column from the persisted selection."""
        df = self.table.value.drop(columns=[self.column])
        markers = self._markers(df)
        # patch() addresses rows by index label.
        self.table.patch({self.column: list(zip(df.index, markers))})
        logger.debug(f"Re-rendered {len(markers)} checkbox cells")

    def _on_cell_click(self, event) -> None:
        if event.column != self.column:
            return
        # event.row is a position in value, independent of sort order.
        record = record_at(self.table.value.drop(columns=[self.column]), event.row)
        self.controller.on_row_click(record)

    def _on_header_toggle(self, event) -> None:
        if self._syncing:
            return
        self.controller.on_header_click(self.visible_records())
        # The controller decides the final header state.
        self._on_header_state(None)

    def _on_header_state(self, event) -> None:
        self.header.css_classes = self.renderer.header_config()["css_classes"]
        checked = self.controller.header_checked
        if self.header.value == checked:
            return
        self._syncing = True
        try:
            self.header.value = checked
        finally:
            self._syncing = False

    def _on_view_change(self, event) -> None:
        self.controller.on_view_refresh(self.visible_records())

    def panel(self) -> pn.Column:
        """Header checkbox above the grid."""
        return pn.Column(self.header, self.table, sizing_mode="stretch_width")
