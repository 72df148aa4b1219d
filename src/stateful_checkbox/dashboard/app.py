"""SelectionDashboardApp: serves a paginated grid with a persistent checkbox column."""

from __future__ import annotations

from typing import Any, Callable

import panel as pn
import pandas as pd

from ..config import CheckboxColumnConfig
from ..controller import SelectionController
from ..storage.providers import MemoryProvider, PersistenceProvider
from ..storage.state_store import SelectionStateStore
from .table_pane import StatefulCheckboxTable

_MAX_PREVIEW_IDS = 20


class SelectionDashboardApp:
    """Grid dashboard whose row selection survives paging and reloads.

    Assembles a Panel MaterialTemplate with:
    - Main area: "select all" header checkbox + paginated Tabulator grid
    - Readout: the persisted selection, updated on every change
    """

    def __init__(
        self,
        data: pd.DataFrame,
        state_key: str,
        record_index_field: str | Callable[[Any], Any],
        provider: PersistenceProvider | None = None,
        page_size: int = 20,
        **options: Any,
    ) -> None:
        pn.extension("tabulator", sizing_mode="stretch_width")

        self.config = CheckboxColumnConfig.from_options({
            "state_key": state_key,
            "record_index_field": record_index_field,
            **options,
        }).validate()

        self.store = SelectionStateStore(provider if provider is not None else MemoryProvider())
        self.controller = SelectionController(self.store, config=self.config)

        # Readout must exist before initialize() emits the first notification
        self.readout = pn.pane.Markdown("", sizing_mode="stretch_width")
        self.controller.on_change(self._update_readout)
        self.controller.initialize(
            self.config.state_key, self.config.record_index_field, records=data,
        )

        self.table = StatefulCheckboxTable(data, self.controller, page_size=page_size)

    def _update_readout(self, ids: list) -> None:
        preview = ", ".join(str(x) for x in ids[:_MAX_PREVIEW_IDS])
        if len(ids) > _MAX_PREVIEW_IDS:
            preview += f", ... ({len(ids) - _MAX_PREVIEW_IDS} more)"
        self.readout.object = f"**{len(ids)} selected** {preview}"

    def _build_template(self) -> pn.template.MaterialTemplate:
        """Build the Panel MaterialTemplate layout."""
        template = pn.template.MaterialTemplate(
            title="stateful checkbox",
            header_background="#fafafa",
            header_color="#202124",
        )
        template.main.append(
            pn.Column(self.readout, self.table.panel(), sizing_mode="stretch_width")
        )
        return template

    def serve(self, port: int = 0, show: bool = True, **kwargs) -> None:
        """Start the Panel server and optionally open the browser.

        Parameters
        ----------
        port : int
            Port number. 0 = auto-assign.
        show : bool
            Whether to open the browser automatically.
        **kwargs
            Additional keyword arguments passed to pn.serve().
        """
        template = self._build_template()
        pn.serve(
            template,
            port=port or 0,
            show=show,
            title="stateful-checkbox Explorer",
            **kwargs,
        )
