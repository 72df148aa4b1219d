"""stateful-checkbox: row selection for paginated grids that survives paging and reloads."""

from ._version import __version__
from .config import CheckboxColumnConfig
from .controller import SelectionController
from .core.aggregate import Aggregate
from .core.errors import ConfigurationError, IdentityError, PersistenceError, SelectionError
from .core.identity import RecordIdentity
from .core.selection_set import SelectionSet
from .storage import JsonFileProvider, MemoryProvider, SQLiteProvider, SelectionStateStore
from .widget.renderer import CheckboxRenderer


def explore(data, state_key, record_index_field, provider=None, port=0, show=True, **options):
    """Launch a grid dashboard with a persistent checkbox column in the browser.

    Parameters
    ----------
    data : pd.DataFrame
        Records to display, one row per record.
    state_key : str
        Key under which the selection is persisted.
    record_index_field : str or callable
        Column holding each record's identifier ('index' for the DataFrame
        index), or a function ``record -> identifier``.
    provider : PersistenceProvider, optional
        Where the selection is stored. Defaults to in-memory.
    port : int
        Port number. 0 = auto-assign.
    show : bool
        Whether to open the browser automatically.
    **options
        Extra column options (header_position, header_width, ...).
    """
    from .dashboard.app import SelectionDashboardApp

    app = SelectionDashboardApp(
        data, state_key, record_index_field, provider=provider, **options,
    )
    app.serve(port=port, show=show)


__all__ = [
    "__version__",
    "Aggregate",
    "CheckboxColumnConfig",
    "CheckboxRenderer",
    "ConfigurationError",
    "IdentityError",
    "JsonFileProvider",
    "MemoryProvider",
    "PersistenceError",
    "RecordIdentity",
    "SQLiteProvider",
    "SelectionController",
    "SelectionError",
    "SelectionSet",
    "SelectionStateStore",
    "explore",
]
