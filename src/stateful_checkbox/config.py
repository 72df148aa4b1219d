"""CheckboxColumnConfig: recognised options of a stateful checkbox column."""

from __future__ import annotations

from typing import Any, Mapping

import param

from .core.errors import ConfigurationError
from .core.validation import (
    validate_header_position,
    validate_record_index_field,
    validate_state_key,
)

# Option names used by grid configs written in camelCase.
OPTION_ALIASES = {
    "stateKey": "state_key",
    "stateId": "state_key",
    "recordIndexField": "record_index_field",
    "recordIndex": "record_index_field",
    "headerPosition": "header_position",
    "headerPos": "header_position",
    "headerWidth": "header_width",
    "headerStyle": "header_style",
    "additionalClasses": "additional_classes",
    "additionalCls": "additional_classes",
    "inputCss": "input_css",
}


class CheckboxColumnConfig(param.Parameterized):
    """Options for one checkbox column.

    Only ``state_key`` and ``record_index_field`` affect selection
    behaviour; the header options are presentation hints for the view.
    """

    # --- Selection ---
    state_key = param.String(default=None, allow_None=True, doc="Unique persistence key")
    record_index_field = param.Parameter(
        default=None, doc="Identifier field name or accessor callable"
    )

    # --- Presentation ---
    header_position = param.Parameter(default=0, doc="Column index, 'first' or 'last'")
    header_width = param.Integer(default=50, bounds=(0, None))
    header_style = param.String(default=None, allow_None=True)
    additional_classes = param.List(default=[], item_type=str)
    input_css = param.String(default="ux-grid-cell-checker")

    def __init__(self, **params):
        try:
            super().__init__(**params)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e
        validate_header_position(self.header_position)

    @param.depends("header_position", watch=True)
    def _check_header_position(self):
        validate_header_position(self.header_position)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> CheckboxColumnConfig:
        """Build from a mapping of snake_case or camelCase option names."""
        params: dict[str, Any] = {}
        unknown = []
        for key, value in options.items():
            name = OPTION_ALIASES.get(key, key)
            if name not in cls.param or name == "name":
                unknown.append(key)
                continue
            params[name] = value
        if unknown:
            raise ConfigurationError(
                f"Unknown checkbox column options: {sorted(unknown)}. "
                f"Known: {sorted(set(OPTION_ALIASES.values()))}"
            )
        return cls(**params)

    def validate(self) -> CheckboxColumnConfig:
        """Raise ConfigurationError unless the required options are usable."""
        validate_state_key(self.state_key)
        validate_record_index_field(self.record_index_field)
        validate_header_position(self.header_position)
        return self

    def __repr__(self) -> str:
        return (
            f"CheckboxColumnConfig(state_key={self.state_key!r}, "
            f"record_index_field={self.record_index_field!r}, "
            f"header_position={self.header_position!r})"
        )
