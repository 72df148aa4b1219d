"""Tests for CheckboxColumnConfig and option validation."""

import pandas as pd
import pytest

from stateful_checkbox.config import CheckboxColumnConfig
from stateful_checkbox.core.errors import ConfigurationError
from stateful_checkbox.core.validation import (
    validate_header_position,
    validate_record_index_field,
    validate_records,
    validate_state_key,
)


class TestValidators:
    @pytest.mark.parametrize("value", [None, "", "   ", 42])
    def test_bad_state_key(self, value):
        with pytest.raises(ConfigurationError):
            validate_state_key(value)

    def test_good_state_key(self):
        assert validate_state_key("grid1") == "grid1"

    @pytest.mark.parametrize("value", [None, "", 3.5])
    def test_bad_record_index_field(self, value):
        with pytest.raises(ConfigurationError):
            validate_record_index_field(value)

    def test_callable_record_index_field(self):
        fn = lambda r: r["id"]  # noqa: E731
        assert validate_record_index_field(fn) is fn

    @pytest.mark.parametrize("value", [0, 3, "first", "last"])
    def test_good_header_position(self, value):
        assert validate_header_position(value) == value

    @pytest.mark.parametrize("value", [-1, "middle", 1.5, True])
    def test_bad_header_position(self, value):
        with pytest.raises(ConfigurationError):
            validate_header_position(value)

    def test_records_rejects_non_iterable(self):
        with pytest.raises(TypeError, match="iterable"):
            validate_records(5)

    @pytest.mark.parametrize("value", ["abc", {"id": 1}, pd.Series({"id": 1})])
    def test_records_rejects_single_record(self, value):
        with pytest.raises(TypeError, match="collection of records"):
            validate_records(value)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_state_key(None)


class TestCheckboxColumnConfig:
    def test_defaults(self):
        config = CheckboxColumnConfig(state_key="grid1", record_index_field="id")
        assert config.header_position == 0
        assert config.header_width == 50
        assert config.header_style is None
        assert config.additional_classes == []
        assert config.input_css == "ux-grid-cell-checker"

    def test_from_camel_case_options(self):
        config = CheckboxColumnConfig.from_options({
            "stateKey": "grid1",
            "recordIndexField": "id",
            "headerPosition": "last",
            "headerWidth": 30,
            "headerStyle": "color: red;",
            "additionalClasses": ["row-check"],
        })
        assert config.state_key == "grid1"
        assert config.record_index_field == "id"
        assert config.header_position == "last"
        assert config.header_width == 30
        assert config.header_style == "color: red;"
        assert config.additional_classes == ["row-check"]

    def test_from_legacy_option_names(self):
        config = CheckboxColumnConfig.from_options({
            "stateId": "grid1", "recordIndex": "id", "headerPos": "first",
        })
        assert config.state_key == "grid1"
        assert config.header_position == "first"

    def test_unknown_option(self):
        with pytest.raises(ConfigurationError, match="Unknown"):
            CheckboxColumnConfig.from_options({"stateKey": "g", "colour": "red"})

    def test_validate_requires_state_key(self):
        config = CheckboxColumnConfig(record_index_field="id")
        with pytest.raises(ConfigurationError, match="state_key"):
            config.validate()

    def test_validate_requires_record_index_field(self):
        config = CheckboxColumnConfig(state_key="grid1")
        with pytest.raises(ConfigurationError, match="record_index_field"):
            config.validate()

    def test_validate_returns_self(self):
        config = CheckboxColumnConfig(state_key="grid1", record_index_field="id")
        assert config.validate() is config

    def test_negative_width_rejected(self):
        with pytest.raises(ConfigurationError):
            CheckboxColumnConfig(state_key="grid1", record_index_field="id", header_width=-5)

    def test_bad_header_position_rejected(self):
        with pytest.raises(ConfigurationError):
            CheckboxColumnConfig(header_position="middle")

    def test_bad_header_position_on_update(self):
        config = CheckboxColumnConfig()
        with pytest.raises(ConfigurationError):
            config.header_position = -2
