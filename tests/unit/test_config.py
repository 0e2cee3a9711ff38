"""
Unit tests for configuration loading and validation.

Tests cover:
- Defaults
- Merging overrides (options, highlight groups, templates, codes)
- Rejection of bad values with InvalidConfigurationError
- Loading JSON configuration files
"""

import json

import pytest

from tsprettify.config import (
    DEFAULT_CONFIG,
    DEFAULT_HIGHLIGHT_GROUPS,
    PrettifierConfig,
    load_config,
    load_config_file,
)
from tsprettify.extractor import extract
from tsprettify.templates import DEFAULT_TEMPLATES
from tsprettify.utils.errors import InvalidConfigurationError, MalformedTemplateError


class TestDefaults:
    """Tests for the default configuration."""

    def test_default_values(self):
        """Test the documented defaults."""
        config = load_config()
        assert config.indent == "  "
        assert config.max_line_length == 80
        assert config.show_icons is True
        assert config.auto_open_float is False
        assert config.use_diff_highlighting is True
        assert config.show_type_preview is True
        assert dict(config.highlight_groups) == DEFAULT_HIGHLIGHT_GROUPS
        assert config.templates is DEFAULT_TEMPLATES

    def test_no_overrides_returns_base(self):
        """Test that empty overrides give the base configuration back."""
        assert load_config({}) is DEFAULT_CONFIG
        assert load_config(None) is DEFAULT_CONFIG

    def test_config_is_frozen(self):
        """Test that a configuration cannot be modified."""
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.indent = "\t"
        with pytest.raises(TypeError):
            DEFAULT_CONFIG.highlight_groups["title"] = "Error"


class TestMerge:
    """Tests for merging overrides."""

    def test_scalar_overrides(self):
        """Test overriding plain options."""
        config = load_config({"indent": "\t", "max_line_length": 120, "show_icons": False})
        assert config.indent == "\t"
        assert config.max_line_length == 120
        assert config.show_icons is False
        assert config.use_diff_highlighting is True

    def test_base_unchanged(self):
        """Test that merging leaves the base configuration untouched."""
        load_config({"indent": "\t"})
        assert DEFAULT_CONFIG.indent == "  "

    def test_merge_onto_custom_base(self):
        """Test merging onto a base other than the defaults."""
        base = load_config({"indent": "\t"})
        config = load_config({"max_line_length": 40}, base)
        assert config.indent == "\t"
        assert config.max_line_length == 40

    def test_highlight_groups_merged(self):
        """Test that highlight groups are merged key by key."""
        config = load_config({"highlight_groups": {"title": "ErrorMsg"}})
        assert config.highlight_groups["title"] == "ErrorMsg"
        assert config.highlight_groups["actual"] == DEFAULT_HIGHLIGHT_GROUPS["actual"]

    def test_template_added(self):
        """Test adding a template through overrides."""
        config = load_config(
            {
                "templates": {
                    "index": {
                        "pattern": r"Element implicitly has an '(.+)' type .* type '(.+)'",
                        "labels": ["Element type:", "Indexed type:"],
                    }
                }
            }
        )
        assert config.templates.names()[-1] == "index"
        assert "index" not in DEFAULT_TEMPLATES

    def test_codes_may_name_new_template(self):
        """Test that codes can point at a template added in the same overrides."""
        config = load_config(
            {
                "templates": {"pair": {"pattern": r"L '(.+)' R '(.+)'", "labels": ["L", "R"]}},
                "codes": {"TS9001": "pair"},
            }
        )
        assert config.templates.for_code(9001).name == "pair"
        assert extract("L 'a' R 'b'", 9001, config.templates).template == "pair"

    def test_codes_remap_existing(self):
        """Test remapping a default code."""
        config = load_config({"codes": {"2322": "return_mismatch"}})
        message = "Type 'A' is not assignable to type 'B'."
        assert extract(message, 2322, config.templates).template == "return_mismatch"


class TestValidation:
    """Tests for rejected overrides."""

    @pytest.mark.parametrize("value", [19, 0, -5, "80", 80.0, None, True])
    def test_bad_max_line_length(self, value):
        """Test that max_line_length must be an integer of at least 20."""
        with pytest.raises(InvalidConfigurationError) as exc_info:
            load_config({"max_line_length": value})
        assert exc_info.value.option == "max_line_length"

    def test_min_line_length_accepted(self):
        """Test the lower bound itself."""
        assert load_config({"max_line_length": 20}).max_line_length == 20

    @pytest.mark.parametrize("value", [2, None, ["  "]])
    def test_bad_indent(self, value):
        """Test that indent must be a string."""
        with pytest.raises(InvalidConfigurationError, match="indent must be a string"):
            load_config({"indent": value})

    def test_bad_boolean(self):
        """Test that toggles must be booleans."""
        with pytest.raises(InvalidConfigurationError, match="show_icons must be a boolean"):
            load_config({"show_icons": "yes"})

    def test_unknown_option(self):
        """Test that an unknown option is rejected with a suggestion."""
        with pytest.raises(InvalidConfigurationError, match="did you mean 'show_icons'"):
            load_config({"show_icon": False})

    def test_bad_highlight_groups(self):
        """Test that highlight groups must map strings to strings."""
        with pytest.raises(InvalidConfigurationError):
            load_config({"highlight_groups": {"title": 1}})
        with pytest.raises(InvalidConfigurationError):
            load_config({"highlight_groups": "Error"})

    def test_bad_template(self):
        """Test that a malformed template override is rejected."""
        with pytest.raises(MalformedTemplateError):
            load_config({"templates": {"pair": {"pattern": r"(one)", "labels": ["a", "b"]}}})
        with pytest.raises(MalformedTemplateError):
            load_config({"templates": {"pair": "not a mapping"}})

    def test_unknown_code_target(self):
        """Test that codes must point at a known template."""
        with pytest.raises(InvalidConfigurationError):
            load_config({"codes": {"2322": "nope"}})

    def test_overrides_must_be_mapping(self):
        """Test that overrides must be a mapping."""
        with pytest.raises(InvalidConfigurationError):
            load_config(["indent"])

    def test_direct_construction_validated(self):
        """Test that building the dataclass directly is validated too."""
        with pytest.raises(InvalidConfigurationError):
            PrettifierConfig(max_line_length=5)


class TestConfigFile:
    """Tests for JSON configuration files."""

    def test_load_file(self, tmp_path):
        """Test loading overrides from a JSON file."""
        path = tmp_path / "prettifier.json"
        path.write_text(json.dumps({"indent": "    ", "show_type_preview": False}))
        config = load_config_file(path)
        assert config.indent == "    "
        assert config.show_type_preview is False

    def test_invalid_json(self, tmp_path):
        """Test that invalid JSON is a configuration error."""
        path = tmp_path / "prettifier.json"
        path.write_text("{ indent: ")
        with pytest.raises(InvalidConfigurationError, match="invalid JSON"):
            load_config_file(path)

    def test_not_an_object(self, tmp_path):
        """Test that the top level must be an object."""
        path = tmp_path / "prettifier.json"
        path.write_text("[1, 2]")
        with pytest.raises(InvalidConfigurationError, match="JSON object"):
            load_config_file(path)

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config_file(tmp_path / "missing.json")
