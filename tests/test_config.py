"""
Tests for configuration loading.
"""

import pytest

from deus.config import DEFAULT_CONFIG, TimeConfig, load_config


class TestTimeConfig:

    def test_defaults(self):
        config = TimeConfig()
        assert config.unit == 's'
        assert config.days_per_year == 365.25
        assert config.unit_nanoseconds == 10**9

    def test_unsupported_unit(self):
        with pytest.raises(ValueError, match="Unsupported time unit"):
            TimeConfig(unit='Y')

    @pytest.mark.parametrize("days", [0, -365.25, "abc", None, True,
                                      float("nan"), float("inf")])
    def test_invalid_days_per_year(self, days):
        with pytest.raises(ValueError, match="days_per_year"):
            TimeConfig(days_per_year=days)

    def test_non_string_unit(self):
        with pytest.raises(ValueError, match="Unsupported time unit"):
            TimeConfig(unit=["s"])


class TestLoadConfig:

    def test_load(self, tmp_path):
        path = tmp_path / "deus.yaml"
        path.write_text("time:\n  unit: ms\n  days_per_year: 365\n")

        config = load_config(path)

        assert config == TimeConfig(unit='ms', days_per_year=365)

    def test_partial_section(self, tmp_path):
        path = tmp_path / "deus.yaml"
        path.write_text("time:\n  unit: D\n")

        config = load_config(str(path))

        assert config.unit == 'D'
        assert config.days_per_year == DEFAULT_CONFIG.days_per_year

    def test_empty_file(self, tmp_path):
        path = tmp_path / "deus.yaml"
        path.write_text("")

        assert load_config(path) == DEFAULT_CONFIG

    def test_missing_section(self, tmp_path):
        path = tmp_path / "deus.yaml"
        path.write_text("other: 1\n")

        assert load_config(path) == DEFAULT_CONFIG

    def test_unknown_option(self, tmp_path):
        path = tmp_path / "deus.yaml"
        path.write_text("time:\n  epoch: big_bang\n")

        with pytest.raises(ValueError, match="Unknown time options"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "deus.yaml"
        path.write_text("- s\n- ms\n")

        with pytest.raises(ValueError):
            load_config(path)

    def test_invalid_unit(self, tmp_path):
        path = tmp_path / "deus.yaml"
        path.write_text("time:\n  unit: fortnight\n")

        with pytest.raises(ValueError):
            load_config(path)

    @pytest.mark.parametrize("value", ["abc", ".nan", ".inf"])
    def test_invalid_days_per_year(self, tmp_path, value):
        path = tmp_path / "deus.yaml"
        path.write_text(f"time:\n  days_per_year: {value}\n")

        with pytest.raises(ValueError, match="days_per_year"):
            load_config(path)

    @pytest.mark.parametrize("value", ["0", "[]", "''", "5"])
    def test_section_not_a_mapping(self, tmp_path, value):
        path = tmp_path / "deus.yaml"
        path.write_text(f"time: {value}\n")

        with pytest.raises(ValueError, match="must be a mapping"):
            load_config(path)

    def test_null_section(self, tmp_path):
        path = tmp_path / "deus.yaml"
        path.write_text("time:\n")

        assert load_config(path) == DEFAULT_CONFIG
