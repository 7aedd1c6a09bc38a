"""
utils/data_loader.py 單元測試
"""

import json

import pytest

from core.exceptions import ConfigError
from utils.data_loader import load_data, load_json, load_yaml


@pytest.mark.unit
class TestLoadData:
    """依副檔名載入"""

    @pytest.mark.unit
    def test_json(self, tmp_path):
        path = tmp_path / "modules.json"
        path.write_text(json.dumps(["Dashboard"]), encoding="utf-8")
        assert load_data(path) == ["Dashboard"]
        assert load_json(path) == ["Dashboard"]

    @pytest.mark.unit
    @pytest.mark.parametrize("suffix", [".yaml", ".yml", ".YAML"])
    def test_yaml_suffixes(self, tmp_path, suffix):
        path = tmp_path / f"scaffold{suffix}"
        path.write_text("day_step: 3\n", encoding="utf-8")
        assert load_data(path) == {"day_step": 3}

    @pytest.mark.unit
    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")
        assert load_yaml(path) is None

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError) as exc_info:
            load_data(tmp_path / "nope.json")
        assert exc_info.value.context["path"].endswith("nope.json")

    @pytest.mark.unit
    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "modules.csv"
        path.write_text("Dashboard\n", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_data(path)
        assert ".csv" in str(exc_info.value)
