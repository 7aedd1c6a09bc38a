"""
scaffold/catalog.py 單元測試
"""

import json

import pytest

from core.exceptions import ConfigError, InvalidModuleError
from scaffold.catalog import DEFAULT_CATALOG, build_catalog, load_catalog
from scaffold.schema import DEFAULT_MODULES, Module


@pytest.mark.unit
class TestBuildCatalog:
    """目錄驗證"""

    @pytest.mark.unit
    def test_default_catalog(self):
        assert [m.name for m in DEFAULT_CATALOG] == list(DEFAULT_MODULES)

    @pytest.mark.unit
    def test_order_preserved(self):
        catalog = build_catalog(["Storage", "Dashboard"])
        assert catalog == (Module("Storage"), Module("Dashboard"))

    @pytest.mark.unit
    def test_empty_rejected(self):
        with pytest.raises(ConfigError):
            build_catalog([])

    @pytest.mark.unit
    def test_duplicate_rejected(self):
        with pytest.raises(InvalidModuleError):
            build_catalog(["Storage", "Storage"])

    @pytest.mark.unit
    def test_case_collision_rejected(self):
        """小寫後相同會寫到同一個檔案"""
        with pytest.raises(InvalidModuleError) as exc_info:
            build_catalog(["AuditLog", "Auditlog"])
        assert "AuditLog" in str(exc_info.value)

    @pytest.mark.unit
    def test_invalid_name(self):
        with pytest.raises(InvalidModuleError):
            build_catalog(["Dashboard", "user-management"])


@pytest.mark.unit
class TestLoadCatalog:
    """從檔案載入"""

    @pytest.mark.unit
    def test_json_list(self, tmp_path):
        path = tmp_path / "modules.json"
        path.write_text(json.dumps(["Dashboard", "Storage"]), encoding="utf-8")
        assert [m.name for m in load_catalog(path)] == ["Dashboard", "Storage"]

    @pytest.mark.unit
    def test_yaml_mapping(self, tmp_path):
        path = tmp_path / "modules.yaml"
        path.write_text("modules:\n  - Network\n  - Backup\n", encoding="utf-8")
        assert [m.name for m in load_catalog(path)] == ["Network", "Backup"]

    @pytest.mark.unit
    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_catalog(tmp_path / "nope.yaml")

    @pytest.mark.unit
    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "modules.txt"
        path.write_text("Dashboard\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            load_catalog(path)

    @pytest.mark.unit
    def test_not_a_list(self, tmp_path):
        path = tmp_path / "modules.json"
        path.write_text(json.dumps({"name": "Dashboard"}), encoding="utf-8")
        with pytest.raises(ConfigError):
            load_catalog(path)
