"""
模組目錄 (Catalog)
固定順序的模組清單；順序決定寫檔順序與 commit 日期偏移。

用法：
    from scaffold.catalog import DEFAULT_CATALOG, build_catalog, load_catalog

    catalog = build_catalog(["Dashboard", "VirtualMachine", "Storage"])
    catalog = load_catalog("modules.yaml")
"""

from __future__ import annotations

from pathlib import Path

from core.exceptions import ConfigError, InvalidModuleError
from scaffold.schema import DEFAULT_MODULES, Module
from utils.data_loader import load_data


def build_catalog(names) -> tuple[Module, ...]:
    """
    驗證並建立模組目錄。

    Raises:
        ConfigError: 目錄為空
        InvalidModuleError: 名稱格式錯誤，或兩個模組小寫後相同（會寫到同一個檔案）
    """
    names = list(names)
    if not names:
        raise ConfigError("模組目錄不可為空")

    modules: list[Module] = []
    seen: dict[str, str] = {}
    for name in names:
        module = Module(name)
        key = module.identifiers.path_form
        if key in seen:
            raise InvalidModuleError(name, f"與 {seen[key]!r} 的路徑名稱重複")
        seen[key] = name
        modules.append(module)
    return tuple(modules)


def load_catalog(path: str | Path) -> tuple[Module, ...]:
    """
    從 JSON / YAML 載入模組目錄。

    接受兩種格式：
        ["Dashboard", "Storage"]
        {"modules": ["Dashboard", "Storage"]}
    """
    data = load_data(path)
    if isinstance(data, dict) and "modules" in data:
        data = data["modules"]
    if not isinstance(data, list):
        raise ConfigError(f"模組目錄必須是名稱列表: {path}",
                          context={"path": str(path)})
    return build_catalog(data)


DEFAULT_CATALOG = build_catalog(DEFAULT_MODULES)
