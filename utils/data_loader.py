"""
設定檔載入器
統一從 JSON / YAML 檔讀取執行設定與模組目錄，依副檔名自動選擇解析方式。

用法：
    from utils.data_loader import load_data, load_json, load_yaml

    # 自動偵測格式
    data = load_data("scaffold.json")
    data = load_data("modules.yaml")
"""

import json
from pathlib import Path

import yaml

from core.exceptions import ConfigError


def load_json(path: str | Path):
    """從 JSON 檔載入"""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_yaml(path: str | Path):
    """從 YAML 檔載入，空檔案視為 None"""
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


_LOADERS = {
    ".json": load_json,
    ".yaml": load_yaml,
    ".yml": load_yaml,
}


def load_data(path: str | Path):
    """
    自動偵測檔案格式並載入。

    支援副檔名: .json, .yaml, .yml

    Raises:
        ConfigError: 檔案不存在或副檔名不支援
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"找不到檔案: {path}", context={"path": str(path)})

    suffix = path.suffix.lower()
    loader = _LOADERS.get(suffix)
    if loader is None:
        raise ConfigError(
            f"不支援的檔案格式: {suffix} "
            f"(支援: {', '.join(_LOADERS.keys())})",
            context={"path": str(path)},
        )
    return loader(path)
