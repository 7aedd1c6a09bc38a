"""
設定管理模組
統一管理輸出目錄、副檔名、git 執行檔與提交者身分等設定。
支援透過環境變數覆蓋預設值，方便 CI/CD 整合。
支援執行設定檔 (JSON / YAML) 結構驗證，提前發現設定錯誤。
"""

import os
import re
from datetime import date, datetime, time
from pathlib import Path

from core.exceptions import ConfigValidationError
from utils.data_loader import load_data

# 執行設定檔可用欄位 → 型別說明
_KNOWN_KEYS = {
    "output_dir": "str",
    "modules": "list[str]",
    "ext": "str",
    "base_date": "YYYY-MM-DD",
    "utility_date": "YYYY-MM-DDTHH:MM:SS",
    "data_date": "YYYY-MM-DDTHH:MM:SS",
    "maintenance_dates": "list[YYYY-MM-DD]",
    "module_time": "HH:MM:SS",
    "maintenance_time": "HH:MM:SS",
    "day_step": "int",
    "commit": "bool",
    "init_repo": "bool",
}

_DATE_PARSERS = {
    "base_date": date.fromisoformat,
    "utility_date": datetime.fromisoformat,
    "data_date": datetime.fromisoformat,
    "module_time": time.fromisoformat,
    "maintenance_time": time.fromisoformat,
}

_EXT_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


class Config:
    """產生器全域設定"""

    # 輸出
    OUTPUT_DIR = os.getenv("SCAFFOLD_OUTPUT_DIR", "./cloud_tests")
    FILE_EXT = os.getenv("SCAFFOLD_FILE_EXT", "js")

    # git
    GIT_BIN = os.getenv("SCAFFOLD_GIT_BIN", "git")
    AUTHOR_NAME = os.getenv("SCAFFOLD_AUTHOR_NAME", "")
    AUTHOR_EMAIL = os.getenv("SCAFFOLD_AUTHOR_EMAIL", "")

    @classmethod
    def git_identity(cls) -> dict:
        """
        提交者身分的環境變數。未設定時回傳空 dict，交給 git 自己的設定。
        """
        identity = {}
        if cls.AUTHOR_NAME:
            identity["GIT_AUTHOR_NAME"] = cls.AUTHOR_NAME
            identity["GIT_COMMITTER_NAME"] = cls.AUTHOR_NAME
        if cls.AUTHOR_EMAIL:
            identity["GIT_AUTHOR_EMAIL"] = cls.AUTHOR_EMAIL
            identity["GIT_COMMITTER_EMAIL"] = cls.AUTHOR_EMAIL
        return identity

    @classmethod
    def load_spec(cls, path: str | Path, validate: bool = True) -> dict:
        """
        從 JSON 或 YAML 檔載入執行設定。

        Args:
            path: 設定檔路徑 (.json / .yaml / .yml)
            validate: 是否驗證欄位（預設 True）

        Returns:
            設定 dict

        Raises:
            ConfigError: 檔案不存在或格式不支援
            ConfigValidationError: 欄位內容錯誤
        """
        data = load_data(path)
        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise ConfigValidationError(["設定檔最外層必須是物件 (mapping)"])

        if validate:
            cls.validate_spec(data)
        return data

    @classmethod
    def validate_spec(cls, data: dict) -> list[str]:
        """
        驗證執行設定結構。

        Returns:
            警告訊息列表（未知欄位等）

        Raises:
            ConfigValidationError: 欄位型別或格式錯誤時拋出
        """
        errors: list[str] = []
        warnings: list[str] = []

        for key in data:
            if key not in _KNOWN_KEYS:
                warnings.append(f"未知欄位將被忽略: {key}")

        modules = data.get("modules")
        if modules is not None:
            if not isinstance(modules, list) or not all(
                isinstance(m, str) for m in modules
            ):
                errors.append("modules 必須是字串列表")

        ext = data.get("ext")
        if ext is not None and (
            not isinstance(ext, str) or not _EXT_PATTERN.match(ext)
        ):
            errors.append(f"ext 只能包含英數字: {ext!r}")

        for key, parse in _DATE_PARSERS.items():
            value = data.get(key)
            if value is None:
                continue
            try:
                parse(str(value))
            except ValueError:
                errors.append(f"{key} 格式錯誤，應為 {_KNOWN_KEYS[key]}: {value!r}")

        dates = data.get("maintenance_dates")
        if dates is not None:
            if not isinstance(dates, list):
                errors.append("maintenance_dates 必須是日期列表")
            else:
                for value in dates:
                    try:
                        date.fromisoformat(str(value))
                    except ValueError:
                        errors.append(
                            f"maintenance_dates 格式錯誤，應為 YYYY-MM-DD: {value!r}"
                        )

        step = data.get("day_step")
        if step is not None and (
            isinstance(step, bool) or not isinstance(step, int) or step < 1
        ):
            errors.append(f"day_step 必須是正整數: {step!r}")

        for key in ("commit", "init_repo"):
            value = data.get(key)
            if value is not None and not isinstance(value, bool):
                errors.append(f"{key} 必須是布林值: {value!r}")

        if errors:
            raise ConfigValidationError(errors)

        return warnings
