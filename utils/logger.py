"""
日誌模組
統一的 logging 設定，輸出到 console，可選擇同時寫檔。

支援：
- Console 輸出（人類可讀格式）
- 檔案輸出（純文字 + 可選 JSON 結構化格式）
- 環境變數控制:
    LOG_LEVEL: console 日誌等級 (預設 INFO)
    SCAFFOLD_LOG_FILE: 設定後額外寫入該檔案
    LOG_JSON: 設為 "1" 且有 SCAFFOLD_LOG_FILE 時，另外寫一份 <檔名>.json.log
- CLI 的 --log-file / --log-json 以 attach_file_handlers 在執行期間掛上同樣的 handler
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

LOGGER_NAME = "cloud_scaffold"


class JsonFormatter(logging.Formatter):
    """
    JSON 結構化日誌格式器，一行一筆。

    以 extra={"context": ...} 記錄的欄位（例如 ScaffoldError.context）
    會放在 "context" 底下，方便依 kind / path / commit 日期查詢。
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        context = getattr(record, "context", None)
        if context:
            log_entry["context"] = context
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False, default=str)


def _text_formatter() -> logging.Formatter:
    return logging.Formatter(
        "[%(asctime)s] %(levelname)-7s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def json_log_path(log_file: str | Path) -> Path:
    """run.log → run.json.log"""
    return Path(log_file).with_suffix(".json.log")


def attach_file_handlers(target: logging.Logger, log_file: str | Path,
                         json_log: bool = False) -> list[logging.Handler]:
    """
    在 target 加上純文字檔案 handler，json_log=True 時再加 JSON handler。

    Returns:
        新增的 handler，交給 detach_handlers 關閉
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    # File handler（純文字）
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(_text_formatter())
    handlers: list[logging.Handler] = [file_handler]

    # JSON file handler
    if json_log:
        json_handler = logging.FileHandler(json_log_path(log_path), encoding="utf-8")
        json_handler.setFormatter(JsonFormatter())
        handlers.append(json_handler)

    for handler in handlers:
        handler.setLevel(logging.DEBUG)
        target.addHandler(handler)
    return handlers


def detach_handlers(target: logging.Logger, handlers: list[logging.Handler]) -> None:
    for handler in handlers:
        target.removeHandler(handler)
        handler.close()


def _create_logger() -> logging.Logger:
    _logger = logging.Logger(LOGGER_NAME)
    _logger.setLevel(logging.DEBUG)

    console_level = getattr(
        logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO
    )

    # Console handler（人類可讀）
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level)
    console.setFormatter(_text_formatter())
    _logger.addHandler(console)

    log_file = os.getenv("SCAFFOLD_LOG_FILE", "").strip()
    if log_file:
        attach_file_handlers(
            _logger, log_file,
            json_log=os.getenv("LOG_JSON", "").strip() == "1",
        )

    return _logger


logger = _create_logger()
