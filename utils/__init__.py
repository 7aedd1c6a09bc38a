from utils.logger import JsonFormatter, logger

__all__ = [
    "logger",
    "JsonFormatter",
]
