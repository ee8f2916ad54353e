"""
Logging Config — централизованная настройка логирования

Единая точка конфигурации stdlib logging для всех модулей:
- Структурированный формат: [TIMESTAMP] [LEVEL] [COMPONENT] MESSAGE
- Консольный handler (stderr) и опциональный файловый handler
- Идемпотентная настройка (повторный вызов не дублирует handlers)

Использование:
    from src.core.logging_config import get_logger

    logger = get_logger(__name__)
    logger.debug("Long division: dividend_digits=%d", 42)
"""

import logging
import sys
from pathlib import Path
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# Корневой logger проекта (все модули src.* наследуют его настройки)
ROOT_LOGGER_NAME: Final[str] = "src"

DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

LOG_FORMAT: Final[str] = "[%(asctime)s] [%(levelname)-8s] [%(name)s] %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Маркер handlers, установленных setup_logging (для идемпотентности)
_HANDLER_MARKER: Final[str] = "_bignum_handler"


# =============================================================================
# FORMATTER
# =============================================================================


class EngineLogFormatter(logging.Formatter):
    """
    Formatter с поддержкой контекстных полей.

    Если запись содержит атрибут ``extra_info`` (dict), пары key=value
    добавляются в конец строки через " | ".
    """

    def __init__(self, include_extra: bool = True) -> None:
        self.include_extra = include_extra
        super().__init__(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        extra_info = getattr(record, "extra_info", None)
        if self.include_extra and isinstance(extra_info, dict) and extra_info:
            extra_str = " | ".join(f"{k}={v}" for k, v in extra_info.items())
            message += f" | {extra_str}"

        return message


# =============================================================================
# SETUP
# =============================================================================


def setup_logging(
    level: str | int = DEFAULT_LOG_LEVEL,
    log_file: str | Path | None = None,
) -> logging.Logger:
    """
    Настройка корневого logger проекта.

    Args:
        level: Уровень логирования (имя, например "DEBUG", или int)
        log_file: Путь к файлу лога (optional, по умолчанию только stderr)

    Returns:
        Настроенный корневой logger проекта

    Raises:
        ValueError: Если level — неизвестное имя уровня
    """
    if isinstance(level, str):
        numeric_level = logging.getLevelName(level.upper())
        if not isinstance(numeric_level, int):
            raise ValueError(f"Unknown log level: {level}")
    else:
        numeric_level = level

    root = reset_logging()
    root.setLevel(numeric_level)

    formatter = EngineLogFormatter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    setattr(console_handler, _HANDLER_MARKER, True)
    root.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        setattr(file_handler, _HANDLER_MARKER, True)
        root.addHandler(file_handler)

    return root


def reset_logging() -> logging.Logger:
    """
    Удаление handlers, установленных setup_logging, и сброс уровня.

    Чужие handlers (например pytest caplog) не затрагиваются.

    Returns:
        Корневой logger проекта
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.NOTSET)
    return root


def get_logger(name: str) -> logging.Logger:
    """Logger для модуля (обычно вызывается с __name__)."""
    return logging.getLogger(name)
