"""
Тесты для демонстрационного CLI и настройки логирования
"""

import json
import logging

import pytest
from typer.testing import CliRunner

from src.calculator.demo import app, demo_lines
from src.core.logging_config import (
    ROOT_LOGGER_NAME,
    EngineLogFormatter,
    get_logger,
    reset_logging,
    setup_logging,
)

EXPECTED_DEMO_LINES = [
    "a = 123456789",
    "b = 987654321",
    "a + b = 1111111110",
    "b - a = 864197532",
    "a * b = 121932631112635269",
    "",
    "100 / 3 = 33",
    "100 % 3 = 1",
    "",
    "2^10 = 1024",
    "sqrt(1000000) = 1000",
    "",
    "5! = 120",
    "fib(10) = 55",
    "catalan(4) = 14",
]

runner = CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    reset_logging()


def _write_request(tmp_path, data) -> str:
    request_file = tmp_path / "request.json"
    request_file.write_text(json.dumps(data), encoding="utf-8")
    return str(request_file)


class TestDemoCommand:
    """Тесты команды demo"""

    def test_demo_lines(self):
        """Все примеры вычислений"""
        assert demo_lines() == EXPECTED_DEMO_LINES

    def test_demo_command_output(self):
        """bignum-demo demo печатает примеры, код 0"""
        result = runner.invoke(app, ["demo"])

        assert result.exit_code == 0
        assert result.stdout.splitlines() == EXPECTED_DEMO_LINES

    def test_invalid_log_level(self):
        """Неизвестный --log-level → ошибка параметра"""
        result = runner.invoke(app, ["--log-level", "VERBOSE", "demo"])
        assert result.exit_code != 0


class TestComputeCommand:
    """Тесты команды compute"""

    def test_binary_operation(self):
        """compute multiply → JSON результат"""
        result = runner.invoke(app, ["compute", "multiply", "123456789", "987654321"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["result"] == "121932631112635269"

    def test_derived_function(self):
        """compute factorial -n 5"""
        result = runner.invoke(app, ["compute", "factorial", "-n", "5"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["result"] == "120"

    def test_squaring_option(self):
        """--pow-algorithm squaring"""
        result = runner.invoke(
            app, ["compute", "power", "2", "100", "--pow-algorithm", "squaring"]
        )

        assert result.exit_code == 0
        assert json.loads(result.stdout)["result"] == str(2**100)

    def test_engine_error_exit_code(self):
        """Ошибка движка → JSON с error_kind, код 1"""
        result = runner.invoke(app, ["compute", "subtract", "3", "5"])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["error_kind"] == "UNDERFLOW"

    def test_invalid_request_exit_code(self):
        """Неверная арность → код 2"""
        result = runner.invoke(app, ["compute", "add", "1"])
        assert result.exit_code == 2


class TestEvaluateCommand:
    """Тесты команды evaluate"""

    def test_success(self, tmp_path):
        """JSON запрос из файла → JSON результат, код 0"""
        path = _write_request(
            tmp_path, {"schema_version": "1", "operation": "add", "operands": ["1", "2"]}
        )

        result = runner.invoke(app, ["evaluate", path])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["result"] == "3"

    def test_engine_error(self, tmp_path):
        """Ошибка движка → код 1"""
        path = _write_request(
            tmp_path,
            {"schema_version": "1", "operation": "divide", "operands": ["1", "0"]},
        )

        result = runner.invoke(app, ["evaluate", path])

        assert result.exit_code == 1
        assert json.loads(result.stdout)["error_kind"] == "DIVISION_BY_ZERO"

    def test_contract_violation(self, tmp_path):
        """Нарушение контракта → код 2"""
        path = _write_request(
            tmp_path,
            {"schema_version": "1", "operation": "add", "operands": ["12a3", "1"]},
        )

        result = runner.invoke(app, ["evaluate", path])
        assert result.exit_code == 2

    def test_missing_file(self, tmp_path):
        """Несуществующий файл → ошибка параметра"""
        result = runner.invoke(app, ["evaluate", str(tmp_path / "missing.json")])
        assert result.exit_code != 0


class TestLoggingConfig:
    """Тесты setup_logging / formatter"""

    def test_setup_is_idempotent(self):
        """Повторный вызов не дублирует handlers"""
        root = setup_logging("INFO")
        count = len(root.handlers)
        setup_logging("DEBUG")

        assert len(root.handlers) == count
        assert root.level == logging.DEBUG

    def test_reset_removes_own_handlers(self):
        """reset_logging удаляет только собственные handlers"""
        root = setup_logging("INFO")
        foreign = logging.NullHandler()
        root.addHandler(foreign)

        reset_logging()

        assert root.handlers == [foreign]
        assert root.level == logging.NOTSET
        root.removeHandler(foreign)

    def test_unknown_level_rejected(self):
        """Неизвестный уровень → ValueError"""
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging("VERBOSE")

    def test_log_file(self, tmp_path):
        """Файловый handler пишет в файл"""
        log_file = tmp_path / "logs" / "engine.log"
        setup_logging("INFO", log_file=log_file)

        get_logger(f"{ROOT_LOGGER_NAME}.test").info("hello file")
        for handler in logging.getLogger(ROOT_LOGGER_NAME).handlers:
            handler.flush()

        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_formatter_appends_extra_info(self):
        """extra_info добавляется как key=value"""
        record = logging.LogRecord("src.x", logging.INFO, __file__, 1, "msg", None, None)
        record.extra_info = {"digits": 42}

        formatted = EngineLogFormatter().format(record)
        assert "[src.x] msg | digits=42" in formatted
