"""
Computation — модели запроса и результата вычисления

Immutable Pydantic модели для внешнего интерфейса движка BigValue.
Соответствуют JSON Schema контрактам:
- contracts/schema/computation_request.json
- contracts/schema/computation_result.json

Операнды и результаты передаются как канонические десятичные строки,
поскольку JSON number не вмещает значения произвольной точности.
"""

import re
from enum import Enum
from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

# =============================================================================
# CONSTANTS
# =============================================================================

SCHEMA_VERSION: Final[str] = "1"

# Десятичная строка без знака (ведущие нули допускаются во входе)
DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[0-9]+$")

# Результаты операции compare
COMPARE_RESULTS: Final[tuple[str, ...]] = ("lt", "eq", "gt")


# =============================================================================
# ENUMS
# =============================================================================


class Operation(str, Enum):
    """Операция над BigValue"""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    MODULO = "modulo"
    POWER = "power"
    SQRT = "sqrt"
    COMPARE = "compare"
    FACTORIAL = "factorial"
    FIBONACCI = "fibonacci"
    CATALAN = "catalan"

    @property
    def is_binary(self) -> bool:
        return self in _BINARY_OPERATIONS

    @property
    def is_derived(self) -> bool:
        return self in _DERIVED_OPERATIONS


_BINARY_OPERATIONS: Final[frozenset[Operation]] = frozenset(
    {
        Operation.ADD,
        Operation.SUBTRACT,
        Operation.MULTIPLY,
        Operation.DIVIDE,
        Operation.MODULO,
        Operation.POWER,
        Operation.COMPARE,
    }
)

_DERIVED_OPERATIONS: Final[frozenset[Operation]] = frozenset(
    {Operation.FACTORIAL, Operation.FIBONACCI, Operation.CATALAN}
)


class ErrorKind(str, Enum):
    """Вид ошибки движка"""

    INVALID_FORMAT = "INVALID_FORMAT"
    UNDERFLOW = "UNDERFLOW"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


# =============================================================================
# REQUEST
# =============================================================================


class ComputationRequest(BaseModel):
    """
    Запрос на вычисление.

    Арность:
    - бинарные операции (add..power, compare): ровно 2 операнда
    - sqrt: ровно 1 операнд
    - factorial/fibonacci/catalan: argument задан, операндов нет
    """

    schema_version: str = Field(SCHEMA_VERSION, description="Версия контракта")
    operation: Operation = Field(..., description="Операция")
    operands: list[str] = Field(
        default_factory=list, description="Операнды (десятичные строки)"
    )
    argument: int | None = Field(
        None, description="Аргумент производной функции (native int)"
    )

    model_config = {"frozen": True}

    @field_validator("operands")
    @classmethod
    def validate_operands(cls, v: list[str]) -> list[str]:
        """Каждый операнд — непустая строка из десятичных цифр"""
        for operand in v:
            if not DECIMAL_PATTERN.match(operand):
                raise ValueError(f"operand must be a decimal digit string, got {operand!r}")
        return v

    @model_validator(mode="after")
    def validate_arity(self) -> "ComputationRequest":
        """Проверка количества операндов и наличия argument для операции"""
        op = self.operation

        if op.is_derived:
            if self.argument is None:
                raise ValueError(f"{op.value} requires argument")
            if self.operands:
                raise ValueError(f"{op.value} takes no operands")
            return self

        if self.argument is not None:
            raise ValueError(f"{op.value} takes no argument")

        expected = 2 if op.is_binary else 1
        if len(self.operands) != expected:
            raise ValueError(
                f"{op.value} requires {expected} operand(s), got {len(self.operands)}"
            )
        return self


# =============================================================================
# RESULT
# =============================================================================


class ComputationResult(BaseModel):
    """
    Результат вычисления.

    Ровно одно из двух: result (успех) либо error_kind + error_message (ошибка).
    """

    schema_version: str = Field(SCHEMA_VERSION, description="Версия контракта")
    operation: Operation = Field(..., description="Операция")
    result: str | None = Field(
        None, description="Каноническая десятичная строка или lt/eq/gt для compare"
    )
    error_kind: ErrorKind | None = Field(None, description="Вид ошибки")
    error_message: str | None = Field(None, description="Сообщение об ошибке")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_outcome(self) -> "ComputationResult":
        """Проверка взаимоисключения result / error"""
        has_error = self.error_kind is not None

        if has_error == (self.result is not None):
            raise ValueError("exactly one of result or error_kind must be set")

        if has_error and not self.error_message:
            raise ValueError("error_message is required when error_kind is set")

        if not has_error and self.error_message is not None:
            raise ValueError("error_message must be null on success")

        if self.result is not None:
            if self.operation is Operation.COMPARE:
                if self.result not in COMPARE_RESULTS:
                    raise ValueError(f"compare result must be one of {COMPARE_RESULTS}")
            elif not DECIMAL_PATTERN.match(self.result):
                raise ValueError(f"result must be a decimal digit string, got {self.result!r}")

        return self

    @property
    def ok(self) -> bool:
        return self.error_kind is None
