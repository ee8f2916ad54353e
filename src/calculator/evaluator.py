"""Evaluator — исполнение ComputationRequest над BigValue

Единственная граница, на которой ошибки движка превращаются в данные:
- BigValueError → ComputationResult с соответствующим ErrorKind
- Ошибки контракта (jsonschema/pydantic) не перехватываются

Порядок обработки:
1. Конструирование операндов (InvalidFormat)
2. Исполнение операции
3. Рендеринг результата в каноническую строку
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Final

from src.core.contracts import (
    validate_computation_request,
    validate_computation_result,
)
from src.core.domain.computation import (
    ComputationRequest,
    ComputationResult,
    ErrorKind,
    Operation,
)
from src.core.logging_config import get_logger
from src.core.math.big_value import (
    BigValue,
    BigValueError,
    DivisionByZeroError,
    InvalidArgumentError,
    InvalidFormatError,
    PowAlgorithm,
    UnderflowError,
)
from src.core.math.special_functions import catalan, factorial, fibonacci

logger = get_logger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Порог показателя для предупреждения о медленном линейном pow
LINEAR_POW_WARNING_EXPONENT: Final[int] = 10_000

_ERROR_KINDS: Final[tuple[tuple[type[BigValueError], ErrorKind], ...]] = (
    (InvalidFormatError, ErrorKind.INVALID_FORMAT),
    (UnderflowError, ErrorKind.UNDERFLOW),
    (DivisionByZeroError, ErrorKind.DIVISION_BY_ZERO),
    (InvalidArgumentError, ErrorKind.INVALID_ARGUMENT),
)

_DERIVED_FUNCTIONS: Final[Dict[Operation, Callable[[int], BigValue]]] = {
    Operation.FACTORIAL: factorial,
    Operation.FIBONACCI: fibonacci,
    Operation.CATALAN: catalan,
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class EvaluatorConfig:
    """Конфигурация Evaluator.

    pow_algorithm: алгоритм возведения в степень (LINEAR по умолчанию)
    linear_pow_warning_exponent: показатель, начиная с которого линейный
        pow логируется как WARNING (вычисление не отклоняется)
    """

    pow_algorithm: PowAlgorithm = PowAlgorithm.LINEAR
    linear_pow_warning_exponent: int = LINEAR_POW_WARNING_EXPONENT


# =============================================================================
# EVALUATOR
# =============================================================================


def error_kind_for(error: BigValueError) -> ErrorKind:
    """ErrorKind для исключения движка."""
    for error_type, kind in _ERROR_KINDS:
        if isinstance(error, error_type):
            return kind
    raise TypeError(f"Unmapped BigValue error: {type(error).__name__}")


class Evaluator:
    """Исполнитель запросов на вычисление."""

    def __init__(self, config: EvaluatorConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or EvaluatorConfig()

    def evaluate(self, request: ComputationRequest) -> ComputationResult:
        """Исполнение запроса.

        Args:
            request: валидированный запрос

        Returns:
            ComputationResult с результатом либо с описанием ошибки движка
        """
        logger.debug(
            "evaluate: operation=%s operands=%d argument=%s",
            request.operation.value,
            len(request.operands),
            request.argument,
        )

        try:
            rendered = self._run(request)
        except BigValueError as e:
            kind = error_kind_for(e)
            logger.info(
                "Operation %s failed: %s (%s)",
                request.operation.value,
                kind.value,
                e,
                extra={
                    "extra_info": {
                        "operands": len(request.operands),
                        "argument": request.argument,
                        "error_kind": kind.value,
                    }
                },
            )
            return ComputationResult(
                operation=request.operation,
                error_kind=kind,
                error_message=str(e),
            )

        return ComputationResult(operation=request.operation, result=rendered)

    def evaluate_json(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Исполнение запроса в JSON-представлении.

        Результат также проверяется по контракту computation_result.

        Raises:
            jsonschema.ValidationError: если data нарушает контракт запроса
            pydantic.ValidationError: если data нарушает модель запроса
        """
        validate_computation_request(data)
        request = ComputationRequest.model_validate(data)
        output = self.evaluate(request).model_dump(mode="json")
        validate_computation_result(output)
        return output

    def _run(self, request: ComputationRequest) -> str:
        op = request.operation

        if op.is_derived:
            # argument гарантирован model_validator
            return str(_DERIVED_FUNCTIONS[op](request.argument))

        operands = [BigValue.from_string(text) for text in request.operands]

        if op is Operation.SQRT:
            return str(operands[0].isqrt())

        lhs, rhs = operands

        if op is Operation.ADD:
            return str(lhs + rhs)
        if op is Operation.SUBTRACT:
            return str(lhs - rhs)
        if op is Operation.MULTIPLY:
            return str(lhs * rhs)
        if op is Operation.DIVIDE:
            return str(lhs // rhs)
        if op is Operation.MODULO:
            return str(lhs % rhs)
        if op is Operation.POWER:
            return str(self._power(lhs, rhs))
        if op is Operation.COMPARE:
            if lhs < rhs:
                return "lt"
            return "eq" if lhs == rhs else "gt"

        raise ValueError(f"Unsupported operation: {op.value}")

    def _power(self, base: BigValue, exponent: BigValue) -> BigValue:
        algorithm = self.config.pow_algorithm
        if (
            algorithm is PowAlgorithm.LINEAR
            and exponent > self.config.linear_pow_warning_exponent
        ):
            logger.warning(
                "Linear pow with large exponent=%s (threshold %d), cost grows with its value",
                exponent,
                self.config.linear_pow_warning_exponent,
            )
        return base.pow(exponent, algorithm=algorithm)
