"""Calculator — исполнение запросов на вычисление и демонстрационный драйвер."""

from .evaluator import (
    LINEAR_POW_WARNING_EXPONENT,
    Evaluator,
    EvaluatorConfig,
    error_kind_for,
)

__all__ = [
    "LINEAR_POW_WARNING_EXPONENT",
    "Evaluator",
    "EvaluatorConfig",
    "error_kind_for",
]
