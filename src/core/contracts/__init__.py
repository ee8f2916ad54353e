"""
Contract Validation Module

Модуль для валидации JSON контрактов запросов и результатов вычислений.
"""

from .validators import (
    ComputationRequestValidator,
    ComputationResultValidator,
    ContractValidator,
    SchemaLoader,
    get_schema_loader,
    validate_computation_request,
    validate_computation_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComputationRequestValidator",
    "ComputationResultValidator",
    # Functions
    "get_schema_loader",
    "validate_computation_request",
    "validate_computation_result",
]
