"""Демонстрационный драйвер BigValue (CLI).

Команды:

    bignum-demo demo                          # примеры вычислений
    bignum-demo compute multiply 123 456      # одна операция
    bignum-demo compute factorial -n 30
    bignum-demo --log-level DEBUG evaluate request.json
"""

import json
from pathlib import Path
from typing import List, Optional

import typer
from jsonschema import ValidationError as ContractError
from pydantic import ValidationError as ModelError

from src.calculator.evaluator import Evaluator, EvaluatorConfig
from src.core.domain import ComputationRequest, ComputationResult, Operation
from src.core.logging_config import DEFAULT_LOG_LEVEL, setup_logging
from src.core.math import BigValue, PowAlgorithm, catalan, factorial, fibonacci

app = typer.Typer(
    name="bignum-demo",
    help="Arbitrary-precision unsigned integer arithmetic demo",
    add_completion=False,
)


def demo_lines() -> List[str]:
    """Примеры: базовые операции, деление, степень и корень, функции."""
    a = BigValue("123456789")
    b = BigValue("987654321")
    c = BigValue("100")
    d = BigValue("3")

    return [
        f"a = {a}",
        f"b = {b}",
        f"a + b = {a + b}",
        f"b - a = {b - a}",
        f"a * b = {a * b}",
        "",
        f"100 / 3 = {c // d}",
        f"100 % 3 = {c % d}",
        "",
        f"2^10 = {BigValue('2').pow(BigValue(10))}",
        f"sqrt(1000000) = {BigValue('1000000').isqrt()}",
        "",
        f"5! = {factorial(5)}",
        f"fib(10) = {fibonacci(10)}",
        f"catalan(4) = {catalan(4)}",
    ]


def _echo_result(result: ComputationResult) -> None:
    typer.echo(json.dumps(result.model_dump(mode="json"), indent=2))
    if not result.ok:
        raise typer.Exit(code=1)


@app.callback()
def configure(
    log_level: str = typer.Option(DEFAULT_LOG_LEVEL, help="Logging level"),
) -> None:
    """Arbitrary-precision unsigned integer arithmetic demo"""
    try:
        setup_logging(log_level)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


@app.command()
def demo() -> None:
    """Print the sample computations"""
    for line in demo_lines():
        typer.echo(line)


@app.command()
def compute(
    operation: Operation = typer.Argument(..., help="Operation to run"),
    operands: Optional[List[str]] = typer.Argument(None, help="Decimal operands"),
    argument: Optional[int] = typer.Option(
        None, "--argument", "-n", help="Argument of factorial/fibonacci/catalan"
    ),
    pow_algorithm: PowAlgorithm = typer.Option(
        PowAlgorithm.LINEAR, help="Exponentiation algorithm"
    ),
) -> None:
    """Run a single operation and print the JSON result"""
    try:
        request = ComputationRequest(
            operation=operation, operands=operands or [], argument=argument
        )
    except ModelError as e:
        typer.echo(f"Invalid request: {e}", err=True)
        raise typer.Exit(code=2) from e

    evaluator = Evaluator(EvaluatorConfig(pow_algorithm=pow_algorithm))
    _echo_result(evaluator.evaluate(request))


@app.command()
def evaluate(
    request_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="JSON computation request"
    ),
    pow_algorithm: PowAlgorithm = typer.Option(
        PowAlgorithm.LINEAR, help="Exponentiation algorithm"
    ),
) -> None:
    """Evaluate a computation request read from a JSON file"""
    with open(request_file, "r", encoding="utf-8") as f:
        data = json.load(f)

    evaluator = Evaluator(EvaluatorConfig(pow_algorithm=pow_algorithm))
    try:
        output = evaluator.evaluate_json(data)
    except ContractError as e:
        typer.echo(f"Invalid request: {e.message}", err=True)
        raise typer.Exit(code=2) from e
    except ModelError as e:
        typer.echo(f"Invalid request: {e}", err=True)
        raise typer.Exit(code=2) from e

    _echo_result(ComputationResult.model_validate(output))


if __name__ == "__main__":
    app()
