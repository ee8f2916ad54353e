"""
Special Functions — производные числовые функции над BigValue

Чистые композиции публичных операций BigValue:
- factorial(n): произведение 1..n (пустое произведение = 1)
- fibonacci(n): итеративное попарное накопление, F(0) = 0, F(1) = 1, n < 0 → 1
- catalan(n): (2n)! / ((n+1)! * n!)

Аргумент — небольшой native int. Каждый вызов работает на собственных
локальных значениях; общего изменяемого аккумулятора между вызовами нет.
"""

from src.core.math.big_value import BigValue, InvalidArgumentError


def _validate_type(n: int, name: str) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} argument must be int, got {type(n).__name__}")


def _validate_argument(n: int, name: str) -> None:
    _validate_type(n, name)
    if n < 0:
        raise InvalidArgumentError(f"{name} is undefined for negative n, got {n}")


def factorial(n: int) -> BigValue:
    """
    Факториал n! = 1 * 2 * ... * n.

    Args:
        n: Неотрицательный int

    Returns:
        n! (0! == 1)

    Raises:
        InvalidArgumentError: Если n < 0

    Examples:
        >>> str(factorial(5))
        '120'
    """
    _validate_argument(n, "factorial")

    result = BigValue(1)
    for i in range(2, n + 1):
        result.multiply_into(i)
    return result


def fibonacci(n: int) -> BigValue:
    """
    Число Фибоначчи F(n), F(0) = 0, F(1) = 1.

    Для n < 0 цикл накопления не выполняется и результат равен 1.

    Raises:
        TypeError: Если n не int

    Examples:
        >>> str(fibonacci(10))
        '55'
    """
    _validate_type(n, "fibonacci")

    previous, current = BigValue(0), BigValue(1)
    if n == 0:
        return previous

    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def catalan(n: int) -> BigValue:
    """
    Число Каталана C(n) = (2n)! / ((n+1)! * n!).

    Деление всегда точное (числа Каталана целые).

    Raises:
        InvalidArgumentError: Если n < 0

    Examples:
        >>> str(catalan(4))
        '14'
    """
    _validate_argument(n, "catalan")

    numerator = factorial(2 * n)
    denominator = factorial(n + 1).multiply_into(factorial(n))
    return numerator.divide_into(denominator)
