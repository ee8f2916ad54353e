"""
Тесты для производных функций: factorial, fibonacci, catalan

Проверяет:
1. Конкретные значения (5! = 120, F(10) = 55, C(4) = 14)
2. Базовые случаи (0! = 1, F(0) = 0, F(1) = 1, C(0) = 1)
3. Согласованность с int для больших n
4. InvalidArgumentError для отрицательных n
5. Независимость вызовов (нет общего аккумулятора)
"""

import math

import pytest

from src.core.math import (
    BigValue,
    InvalidArgumentError,
    catalan,
    factorial,
    fibonacci,
)


def _fib_int(n: int) -> int:
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


class TestFactorial:
    """Тесты factorial"""

    def test_concrete_scenario(self):
        """5! = 120"""
        assert str(factorial(5)) == "120"

    def test_empty_product(self):
        """0! = 1! = 1"""
        assert factorial(0) == 1
        assert factorial(1) == 1

    @pytest.mark.parametrize("n", [2, 10, 25, 50])
    def test_matches_math_factorial(self, n):
        """Согласованность с math.factorial"""
        assert int(factorial(n)) == math.factorial(n)

    def test_negative_rejected(self):
        """factorial(-1) → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError, match="negative"):
            factorial(-1)

    def test_non_int_rejected(self):
        """factorial(2.0) → TypeError"""
        with pytest.raises(TypeError):
            factorial(2.0)  # type: ignore[arg-type]

    def test_returns_big_value(self):
        """Результат — BigValue"""
        assert isinstance(factorial(3), BigValue)


class TestFibonacci:
    """Тесты fibonacci"""

    def test_concrete_scenario(self):
        """F(10) = 55"""
        assert str(fibonacci(10)) == "55"

    def test_base_cases(self):
        """F(0) = 0, F(1) = 1, F(2) = 1"""
        assert fibonacci(0).digits == (0,)
        assert fibonacci(1) == 1
        assert fibonacci(2) == 1

    @pytest.mark.parametrize("n", [3, 20, 100, 300])
    def test_matches_int_sequence(self, n):
        """Согласованность с итерацией по int"""
        assert int(fibonacci(n)) == _fib_int(n)

    @pytest.mark.parametrize("n", [-1, -50])
    def test_negative_returns_one(self, n):
        """F(n < 0) = 1 (цикл накопления не выполняется)"""
        assert str(fibonacci(n)) == "1"

    def test_non_int_rejected(self):
        """fibonacci("3") → TypeError"""
        with pytest.raises(TypeError):
            fibonacci("3")  # type: ignore[arg-type]


class TestCatalan:
    """Тесты catalan"""

    def test_concrete_scenario(self):
        """C(4) = 14"""
        assert str(catalan(4)) == "14"

    def test_first_values(self):
        """1, 1, 2, 5, 14, 42, 132"""
        assert [int(catalan(n)) for n in range(7)] == [1, 1, 2, 5, 14, 42, 132]

    @pytest.mark.parametrize("n", [10, 25])
    def test_matches_binomial_formula(self, n):
        """C(n) = comb(2n, n) / (n + 1)"""
        assert int(catalan(n)) == math.comb(2 * n, n) // (n + 1)

    def test_negative_rejected(self):
        """catalan(-1) → InvalidArgumentError"""
        with pytest.raises(InvalidArgumentError, match="negative"):
            catalan(-1)

    def test_repeated_calls_are_independent(self):
        """Повторные вызовы не влияют друг на друга"""
        first = catalan(5)
        first.add_into(1000)
        assert catalan(5) == 42
        assert factorial(5) == 120
