"""
BigValue — беззнаковое целое произвольной точности

Модуль реализует точную арифметику над неотрицательными целыми неограниченной величины:
- Представление: список десятичных цифр, младшая цифра первой
- Нормализация до канонической формы
- Конструирование из int и из десятичной строки
- Полный порядок (сначала по длине, затем по цифрам от старшей)
- Сложение/вычитание с переносом/заёмом
- Умножение (schoolbook) и деление в столбик, остаток через деление
- Возведение в степень (линейное по умолчанию) и целочисленный корень (бисекция)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Последовательность цифр никогда не пуста
2. Нет старших нулей, кроме канонического нуля [0]
3. Каждая цифра в [0, 9]; знак не представлен (только неотрицательные значения)
4. Неудачная операция оставляет значение получателя без изменений
5. Результат либо точный, либо exception (никаких clamp/wrap/saturate)

Неотрицательность структурна: отрицательное значение невозможно сконструировать,
поэтому у isqrt() нет runtime-проверки знака.
"""

from enum import Enum
from typing import Final, TextIO

from src.core.logging_config import get_logger

logger = get_logger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Основание системы счисления (только десятичная)
DIGIT_BASE: Final[int] = 10

# Разрядность native unsigned по умолчанию для fits_in_uint()
NATIVE_UINT_BITS_DEFAULT: Final[int] = 64

_DECIMAL_CHARS: Final[str] = "0123456789"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigValueError(Exception):
    """Базовый класс всех ошибок арифметики BigValue."""


class InvalidFormatError(BigValueError, ValueError):
    """Не-цифровой символ при парсинге десятичной строки."""


class UnderflowError(BigValueError, ArithmeticError):
    """Вычитание дало бы отрицательный результат (тип беззнаковый)."""


class DivisionByZeroError(BigValueError, ZeroDivisionError):
    """Деление или остаток от деления на ноль."""


class InvalidArgumentError(BigValueError, ValueError):
    """Недопустимый аргумент (отрицательный int для беззнакового типа)."""


# =============================================================================
# ENUMS
# =============================================================================


class PowAlgorithm(str, Enum):
    """
    Алгоритм возведения в степень.

    LINEAR — умножение на основание exponent раз (стоимость пропорциональна
    значению exponent, а не числу его цифр). Алгоритм по умолчанию.
    SQUARING — бинарное возведение в степень (быстрый путь, opt-in).
    """

    LINEAR = "linear"
    SQUARING = "squaring"


# =============================================================================
# КОНВЕРСИЯ
# =============================================================================


def _digits_from_int(n: int) -> list[int]:
    """Цифры (младшая первой) native int; цикл выполняется минимум один раз."""
    if n < 0:
        raise InvalidArgumentError(f"BigValue is unsigned, got negative int {n}")

    digits: list[int] = []
    while True:
        digits.append(n % DIGIT_BASE)
        n //= DIGIT_BASE
        if n == 0:
            break
    return digits


def _digits_from_string(text: str) -> list[int]:
    """
    Цифры (младшая первой) десятичной строки.

    Ведущие '0' отбрасываются; пустой остаток → ноль.
    Знаки, точки, пробелы и не-ASCII цифры не принимаются.
    """
    significant = text.lstrip("0")
    if not significant:
        return [0]

    digits: list[int] = []
    for ch in reversed(significant):
        if ch not in _DECIMAL_CHARS:
            raise InvalidFormatError(f"Non-digit character {ch!r} in {text!r}")
        digits.append(ord(ch) - ord("0"))
    return digits


def _coerce(value: object) -> "BigValue | None":
    """BigValue или non-bool int → BigValue; иначе None (для NotImplemented)."""
    if isinstance(value, BigValue):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigValue(value)
    return None


def _comparable(value: object) -> "BigValue | None":
    """Как _coerce, но отрицательный int → None (сравнение не определено)."""
    if isinstance(value, int) and not isinstance(value, bool) and value < 0:
        return None
    return _coerce(value)


def _require(value: object) -> "BigValue":
    """Как _coerce, но неподдерживаемый тип → TypeError."""
    coerced = _coerce(value)
    if coerced is None:
        raise TypeError(
            f"Operand must be BigValue or non-negative int, got {type(value).__name__}"
        )
    return coerced


# =============================================================================
# BIG VALUE
# =============================================================================


class BigValue:
    """
    Неотрицательное целое произвольной точности (основание 10).

    Значение неизменяемо для вызывающего кода, кроме методов *_into
    (add_into, subtract_into, multiply_into, divide_into), которые заменяют
    цифры получателя in-place с сохранением канонической формы.
    Операторы (+, -, *, //, /, %, **) всегда возвращают новое значение.

    Examples:
        >>> str(BigValue("123456789") + BigValue("987654321"))
        '1111111110'
        >>> BigValue(100) // 3
        BigValue('33')
        >>> BigValue(2).pow(10)
        BigValue('1024')
    """

    # Изменяемо через *_into → не может быть ключом dict
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: "int | str | BigValue" = 0) -> None:
        """
        Args:
            value: Неотрицательный int, десятичная строка или BigValue (копия)

        Raises:
            InvalidArgumentError: Если value — отрицательный int
            InvalidFormatError: Если строка содержит не-цифровой символ
            TypeError: Если тип value не поддерживается
        """
        if isinstance(value, BigValue):
            self._digits: list[int] = list(value._digits)
        elif isinstance(value, bool):
            raise TypeError("Cannot construct BigValue from bool")
        elif isinstance(value, int):
            self._digits = _digits_from_int(value)
        elif isinstance(value, str):
            self._digits = _digits_from_string(value)
        else:
            raise TypeError(f"Cannot construct BigValue from {type(value).__name__}")

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_int(cls, n: int) -> "BigValue":
        """Конструирование из неотрицательного native int."""
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"Expected int, got {type(n).__name__}")
        return cls(n)

    @classmethod
    def from_string(cls, text: str) -> "BigValue":
        """Парсинг десятичной строки (ведущие нули допускаются)."""
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        return cls(text)

    @classmethod
    def read(cls, stream: TextIO) -> "BigValue":
        """
        Чтение одного токена (разделитель — whitespace) из текстового потока.

        Ведущие пробельные символы пропускаются; поток читается до конца токена.

        Raises:
            InvalidFormatError: Если поток исчерпан до начала токена
                или токен не является десятичным числом
        """
        token_chars: list[str] = []
        while True:
            ch = stream.read(1)
            if not ch:
                break
            if ch.isspace():
                if token_chars:
                    break
                continue
            token_chars.append(ch)

        if not token_chars:
            raise InvalidFormatError("No token available in stream")

        return cls.from_string("".join(token_chars))

    # -------------------------------------------------------------------------
    # Представление и нормализация
    # -------------------------------------------------------------------------

    def normalize(self) -> "BigValue":
        """Удаление старших нулей до канонической формы."""
        digits = self._digits
        while len(digits) > 1 and digits[-1] == 0:
            digits.pop()
        if not digits:
            digits.append(0)
        return self

    def is_zero(self) -> bool:
        return len(self._digits) == 1 and self._digits[0] == 0

    def digit_count(self) -> int:
        return len(self._digits)

    @property
    def digits(self) -> tuple[int, ...]:
        """Цифры, младшая первой (read-only копия)."""
        return tuple(self._digits)

    def to_int(self) -> int:
        """Конверсия в native int (в Python — без ограничения разрядности)."""
        value = 0
        for digit in reversed(self._digits):
            value = value * DIGIT_BASE + digit
        return value

    def fits_in_uint(self, bits: int = NATIVE_UINT_BITS_DEFAULT) -> bool:
        """
        Помещается ли значение в беззнаковое целое заданной разрядности.

        Raises:
            InvalidArgumentError: Если bits <= 0
        """
        if bits <= 0:
            raise InvalidArgumentError(f"bits must be positive, got {bits}")
        return self <= BigValue((1 << bits) - 1)

    def __int__(self) -> int:
        return self.to_int()

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __str__(self) -> str:
        return "".join(_DECIMAL_CHARS[d] for d in reversed(self._digits))

    def __repr__(self) -> str:
        return f"BigValue('{self}')"

    # -------------------------------------------------------------------------
    # Порядок
    # -------------------------------------------------------------------------

    def __lt__(self, other: object) -> bool:
        rhs = _comparable(other)
        if rhs is None:
            return NotImplemented

        a, b = self._digits, rhs._digits
        if len(a) != len(b):
            return len(a) < len(b)

        for i in range(len(a) - 1, -1, -1):
            if a[i] != b[i]:
                return a[i] < b[i]
        return False

    def __eq__(self, other: object) -> bool:
        rhs = _comparable(other)
        if rhs is None:
            return NotImplemented
        return self._digits == rhs._digits

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __gt__(self, other: object) -> bool:
        rhs = _comparable(other)
        if rhs is None:
            return NotImplemented
        return rhs < self

    def __le__(self, other: object) -> bool:
        rhs = _comparable(other)
        if rhs is None:
            return NotImplemented
        return not rhs < self

    def __ge__(self, other: object) -> bool:
        rhs = _comparable(other)
        if rhs is None:
            return NotImplemented
        return not self < rhs

    # -------------------------------------------------------------------------
    # Аддитивные операции (in-place)
    # -------------------------------------------------------------------------

    def add_into(self, other: "BigValue | int") -> "BigValue":
        """Сложение с переносом: self += other."""
        rhs = list(_require(other)._digits)
        digits = self._digits

        carry = 0
        max_len = max(len(digits), len(rhs))
        i = 0
        while i < max_len or carry:
            if i == len(digits):
                digits.append(0)
            other_digit = rhs[i] if i < len(rhs) else 0
            carry, digits[i] = divmod(digits[i] + other_digit + carry, DIGIT_BASE)
            i += 1

        return self

    def subtract_into(self, other: "BigValue | int") -> "BigValue":
        """
        Вычитание с заёмом: self -= other.

        Заём распространяется по всей длине self (other дополняется нулями).

        Raises:
            UnderflowError: Если self < other
        """
        rhs_value = _require(other)
        if self < rhs_value:
            raise UnderflowError(f"Result would be negative: {self} - {rhs_value}")

        rhs = list(rhs_value._digits)
        digits = self._digits

        borrow = 0
        for i in range(len(digits)):
            other_digit = rhs[i] if i < len(rhs) else 0
            diff = digits[i] - borrow - other_digit
            if diff < 0:
                diff += DIGIT_BASE
                borrow = 1
            else:
                borrow = 0
            digits[i] = diff

        return self.normalize()

    # -------------------------------------------------------------------------
    # Мультипликативные операции (in-place)
    # -------------------------------------------------------------------------

    def multiply_into(self, other: "BigValue | int") -> "BigValue":
        """
        Умножение столбиком: self *= other.

        Произведения цифр накапливаются в буфере длины len(self) + len(other);
        перенос выносится в следующую позицию сразу при накоплении.
        """
        rhs_value = _require(other)
        if self.is_zero() or rhs_value.is_zero():
            self._digits = [0]
            return self

        a, b = self._digits, rhs_value._digits
        result = [0] * (len(a) + len(b))

        for i, digit_a in enumerate(a):
            for j, digit_b in enumerate(b):
                result[i + j] += digit_a * digit_b
                result[i + j + 1] += result[i + j] // DIGIT_BASE
                result[i + j] %= DIGIT_BASE

        self._digits = result
        return self.normalize()

    def divide_into(self, divisor: "BigValue | int") -> "BigValue":
        """
        Целочисленное деление в столбик: self //= divisor.

        Цифры делимого просматриваются от старшей к младшей; каждая цифра
        приписывается к текущему остатку, цифра частного — число вычитаний
        divisor из остатка (0..9).

        Raises:
            DivisionByZeroError: Если divisor == 0
        """
        rhs = _require(divisor)
        if rhs.is_zero():
            raise DivisionByZeroError("Division by zero")

        if self < rhs:
            self._digits = [0]
            return self
        if self == rhs:
            self._digits = [1]
            return self

        quotient: list[int] = []
        remainder = BigValue(0)

        for digit in reversed(self._digits):
            remainder._digits.insert(0, digit)
            remainder.normalize()

            count = 0
            while remainder >= rhs:
                remainder.subtract_into(rhs)
                count += 1
            quotient.append(count)

        # quotient собран старшей цифрой первой
        quotient.reverse()
        self._digits = quotient
        return self.normalize()

    def modulo(self, divisor: "BigValue | int") -> "BigValue":
        """
        Остаток от деления: self - (self // divisor) * divisor.

        Результат всегда в [0, divisor).

        Raises:
            DivisionByZeroError: Если divisor == 0
        """
        rhs = _require(divisor)
        if rhs.is_zero():
            raise DivisionByZeroError("Modulo by zero")

        quotient = BigValue(self).divide_into(rhs)
        return BigValue(self).subtract_into(quotient.multiply_into(rhs))

    # -------------------------------------------------------------------------
    # Степень и корень
    # -------------------------------------------------------------------------

    def pow(
        self,
        exponent: "BigValue | int",
        algorithm: PowAlgorithm | str = PowAlgorithm.LINEAR,
    ) -> "BigValue":
        """
        Возведение в степень.

        LINEAR (по умолчанию): аккумулятор умножается на основание, пока
        счётчик произвольной точности меньше exponent. Стоимость линейна
        по значению exponent, пригодно только для малых показателей.
        SQUARING: бинарное возведение в степень, тот же результат.

        Args:
            exponent: Показатель (BigValue или неотрицательный int)
            algorithm: PowAlgorithm или его строковое значение

        Returns:
            Новое значение self ** exponent (0 ** 0 == 1)

        Raises:
            InvalidArgumentError: Если exponent — отрицательный int
            ValueError: Если algorithm неизвестен
        """
        exp = _require(exponent)
        algorithm = PowAlgorithm(algorithm)

        if exp.is_zero():
            return BigValue(1)

        logger.debug(
            "pow: base_digits=%d exponent=%s algorithm=%s",
            self.digit_count(),
            exp,
            algorithm.value,
        )

        if algorithm is PowAlgorithm.SQUARING:
            return self._pow_by_squaring(exp)

        result = BigValue(1)
        counter = BigValue(0)
        while counter < exp:
            result.multiply_into(self)
            counter.add_into(1)
        return result

    def _pow_by_squaring(self, exponent: "BigValue") -> "BigValue":
        result = BigValue(1)
        base = BigValue(self)
        remaining = BigValue(exponent)

        while not remaining.is_zero():
            if remaining._digits[0] % 2 == 1:
                result.multiply_into(base)
            remaining.divide_into(2)
            if not remaining.is_zero():
                base.multiply_into(base)

        return result

    def isqrt(self) -> "BigValue":
        """
        Целочисленный квадратный корень (floor) бисекцией по [1, self].

        Returns:
            Наибольшее r такое, что r * r <= self

        Examples:
            >>> BigValue(1000000).isqrt()
            BigValue('1000')
            >>> BigValue(15).isqrt()
            BigValue('3')
        """
        if self.is_zero() or self == 1:
            return BigValue(self)

        logger.debug("isqrt: target_digits=%d", self.digit_count())

        low = BigValue(1)
        high = BigValue(self)
        result = BigValue(0)

        while low <= high:
            mid = (low + high) // 2
            mid_sq = mid * mid

            if mid_sq == self:
                return mid

            if mid_sq < self:
                low = mid + 1
                result = mid
            else:
                high = mid - 1

        return result

    sqrt = isqrt

    # -------------------------------------------------------------------------
    # Операторы (новое значение)
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "BigValue":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigValue(self).add_into(rhs)

    def __radd__(self, other: object) -> "BigValue":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return BigValue(lhs).add_into(self)

    def __sub__(self, other: object) -> "BigValue":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigValue(self).subtract_into(rhs)

    def __rsub__(self, other: object) -> "BigValue":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return BigValue(lhs).subtract_into(self)

    def __mul__(self, other: object) -> "BigValue":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigValue(self).multiply_into(rhs)

    def __rmul__(self, other: object) -> "BigValue":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return BigValue(lhs).multiply_into(self)

    def __floordiv__(self, other: object) -> "BigValue":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigValue(self).divide_into(rhs)

    def __rfloordiv__(self, other: object) -> "BigValue":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return BigValue(lhs).divide_into(self)

    # "/" тоже целочисленное деление
    __truediv__ = __floordiv__
    __rtruediv__ = __rfloordiv__

    def __mod__(self, other: object) -> "BigValue":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.modulo(rhs)

    def __rmod__(self, other: object) -> "BigValue":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.modulo(self)

    def __divmod__(self, other: object) -> "tuple[BigValue, BigValue]":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return BigValue(self).divide_into(rhs), self.modulo(rhs)

    def __pow__(self, exponent: object, modulo: object = None) -> "BigValue":
        if modulo is not None:
            return NotImplemented
        exp = _coerce(exponent)
        if exp is None:
            return NotImplemented
        return self.pow(exp)

    def __rpow__(self, base: object) -> "BigValue":
        lhs = _coerce(base)
        if lhs is None:
            return NotImplemented
        return lhs.pow(self)
