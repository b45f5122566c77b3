"""
Numeric Kinds — закрытое множество числовых типов

Модуль описывает ограничение Number: единственные допустимые типы значений
для обобщённого суммирования.

- INT64: Python int (не bool) в диапазоне [-2**63, 2**63 - 1]
- FLOAT64: Python float (IEEE-754 binary64)

Статическая часть ограничения — constrained TypeVar `Number` (проверяется
type checker'ом). Runtime часть — исчерпывающая проверка вида значения на
границе функции, до начала накопления суммы.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. bool никогда не считается INT64 (хотя bool — подкласс int)
2. Значения вне закрытого множества отвергаются до суммирования
3. Один вызов суммирования — один вид значений (без смешивания)
"""

import math
from collections.abc import Hashable, Iterable
from enum import Enum
from typing import Final, TypeVar

# =============================================================================
# TYPE PARAMETERS
# =============================================================================

# Тип ключа: любой hashable тип (контракт __eq__/__hash__ — предусловие)
K = TypeVar("K", bound=Hashable)

# Ограничение Number: только int и float
Number = TypeVar("Number", int, float)

# =============================================================================
# INT64 ГРАНИЦЫ
# =============================================================================

INT64_BITS: Final[int] = 64
INT64_MIN: Final[int] = -(2 ** (INT64_BITS - 1))
INT64_MAX: Final[int] = 2 ** (INT64_BITS - 1) - 1

# Толерантности для приближённого сравнения float сумм
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# EXCEPTIONS
# =============================================================================


class NumericKindError(TypeError):
    """Базовая ошибка нарушения ограничения Number."""


class UnsupportedNumericKindError(NumericKindError):
    """Тип значения (или type argument) вне закрытого множества {int, float}."""


class MixedNumericKindsError(NumericKindError):
    """Значения разных видов под одним типом значения V."""


class Int64RangeError(ValueError):
    """Целое значение не помещается в int64."""


class Int64OverflowError(ArithmeticError):
    """
    Накопленная int64 сумма вышла за пределы диапазона.

    Возникает только при OverflowPolicy.RAISE; при WRAP сумма
    оборачивается по модулю 2**64.
    """


# =============================================================================
# NUMERIC KIND
# =============================================================================


class NumericKind(str, Enum):
    """Вид числового значения из закрытого множества Number."""

    INT64 = "int64"
    FLOAT64 = "float64"

    @classmethod
    def from_type(cls, tp: object) -> "NumericKind":
        """
        Преобразование Python типа (type argument) в NumericKind.

        Args:
            tp: int, float или уже готовый NumericKind

        Returns:
            Соответствующий NumericKind

        Raises:
            UnsupportedNumericKindError: для любого другого типа (включая bool)

        Examples:
            >>> NumericKind.from_type(int)
            <NumericKind.INT64: 'int64'>
            >>> NumericKind.from_type(float)
            <NumericKind.FLOAT64: 'float64'>
        """
        if isinstance(tp, NumericKind):
            return tp
        if tp is int:
            return cls.INT64
        if tp is float:
            return cls.FLOAT64
        name = getattr(tp, "__name__", repr(tp))
        raise UnsupportedNumericKindError(
            f"Unsupported value type {name}: expected one of int, float"
        )

    @property
    def python_type(self) -> type:
        return int if self is NumericKind.INT64 else float

    @property
    def zero(self) -> int | float:
        """Нулевое значение вида: 0 для INT64, 0.0 для FLOAT64."""
        return 0 if self is NumericKind.INT64 else 0.0


# Runtime часть ограничения Number
NUMBER_KINDS: Final[frozenset[NumericKind]] = frozenset(NumericKind)


# =============================================================================
# КЛАССИФИКАЦИЯ ЗНАЧЕНИЙ
# =============================================================================


def classify_value(value: object) -> NumericKind:
    """
    Исчерпывающая проверка вида значения.

    Args:
        value: Проверяемое значение

    Returns:
        NumericKind значения

    Raises:
        UnsupportedNumericKindError: bool, str, Decimal, complex, None и т.д.
        Int64RangeError: int вне диапазона int64

    Examples:
        >>> classify_value(34)
        <NumericKind.INT64: 'int64'>
        >>> classify_value(35.98)
        <NumericKind.FLOAT64: 'float64'>
    """
    # bool проверяется первым: isinstance(True, int) истинно
    if isinstance(value, bool):
        raise UnsupportedNumericKindError(
            f"Unsupported value {value!r} of type bool: expected int or float"
        )

    if isinstance(value, int):
        if not INT64_MIN <= value <= INT64_MAX:
            raise Int64RangeError(
                f"Integer value {value} outside int64 range [{INT64_MIN}, {INT64_MAX}]"
            )
        return NumericKind.INT64

    if isinstance(value, float):
        return NumericKind.FLOAT64

    raise UnsupportedNumericKindError(
        f"Unsupported value {value!r} of type {type(value).__name__}: "
        f"expected int or float"
    )


def require_kind(value: object, kind: NumericKind) -> None:
    """
    Проверка, что значение имеет заданный вид.

    Raises:
        MixedNumericKindsError: если вид значения отличается от kind
        UnsupportedNumericKindError, Int64RangeError: см. classify_value
    """
    actual = classify_value(value)
    if actual is not kind:
        raise MixedNumericKindsError(
            f"Value {value!r} is {actual.value}, expected {kind.value}"
        )


def infer_kind(values: Iterable[object]) -> NumericKind | None:
    """
    Вывод единого вида для набора значений (аналог вывода type arguments).

    Args:
        values: Значения коллекции

    Returns:
        Общий NumericKind или None для пустого набора

    Raises:
        MixedNumericKindsError: если встречаются int и float одновременно
        UnsupportedNumericKindError, Int64RangeError: см. classify_value
    """
    inferred: NumericKind | None = None

    for value in values:
        kind = classify_value(value)
        if inferred is None:
            inferred = kind
        elif kind is not inferred:
            raise MixedNumericKindsError(
                f"Cannot infer a single value type: found both "
                f"{inferred.value} and {kind.value} values"
            )

    return inferred


# =============================================================================
# INT64 АРИФМЕТИКА
# =============================================================================


def wrap_int64(value: int) -> int:
    """
    Оборачивание целого в диапазон int64 (two's complement).

    Examples:
        >>> wrap_int64(2**63)
        -9223372036854775808
        >>> wrap_int64(-1)
        -1
    """
    return ((value - INT64_MIN) % (1 << INT64_BITS)) + INT64_MIN


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


# =============================================================================
# СРАВНЕНИЕ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Приближённое сравнение float сумм.

    Порядок суммирования float не нормирован, поэтому побитовое
    равенство результатов не гарантируется.

    Examples:
        >>> is_close(35.98 + 26.99, 62.97)
        True
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
