"""
Summation — обобщённое суммирование значений mapping

Модуль реализует Sum[K, V] для V из закрытого множества Number
(int64, float64):

- sum_numbers: суммирование с ограничением Number, вид значений выводится
- sum_ints_or_floats: суммирование с union-ограничением int | float,
  type argument можно передать явно или вывести
- Summation: явная инстанциация (Sum[str, int64]); недопустимый вид
  отвергается при конструировании, а не при вызове
- sum_ints / sum_floats: необобщённые эквиваленты для одного вида
- sum_sharded: ассоциативная редукция по частичным суммам

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустой mapping → нулевое значение вида (0 или 0.0)
2. Для INT64 результат не зависит от порядка обхода и разбиения на шарды
3. Все значения проверяются до начала накопления
4. Входной mapping не изменяется

ФОРМУЛЫ:
    Sum(m) = Σ v  для (k, v) в m
    sum_sharded(m, n) = Σ_i Σ_{v ∈ shard_i} v
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Final, Generic

from src.core.math.numeric_kinds import (
    Int64OverflowError,
    K,
    Number,
    NumericKind,
    fits_int64,
    infer_kind,
    require_kind,
    wrap_int64,
)
from src.utils.logging_config import get_logger

logger = get_logger(__name__)


# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================


class OverflowPolicy(str, Enum):
    """Поведение при выходе int64 суммы за пределы диапазона."""

    WRAP = "wrap"  # two's complement, как у 64-битного сумматора
    RAISE = "raise"


class FloatSummationMode(str, Enum):
    """Способ накопления float суммы."""

    NAIVE = "naive"  # последовательный +=
    COMPENSATED = "compensated"  # math.fsum, корректно округлённая сумма


@dataclass(frozen=True)
class SummationConfig:
    """Конфигурация суммирования.

    - overflow: WRAP оборачивает int64 сумму по модулю 2**64,
      RAISE выбрасывает Int64OverflowError
    - float_mode: NAIVE или COMPENSATED (order- и shard-independent для float)
    """

    overflow: OverflowPolicy = OverflowPolicy.WRAP
    float_mode: FloatSummationMode = FloatSummationMode.NAIVE


DEFAULT_SUMMATION_CONFIG: Final[SummationConfig] = SummationConfig()


# =============================================================================
# НАКОПЛЕНИЕ
# =============================================================================


def _ensure_mapping(m: object) -> None:
    if not isinstance(m, Mapping):
        raise TypeError(f"Expected a mapping, got {type(m).__name__}")


def _checked_values(m: Mapping, kind: NumericKind) -> list:
    """Снимок значений mapping с проверкой вида каждого значения."""
    values = list(m.values())
    for value in values:
        require_kind(value, kind)
    return values


def _accumulate(values: Sequence, kind: NumericKind, config: SummationConfig):
    """
    Накопление суммы без финализации.

    Для INT64 возвращает точную (неограниченную) сумму: проверка
    переполнения выполняется один раз в _finalize, поэтому результат
    не зависит от порядка значений.
    """
    if kind is NumericKind.INT64:
        total = 0
        for value in values:
            total += value
        return total

    if config.float_mode is FloatSummationMode.COMPENSATED:
        return math.fsum(values)

    total = 0.0
    for value in values:
        total += value
    return total


def _finalize(total, kind: NumericKind, config: SummationConfig):
    if kind is not NumericKind.INT64 or fits_int64(total):
        return total

    if config.overflow is OverflowPolicy.RAISE:
        raise Int64OverflowError(f"int64 sum overflow: exact total is {total}")

    wrapped = wrap_int64(total)
    logger.debug("int64 sum %d wrapped to %d", total, wrapped)
    return wrapped


# =============================================================================
# SUMMATION
# =============================================================================


@dataclass(frozen=True)
class Summation(Generic[K, Number]):
    """
    Явно инстанцированное суммирование Sum[K, V].

    Вид значения проверяется в __post_init__: Summation(str) падает при
    конструировании, до любого вызова.

    Examples:
        >>> Summation(NumericKind.INT64)({"first": 34, "second": 12})
        46
        >>> Summation.for_type(float)({})
        0.0
    """

    value_kind: NumericKind
    config: SummationConfig = DEFAULT_SUMMATION_CONFIG

    def __post_init__(self) -> None:
        object.__setattr__(self, "value_kind", NumericKind.from_type(self.value_kind))
        if not isinstance(self.config, SummationConfig):
            raise TypeError(
                f"config must be a SummationConfig, got {type(self.config).__name__}"
            )

    @classmethod
    def for_type(
        cls,
        value_type: type,
        config: SummationConfig = DEFAULT_SUMMATION_CONFIG,
    ) -> "Summation":
        """Инстанциация по Python типу (int или float)."""
        return cls(NumericKind.from_type(value_type), config)

    @property
    def zero(self) -> Number:
        return self.value_kind.zero

    def __call__(self, m: Mapping[K, Number]) -> Number:
        """
        Сумма всех значений mapping.

        Args:
            m: Mapping из hashable ключей в значения вида value_kind

        Returns:
            Сумма значений; нулевое значение для пустого mapping

        Raises:
            TypeError: если m не является Mapping
            MixedNumericKindsError: значение другого вида
            UnsupportedNumericKindError: значение вне Number
            Int64RangeError: int значение вне int64
            Int64OverflowError: переполнение при OverflowPolicy.RAISE
        """
        _ensure_mapping(m)
        values = _checked_values(m, self.value_kind)
        logger.debug("Summing %d %s values", len(values), self.value_kind.value)
        total = _accumulate(values, self.value_kind, self.config)
        return _finalize(total, self.value_kind, self.config)


def _resolve_kind(m: Mapping, value_type: object | None) -> NumericKind:
    if value_type is not None:
        return NumericKind.from_type(value_type)

    _ensure_mapping(m)
    # Для пустого mapping вывод невозможен: используется INT64
    return infer_kind(m.values()) or NumericKind.INT64


# =============================================================================
# ОБОБЩЁННЫЕ ФУНКЦИИ
# =============================================================================


def sum_numbers(
    m: Mapping[K, Number],
    config: SummationConfig | None = None,
) -> Number:
    """
    Обобщённая сумма с ограничением Number.

    Вид значений выводится из самих значений. Пустой mapping даёт 0.

    Examples:
        >>> sum_numbers({"first": 34, "second": 12})
        46
        >>> sum_numbers({})
        0
    """
    kind = _resolve_kind(m, None)
    return Summation(kind, config or DEFAULT_SUMMATION_CONFIG)(m)


def sum_ints_or_floats(
    m: Mapping[K, Number],
    value_type: type | None = None,
    config: SummationConfig | None = None,
) -> Number:
    """
    Обобщённая сумма с union-ограничением int | float.

    Args:
        m: Mapping для суммирования
        value_type: Явный type argument (int или float); если None,
            выводится из значений
        config: Конфигурация суммирования

    Returns:
        Сумма значений типа value_type

    Raises:
        UnsupportedNumericKindError: value_type вне {int, float}; проверяется
            до обращения к m

    Examples:
        >>> sum_ints_or_floats({"first": 34, "second": 12}, int)
        46
        >>> sum_ints_or_floats({}, float)
        0.0
    """
    kind = _resolve_kind(m, value_type)
    return Summation(kind, config or DEFAULT_SUMMATION_CONFIG)(m)


# =============================================================================
# НЕОБОБЩЁННЫЕ ЭКВИВАЛЕНТЫ
# =============================================================================


def sum_ints(m: Mapping[str, int]) -> int:
    """Сумма int64 значений m."""
    return Summation(NumericKind.INT64)(m)


def sum_floats(m: Mapping[str, float]) -> float:
    """Сумма float64 значений m."""
    return Summation(NumericKind.FLOAT64)(m)


# =============================================================================
# ШАРДИРОВАННАЯ РЕДУКЦИЯ
# =============================================================================


def sum_sharded(
    m: Mapping[K, Number],
    shards: int,
    value_type: type | None = None,
    config: SummationConfig | None = None,
) -> Number:
    """
    Сумма через частичные суммы по шардам.

    Значения делятся на `shards` смежных частей, каждая часть суммируется
    независимо, затем частичные суммы объединяются. Для INT64 результат
    совпадает с sum_numbers при любом shards >= 1.

    В режиме FloatSummationMode.COMPENSATED float значения суммируются
    одним проходом math.fsum: округлённые частичные суммы уже не дали бы
    корректно округлённого результата.

    Args:
        m: Mapping для суммирования
        shards: Количество частей (>= 1); лишние пустые части пропускаются
        value_type: Явный type argument (int или float) или None
        config: Конфигурация суммирования

    Raises:
        ValueError: если shards < 1

    Examples:
        >>> sum_sharded({"a": 1, "b": 2, "c": 3}, shards=2)
        6
    """
    if isinstance(shards, bool) or not isinstance(shards, int):
        raise TypeError(f"shards must be an int, got {type(shards).__name__}")
    if shards < 1:
        raise ValueError(f"shards must be >= 1, got {shards}")

    cfg = config or DEFAULT_SUMMATION_CONFIG
    kind = _resolve_kind(m, value_type)
    _ensure_mapping(m)
    values = _checked_values(m, kind)

    if kind is NumericKind.FLOAT64 and cfg.float_mode is FloatSummationMode.COMPENSATED:
        logger.debug("Compensated float sum over %d values in one pass", len(values))
        return math.fsum(values)

    chunk_size = max(1, math.ceil(len(values) / shards))
    partials = [
        _accumulate(values[start:start + chunk_size], kind, cfg)
        for start in range(0, len(values), chunk_size)
    ]
    logger.debug(
        "Combining %d partial %s sums (requested shards=%d)",
        len(partials),
        kind.value,
        shards,
    )

    total = _accumulate(partials, kind, cfg)
    return _finalize(total, kind, cfg)
