"""
KeyedCollection — Модель коллекции значений по ключам

Immutable Pydantic модель: mapping строковых ключей в значения одного
вида из закрытого множества Number (int64 или float64).
entries хранится как read-only mapping и сериализуется как обычный dict;
inf/nan пишутся в JSON константами Infinity/NaN и читаются обратно.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from pydantic import BaseModel, Field, field_serializer, field_validator

from src.core.math.numeric_kinds import (
    NumericKind,
    NumericKindError,
    classify_value,
    infer_kind,
)
from src.core.math.summation import Summation, SummationConfig, DEFAULT_SUMMATION_CONFIG


# =============================================================================
# KEYED COLLECTION MODEL
# =============================================================================


class KeyedCollection(BaseModel):
    """
    Коллекция значений по уникальным ключам.

    Порядок ключей не влияет на total() для int64 значений.

    Immutable модель (frozen=True).
    """

    value_kind: NumericKind = Field(..., description="Вид значений (int64/float64)")
    entries: dict[str, int | float] = Field(
        default_factory=dict, validate_default=True, description="Значения по ключам"
    )

    model_config = {
        "frozen": True,  # Immutable
        "ser_json_inf_nan": "constants",  # inf/nan переживают JSON round trip
    }

    @field_validator("entries", mode="before")
    @classmethod
    def validate_entry_kinds(cls, v: Any) -> Any:
        """
        Исчерпывающая проверка вида каждого значения до приведения типов.

        Без неё lax режим pydantic превратил бы True в 1 и "34" в 34.
        """
        if not isinstance(v, Mapping):
            return v

        for key, value in v.items():
            try:
                classify_value(value)
            except NumericKindError as exc:
                raise ValueError(f"entry {key!r}: {exc}") from exc
        return v

    @field_validator("entries")
    @classmethod
    def validate_uniform_kind(
        cls, v: dict[str, int | float], info
    ) -> Mapping[str, int | float]:
        """Проверка, что все значения имеют вид value_kind; результат read-only"""
        if "value_kind" not in info.data:
            return MappingProxyType(v)

        value_kind = info.data["value_kind"]
        for key, value in v.items():
            kind = classify_value(value)
            if kind is not value_kind:
                raise ValueError(
                    f"entry {key!r} is {kind.value}, expected {value_kind.value}"
                )
        return MappingProxyType(v)

    @field_serializer("entries")
    def serialize_entries(self, v: Mapping[str, int | float]) -> dict[str, int | float]:
        return dict(v)

    @classmethod
    def from_mapping(
        cls,
        m: Mapping[str, int | float],
        value_kind: Optional[object] = None,
    ) -> "KeyedCollection":
        """
        Создание коллекции из mapping.

        Args:
            m: Исходный mapping
            value_kind: NumericKind, int или float; если None, выводится
                из значений (INT64 для пустого mapping)

        Raises:
            UnsupportedNumericKindError: value_kind вне Number
            MixedNumericKindsError: при выводе обнаружены int и float
            ValidationError: значения не соответствуют value_kind
        """
        if value_kind is not None:
            kind = NumericKind.from_type(value_kind)
        else:
            kind = infer_kind(m.values()) or NumericKind.INT64
        return cls(value_kind=kind, entries=dict(m))

    def total(self, config: Optional[SummationConfig] = None) -> int | float:
        """Сумма всех значений коллекции."""
        return Summation(self.value_kind, config or DEFAULT_SUMMATION_CONFIG)(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
