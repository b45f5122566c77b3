"""
Core math modules

Закрытое множество числовых видов и обобщённое суммирование.
"""

# Numeric Kinds
from src.core.math.numeric_kinds import (
    # Constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    INT64_MAX,
    INT64_MIN,
    NUMBER_KINDS,
    # Type parameters
    K,
    Number,
    # Types
    NumericKind,
    # Exceptions
    Int64OverflowError,
    Int64RangeError,
    MixedNumericKindsError,
    NumericKindError,
    UnsupportedNumericKindError,
    # Functions
    classify_value,
    fits_int64,
    infer_kind,
    is_close,
    require_kind,
    wrap_int64,
)

# Summation
from src.core.math.summation import (
    DEFAULT_SUMMATION_CONFIG,
    FloatSummationMode,
    OverflowPolicy,
    Summation,
    SummationConfig,
    sum_floats,
    sum_ints,
    sum_ints_or_floats,
    sum_numbers,
    sum_sharded,
)

__all__ = [
    # Numeric Kinds — Constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    "INT64_MAX",
    "INT64_MIN",
    "NUMBER_KINDS",
    # Numeric Kinds — Type parameters
    "K",
    "Number",
    # Numeric Kinds — Types
    "NumericKind",
    # Numeric Kinds — Exceptions
    "Int64OverflowError",
    "Int64RangeError",
    "MixedNumericKindsError",
    "NumericKindError",
    "UnsupportedNumericKindError",
    # Numeric Kinds — Functions
    "classify_value",
    "fits_int64",
    "infer_kind",
    "is_close",
    "require_kind",
    "wrap_int64",
    # Summation — Config
    "DEFAULT_SUMMATION_CONFIG",
    "FloatSummationMode",
    "OverflowPolicy",
    "SummationConfig",
    # Summation — Functions
    "Summation",
    "sum_floats",
    "sum_ints",
    "sum_ints_or_floats",
    "sum_numbers",
    "sum_sharded",
]
