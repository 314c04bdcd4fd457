"""
Core container types: Either, Optional, LeftOptional and the collectors
that aggregate sequences of Either values.
"""

from .collectors import (
    Collector,
    ValidatingAccumulator,
    ValidatingAccumulatorAll,
    collect,
    collect_partitioned,
    optional_list,
    to_optional_list,
    to_valid_list,
    to_valid_list_all,
)
from .either import Either, Left, Right, left, right
from .option import AbstractOptional, LeftOptional, Optional

__all__ = [
    "AbstractOptional",
    "Collector",
    "Either",
    "Left",
    "LeftOptional",
    "Optional",
    "Right",
    "ValidatingAccumulator",
    "ValidatingAccumulatorAll",
    "collect",
    "collect_partitioned",
    "left",
    "optional_list",
    "right",
    "to_optional_list",
    "to_valid_list",
    "to_valid_list_all",
]
