"""
eitherkit: Either and Optional containers for Python.

This package provides:
- ``Either``, a value that is either a Left (failure) or a Right (success)
- ``Optional`` and ``LeftOptional``, null-safe single-value containers
- collectors that fold a sequence of Either values into one result
"""

import logging

from .core import (
    AbstractOptional,
    Collector,
    Either,
    Left,
    LeftOptional,
    Optional,
    Right,
    ValidatingAccumulator,
    ValidatingAccumulatorAll,
    collect,
    collect_partitioned,
    left,
    optional_list,
    right,
    to_optional_list,
    to_valid_list,
    to_valid_list_all,
)
from .config import LibraryConfig, configure_logging, get_config, set_config
from .errors import (
    ConfigurationError,
    EitherKitError,
    InvalidArgumentError,
    MapperContractError,
    NoValuePresentError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "AbstractOptional",
    "Collector",
    "ConfigurationError",
    "Either",
    "EitherKitError",
    "InvalidArgumentError",
    "Left",
    "LeftOptional",
    "LibraryConfig",
    "MapperContractError",
    "NoValuePresentError",
    "Optional",
    "Right",
    "ValidatingAccumulator",
    "ValidatingAccumulatorAll",
    "collect",
    "collect_partitioned",
    "configure_logging",
    "get_config",
    "left",
    "optional_list",
    "right",
    "set_config",
    "to_optional_list",
    "to_valid_list",
    "to_valid_list_all",
]
