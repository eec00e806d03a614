import logging

from ._core import Config, get_config, set_config
from ._errors import (
    EmptyReductionError,
    InvalidArgumentError,
    LazyChainError,
    TypeMismatchError,
)
from ._iter import Iter
from ._results import NONE, NoneOption, Option, OptionUnwrapError, Some
from ._sources import chain, iter, once, range, zip
from ._types import Enumerated, Partitioned

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "Config",
    "EmptyReductionError",
    "Enumerated",
    "InvalidArgumentError",
    "Iter",
    "LazyChainError",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Partitioned",
    "Some",
    "TypeMismatchError",
    "chain",
    "get_config",
    "iter",
    "once",
    "range",
    "set_config",
    "zip",
]
