from ._config import Config, get_config, set_config
from ._format import producer_repr
from ._main import CommonBase

__all__ = [
    "CommonBase",
    "Config",
    "get_config",
    "producer_repr",
    "set_config",
]
