from ._config import Config
from ._config import config


__all__ = ["Config", "config"]
