from loguru import logger

from perhaps.core.errors import AbsentValueError
from perhaps.core.holder import Holder
from perhaps.core.maybe import NOTHING, Just, Maybe, Nothing, absent, from_optional, present
from perhaps.core.presence import Presence
from perhaps.logging_config import configure_logging

# Silent until the host application opts in
logger.disable("perhaps")

__version__ = "0.1.0"

__all__ = [
    "AbsentValueError",
    "Holder",
    "Just",
    "Maybe",
    "NOTHING",
    "Nothing",
    "Presence",
    "absent",
    "configure_logging",
    "from_optional",
    "present",
]
