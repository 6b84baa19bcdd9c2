from .logger import Logger as Logger
from .logger import get_logger as get_logger
