from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


# "WARN" is accepted from config files and mapped to WARNING
LEVEL_ALIASES = {"WARN": "WARNING"}

DEFAULT_SERVICE_NAME = "rediscache"
DEFAULT_LEVEL = LogLevel.INFO
DEFAULT_ENABLE_CONSOLE = True
DEFAULT_COLORIZE = True

LOG_FORMAT_TIME = "<green>{time:YYYY-MM-DD HH:mm:ss}</green>"
LOG_FORMAT_LEVEL = "<level>{level: <7}</level>"
LOG_FORMAT_SERVICE = "<magenta>{extra[service]}</magenta>"
LOG_FORMAT_TRACE = "<cyan>{extra[trace_id]: <16}</cyan>"
LOG_FORMAT_LOCATION = "<cyan>{name}</cyan>:<cyan>{line}</cyan>"
LOG_FORMAT_MESSAGE = "<level>{message}</level>"

SERVICE_KEY = "service"
TRACE_ID_KEY = "trace_id"

ERROR_INVALID_LEVEL = "Invalid log level: {level}. Must be one of {valid}"
