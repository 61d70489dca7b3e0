from xminds_client.config import ClientSettings, ConfigurationError
from xminds_client.errors import (
    ApiConnectionError,
    ClassifiedError,
    ErrorKind,
    XMindsError,
    parse_error,
)
from xminds_client.services import XMindsService, build_service

__version__ = "0.1.0"

__all__ = [
    "ApiConnectionError",
    "ClassifiedError",
    "ClientSettings",
    "ConfigurationError",
    "ErrorKind",
    "XMindsError",
    "XMindsService",
    "build_service",
    "parse_error",
]
