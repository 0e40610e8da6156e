"""
Core module - configuration, exceptions, logging.
"""

from mscs_face.core.config import (
    VERSION,
    IDENTIFY_BATCH_SIZE,
    ClientConfig,
    Region,
    Settings,
    get_settings,
    resolve_region,
)
from mscs_face.core.exceptions import (
    FaceApiException,
    ConfigurationError,
    UnknownRegionError,
    ServiceError,
    UnexpectedResponseError,
    InvalidResponseError,
    InvalidArgumentError,
    TransportError,
)
from mscs_face.core.logging import setup_logging, get_logger

__all__ = [
    'VERSION',
    'IDENTIFY_BATCH_SIZE',
    'ClientConfig',
    'Region',
    'Settings',
    'get_settings',
    'resolve_region',
    'FaceApiException',
    'ConfigurationError',
    'UnknownRegionError',
    'ServiceError',
    'UnexpectedResponseError',
    'InvalidResponseError',
    'InvalidArgumentError',
    'TransportError',
    'setup_logging',
    'get_logger',
]
