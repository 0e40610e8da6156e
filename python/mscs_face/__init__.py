"""
Async client for the Microsoft Cognitive Services Face API.

Person groups, persons and persisted faces, detection and identification.
"""

from mscs_face.core.config import VERSION, Region, resolve_region
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
from mscs_face.models import (
    PersonGroup,
    TrainingState,
    TrainingStatus,
    Person,
    FaceRectangle,
    DetectedFace,
    IdentifyCandidate,
    IdentifyResult,
)
from mscs_face.services.face_client import FaceServiceClient

__version__ = VERSION

__all__ = [
    'FaceServiceClient',
    'Region',
    'resolve_region',
    'FaceApiException',
    'ConfigurationError',
    'UnknownRegionError',
    'ServiceError',
    'UnexpectedResponseError',
    'InvalidResponseError',
    'InvalidArgumentError',
    'TransportError',
    'PersonGroup',
    'TrainingState',
    'TrainingStatus',
    'Person',
    'FaceRectangle',
    'DetectedFace',
    'IdentifyCandidate',
    'IdentifyResult',
]
