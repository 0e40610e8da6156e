"""
Response and request models for the Face service.
"""

from mscs_face.models.person_group import PersonGroup, TrainingState, TrainingStatus
from mscs_face.models.person import Person
from mscs_face.models.face import FaceRectangle, DetectedFace, IdentifyCandidate, IdentifyResult
from mscs_face.models.requests import ListParams, IdentifyOptions

__all__ = [
    'PersonGroup',
    'TrainingState',
    'TrainingStatus',
    'Person',
    'FaceRectangle',
    'DetectedFace',
    'IdentifyCandidate',
    'IdentifyResult',
    'ListParams',
    'IdentifyOptions',
]
