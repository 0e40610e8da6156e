"""
Face service client and request dispatch.
"""

from mscs_face.services.face_client import FaceServiceClient
from mscs_face.services.http import FaceApiTransport

__all__ = [
    'FaceServiceClient',
    'FaceApiTransport',
]
