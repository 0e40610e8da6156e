"""
Face models.
Detection results and identification candidates.
"""

from typing import Optional, List
from pydantic import BaseModel, Field


class FaceRectangle(BaseModel):
    """Face location within the image, in pixels."""

    top: int = Field(..., description="Top edge Y coordinate")
    left: int = Field(..., description="Left edge X coordinate")
    width: int = Field(..., ge=0, description="Rectangle width")
    height: int = Field(..., ge=0, description="Rectangle height")

    @property
    def area(self) -> int:
        """Rectangle area."""
        return self.width * self.height


class DetectedFace(BaseModel):
    """
    Face found by a detect call.

    face_id is transient: the service only keeps it for a short time,
    long enough to pass it to identify.
    """

    face_id: str = Field(..., alias="faceId", description="Transient face ID")
    face_rectangle: FaceRectangle = Field(..., alias="faceRectangle")

    class Config:
        populate_by_name = True
        extra = "allow"


class IdentifyCandidate(BaseModel):
    """A person that may match the query face."""

    person_id: str = Field(..., alias="personId")
    confidence: float = Field(..., ge=0, le=1, description="Similarity confidence")

    class Config:
        populate_by_name = True
        extra = "allow"


class IdentifyResult(BaseModel):
    """Identification outcome for one query face."""

    face_id: str = Field(..., alias="faceId")
    candidates: List[IdentifyCandidate] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        extra = "allow"

    @property
    def best_candidate(self) -> Optional[IdentifyCandidate]:
        """Candidate with the highest confidence, if any."""
        if not self.candidates:
            return None
        return max(self.candidates, key=lambda c: c.confidence)
