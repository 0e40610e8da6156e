"""
Person model.
A person belongs to exactly one person group.
"""

from typing import Optional, List
from pydantic import BaseModel, Field


class Person(BaseModel):
    """Enrolled person with its persisted faces."""

    person_id: str = Field(..., alias="personId", description="Server-issued person ID")
    name: str = Field("", description="Display name")
    user_data: Optional[str] = Field(None, alias="userData", description="User-provided data")
    persisted_face_ids: List[str] = Field(
        default_factory=list,
        alias="persistedFaceIds",
        description="IDs of registered faces"
    )

    class Config:
        populate_by_name = True
        extra = "allow"

    @property
    def face_count(self) -> int:
        return len(self.persisted_face_ids)
