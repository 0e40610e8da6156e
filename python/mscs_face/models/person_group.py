"""
Person group models.
A person group is the search space used for identification.
"""

from typing import Optional
from datetime import datetime
from enum import Enum
from pydantic import BaseModel, Field


class PersonGroup(BaseModel):
    """Person group as returned by the service."""

    person_group_id: str = Field(..., alias="personGroupId", description="Caller-supplied group ID")
    name: str = Field("", description="Display name")
    user_data: Optional[str] = Field(None, alias="userData", description="User-provided data")

    class Config:
        populate_by_name = True
        extra = "allow"


class TrainingState(str, Enum):
    """Server-side training job state."""
    NOT_STARTED = "notstarted"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class TrainingStatus(BaseModel):
    """Training status of a person group."""

    status: TrainingState = Field(..., description="Training state")
    created_date_time: Optional[datetime] = Field(None, alias="createdDateTime")
    last_action_date_time: Optional[datetime] = Field(None, alias="lastActionDateTime")
    message: Optional[str] = Field(None, description="Failure reason when status is failed")

    class Config:
        populate_by_name = True
        extra = "allow"

    @property
    def is_finished(self) -> bool:
        """True once training has either succeeded or failed."""
        return self.status in (TrainingState.SUCCEEDED, TrainingState.FAILED)
