"""
Request option models.
Optional parameters with their defaults, so methods never guess.
"""

from typing import Optional, Dict, Any
from pydantic import BaseModel, Field

from mscs_face.core.config import DEFAULT_LIST_START, DEFAULT_LIST_TOP


class ListParams(BaseModel):
    """Paging parameters for list endpoints."""

    start: str = Field(DEFAULT_LIST_START, description="List IDs greater than this")
    top: int = Field(DEFAULT_LIST_TOP, description="Number of entries to return, 1-1000")

    def to_query(self) -> Dict[str, Any]:
        return {"start": self.start, "top": self.top}


class IdentifyOptions(BaseModel):
    """
    Options for identify.

    A None threshold leaves the service default. Values are not range-checked
    locally; the service rejects invalid ones.
    """

    confidence_threshold: Optional[float] = Field(None, description="Range [0, 1], checked by the service")
