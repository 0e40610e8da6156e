"""
Client configuration.

Region resolution and URL layout are fixed by the Face service. Optional
environment settings are loaded via Pydantic Settings.
"""

from enum import Enum
from typing import Dict, Optional
from functools import lru_cache

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

from mscs_face.core.exceptions import ConfigurationError, UnknownRegionError


VERSION = "1.0.0"

API_VERSION = "/face/v1.0"
HOST_TEMPLATE = "https://{host}.api.cognitive.microsoft.com"

# The identify endpoint accepts at most this many faceIds per call
IDENTIFY_BATCH_SIZE = 10

DEFAULT_LIST_START = ""
DEFAULT_LIST_TOP = 1000

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"


class Region(str, Enum):
    """Short region codes accepted by the client."""
    WUS = "WUS"
    EUS2 = "EUS2"
    WCUS = "WCUS"
    WE = "WE"
    SA = "SA"


REGION_HOSTS: Dict[str, str] = {
    Region.WUS.value: "westus",
    Region.EUS2.value: "eastus2",
    Region.WCUS.value: "westcentralus",
    Region.WE.value: "westeurope",
    Region.SA.value: "southeastasia",
}


def resolve_region(code: str) -> str:
    """
    Map a short region code to its host fragment.

    The match is exact and case-sensitive ("wus" is not "WUS").

    Raises:
        UnknownRegionError: If the code is not one of the known regions
    """
    if isinstance(code, Region):
        code = code.value
    host = REGION_HOSTS.get(code) if isinstance(code, str) else None
    if host is None:
        raise UnknownRegionError(code)
    return host


class ClientConfig(BaseModel):
    """Immutable client configuration: credentials and base URLs."""

    api_key: str = Field(..., description="Subscription key")
    region: Region = Field(..., description="Short region code")
    host: str = Field(..., description="Resolved region host fragment")

    class Config:
        frozen = True

    @classmethod
    def create(cls, api_key: str, region: str) -> "ClientConfig":
        """
        Build a configuration, failing fast on an unknown region.

        Raises:
            ConfigurationError: If the key is empty or the region unknown
        """
        if not api_key:
            raise ConfigurationError("An API key is required", field="api_key")
        host = resolve_region(region)
        return cls(api_key=api_key, region=Region(region), host=host)

    @property
    def api_url(self) -> str:
        return HOST_TEMPLATE.format(host=self.host) + API_VERSION

    @property
    def person_groups_url(self) -> str:
        return f"{self.api_url}/persongroups"

    @property
    def detect_url(self) -> str:
        return f"{self.api_url}/detect"

    @property
    def identify_url(self) -> str:
        return f"{self.api_url}/identify"

    @property
    def headers(self) -> Dict[str, str]:
        """Headers attached to every request."""
        return {
            SUBSCRIPTION_KEY_HEADER: self.api_key,
            "Content-Type": "application/json",
        }


class Settings(BaseSettings):
    """Optional settings loaded from environment variables."""

    # === Face service ===
    face_api_key: Optional[str] = Field(default=None, alias="FACE_API_KEY")
    face_api_region: str = Field(default=Region.WE.value, alias="FACE_API_REGION")

    # === Logging ===
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    debug: bool = Field(default=False, alias="DEBUG")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Ignore extra env vars


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
