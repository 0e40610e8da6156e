"""
Face service client.

One coroutine per supported remote operation. All requests go through
FaceApiTransport; identify additionally splits its input into batches
the service accepts and runs them concurrently.
"""

import asyncio
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from mscs_face.core.config import ClientConfig, IDENTIFY_BATCH_SIZE, get_settings
from mscs_face.core.exceptions import ConfigurationError, InvalidArgumentError, InvalidResponseError
from mscs_face.core.logging import get_logger
from mscs_face.models.face import DetectedFace, IdentifyResult
from mscs_face.models.person import Person
from mscs_face.models.person_group import PersonGroup, TrainingStatus
from mscs_face.models.requests import IdentifyOptions, ListParams
from mscs_face.services.batching import merge, partition
from mscs_face.services.http import FaceApiTransport

logger = get_logger(__name__)

M = TypeVar('M', bound=BaseModel)


def _body(**fields: Any) -> Dict[str, Any]:
    """JSON body without the fields left as None."""
    return {key: value for key, value in fields.items() if value is not None}


def _options(model: Type[M], **fields: Any) -> M:
    """
    Build an option structure from caller arguments.

    Raises:
        InvalidArgumentError: If an argument has the wrong type
    """
    try:
        return model(**_body(**fields))
    except ValidationError as e:
        first = e.errors()[0]
        field = str(first["loc"][0]) if first.get("loc") else None
        raise InvalidArgumentError(f"Invalid {field}: {first['msg']}", field=field) from e


def _parse(model: Type[M], data: Any) -> M:
    """
    Validate a response payload into a model.

    Raises:
        InvalidResponseError: If the payload does not match the model
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidResponseError(
            f"Unexpected {model.__name__} payload: {e.error_count()} validation error(s)"
        ) from e


def _parse_list(model: Type[M], data: Any) -> List[M]:
    """Validate a JSON array payload; an empty body counts as []."""
    return [_parse(model, item) for item in _as_list(data)]


def _as_list(data: Any) -> List[Any]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise InvalidResponseError(f"Expected a JSON array, got {type(data).__name__}")
    return data


def _field(data: Any, key: str) -> Any:
    """Required field of a JSON object payload."""
    if not isinstance(data, dict) or key not in data:
        raise InvalidResponseError(f"Response has no '{key}' field")
    return data[key]


class FaceServiceClient:
    """
    Client for the Face API person group, detect and identify endpoints.

    Every operation either returns its result or raises a FaceApiException:
    - ServiceError: the service answered with an HTTP failure
      (InvalidResponseError when a success body is not the expected shape)
    - TransportError: no response was received
    - InvalidArgumentError: an argument has the wrong type; nothing was sent
      (only operations taking list or identify options)

    Usage:
        async with FaceServiceClient(key, "WE") as client:
            faces = await client.detect_face(url)
            results = await client.identify_face("group", [f.face_id for f in faces])
    """

    def __init__(
        self,
        api_key: str,
        region: str,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        """
        Args:
            api_key: Subscription key for the Face resource
            region: Short region code (WUS, EUS2, WCUS, WE, SA)
            http_client: Shared httpx client (optional, left open by this client)

        Raises:
            ConfigurationError: If the region is unknown or the key is empty
        """
        self.config = ClientConfig.create(api_key, region)
        self._transport = FaceApiTransport(self.config, http_client)
        self._owns_client = False
        logger.debug(f"FaceServiceClient initialized for region {self.config.region.value} ({self.config.host})")

    @classmethod
    def from_settings(cls, http_client: Optional[httpx.AsyncClient] = None) -> "FaceServiceClient":
        """Build a client from FACE_API_KEY / FACE_API_REGION."""
        settings = get_settings()
        if not settings.face_api_key:
            raise ConfigurationError("FACE_API_KEY is not set", field="api_key")
        return cls(settings.face_api_key, settings.face_api_region, http_client=http_client)

    async def __aenter__(self) -> "FaceServiceClient":
        if self._transport.http_client is None:
            self._transport.http_client = httpx.AsyncClient()
            self._owns_client = True
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if self._owns_client and self._transport.http_client is not None:
            await self._transport.http_client.aclose()
            self._transport.http_client = None
            self._owns_client = False

    def _group_url(self, person_group_id: str) -> str:
        return f"{self.config.person_groups_url}/{person_group_id}"

    # ============================================================
    # Person Groups
    # ============================================================

    async def create_person_group(
        self,
        person_group_id: str,
        name: str,
        user_data: Optional[str] = None
    ) -> None:
        """
        Create a person group.

        Args:
            person_group_id: Lower-case letters, digits, '-' and '_'; at most 64 chars
            name: Display name, at most 128 chars
            user_data: Attached data, at most 16KB (optional)

        Raises:
            ServiceError, TransportError
        """
        await self._transport.request(
            "PUT",
            self._group_url(person_group_id),
            json=_body(name=name, userData=user_data)
        )
        logger.info(f"Created person group {person_group_id}")

    async def delete_person_group(self, person_group_id: str) -> None:
        """
        Delete a person group with all its persons and faces.

        Raises:
            ServiceError, TransportError
        """
        await self._transport.request("DELETE", self._group_url(person_group_id))
        logger.info(f"Deleted person group {person_group_id}")

    async def get_person_group(self, person_group_id: str) -> PersonGroup:
        """
        Get a person group's name and userData.

        Raises:
            ServiceError: Includes InvalidResponseError for a malformed body
            TransportError
        """
        data = await self._transport.request("GET", self._group_url(person_group_id))
        return _parse(PersonGroup, data)

    async def get_person_group_training_status(self, person_group_id: str) -> TrainingStatus:
        """
        Get the state of the group's latest training job.

        Raises:
            ServiceError: Includes InvalidResponseError for a malformed body
                or an unknown status value
            TransportError
        """
        data = await self._transport.request("GET", f"{self._group_url(person_group_id)}/training")
        return _parse(TrainingStatus, data)

    async def list_person_groups(
        self,
        start: Optional[str] = None,
        top: Optional[int] = None
    ) -> List[PersonGroup]:
        """
        List person groups ordered by personGroupId.

        Args:
            start: Only groups with an ID greater than this (default "")
            top: Number of groups to return, 1-1000 (default 1000)

        Raises:
            InvalidArgumentError: start/top of the wrong type; nothing is sent
            ServiceError: Includes InvalidResponseError for a malformed body
            TransportError
        """
        params = _options(ListParams, start=start, top=top)
        data = await self._transport.request(
            "GET",
            self.config.person_groups_url,
            params=params.to_query()
        )
        return _parse_list(PersonGroup, data)

    async def train_person_group(self, person_group_id: str) -> None:
        """
        Queue a training job for the group.

        Returns once the job is queued. Poll get_person_group_training_status()
        to see when it finishes.

        Raises:
            ServiceError, TransportError
        """
        await self._transport.request("POST", f"{self._group_url(person_group_id)}/train")
        logger.info(f"Queued training for person group {person_group_id}")

    async def update_person_group(
        self,
        person_group_id: str,
        name: Optional[str] = None,
        user_data: Optional[str] = None
    ) -> None:
        """
        Update a group's name and userData.

        Both fields are always sent; a missing one is sent as "".

        Raises:
            ServiceError, TransportError
        """
        await self._transport.request(
            "PATCH",
            self._group_url(person_group_id),
            json={
                "name": "" if name is None else name,
                "userData": "" if user_data is None else user_data,
            }
        )
        logger.info(f"Updated person group {person_group_id}")

    # ============================================================
    # Persons
    # ============================================================

    async def create_person(
        self,
        person_group_id: str,
        name: str,
        user_data: Optional[str] = None
    ) -> str:
        """
        Create a person with no faces in the group.

        Returns:
            The new personId

        Raises:
            ServiceError: Includes InvalidResponseError when no personId is returned
            TransportError
        """
        data = await self._transport.request(
            "POST",
            f"{self._group_url(person_group_id)}/persons",
            json=_body(name=name, userData=user_data)
        )
        person_id = _field(data, "personId")
        logger.info(f"Created person {person_id} in group {person_group_id}")
        return person_id

    async def list_persons_in_person_group(
        self,
        person_group_id: str,
        start: Optional[str] = None,
        top: Optional[int] = None
    ) -> List[Person]:
        """
        List persons in a group with their persisted face IDs.

        Raises:
            InvalidArgumentError: start/top of the wrong type; nothing is sent
            ServiceError: Includes InvalidResponseError for a malformed body
            TransportError
        """
        params = _options(ListParams, start=start, top=top)
        data = await self._transport.request(
            "GET",
            f"{self._group_url(person_group_id)}/persons",
            params=params.to_query()
        )
        return _parse_list(Person, data)

    async def add_person_face(
        self,
        person_group_id: str,
        person_id: str,
        user_data: Optional[str],
        image_url: str
    ) -> str:
        """
        Register a face image for a person.

        Args:
            person_group_id: Group containing the person
            person_id: Target person
            user_data: Data about the face, at most 1KB; omitted from the URL when empty
            image_url: Image with exactly one face, 1KB to 4MB

        Returns:
            The new persistedFaceId, which does not expire

        Raises:
            ServiceError: Includes InvalidResponseError when no persistedFaceId is returned
            TransportError
        """
        params = {"userData": user_data} if user_data else None
        data = await self._transport.request(
            "POST",
            f"{self._group_url(person_group_id)}/persons/{person_id}/persistedFaces",
            params=params,
            json={"url": image_url}
        )
        persisted_face_id = _field(data, "persistedFaceId")
        logger.info(f"Added face {persisted_face_id} to person {person_id} in group {person_group_id}")
        return persisted_face_id

    # ============================================================
    # Detection & Identification
    # ============================================================

    async def detect_face(self, image_url: str) -> List[DetectedFace]:
        """
        Detect faces in an image.

        Returns:
            Faces ordered by rectangle size, largest first; empty if none found

        Raises:
            ServiceError: Includes InvalidResponseError for a malformed body
            TransportError
        """
        data = await self._transport.request(
            "POST",
            self.config.detect_url,
            params={"returnFaceId": "true"},
            json={"url": image_url}
        )
        faces = _parse_list(DetectedFace, data)
        logger.debug(f"Detected {len(faces)} face(s) in {image_url}")
        return faces

    async def identify_face(
        self,
        person_group_id: str,
        face_ids: Iterable[str],
        confidence_threshold: Optional[float] = None
    ) -> List[IdentifyResult]:
        """
        Identify faces against a trained person group.

        Any number of faceIds is accepted. They are sent in batches of
        IDENTIFY_BATCH_SIZE, all batches at once, and the results come back
        in the order of face_ids. If any batch fails the whole call fails
        with that batch's error. face_ids itself is not modified.

        Args:
            person_group_id: Trained person group to search
            face_ids: faceIds from detect_face(); a single str is rejected
            confidence_threshold: Match cutoff in [0, 1] (default chosen by the service)

        Returns:
            One IdentifyResult per input faceId

        Raises:
            InvalidArgumentError: face_ids is a str, or the threshold is not
                a number; nothing is sent
            ServiceError: Includes InvalidResponseError for a malformed body
            TransportError
        """
        if isinstance(face_ids, str):
            raise InvalidArgumentError("face_ids must be a collection of faceIds, not a str", field="face_ids")

        options = _options(IdentifyOptions, confidence_threshold=confidence_threshold)
        batches = partition(list(face_ids), IDENTIFY_BATCH_SIZE)
        if not batches:
            return []

        if len(batches) > 1:
            logger.info(f"Identifying {sum(len(b) for b in batches)} faces in {len(batches)} batches")

        responses = await asyncio.gather(
            *(self._identify_batch(person_group_id, batch, options) for batch in batches)
        )
        return _parse_list(IdentifyResult, merge(responses))

    async def _identify_batch(
        self,
        person_group_id: str,
        face_ids: List[str],
        options: IdentifyOptions
    ) -> List[Dict[str, Any]]:
        data = await self._transport.request(
            "POST",
            self.config.identify_url,
            json=_body(
                personGroupId=person_group_id,
                faceIds=face_ids,
                confidenceThreshold=options.confidence_threshold
            )
        )
        return _as_list(data)
