"""
Person group operation tests.
"""

import logging

import httpx
import pytest

from conftest import API_KEY, BASE_URL, request_json
from mscs_face import PersonGroup, TrainingState

GROUPS_URL = f"{BASE_URL}/persongroups"


@pytest.mark.asyncio
async def test_create_person_group(client, service):
    result = await client.create_person_group("players", "Players", "season 2024")

    request = service.last
    assert result is None
    assert request.method == "PUT"
    assert str(request.url) == f"{GROUPS_URL}/players"
    assert request.headers["Ocp-Apim-Subscription-Key"] == API_KEY
    assert request.headers["Content-Type"] == "application/json"
    assert request_json(request) == {"name": "Players", "userData": "season 2024"}


@pytest.mark.asyncio
async def test_create_person_group_without_user_data(client, service):
    await client.create_person_group("players", "Players")
    assert request_json(service.last) == {"name": "Players"}


@pytest.mark.asyncio
async def test_delete_person_group(client, service):
    assert await client.delete_person_group("players") is None
    assert service.last.method == "DELETE"
    assert str(service.last.url) == f"{GROUPS_URL}/players"
    assert service.last.content == b""


@pytest.mark.asyncio
async def test_get_person_group(client, service):
    service.respond_json({"personGroupId": "players", "name": "Players", "userData": None})

    group = await client.get_person_group("players")

    assert service.last.method == "GET"
    assert str(service.last.url) == f"{GROUPS_URL}/players"
    assert isinstance(group, PersonGroup)
    assert group.person_group_id == "players"
    assert group.name == "Players"
    assert group.user_data is None


@pytest.mark.asyncio
async def test_get_person_group_training_status(client, service):
    service.respond_json({
        "status": "running",
        "createdDateTime": "2024-03-01T10:00:00Z",
        "lastActionDateTime": None,
        "message": None,
    })

    status = await client.get_person_group_training_status("players")

    assert str(service.last.url) == f"{GROUPS_URL}/players/training"
    assert status.status == TrainingState.RUNNING
    assert not status.is_finished


@pytest.mark.asyncio
async def test_list_person_groups_defaults(client, service):
    service.respond_json([])

    groups = await client.list_person_groups()

    url = service.last.url
    assert groups == []
    assert str(url) == f"{GROUPS_URL}?start=&top=1000"
    assert url.params["start"] == ""
    assert url.params["top"] == "1000"


@pytest.mark.asyncio
async def test_list_person_groups_paging(client, service):
    service.respond_json([
        {"personGroupId": "b", "name": "B"},
        {"personGroupId": "c", "name": "C", "userData": "x"},
    ])

    groups = await client.list_person_groups(start="a", top=2)

    assert str(service.last.url) == f"{GROUPS_URL}?start=a&top=2"
    assert [g.person_group_id for g in groups] == ["b", "c"]
    assert groups[1].user_data == "x"


@pytest.mark.asyncio
async def test_train_person_group(client, service):
    service.handler = lambda request: httpx.Response(202)

    assert await client.train_person_group("players") is None
    assert service.last.method == "POST"
    assert str(service.last.url) == f"{GROUPS_URL}/players/train"


@pytest.mark.asyncio
async def test_update_person_group_fills_missing_fields(client, service):
    await client.update_person_group("players")

    assert service.last.method == "PATCH"
    assert str(service.last.url) == f"{GROUPS_URL}/players"
    assert request_json(service.last) == {"name": "", "userData": ""}


@pytest.mark.asyncio
async def test_update_person_group_partial(client, service):
    await client.update_person_group("players", name="Renamed")
    assert request_json(service.last) == {"name": "Renamed", "userData": ""}


@pytest.mark.asyncio
async def test_update_person_group_logs(client, service, caplog):
    with caplog.at_level(logging.INFO, logger="mscs_face.services.face_client"):
        await client.update_person_group("players", name="Renamed")

    assert "Updated person group players" in caplog.text
