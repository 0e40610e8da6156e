"""
Person and persisted face operation tests.
"""

import logging

import pytest

from conftest import BASE_URL, request_json

PERSONS_URL = f"{BASE_URL}/persongroups/players/persons"


@pytest.mark.asyncio
async def test_create_person_returns_id(client, service):
    service.respond_json({"personId": "25985303-c537-4467-b41d-bdb45cd95ca1"})

    person_id = await client.create_person("players", "Ana", "left side")

    assert person_id == "25985303-c537-4467-b41d-bdb45cd95ca1"
    assert service.last.method == "POST"
    assert str(service.last.url) == PERSONS_URL
    assert request_json(service.last) == {"name": "Ana", "userData": "left side"}


@pytest.mark.asyncio
async def test_create_person_without_user_data(client, service):
    service.respond_json({"personId": "p1"})
    await client.create_person("players", "Ana")
    assert request_json(service.last) == {"name": "Ana"}


@pytest.mark.asyncio
async def test_list_persons_defaults(client, service):
    service.respond_json([
        {
            "personId": "p1",
            "name": "Ana",
            "userData": None,
            "persistedFaceIds": ["f1", "f2"],
        },
        {"personId": "p2", "name": "Ben", "persistedFaceIds": []},
    ])

    persons = await client.list_persons_in_person_group("players")

    assert str(service.last.url) == f"{PERSONS_URL}?start=&top=1000"
    assert [p.person_id for p in persons] == ["p1", "p2"]
    assert persons[0].persisted_face_ids == ["f1", "f2"]
    assert persons[0].face_count == 2
    assert persons[1].face_count == 0


@pytest.mark.asyncio
async def test_list_persons_paging(client, service):
    service.respond_json([])
    await client.list_persons_in_person_group("players", start="p1", top=50)
    assert str(service.last.url) == f"{PERSONS_URL}?start=p1&top=50"


@pytest.mark.asyncio
async def test_add_person_face_without_user_data(client, service):
    service.respond_json({"persistedFaceId": "pf-1"})

    face_id = await client.add_person_face("players", "p1", None, "https://img.example/ana.jpg")

    assert face_id == "pf-1"
    assert str(service.last.url) == f"{PERSONS_URL}/p1/persistedFaces"
    assert "userData" not in service.last.url.params
    assert request_json(service.last) == {"url": "https://img.example/ana.jpg"}


@pytest.mark.asyncio
async def test_add_person_face_empty_user_data_omitted(client, service):
    service.respond_json({"persistedFaceId": "pf-1"})
    await client.add_person_face("players", "p1", "", "https://img.example/ana.jpg")
    assert str(service.last.url) == f"{PERSONS_URL}/p1/persistedFaces"


@pytest.mark.asyncio
async def test_add_person_face_with_user_data(client, service):
    service.respond_json({"persistedFaceId": "pf-2"})

    await client.add_person_face("players", "p1", "x", "https://img.example/ana.jpg")

    assert str(service.last.url).endswith("/persistedFaces?userData=x")


@pytest.mark.asyncio
async def test_add_person_face_logs(client, service, caplog):
    service.respond_json({"persistedFaceId": "pf-3"})

    with caplog.at_level(logging.INFO, logger="mscs_face.services.face_client"):
        await client.add_person_face("players", "p1", None, "https://img.example/ana.jpg")

    assert "Added face pf-3 to person p1 in group players" in caplog.text
