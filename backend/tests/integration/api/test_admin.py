"""
Integration tests for the admin contacts API.

WHAT: GET /api/admin/contacts.

WHY: The listing is unauthenticated, so it must never expose requester IP
or user agent, and must keep messages short.
"""

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from cybershield.core.config import Settings
from cybershield.main import create_app
from tests.factories import ContactPayloadFactory, ContactRecordFactory


SUMMARY_KEYS = {"id", "name", "email", "company", "service", "message", "nda", "timestamp"}


class TestListContacts:

    @pytest.mark.asyncio
    async def test_empty_store_creates_file(self, client: AsyncClient, contacts_file: Path):
        response = await client.get("/api/admin/contacts")

        assert response.status_code == 200
        assert response.json() == []
        assert contacts_file.exists()

    @pytest.mark.asyncio
    async def test_example_submission_round_trip(self, client: AsyncClient):
        await client.post(
            "/api/contact", json={"name": "Alice", "email": "a@b.com", "message": "hello"}
        )

        response = await client.get("/api/admin/contacts")

        contacts = response.json()
        assert len(contacts) == 1
        assert contacts[0]["id"] == 1
        assert contacts[0]["company"] == "Not specified"
        assert contacts[0]["message"] == "hello..."

    @pytest.mark.asyncio
    async def test_never_exposes_ip_or_user_agent(self, client: AsyncClient):
        for i in range(3):
            await client.post(
                "/api/contact",
                json=ContactPayloadFactory.build(name=f"Visitor {i}"),
                headers={"User-Agent": "secret-agent"},
            )

        contacts = (await client.get("/api/admin/contacts")).json()

        for contact in contacts:
            assert set(contact) == SUMMARY_KEYS
        assert "secret-agent" not in str(contacts)
        assert "127.0.0.1" not in str(contacts)

    @pytest.mark.asyncio
    async def test_truncates_long_messages(self, client: AsyncClient):
        await client.post("/api/contact", json=ContactPayloadFactory.build(message="m" * 500))

        contact = (await client.get("/api/admin/contacts")).json()[0]

        assert len(contact["message"]) == 103
        assert contact["message"].endswith("...")

    @pytest.mark.asyncio
    async def test_ids_match_submission_order(self, client: AsyncClient):
        names = [f"Visitor {i}" for i in range(1, 6)]
        for name in names:
            await client.post("/api/contact", json=ContactPayloadFactory.build(name=name))

        contacts = (await client.get("/api/admin/contacts")).json()

        assert [c["id"] for c in contacts] == [1, 2, 3, 4, 5]
        assert [c["name"] for c in contacts] == names

    @pytest.mark.asyncio
    async def test_lists_records_written_by_other_tools(
        self, client: AsyncClient, contacts_file: Path
    ):
        ContactRecordFactory.write_file(
            contacts_file, [ContactRecordFactory.build(1, nda=True, company="Acme")]
        )

        contact = (await client.get("/api/admin/contacts")).json()[0]

        assert contact["nda"] is True
        assert contact["company"] == "Acme"


class TestListContactsStorageFailure:

    @pytest.mark.asyncio
    async def test_corrupt_store_returns_500(self, client: AsyncClient, contacts_file: Path):
        contacts_file.parent.mkdir(parents=True, exist_ok=True)
        contacts_file.write_text("[{]", encoding="utf-8")

        response = await client.get("/api/admin/contacts")

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to retrieve contacts"

    @pytest.mark.asyncio
    async def test_undecodable_store_returns_500(self, client: AsyncClient, contacts_file: Path):
        contacts_file.parent.mkdir(parents=True, exist_ok=True)
        contacts_file.write_bytes(b"[\xff\xfe]")

        response = await client.get("/api/admin/contacts")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Failed to retrieve contacts"
        assert body["code"] == "StorageError"

    @pytest.mark.asyncio
    async def test_detail_hidden_outside_development(self, settings: Settings, contacts_file: Path):
        app = create_app(settings.model_copy(update={"ENVIRONMENT": "production"}))
        contacts_file.parent.mkdir(parents=True, exist_ok=True)
        contacts_file.write_text("[{]", encoding="utf-8")

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            response = await ac.get("/api/admin/contacts")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Failed to retrieve contacts"
        assert "message" not in body
