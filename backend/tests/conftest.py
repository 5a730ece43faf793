"""
Pytest configuration and fixtures.

WHY: Fixtures provide reusable test setup/teardown logic, reducing
duplication and ensuring consistent test environments.
"""

from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from cybershield.core.config import Settings
from cybershield.dao.contact_store import ContactStore
from cybershield.main import create_app
from cybershield.services.notification_service import NotificationService
from tests.factories import INDEX_HTML, RecordingNotificationProvider


@pytest.fixture
def frontend_dir(tmp_path: Path) -> Path:
    """
    Minimal frontend build: an entry document and one static asset.

    WHY: The catch-all route serves files from disk, so tests need a
    frontend directory they control.
    """
    root = tmp_path / "frontend"
    (root / "assets").mkdir(parents=True)
    (root / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (root / "assets" / "app.js").write_text("console.log('cybershield');", encoding="utf-8")
    return root


@pytest.fixture
def settings(tmp_path: Path, frontend_dir: Path) -> Settings:
    """
    Settings isolated to the test's tmp directory.

    WHY: Each test gets its own contacts file, so record ids always start at 1
    and no test sees another test's submissions. _env_file=None keeps a
    developer's .env out of the test run.
    """
    return Settings(
        _env_file=None,
        DATA_DIR=tmp_path / "data",
        FRONTEND_DIR=frontend_dir,
        ENVIRONMENT="development",
    )


@pytest.fixture
def notifications() -> RecordingNotificationProvider:
    """Notification provider that records what the app sends."""
    return RecordingNotificationProvider()


@pytest.fixture
def app(settings: Settings, notifications: RecordingNotificationProvider) -> FastAPI:
    app = create_app(settings)
    app.state.notifications = NotificationService(notifications)
    return app


@pytest.fixture
def contacts_file(settings: Settings) -> Path:
    return settings.contacts_file


@pytest.fixture
def store(contacts_file: Path) -> ContactStore:
    """A contact store over the test's contacts file."""
    return ContactStore(contacts_file)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test HTTP client.

    WHY: AsyncClient allows testing FastAPI endpoints without running
    a real server, making tests faster and more reliable.

    Yields:
        AsyncClient: HTTP client for making test requests
    """
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

