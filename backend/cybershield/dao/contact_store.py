"""
File-backed contact store.

WHAT: Persists contact submissions as one JSON array in a single file and
returns redacted summaries for the admin view.

WHY: The site receives a handful of submissions a day. A flat JSON file
needs no database server and can be inspected or exported by hand.

HOW: Every operation reads the whole file, and append() rewrites it
(pretty-printed, 2-space indent). Blocking file I/O runs in Starlette's
threadpool so the event loop keeps serving other requests.

Concurrency: append() is a read-modify-write with no lock by default.
Two overlapping appends can read the same array, so one record may be lost
or two records may get the same id. The race is accepted; pass
serialize_writes=True to put one asyncio.Lock around appends
within this process. Nothing protects against other processes.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from starlette.concurrency import run_in_threadpool

from cybershield.core.exceptions import StorageError
from cybershield.schemas.contact import (
    ContactRecord,
    ContactSummary,
    SUMMARY_ELLIPSIS,
    SUMMARY_MESSAGE_LENGTH,
)


logger = logging.getLogger(__name__)


def summarize(record: Dict[str, Any]) -> ContactSummary:
    """
    Build the redacted projection of a stored record.

    ip and userAgent are dropped; message is truncated to
    SUMMARY_MESSAGE_LENGTH characters and always followed by the ellipsis.
    """
    message = str(record.get("message") or "")
    return ContactSummary(
        id=record["id"],
        name=record.get("name"),
        email=record.get("email"),
        company=record.get("company"),
        service=record.get("service"),
        message=message[:SUMMARY_MESSAGE_LENGTH] + SUMMARY_ELLIPSIS,
        nda=bool(record.get("nda", False)),
        timestamp=record.get("timestamp"),
    )


class ContactStore:
    """
    Contact Store over a single JSON file.

    Args:
        path: Location of the JSON array file
        serialize_writes: Serialize append() with an in-process lock
    """

    def __init__(self, path: Path, serialize_writes: bool = False):
        self.path = Path(path)
        self.serialize_writes = serialize_writes
        self._write_lock: Optional[asyncio.Lock] = asyncio.Lock() if serialize_writes else None

    # ------------------------------------------------------------------
    # Blocking helpers (run in the threadpool)
    # ------------------------------------------------------------------

    def _ensure_initialized_sync(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self.path.write_text(json.dumps([]), encoding="utf-8")
            logger.info(f"Created contact store at {self.path}")

    def _read_all_sync(self) -> List[Dict[str, Any]]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(detail=f"Could not read contact store: {e}") from e
        except UnicodeDecodeError as e:
            raise StorageError(detail=f"Contact store is not valid UTF-8: {e}") from e

        try:
            contacts = json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(detail=f"Contact store is not valid JSON: {e}") from e

        if not isinstance(contacts, list):
            raise StorageError(
                detail=f"Contact store must hold a JSON array, found {type(contacts).__name__}"
            )
        return contacts

    def _write_all_sync(self, contacts: List[Dict[str, Any]]) -> None:
        try:
            self.path.write_text(
                json.dumps(contacts, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except OSError as e:
            raise StorageError(detail=f"Could not write contact store: {e}") from e

    def _append_sync(self, fields: Dict[str, Any]) -> ContactRecord:
        self._ensure_initialized_sync()
        contacts = self._read_all_sync()

        # WHY: id is positional. It is only unique while appends are serialized.
        record = ContactRecord(id=len(contacts) + 1, **fields)
        contacts.append(record.model_dump(by_alias=True))

        self._write_all_sync(contacts)
        return record

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def ensure_initialized(self) -> None:
        """
        Create the storage directory and an empty array file if missing.

        Raises:
            StorageError: If the directory or file cannot be created
        """
        try:
            await run_in_threadpool(self._ensure_initialized_sync)
        except OSError as e:
            raise StorageError(detail=f"Could not initialize contact store: {e}") from e

    async def append(self, fields: Dict[str, Any]) -> ContactRecord:
        """
        Append a new record, assigning id = current record count + 1.

        Args:
            fields: Every ContactRecord field except id

        Returns:
            The stored record

        Raises:
            StorageError: If the file cannot be read, parsed, or written
        """
        try:
            if self._write_lock is None:
                return await run_in_threadpool(self._append_sync, fields)
            async with self._write_lock:
                return await run_in_threadpool(self._append_sync, fields)
        except OSError as e:
            raise StorageError(detail=f"Could not update contact store: {e}") from e

    async def list(self) -> List[ContactSummary]:
        """
        Return the redacted projection of every record, in file order.

        Raises:
            StorageError: If the file cannot be read or parsed
        """
        await self.ensure_initialized()
        contacts = await run_in_threadpool(self._read_all_sync)
        try:
            return [summarize(record) for record in contacts]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise StorageError(detail=f"Malformed contact record: {e}") from e
