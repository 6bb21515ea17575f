"""JSON file backed store of issued tokens."""
from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Dict

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from ..exceptions import StorageError

LOGGER = logging.getLogger(__name__)

FILE_MODE = 0o644


class TokenRecord(BaseModel):
    """Token issued to a user for a given guild."""

    model_config = ConfigDict(frozen=True)

    token: str
    guild_id: str


TokenMap = Dict[str, TokenRecord]
_TOKEN_MAP_ADAPTER: TypeAdapter[TokenMap] = TypeAdapter(TokenMap)


class TokenStore:
    """Mapping of user id to :class:`TokenRecord` persisted as one JSON object.

    The file is the only source of truth: every call to :meth:`load` reads it
    again. Request handlers must go through :meth:`transaction`, which holds the
    store lock for the whole load, mutate and save cycle.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = asyncio.Lock()

    def load(self) -> TokenMap:
        """Read the backing file; a missing file is an empty store."""

        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return {}
        except OSError as exc:
            LOGGER.error("Failed to read token store %s: %s", self.path, exc)
            raise StorageError("Error reading file", cause=exc) from exc

        try:
            return _TOKEN_MAP_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            LOGGER.error("Token store %s is corrupted: %s", self.path, exc)
            raise StorageError("Error parsing file", cause=exc) from exc

    def save(self, records: TokenMap) -> None:
        """Replace the backing file with ``records`` via a temporary file."""

        payload = _TOKEN_MAP_ADAPTER.dump_json(records)
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=f".{self.path.name}.", suffix=".tmp")
        except OSError as exc:
            LOGGER.error("Failed to prepare write of token store %s: %s", self.path, exc)
            raise StorageError("Error writing to file", cause=exc) from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.chmod(tmp_path, FILE_MODE)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            LOGGER.error("Failed to write token store %s: %s", self.path, exc)
            tmp_path.unlink(missing_ok=True)
            raise StorageError("Error writing to file", cause=exc) from exc

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[TokenMap]:
        """Yield the current mapping under the store lock and persist changes.

        The mapping is written back only when the block exits cleanly and the
        contents differ from what was loaded.
        """

        async with self._lock:
            records = await asyncio.to_thread(self.load)
            original = dict(records)
            yield records
            if records != original:
                await self._save_to_completion(records)

    async def _save_to_completion(self, records: TokenMap) -> None:
        """Run :meth:`save` in a worker thread and wait for it even when cancelled.

        The caller keeps the store lock until the write has finished, so a
        cancelled request cannot let a late replace clobber the next save.
        """

        task = asyncio.ensure_future(asyncio.to_thread(self.save, records))
        cancelled = False
        while not task.done():
            try:
                await asyncio.shield(task)
            except asyncio.CancelledError:
                cancelled = True
        if cancelled:
            task.result()
            raise asyncio.CancelledError()


__all__ = ["TokenRecord", "TokenMap", "TokenStore"]
