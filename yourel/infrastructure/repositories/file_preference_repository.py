from __future__ import annotations

"""File-system based preference repository."""

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from yourel.application.errors.exceptions import ServerRequestsError
from yourel.domain.models.preference import UserPreference
from yourel.domain.repositories.preference_repository import (
    PreferenceRepository,
    PreferenceUpdater,
)


class FilePreferenceRepository(PreferenceRepository):
    """基于单个JSON文件的用户偏好仓储实现，文件内容为偏好记录数组。"""

    def __init__(self, filepath: str | Path) -> None:
        self._filepath = Path(filepath)
        self._lock = asyncio.Lock()

    async def list(self) -> list[UserPreference]:
        return await asyncio.to_thread(self._read_sync)

    async def get_by_user_id(self, user_id: str) -> Optional[UserPreference]:
        for record in await self.list():
            if record.user_id == user_id:
                return record
        return None

    async def upsert(self, preference: UserPreference) -> UserPreference:
        return await self.update(preference.user_id, lambda _: preference)

    async def update(self, user_id: str, updater: PreferenceUpdater) -> UserPreference:
        async with self._lock:
            return await asyncio.to_thread(self._update_sync, user_id, updater)

    def _read_sync(self) -> list[UserPreference]:
        if not self._filepath.exists():
            return []

        try:
            payload: Any = json.loads(self._filepath.read_text(encoding="utf-8") or "[]")
            if not isinstance(payload, list):
                raise ValueError("偏好文件内容必须是数组")
            return [UserPreference.model_validate(item) for item in payload]
        except (ValueError, PydanticValidationError) as e:
            raise ServerRequestsError(f"偏好文件解析失败: {self._filepath}") from e

    def _update_sync(self, user_id: str, updater: PreferenceUpdater) -> UserPreference:
        records = self._read_sync()
        current = next(
            (r for r in records if r.user_id == user_id),
            UserPreference(user_id=user_id),
        )
        updated = updater(current)

        records = [r for r in records if r.user_id != user_id]
        records.append(updated)
        self._write_sync(records)
        return updated

    def _write_sync(self, records: list[UserPreference]) -> None:
        self._filepath.parent.mkdir(parents=True, exist_ok=True)
        self._filepath.write_text(
            json.dumps(
                [record.model_dump(mode="json") for record in records],
                ensure_ascii=False,
                indent=2,
            ),
            encoding="utf-8",
        )
