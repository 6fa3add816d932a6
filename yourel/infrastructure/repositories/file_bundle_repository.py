from __future__ import annotations

"""File-system based bundle repository."""

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from yourel.application.errors.exceptions import ServerRequestsError
from yourel.domain.models.bundle import Bundle
from yourel.domain.repositories.bundle_repository import BundleRepository


class FileBundleRepository(BundleRepository):
    """基于单个JSON文件的站点集合仓储实现。"""

    def __init__(self, filepath: str | Path) -> None:
        self._filepath = Path(filepath)
        self._lock = asyncio.Lock()

    async def list(self) -> list[Bundle]:
        bundles = await asyncio.to_thread(self._read_sync)
        bundles.sort(key=lambda item: item.created_at, reverse=True)
        return bundles

    async def get_by_id(self, bundle_id: str) -> Optional[Bundle]:
        for bundle in await asyncio.to_thread(self._read_sync):
            if bundle.id == bundle_id:
                return bundle
        return None

    async def upsert(self, bundle: Bundle) -> Bundle:
        async with self._lock:
            bundles = await asyncio.to_thread(self._read_sync)
            bundles = [item for item in bundles if item.id != bundle.id]
            bundles.append(bundle)
            await asyncio.to_thread(self._write_sync, bundles)
        return bundle

    async def delete(self, bundle_id: str) -> bool:
        async with self._lock:
            bundles = await asyncio.to_thread(self._read_sync)
            remaining = [item for item in bundles if item.id != bundle_id]
            if len(remaining) == len(bundles):
                return False
            await asyncio.to_thread(self._write_sync, remaining)
        return True

    def _read_sync(self) -> list[Bundle]:
        if not self._filepath.exists():
            return []

        try:
            payload: Any = json.loads(self._filepath.read_text(encoding="utf-8") or "[]")
            if not isinstance(payload, list):
                raise ValueError("集合文件内容必须是数组")
            return [Bundle.model_validate(item) for item in payload]
        except (ValueError, PydanticValidationError) as e:
            raise ServerRequestsError(f"集合文件解析失败: {self._filepath}") from e

    def _write_sync(self, bundles: list[Bundle]) -> None:
        self._filepath.parent.mkdir(parents=True, exist_ok=True)
        self._filepath.write_text(
            json.dumps(
                [bundle.model_dump(mode="json") for bundle in bundles],
                ensure_ascii=False,
                indent=2,
            ),
            encoding="utf-8",
        )
