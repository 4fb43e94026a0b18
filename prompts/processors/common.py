"""Helpers shared by the format handlers."""

import aiofiles


async def read_text(path: str) -> str:
    async with aiofiles.open(path, encoding="utf-8") as handle:
        return await handle.read()
