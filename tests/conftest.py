"""Shared fixtures for bup tests."""

import pytest

from model import Directory, DirectoryStore


@pytest.fixture
def photos():
    """The Photos directory with one source."""
    return Directory(name="Photos", sources=["/a"], excludes=[])


@pytest.fixture
def photos_store(photos):
    """Store holding only Photos."""
    return DirectoryStore([photos])


@pytest.fixture
def full_store():
    """Store with several directories, sources and excludes."""
    return DirectoryStore(
        [
            Directory(name="Photos", sources=["/home/user/photos"], excludes=["*.tmp"]),
            Directory(
                name="Code",
                sources=["/home/user/src", "/home/user/notes"],
                excludes=["node_modules", "*.pyc", ".venv"],
            ),
            Directory(name="Music", sources=["/media/music"], excludes=[]),
        ]
    )


class FakeFolderDialog:
    """Folder dialog returning a fixed answer, optionally after release()."""

    def __init__(self, result: str | None = None, wait: bool = False) -> None:
        import asyncio

        self.result = result
        self.calls = 0
        self._released = asyncio.Event()
        if not wait:
            self._released.set()

    def release(self) -> None:
        self._released.set()

    async def choose_folder(self, app) -> str | None:
        self.calls += 1
        await self._released.wait()
        return self.result


@pytest.fixture
def fake_dialog_factory():
    """Factory for FakeFolderDialog instances."""
    return FakeFolderDialog
