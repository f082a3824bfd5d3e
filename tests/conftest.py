from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from server.main import app
from server.models.learning_path import LearningModule, LearningPath, ModuleStatus, PathSummary, Resource
from server.services.path_repository import get_path_repository


class RecordingContainer:
    """Stands in for the Streamlit API and records every element call."""

    def __init__(self, calls: list[tuple[str, tuple, dict]] | None = None, name: str = "root") -> None:
        self.calls = [] if calls is None else calls
        self.name = name

    def _record(self, method: str, *args: Any, **kwargs: Any) -> None:
        self.calls.append((method, args, kwargs))

    def header(self, *args: Any, **kwargs: Any) -> None:
        self._record("header", *args, **kwargs)

    def subheader(self, *args: Any, **kwargs: Any) -> None:
        self._record("subheader", *args, **kwargs)

    def markdown(self, *args: Any, **kwargs: Any) -> None:
        self._record("markdown", *args, **kwargs)

    def caption(self, *args: Any, **kwargs: Any) -> None:
        self._record("caption", *args, **kwargs)

    def button(self, *args: Any, **kwargs: Any) -> bool:
        self._record("button", *args, **kwargs)
        return False

    def container(self, **kwargs: Any) -> RecordingContainer:
        self._record("container", **kwargs)
        return RecordingContainer(self.calls, name=f"{self.name}.container")

    def columns(self, spec: Any) -> list[RecordingContainer]:
        self._record("columns", spec)
        count = spec if isinstance(spec, int) else len(spec)
        return [RecordingContainer(self.calls, name=f"{self.name}.col{i}") for i in range(count)]

    def of(self, method: str) -> list[tuple[tuple, dict]]:
        return [(args, kwargs) for name, args, kwargs in self.calls if name == method]


class FakePathRepository:
    """In-memory stand-in for the Mongo-backed repository."""

    def __init__(self) -> None:
        self.paths: dict[str, LearningPath] = {}
        self._next_id = 1

    async def save_path(self, user_id: str, path: LearningPath) -> LearningPath:
        path_id = f"p{self._next_id}"
        self._next_id += 1
        saved = path.model_copy(update={"is_saved": True, "path_id": path_id, "user_id": user_id})
        self.paths[path_id] = saved
        return saved

    async def get_path(self, path_id: str) -> LearningPath | None:
        return self.paths.get(path_id)

    async def list_paths(self, user_id: str) -> list[PathSummary]:
        return [PathSummary.from_path(path) for path in self.paths.values() if path.user_id == user_id]

    async def update_module_status(self, path_id: str, module_id: str, status: ModuleStatus) -> bool:
        path = self.paths.get(path_id)
        if path is None or path.get_module(module_id) is None:
            return False
        self.paths[path_id] = path.replace_module_status(module_id, status)
        return True

    async def delete_path(self, path_id: str) -> bool:
        return self.paths.pop(path_id, None) is not None


def make_path(is_saved: bool = True, path_id: str | None = "p1") -> LearningPath:
    return LearningPath(
        title="Python Foundations",
        description="From first script to a small package.",
        is_saved=is_saved,
        path_id=path_id,
        modules=[
            LearningModule(
                id="m1",
                title="Syntax",
                description="Variables and types.",
                estimated_hours=6,
                resources=[
                    Resource(type="article", title="Tutorial", url="https://docs.python.org/3/tutorial/"),
                    Resource(type="video", title="Intro video", url="https://example.com/intro"),
                ],
            ),
            LearningModule(
                id="m2",
                title="Control Flow",
                description="Loops and functions.",
                status=ModuleStatus.IN_PROGRESS,
                estimated_hours=8.5,
            ),
        ],
    )


@pytest.fixture
def streamlit_recorder() -> RecordingContainer:
    return RecordingContainer()


@pytest.fixture
def repository() -> FakePathRepository:
    return FakePathRepository()


@pytest.fixture
def client(repository: FakePathRepository):
    app.dependency_overrides[get_path_repository] = lambda: repository
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def path_factory():
    return make_path
