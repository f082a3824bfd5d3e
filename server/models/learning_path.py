from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ModuleStatus(str, Enum):
    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class ResourceType(str, Enum):
    VIDEO = "video"
    ARTICLE = "article"
    COURSE = "course"


class Resource(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: ResourceType
    title: str
    url: str


class LearningModule(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str
    status: ModuleStatus = ModuleStatus.NOT_STARTED
    estimated_hours: float = Field(default=0, ge=0, alias="estimatedHours")
    resources: List[Resource] = []


class LearningPath(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str
    description: str
    modules: List[LearningModule]
    is_saved: bool = Field(default=False, alias="isSaved")
    path_id: Optional[str] = Field(default=None, alias="pathId")
    user_id: Optional[str] = Field(default=None, alias="userId")

    def replace_module_status(self, module_id: str, status: ModuleStatus) -> "LearningPath":
        """Return a copy with one module's status replaced, matched by id."""
        modules = [
            module.model_copy(update={"status": ModuleStatus(status)}) if module.id == module_id else module
            for module in self.modules
        ]
        return self.model_copy(update={"modules": modules})

    def get_module(self, module_id: str) -> Optional[LearningModule]:
        return next((module for module in self.modules if module.id == module_id), None)


class ModuleStatusUpdate(BaseModel):
    status: ModuleStatus


class SavePathRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="userId")
    path: LearningPath


class PathSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    path_id: str = Field(alias="pathId")
    title: str
    description: str
    module_count: int = Field(alias="moduleCount")
    completed_count: int = Field(alias="completedCount")

    @classmethod
    def from_path(cls, path: LearningPath) -> "PathSummary":
        return cls(
            path_id=path.path_id,
            title=path.title,
            description=path.description,
            module_count=len(path.modules),
            completed_count=sum(1 for module in path.modules if module.status == ModuleStatus.COMPLETED),
        )
