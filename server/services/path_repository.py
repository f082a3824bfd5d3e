import logging
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from server.database import db
from server.config import settings
from server.models.learning_path import LearningPath, ModuleStatus, PathSummary

logger = logging.getLogger(__name__)


class PathRepository:
    """Saved learning paths stored one document per path."""

    def __init__(self, collection):
        self.collection = collection

    async def save_path(self, user_id: str, path: LearningPath) -> LearningPath:
        path_id = uuid.uuid4().hex
        saved = path.model_copy(update={"is_saved": True, "path_id": path_id, "user_id": user_id})
        now = datetime.now(timezone.utc)
        document = saved.model_dump(mode="json")
        document.update({"created_at": now, "updated_at": now})
        await self.collection.insert_one(document)
        logger.info(f"Path saved: path_id={path_id}, user_id={user_id}")
        return saved

    async def get_path(self, path_id: str) -> Optional[LearningPath]:
        document = await self.collection.find_one({"path_id": path_id})
        if not document:
            return None
        return LearningPath.model_validate(document)

    async def list_paths(self, user_id: str) -> List[PathSummary]:
        cursor = self.collection.find({"user_id": user_id}).sort("created_at", -1)
        documents = await cursor.to_list(length=None)
        return [PathSummary.from_path(LearningPath.model_validate(document)) for document in documents]

    async def update_module_status(self, path_id: str, module_id: str, status: ModuleStatus) -> bool:
        """Set one module's status; returns False when path or module is unknown."""
        result = await self.collection.update_one(
            {"path_id": path_id, "modules.id": module_id},
            {
                "$set": {
                    "modules.$.status": ModuleStatus(status).value,
                    "updated_at": datetime.now(timezone.utc),
                }
            },
        )
        return result.matched_count > 0

    async def delete_path(self, path_id: str) -> bool:
        result = await self.collection.delete_one({"path_id": path_id})
        return result.deleted_count > 0


def get_path_repository() -> PathRepository:
    return PathRepository(db.get_collection(settings.PATH_COLLECTION))
