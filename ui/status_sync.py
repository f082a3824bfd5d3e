import logging
from enum import Enum
from typing import Callable

from server.models.learning_path import LearningPath, ModuleStatus
from ui.notifications import Severity
from ui.persistence import PathStore

logger = logging.getLogger(__name__)

PERSISTENCE_ERROR_MESSAGE = "Failed to save your progress. Please try again."
UNEXPECTED_FAULT_MESSAGE = "An unexpected error occurred while saving your progress."

StatusChangeHandler = Callable[[str, ModuleStatus], None]
Notifier = Callable[[str, str, Severity], None]


class SyncOutcome(str, Enum):
    LOCAL_ONLY = "local-only"
    SAVED = "saved"
    FAILED = "failed"
    FAULTED = "faulted"


class StatusSyncController:
    """Applies a status change locally, then makes one attempt to persist it.

    The local change is never rolled back when persistence fails; the user
    only gets a notification.
    """

    def __init__(self, on_module_status_change: StatusChangeHandler, store: PathStore, notify: Notifier):
        self.on_module_status_change = on_module_status_change
        self.store = store
        self.notify = notify

    async def change_status(self, module_id: str, new_status: ModuleStatus, path: LearningPath) -> SyncOutcome:
        self.on_module_status_change(module_id, new_status)

        if not path.is_saved or not path.path_id:
            return SyncOutcome.LOCAL_ONLY

        try:
            logger.info(
                f"Saving module status: module_id={module_id}, status={ModuleStatus(new_status).value}, "
                f"path_id={path.path_id}"
            )
            result = await self.store.update_module_status(path.path_id, module_id, new_status)
        except Exception:
            logger.exception(f"Unexpected error saving status of module {module_id}")
            self.notify("Error", UNEXPECTED_FAULT_MESSAGE, Severity.DESTRUCTIVE)
            return SyncOutcome.FAULTED

        if not result.ok:
            logger.error(f"Failed to save module status: {result.error}")
            self.notify("Error", PERSISTENCE_ERROR_MESSAGE, Severity.DESTRUCTIVE)
            return SyncOutcome.FAILED

        logger.info(f"Module status saved: module_id={module_id}")
        return SyncOutcome.SAVED
