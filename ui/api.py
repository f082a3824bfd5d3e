from typing import Any, Dict, List
from urllib.parse import quote

import requests

from server.models.learning_path import LearningPath, PathSummary
from ui.config import settings

PATHS_URL = f"{settings.API_BASE_URL}/paths"


def _segment(value: str) -> str:
    return quote(value, safe="")


def list_templates() -> List[Dict[str, Any]]:
    response = requests.get(f"{PATHS_URL}/templates", timeout=settings.REQUEST_TIMEOUT)
    response.raise_for_status()
    return response.json()


def get_template(template_id: str) -> LearningPath:
    response = requests.get(f"{PATHS_URL}/templates/{_segment(template_id)}", timeout=settings.REQUEST_TIMEOUT)
    response.raise_for_status()
    return LearningPath.model_validate(response.json())


def list_user_paths(user_id: str) -> List[PathSummary]:
    response = requests.get(f"{PATHS_URL}/user/{_segment(user_id)}", timeout=settings.REQUEST_TIMEOUT)
    response.raise_for_status()
    return [PathSummary.model_validate(item) for item in response.json()]


def get_path(path_id: str) -> LearningPath:
    response = requests.get(f"{PATHS_URL}/{_segment(path_id)}", timeout=settings.REQUEST_TIMEOUT)
    response.raise_for_status()
    return LearningPath.model_validate(response.json())


def save_path(user_id: str, path: LearningPath) -> LearningPath:
    response = requests.post(
        PATHS_URL,
        json={"userId": user_id, "path": path.model_dump(mode="json", by_alias=True)},
        timeout=settings.REQUEST_TIMEOUT,
    )
    response.raise_for_status()
    return LearningPath.model_validate(response.json())
