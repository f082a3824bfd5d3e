from fastapi import APIRouter, Depends, HTTPException
from typing import List
from server.models.learning_path import LearningPath, ModuleStatusUpdate, PathSummary, SavePathRequest
from server.services.path_loader import list_path_templates, load_path_template
from server.services.path_repository import PathRepository, get_path_repository
import logging

router = APIRouter(prefix="/paths", tags=["Learning Paths"])

logger = logging.getLogger(__name__)


@router.get("/templates")
async def get_path_templates():
    """
    Get list of bundled path templates
    """
    try:
        return list_path_templates()
    except Exception as e:
        logger.error(f"Error listing path templates: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/templates/{template_id}", response_model=LearningPath)
async def get_path_template(template_id: str):
    """
    Get a template as an unsaved learning path
    """
    try:
        return load_path_template(template_id)
    except FileNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Error loading path template {template_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("", response_model=LearningPath, status_code=201)
async def save_path(request: SavePathRequest, repository: PathRepository = Depends(get_path_repository)):
    try:
        return await repository.save_path(request.user_id, request.path)
    except Exception as e:
        logger.error(f"Error saving path for user {request.user_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/user/{user_id:path}", response_model=List[PathSummary])
async def get_user_paths(user_id: str, repository: PathRepository = Depends(get_path_repository)):
    """
    Get the saved paths of a user, newest first
    """
    try:
        return await repository.list_paths(user_id)
    except Exception as e:
        logger.error(f"Error listing paths for user {user_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/{path_id}", response_model=LearningPath)
async def get_path(path_id: str, repository: PathRepository = Depends(get_path_repository)):
    try:
        path = await repository.get_path(path_id)
    except Exception as e:
        logger.error(f"Error loading path {path_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
    if path is None:
        raise HTTPException(status_code=404, detail=f"Path {path_id} not found")
    return path


@router.patch("/{path_id}/modules/{module_id:path}/status")
async def update_module_status(
    path_id: str,
    module_id: str,
    update: ModuleStatusUpdate,
    repository: PathRepository = Depends(get_path_repository),
):
    logger.info(f"Updating module status: path_id={path_id}, module_id={module_id}, status={update.status.value}")
    try:
        updated = await repository.update_module_status(path_id, module_id, update.status)
    except Exception as e:
        logger.error(f"Error updating module status: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
    if not updated:
        raise HTTPException(status_code=404, detail=f"Module {module_id} not found in path {path_id}")
    return {"ok": True}


@router.delete("/{path_id}")
async def delete_path(path_id: str, repository: PathRepository = Depends(get_path_repository)):
    try:
        deleted = await repository.delete_path(path_id)
    except Exception as e:
        logger.error(f"Error deleting path {path_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Path {path_id} not found")
    return {"ok": True}
