"""Project API routes."""

from fastapi import APIRouter, Depends, status

from schema_designer.api.deps import get_project_store
from schema_designer.models.schemas import (
    ProjectCreate,
    ProjectCreated,
    ProjectResponse,
    ProjectUpdate,
    ProjectUpdated,
)
from schema_designer.services import ProjectStore

router = APIRouter(prefix="/projects", tags=["projects"])


@router.post("", response_model=ProjectCreated, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_data: ProjectCreate,
    store: ProjectStore = Depends(get_project_store),
):
    """Create a new project."""
    project_id = await store.create(project_data)
    return ProjectCreated(id=project_id)


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: str,
    store: ProjectStore = Depends(get_project_store),
):
    """Get a project by ID."""
    return await store.read(project_id)


@router.put("/{project_id}", response_model=ProjectUpdated)
async def update_project(
    project_id: str,
    project_data: ProjectUpdate,
    store: ProjectStore = Depends(get_project_store),
):
    """Update a project's name and schema."""
    await store.update(project_id, project_data)
    return ProjectUpdated()
