"""Project endpoints - owner-scoped CRUD and progress.

Every route resolves the caller from the bearer token and passes the
caller's id down; a project owned by someone else answers 404 exactly like
a missing one.
"""

from uuid import UUID

from fastapi import APIRouter, Response, status

from src.tasktracker.api.dependencies import CurrentUser, ProjectServiceDep
from src.tasktracker.core.progress import progress_summary
from src.tasktracker.schemas.project import (
    ProjectCreate,
    ProjectProgressRead,
    ProjectRead,
    ProjectUpdate,
)

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="List the caller's projects, newest first, with task counts.",
)
async def list_projects(user: CurrentUser, service: ProjectServiceDep) -> list[ProjectRead]:
    rows = await service.list_with_progress(user.id)
    return [ProjectRead.from_model(project, summary) for project, summary in rows]


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={
        201: {"description": "Project created"},
        422: {"description": "Validation error"},
    },
)
async def create_project(
    data: ProjectCreate,
    user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectRead:
    """Create a project owned by the caller."""
    project = await service.create(user.id, data)
    return ProjectRead.from_model(project, progress_summary(0, 0))


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={
        200: {"description": "Project details"},
        404: {"description": "Project not found"},
    },
)
async def get_project(
    project_id: UUID,
    user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectRead:
    project, summary = await service.get_with_progress(project_id, user.id)
    return ProjectRead.from_model(project, summary)


@router.patch(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    responses={
        200: {"description": "Project updated"},
        404: {"description": "Project not found"},
        422: {"description": "Validation error"},
    },
)
async def update_project(
    project_id: UUID,
    data: ProjectUpdate,
    user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectRead:
    """Update title and/or description. Omitted fields are left unchanged."""
    await service.update(project_id, user.id, data)
    project, summary = await service.get_with_progress(project_id, user.id)
    return ProjectRead.from_model(project, summary)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    responses={
        204: {"description": "Project and its tasks deleted"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(
    project_id: UUID,
    user: CurrentUser,
    service: ProjectServiceDep,
) -> Response:
    """Delete a project together with all of its tasks."""
    await service.delete(project_id, user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/{project_id}/progress",
    response_model=ProjectProgressRead,
    summary="Project progress",
    responses={
        200: {"description": "Completion statistics"},
        404: {"description": "Project not found"},
    },
)
async def get_project_progress(
    project_id: UUID,
    user: CurrentUser,
    service: ProjectServiceDep,
) -> ProjectProgressRead:
    project, summary = await service.get_with_progress(project_id, user.id)
    return ProjectProgressRead.from_model(project, summary)
