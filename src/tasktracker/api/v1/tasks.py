"""Task endpoints, nested under the owning project."""

from uuid import UUID

from fastapi import APIRouter, Response, status

from src.tasktracker.api.dependencies import CurrentUser, TaskServiceDep
from src.tasktracker.schemas.task import TaskCreate, TaskRead, TaskUpdate

router = APIRouter(prefix="/projects/{project_id}/tasks", tags=["tasks"])

_NOT_FOUND = {404: {"description": "Project or task not found"}}


@router.get(
    "",
    response_model=list[TaskRead],
    summary="List tasks",
    description="List the project's tasks, newest first.",
    responses=_NOT_FOUND,
)
async def list_tasks(
    project_id: UUID,
    user: CurrentUser,
    service: TaskServiceDep,
) -> list[TaskRead]:
    tasks = await service.list_tasks(project_id, user.id)
    return [TaskRead.from_model(task) for task in tasks]


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create task",
    responses={**_NOT_FOUND, 422: {"description": "Validation error"}},
)
async def create_task(
    project_id: UUID,
    data: TaskCreate,
    user: CurrentUser,
    service: TaskServiceDep,
) -> TaskRead:
    """Create an open task in the project."""
    task = await service.create(project_id, user.id, data)
    return TaskRead.from_model(task)


@router.get("/{task_id}", response_model=TaskRead, summary="Get task", responses=_NOT_FOUND)
async def get_task(
    project_id: UUID,
    task_id: UUID,
    user: CurrentUser,
    service: TaskServiceDep,
) -> TaskRead:
    task = await service.get(project_id, task_id, user.id)
    return TaskRead.from_model(task)


@router.patch(
    "/{task_id}",
    response_model=TaskRead,
    summary="Update task",
    responses={**_NOT_FOUND, 422: {"description": "Validation error"}},
)
async def update_task(
    project_id: UUID,
    task_id: UUID,
    data: TaskUpdate,
    user: CurrentUser,
    service: TaskServiceDep,
) -> TaskRead:
    """Partially update a task. Setting ``completed`` moves it through the
    completion state machine, so completed_at stays consistent."""
    task = await service.update(project_id, task_id, user.id, data)
    return TaskRead.from_model(task)


@router.patch(
    "/{task_id}/complete",
    response_model=TaskRead,
    summary="Mark task completed",
    responses=_NOT_FOUND,
)
async def complete_task(
    project_id: UUID,
    task_id: UUID,
    user: CurrentUser,
    service: TaskServiceDep,
) -> TaskRead:
    task = await service.mark_completed(project_id, task_id, user.id)
    return TaskRead.from_model(task)


@router.patch(
    "/{task_id}/incomplete",
    response_model=TaskRead,
    summary="Mark task incomplete",
    responses=_NOT_FOUND,
)
async def reopen_task(
    project_id: UUID,
    task_id: UUID,
    user: CurrentUser,
    service: TaskServiceDep,
) -> TaskRead:
    task = await service.mark_incomplete(project_id, task_id, user.id)
    return TaskRead.from_model(task)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete task",
    responses=_NOT_FOUND,
)
async def delete_task(
    project_id: UUID,
    task_id: UUID,
    user: CurrentUser,
    service: TaskServiceDep,
) -> Response:
    await service.delete(project_id, task_id, user.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
