"""Task API: thin route delegating to TaskIngestionService."""

from typing import Annotated

from fastapi import APIRouter, Body, Depends

from app.api.v1.dependencies import get_task_ingestion_service
from app.application.dtos.task import CreateTaskCommand
from app.application.use_cases.tasks import TaskIngestionService
from app.schemas.task import TaskCreateRequest, TaskCreatedResponse, TaskResponse

router = APIRouter()


@router.post("", response_model=TaskCreatedResponse)
async def create_task(
    service: Annotated[TaskIngestionService, Depends(get_task_ingestion_service)],
    request: Annotated[TaskCreateRequest | None, Body()] = None,
) -> TaskCreatedResponse:
    """Store a task and emit TASK_CREATED to the topic and queue.

    400 when title is missing or blank; 500 when the table write or the
    fan-out fails (in the latter case the task is already stored).
    """
    payload = request or TaskCreateRequest()
    task = await service.create_task(
        CreateTaskCommand(
            title=payload.title,
            description=payload.description,
            task_id=payload.task_id,
            image_key=payload.image_key,
        )
    )
    return TaskCreatedResponse(
        task=TaskResponse(
            task_id=task.task_id,
            title=task.title,
            description=task.description,
            image_key=task.image_key,
            created_at=task.created_at,
        )
    )
