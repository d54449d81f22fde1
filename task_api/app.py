import logging
from typing import Annotated

from fastapi import APIRouter, Depends, FastAPI, Path, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from .models import InputTask, Task
from .store import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter()

# Unsigned 64-bit ids only: plain decimal digits, at most 20 of them.
U64_MAX = 2**64 - 1


class TaskNotFoundError(Exception):
    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with ID {task_id} not found")
        self.task_id = task_id


def get_store(request: Request) -> TaskStore:
    return request.app.state.store


def get_task_id(task_id: Annotated[str, Path(pattern=r"^[0-9]{1,20}$")]) -> int:
    value = int(task_id)
    if value > U64_MAX:
        raise RequestValidationError(
            [{"type": "less_than_equal", "loc": ("path", "task_id"), "msg": f"Input should be at most {U64_MAX}"}]
        )
    return value


TaskId = Annotated[int, Depends(get_task_id)]


async def task_not_found_handler(request: Request, exc: TaskNotFoundError) -> PlainTextResponse:
    logger.debug("%s %s: %s", request.method, request.url.path, exc)
    return PlainTextResponse(str(exc), status_code=404)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    errors = exc.errors()
    if not errors:
        return PlainTextResponse("Invalid request", status_code=400)

    first = errors[0]
    loc = tuple(first.get("loc", ()))
    location = ".".join(str(part) for part in loc)
    message = f"Invalid request: {location}: {first.get('msg', 'invalid value')}"
    # A path segment that is not an id matches no resource.
    status_code = 404 if loc[:1] == ("path",) else 400
    return PlainTextResponse(message, status_code=status_code)


@router.get("/health", response_class=PlainTextResponse)
def health_check() -> str:
    return "API is healthy!"


@router.get("/tasks", status_code=200)
def get_tasks(store: TaskStore = Depends(get_store)) -> list[Task]:
    return store.list()


@router.get("/tasks/{task_id}", status_code=200)
def get_task(task_id: TaskId, store: TaskStore = Depends(get_store)) -> Task:
    task = store.get(task_id)
    if task is None:
        raise TaskNotFoundError(task_id)
    return task


@router.post("/tasks", status_code=201)
def create_task(task: InputTask, store: TaskStore = Depends(get_store)) -> Task:
    return store.create(task.title)


@router.put("/tasks/{task_id}", status_code=200)
def update_task(task_id: TaskId, task: Task, store: TaskStore = Depends(get_store)) -> Task:
    updated = store.update(task_id, task.title, task.completed)
    if updated is None:
        raise TaskNotFoundError(task_id)
    return updated


@router.delete("/tasks/{task_id}", response_class=PlainTextResponse, status_code=200)
def delete_task(task_id: TaskId, store: TaskStore = Depends(get_store)) -> str:
    if not store.delete(task_id):
        raise TaskNotFoundError(task_id)
    return f"Task with ID {task_id} has been deleted"


def create_app(store: TaskStore | None = None) -> FastAPI:
    """Build the application around ``store``, or a freshly seeded one."""
    app = FastAPI(title="Task API")
    app.state.store = store if store is not None else TaskStore.seeded()
    app.add_exception_handler(TaskNotFoundError, task_not_found_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.include_router(router)
    return app
