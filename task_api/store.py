import logging
import threading
from typing import Iterable

from .models import Task

logger = logging.getLogger(__name__)

SEED_TITLES = ("Learn Rust", "Build an API")


class TaskStore:
    """In-memory task collection guarded by a single exclusive lock.

    Every operation, reads included, holds the lock for its whole body.
    Tasks handed out are copies, so nothing outside the store can change
    its contents without going through the lock.

    Ids come from a counter that only moves forward, so the id of a
    deleted task is never handed out again.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._lock = threading.Lock()
        self._tasks: list[Task] = [task.model_copy() for task in tasks]
        self._next_id = max((task.id for task in self._tasks), default=0) + 1

    @classmethod
    def seeded(cls) -> "TaskStore":
        return cls(Task(id=i, title=title, completed=False) for i, title in enumerate(SEED_TITLES, start=1))

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def _find(self, task_id: int) -> Task | None:
        return next((task for task in self._tasks if task.id == task_id), None)

    def list(self) -> list[Task]:
        with self._lock:
            return [task.model_copy() for task in self._tasks]

    def get(self, task_id: int) -> Task | None:
        with self._lock:
            task = self._find(task_id)
            return task.model_copy() if task else None

    def create(self, title: str) -> Task:
        with self._lock:
            task = Task(id=self._next_id, title=title, completed=False)
            self._next_id += 1
            self._tasks.append(task)
            logger.info("Created task %d: %r", task.id, task.title)
            return task.model_copy()

    def update(self, task_id: int, title: str, completed: bool) -> Task | None:
        with self._lock:
            task = self._find(task_id)
            if task is None:
                return None
            task.title = title
            task.completed = completed
            logger.info("Updated task %d", task_id)
            return task.model_copy()

    def delete(self, task_id: int) -> bool:
        with self._lock:
            initial_len = len(self._tasks)
            self._tasks = [task for task in self._tasks if task.id != task_id]
            removed = len(self._tasks) < initial_len
        if removed:
            logger.info("Deleted task %d", task_id)
        return removed
