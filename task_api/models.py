from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


# ---------- Data Models ----------
class BaseTask(BaseModel):
    model_config = ConfigDict(strict=True)


class Task(BaseTask):
    id: Annotated[int, Field(ge=0)]
    title: str
    completed: bool

    def __repr__(self) -> str:
        return f"Task(id: {self.id}, title: '{self.title}', completed: {self.completed})"


class InputTask(BaseTask):
    title: str
