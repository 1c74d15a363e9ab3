# tasks/registry.py
from typing import Dict, Iterable, List

from core.errors import UnknownTaskError
from core.task import TaskDefinition
from tasks.assistant_tasks import ASSISTANT_TASKS
from tasks.case_analysis_tasks import CASE_ANALYSIS_TASKS
from tasks.coaching_tasks import COACHING_TASKS
from tasks.evidence_tasks import EVIDENCE_TASKS


class SchemaRegistry:
    """Task definitions by name. Filled at startup, read-only afterwards."""

    def __init__(self, tasks: Iterable[TaskDefinition] = ()):
        self._tasks: Dict[str, TaskDefinition] = {}
        for task in tasks:
            self.register(task)

    def register(self, task: TaskDefinition) -> None:
        if task.name in self._tasks:
            raise ValueError(f"Task {task.name!r} is already registered")
        self._tasks[task.name] = task

    def get_task_definition(self, name: str) -> TaskDefinition:
        try:
            return self._tasks[name]
        except KeyError:
            raise UnknownTaskError(name) from None

    def task_names(self) -> List[str]:
        return sorted(self._tasks)

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    def __len__(self) -> int:
        return len(self._tasks)


def build_default_registry() -> SchemaRegistry:
    return SchemaRegistry(
        CASE_ANALYSIS_TASKS + EVIDENCE_TASKS + COACHING_TASKS + ASSISTANT_TASKS
    )
