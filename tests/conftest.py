"""Shared fixtures: the default task table, a fake model host and a mocked invoker."""

from typing import Any, List, Optional
from unittest.mock import MagicMock

import pytest

from agents.generation_invoker import GenerationInvoker
from agents.task_dispatcher import TaskDispatcher
from core.interfaces import IGenerationModel
from tasks.registry import build_default_registry


class FakeModel(IGenerationModel):
    """Replays queued results; an Exception in the queue is raised instead."""

    def __init__(self, results: Optional[List[Any]] = None):
        self.results = list(results or [])
        self.prompts: List[str] = []

    def generate(self, prompt, output_model):
        self.prompts.append(prompt)
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def invoker():
    return MagicMock(spec=GenerationInvoker)


@pytest.fixture
def dispatcher(registry, invoker):
    return TaskDispatcher(registry, invoker)


@pytest.fixture
def fake_model():
    return FakeModel
