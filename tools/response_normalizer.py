"""
response_normalizer.py
Reconciles raw model output with each task's fixed requirements:
  - canonical overrides (disclaimers) replace whatever the model wrote
  - mandatory closing sentences are appended when the model omits them
  - an empty model answer becomes the task's fallback, or a GenerationFailedError
"""
import copy
import logging
from typing import Any, Dict, Mapping, Optional

from agents.generation_invoker import NO_OUTPUT, StructuredResponse
from core.errors import GenerationFailedError
from core.task import TaskDefinition

logger = logging.getLogger(__name__)


def _apply_overrides(output: Dict[str, Any], task: TaskDefinition) -> Dict[str, Any]:
    for field, literal in task.overrides.items():
        output[field] = literal
    return output


def normalize(
    structured_response: StructuredResponse,
    task: TaskDefinition,
    validated_input: Mapping[str, Any],
) -> Dict[str, Any]:
    if structured_response is NO_OUTPUT:
        if task.fallback is None:
            raise GenerationFailedError(task.failure_message)
        logger.warning("Using fallback output for %s", task.name)
        return _apply_overrides(copy.deepcopy(task.fallback), task)

    output = copy.deepcopy(dict(structured_response))

    for field, sentence in task.closing_sentences.items():
        text = output.get(field) or ""
        if sentence not in text:
            output[field] = f"{text}\n\n{sentence}" if text else sentence

    return _apply_overrides(output, task)


def short_circuit(task: TaskDefinition, validated_input: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
    """Canned output when the task's short-circuit condition holds, else None."""
    rule = task.short_circuit
    if rule is None or not rule.condition(validated_input):
        return None
    return _apply_overrides(copy.deepcopy(rule.output), task)
