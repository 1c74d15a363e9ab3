# agents/task_dispatcher.py
import logging
from typing import Any, Dict, Mapping

from agents.generation_invoker import GenerationInvoker
from core.errors import DueProcessAIError, UnknownTaskError
from core.schemas import SchemaSpec
from tasks.registry import SchemaRegistry
from tasks.shared import CASE_CATEGORIES, choice, text
from tools import prompt_binder, response_normalizer

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unknown error occurred. Please try again later."

CASE_ANALYSIS_FORM = SchemaSpec("CaseAnalysisForm", [
    text(
        "caseDetails",
        "Detailed information about the case.",
        min_length=50,
        message="Case details must be at least 50 characters long.",
    ),
    choice("caseCategory", CASE_CATEGORIES, "The category of the case."),
])

CATEGORY_TASKS = {
    "criminal": "criminal_law_suggestions",
    "civil": "civil_law_suggestions",
    "general": "suggest_relevant_laws",
}


def _preview(value: Any) -> str:
    s = str(value)
    return s[:100] + ("..." if len(s) > 100 else "")


class TaskDispatcher:
    """
    Single entry point per task. Returns the normalized output as a plain
    dict, or {"error": message}; no exception crosses this boundary.
    """

    def __init__(self, registry: SchemaRegistry, invoker: GenerationInvoker):
        self.registry = registry
        self.invoker = invoker

    def dispatch(self, task_name: str, raw_input: Mapping[str, Any]) -> Dict[str, Any]:
        try:
            return self._run(task_name, raw_input)
        except UnknownTaskError as e:
            logger.critical("Dispatch to unregistered task: %s", e)
            return {"error": str(e)}
        except DueProcessAIError as e:
            logger.error("Task %s failed: %s", task_name, e)
            return {"error": str(e)}
        except Exception as e:
            logger.exception("Unexpected error in task %s: %s", task_name, e)
            return {"error": UNEXPECTED_ERROR_MESSAGE}

    def analyze_case(self, raw_input: Mapping[str, Any]) -> Dict[str, Any]:
        """Validate the case-analysis form and route by case category."""
        try:
            form = CASE_ANALYSIS_FORM.validate(raw_input)
        except DueProcessAIError as e:
            logger.error("Case analysis form rejected: %s", e)
            return {"error": str(e)}
        task_name = CATEGORY_TASKS[form["caseCategory"]]
        return self.dispatch(task_name, {"caseDetails": form["caseDetails"]})

    def _run(self, task_name: str, raw_input: Mapping[str, Any]) -> Dict[str, Any]:
        task = self.registry.get_task_definition(task_name)
        validated = task.input_schema.validate(raw_input)
        logger.info("Dispatching %s: %s", task_name, _preview(validated))

        canned = response_normalizer.short_circuit(task, validated)
        if canned is not None:
            logger.info("Short-circuited %s without calling the model", task_name)
            return canned

        prompt = prompt_binder.bind(task.prompt_template, task.input_schema, validated)
        response = self.invoker.invoke(prompt, task.output_schema)
        output = response_normalizer.normalize(response, task, validated)
        logger.info("Completed %s", task_name)
        return output
