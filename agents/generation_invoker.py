import logging
from typing import Any, Dict, Union

from tenacity import (
    Retrying, stop_after_attempt, wait_exponential, retry_if_exception_type,
    before_sleep_log
)

from core.errors import SchemaViolationError, TransportError
from core.interfaces import IGenerationModel
from core.schemas import SchemaSpec

logger = logging.getLogger(__name__)


class _NoOutput:
    """The model answered but produced nothing usable."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_OUTPUT"

    def __bool__(self) -> bool:
        return False


NO_OUTPUT = _NoOutput()

StructuredResponse = Union[Dict[str, Any], _NoOutput]


class GenerationInvoker:
    def __init__(
        self,
        model: IGenerationModel,
        max_attempts: int = 3,
        min_wait: float = 2.0,
        max_wait: float = 10.0,
    ):
        """
        Args:
            model: The hosted model behind the IGenerationModel boundary
            max_attempts: Total tries for transport failures (1 disables retry)
            min_wait, max_wait: Bounds of the exponential backoff, in seconds
        """
        self.model = model
        self.max_attempts = max_attempts
        self.min_wait = min_wait
        self.max_wait = max_wait

    def invoke(self, prompt: str, output_schema: SchemaSpec) -> StructuredResponse:
        """
        Send one prompt to the model and return its schema-shaped output.

        Raises:
            TransportError: The model host failed on every attempt
            SchemaViolationError: The output does not fit `output_schema`
        """
        retrying = Retrying(
            reraise=True,
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential(multiplier=1, min=self.min_wait, max=self.max_wait),
            retry=retry_if_exception_type(TransportError),
            before_sleep=before_sleep_log(logger, logging.WARNING),
        )
        raw = retrying(self._call_model, prompt, output_schema)

        if raw is None:
            logger.warning("Model returned no output for %s", output_schema.name)
            return NO_OUTPUT
        return output_schema.coerce(raw)

    def _call_model(self, prompt: str, output_schema: SchemaSpec) -> Any:
        try:
            return self.model.generate(prompt, output_schema.build_model())
        except (SchemaViolationError, TypeError, AttributeError):
            raise
        except Exception as e:
            logger.error("LLM invocation failed: %s", e, exc_info=True)
            raise TransportError() from e
