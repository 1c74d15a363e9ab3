import logging
from typing import Any, Dict, Mapping, Optional, Type

from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import BaseModel

from core.config import ModelConfig
from core.errors import SchemaViolationError
from core.interfaces import IGenerationModel

logger = logging.getLogger(__name__)


class GeminiGenerationModel(IGenerationModel):
    def __init__(self, config: ModelConfig, llm: Optional[ChatGoogleGenerativeAI] = None):
        """
        Args:
            config: Model settings built once at startup
            llm: Optional pre-configured LLM instance
        """
        self.config = config
        self.llm = llm or self._create_llm()
        self._structured: Dict[Type[BaseModel], Any] = {}

    def _create_llm(self) -> ChatGoogleGenerativeAI:
        """Create LLM with validated config"""
        return ChatGoogleGenerativeAI(
            model=self.config.model_name,
            temperature=self.config.temperature,
            max_output_tokens=self.config.max_output_tokens,
            google_api_key=self.config.api_key,
            timeout=self.config.timeout_seconds,
            max_retries=0,
        )

    def _runnable_for(self, output_model: Type[BaseModel]):
        runnable = self._structured.get(output_model)
        if runnable is None:
            runnable = self.llm.with_structured_output(output_model, include_raw=True)
            self._structured[output_model] = runnable
        return runnable

    def generate(self, prompt: str, output_model: Type[BaseModel]) -> Optional[Mapping[str, Any]]:
        result = self._runnable_for(output_model).invoke(prompt)

        if result.get("parsing_error") is not None:
            logger.warning("Structured output parsing failed: %s", result["parsing_error"])
            raise SchemaViolationError() from result["parsing_error"]

        parsed = result.get("parsed")
        if parsed is None:
            return None
        if isinstance(parsed, BaseModel):
            return parsed.model_dump()
        return parsed
