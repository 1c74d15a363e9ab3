"""Gemini host adapter with the chat model replaced by a mock."""

from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel

from agents.gemini_model import GeminiGenerationModel
from core.config import ModelConfig
from core.errors import SchemaViolationError


class Answer(BaseModel):
    responseText: str


def _model(result):
    llm = MagicMock()
    llm.with_structured_output.return_value.invoke.return_value = result
    return GeminiGenerationModel(ModelConfig(api_key="test-key"), llm=llm), llm


def test_generate_returns_parsed_model_as_dict() -> None:
    model, llm = _model({"raw": None, "parsed": Answer(responseText="hi"), "parsing_error": None})

    assert model.generate("prompt", Answer) == {"responseText": "hi"}
    llm.with_structured_output.assert_called_once_with(Answer, include_raw=True)
    llm.with_structured_output.return_value.invoke.assert_called_once_with("prompt")


def test_generate_returns_none_when_nothing_parsed() -> None:
    model, _ = _model({"raw": None, "parsed": None, "parsing_error": None})
    assert model.generate("prompt", Answer) is None


def test_parsing_error_is_schema_violation() -> None:
    model, _ = _model({"raw": None, "parsed": None, "parsing_error": ValueError("bad json")})
    with pytest.raises(SchemaViolationError):
        model.generate("prompt", Answer)


def test_structured_runnable_is_reused_per_output_model() -> None:
    model, llm = _model({"raw": None, "parsed": {"responseText": "hi"}, "parsing_error": None})
    model.generate("one", Answer)
    model.generate("two", Answer)
    assert llm.with_structured_output.call_count == 1
