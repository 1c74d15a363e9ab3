"""
prompt_binder.py
Renders task prompt templates from validated input.

Templates are mustache text, rendered through LangChain's PromptTemplate:
  - {{{field}}} substitutes a value verbatim ({{field}} HTML-escapes it)
  - {{#field}}...{{/field}} is dropped entirely when the field is absent or empty
  - {{#items}}...{{/items}} repeats its body once per array element

Rendering is a pure function of (template, input): no dates, no randomness.
"""
import logging
from functools import lru_cache
from typing import Any, Mapping

from langchain_core.prompts import PromptTemplate

from core.schemas import SchemaSpec

logger = logging.getLogger(__name__)


@lru_cache(maxsize=64)
def _compile(template: str) -> PromptTemplate:
    return PromptTemplate.from_template(template, template_format="mustache")


def render(template: str, validated_input: Mapping[str, Any]) -> str:
    """Substitute `validated_input` into `template` and return the prompt text."""
    return _compile(template).format(**dict(validated_input))


def bind(template: str, input_schema: SchemaSpec, validated_input: Mapping[str, Any]) -> str:
    """
    Render with every schema field present, so optional fields the caller
    left out resolve to None and their conditional blocks disappear.
    """
    values = {name: None for name in input_schema.field_names()}
    values.update(validated_input)
    prompt = render(template, values)
    logger.debug("Rendered %s prompt (%d chars)", input_schema.name, len(prompt))
    return prompt
