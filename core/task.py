from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from core.schemas import SchemaSpec


class ShortCircuit(BaseModel):
    """Skip the model entirely when `condition(validated_input)` holds."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    condition: Callable[[Dict[str, Any]], bool]
    output: Dict[str, Any]


class TaskDefinition(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    input_schema: SchemaSpec
    output_schema: SchemaSpec
    prompt_template: str
    overrides: Dict[str, Any] = Field(default_factory=dict)  # replaced verbatim
    closing_sentences: Dict[str, str] = Field(default_factory=dict)  # appended if missing
    fallback: Optional[Dict[str, Any]] = None  # None -> hard failure on empty output
    failure_message: str = "The AI failed to generate a response. Please try again."
    short_circuit: Optional[ShortCircuit] = None

    @model_validator(mode="after")
    def check_fields_exist(self):
        output_fields = set(self.output_schema.field_names())
        for field in list(self.overrides) + list(self.closing_sentences):
            if field not in output_fields:
                raise ValueError(
                    f"task {self.name!r}: {field!r} is not an output field"
                )
        return self
