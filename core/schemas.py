# core/schemas.py

from enum import Enum
from typing import Any, Dict, List, Literal, Mapping, Optional, Tuple, Type

import pydantic
from pydantic import BaseModel, ConfigDict, Field, create_model

from core.errors import SchemaViolationError, ValidationError


class FieldType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ENUM = "enum"
    ARRAY = "array"
    OBJECT = "object"


# pydantic error types raised by the constraints a FieldSpec can carry
_CONSTRAINT_ERRORS = {
    "string_too_short",
    "string_too_long",
    "too_short",
    "too_long",
    "greater_than_equal",
    "less_than_equal",
}


class FieldSpec(BaseModel):
    """Declarative description of one schema field and its constraints.

    `message` replaces pydantic's text when a length or range constraint fails.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: FieldType
    description: str = ""
    required: bool = True
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    choices: Tuple[str, ...] = ()
    items: Optional["FieldSpec"] = None
    fields: Tuple["FieldSpec", ...] = ()
    min_items: Optional[int] = None
    max_items: Optional[int] = None
    default: Any = None
    message: Optional[str] = None

    @pydantic.model_validator(mode="after")
    def check_shape(self):
        if self.type is FieldType.ENUM and not self.choices:
            raise ValueError(f"enum field {self.name!r} needs choices")
        if self.type is FieldType.ARRAY and self.items is None:
            raise ValueError(f"array field {self.name!r} needs an items spec")
        if self.type is FieldType.OBJECT and not self.fields:
            raise ValueError(f"object field {self.name!r} needs nested fields")
        return self

    def annotation(self, model_name: str) -> Any:
        """Python type used for this field in the compiled pydantic model."""
        if self.type is FieldType.STRING:
            return str
        if self.type is FieldType.NUMBER:
            return float
        if self.type is FieldType.BOOLEAN:
            return bool
        if self.type is FieldType.ENUM:
            return Literal[self.choices]
        if self.type is FieldType.ARRAY:
            return List[self.items.annotation(f"{model_name}_{self.name}")]
        return _compile(f"{model_name}_{self.name}", self.fields)

    def field_info(self) -> Any:
        if self.type is FieldType.STRING:
            constraints = {"min_length": self.min_length, "max_length": self.max_length}
        elif self.type is FieldType.ARRAY:
            constraints = {"min_length": self.min_items, "max_length": self.max_items}
        elif self.type is FieldType.NUMBER:
            constraints = {"ge": self.minimum, "le": self.maximum}
        else:
            constraints = {}
        constraints = {k: v for k, v in constraints.items() if v is not None}

        if self.required:
            default = ...
        else:
            default = self.default
        return Field(default, description=self.description or None, **constraints)


FieldSpec.model_rebuild()


def _compile(model_name: str, fields: Tuple[FieldSpec, ...]) -> Type[BaseModel]:
    definitions: Dict[str, Any] = {}
    for spec in fields:
        annotation = spec.annotation(model_name)
        if not spec.required and spec.default is None:
            annotation = Optional[annotation]
        definitions[spec.name] = (annotation, spec.field_info())
    return create_model(model_name, __config__=ConfigDict(extra="ignore"), **definitions)


class SchemaSpec:
    """
    An ordered collection of FieldSpecs. Compiles once into a pydantic model
    that validates caller input and tells the model host what shape to return.
    """

    def __init__(self, name: str, fields: List[FieldSpec]):
        names = [f.name for f in fields]
        if len(names) != len(set(names)):
            raise ValueError(f"duplicate field names in schema {name!r}")
        self.name = name
        self.fields: Tuple[FieldSpec, ...] = tuple(fields)
        self._model: Optional[Type[BaseModel]] = None

    def __repr__(self) -> str:
        return f"SchemaSpec({self.name!r}, fields={self.field_names()})"

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> FieldSpec:
        for spec in self.fields:
            if spec.name == name:
                return spec
        raise KeyError(name)

    def build_model(self) -> Type[BaseModel]:
        if self._model is None:
            self._model = _compile(self.name, self.fields)
        return self._model

    def validate(self, raw: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Validate caller input. Raises ValidationError listing every violation.
        """
        if not isinstance(raw, Mapping):
            raise ValidationError([f"input must be an object, got {type(raw).__name__}"])
        try:
            instance = self.build_model().model_validate(dict(raw))
        except pydantic.ValidationError as e:
            raise ValidationError(self._describe(e)) from e
        return instance.model_dump(exclude_none=True)

    def coerce(self, raw: Any) -> Dict[str, Any]:
        """
        Coerce model output into this schema. Raises SchemaViolationError.
        """
        if isinstance(raw, BaseModel):
            raw = raw.model_dump()
        if not isinstance(raw, Mapping):
            raise SchemaViolationError()
        try:
            instance = self.build_model().model_validate(dict(raw))
        except pydantic.ValidationError as e:
            raise SchemaViolationError() from e
        return instance.model_dump(exclude_none=True)

    def _describe(self, error: pydantic.ValidationError) -> List[str]:
        violations = []
        for item in error.errors():
            path = ".".join(str(part) for part in item["loc"])
            message = item["msg"]
            if item["type"] in _CONSTRAINT_ERRORS and item["loc"]:
                spec = self._lookup(item["loc"])
                if spec is not None and spec.message:
                    message = spec.message
            violations.append(f"{path}: {message}")
        return violations

    def _lookup(self, loc: Tuple[Any, ...]) -> Optional[FieldSpec]:
        fields = self.fields
        spec = None
        for part in loc:
            if isinstance(part, int):
                continue
            spec = next((f for f in fields if f.name == part), None)
            if spec is None:
                return None
            if spec.type is FieldType.ARRAY and spec.items is not None:
                fields = spec.items.fields
            else:
                fields = spec.fields
        return spec
