# core/interfaces.py
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Type

from pydantic import BaseModel


class IGenerationModel(ABC):
    @abstractmethod
    def generate(self, prompt: str, output_model: Type[BaseModel]) -> Optional[Mapping[str, Any]]:
        """
        Return a best-effort value shaped like `output_model`, or None when
        the model produced nothing usable.
        """
        pass
