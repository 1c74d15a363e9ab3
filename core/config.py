# core/config.py
import os
import logging
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from core.errors import MissingAPIKeyError

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - [DUE-PROCESS] %(message)s"


class ModelConfig(BaseModel):
    """Settings for the hosted generation model, built once at startup."""

    api_key: str = Field(..., min_length=1, repr=False)
    model_name: str = "gemini-2.0-flash"
    temperature: float = Field(0.3, ge=0.0, le=2.0)
    max_output_tokens: int = Field(2048, gt=0)
    timeout_seconds: float = Field(30.0, gt=0)
    max_attempts: int = Field(3, ge=1)

    @classmethod
    def from_env(cls) -> "ModelConfig":
        """Ensure required API key exists and read optional overrides"""
        api_key = os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
        if not api_key:
            logger.error("Missing GEMINI_API_KEY in environment")
            raise MissingAPIKeyError("GEMINI_API_KEY not found in environment variables")

        return cls(
            api_key=api_key,
            model_name=os.getenv("DUE_PROCESS_MODEL", "gemini-2.0-flash"),
            temperature=float(os.getenv("DUE_PROCESS_TEMPERATURE", "0.3")),
            max_output_tokens=int(os.getenv("DUE_PROCESS_MAX_OUTPUT_TOKENS", "2048")),
            timeout_seconds=float(os.getenv("DUE_PROCESS_TIMEOUT", "30")),
            max_attempts=int(os.getenv("DUE_PROCESS_MAX_ATTEMPTS", "3")),
        )


def configure_logging(level: int = logging.INFO, log_file: Optional[str] = "due_process_ai.log") -> None:
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers)
