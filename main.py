# main.py
import argparse
import json
import logging
import sys
from typing import Optional

from agents.gemini_model import GeminiGenerationModel
from agents.generation_invoker import GenerationInvoker
from agents.task_dispatcher import TaskDispatcher
from core.config import ModelConfig, configure_logging
from core.errors import DueProcessAIError
from tasks.registry import build_default_registry

logger = logging.getLogger(__name__)


def initialize_system(config: Optional[ModelConfig] = None) -> TaskDispatcher:
    config = config or ModelConfig.from_env()

    # Model first, then the pipeline that wraps it
    model = GeminiGenerationModel(config)
    invoker = GenerationInvoker(model, max_attempts=config.max_attempts)

    return TaskDispatcher(build_default_registry(), invoker)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run one DUE PROCESS AI generation task.")
    parser.add_argument("task", nargs="?", help="Task name, e.g. suggest_relevant_laws")
    parser.add_argument("input", nargs="?", default="-", help="JSON input file, or - for stdin")
    parser.add_argument("--list", action="store_true", help="List registered task names")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    if args.list:
        for name in build_default_registry().task_names():
            print(name)
        return 0
    if not args.task:
        parser.error("a task name is required unless --list is given")

    try:
        if args.input == "-":
            payload = json.load(sys.stdin)
        else:
            with open(args.input, "r", encoding="utf-8") as f:
                payload = json.load(f)
        dispatcher = initialize_system()
    except json.JSONDecodeError as e:
        logger.error("Input is not valid JSON: %s", e)
        result = {"error": f"Input is not valid JSON: {e}"}
    except DueProcessAIError as e:
        logger.error("Startup failed: %s", e)
        result = {"error": str(e)}
    else:
        if args.task == "case_analysis":
            result = dispatcher.analyze_case(payload)
        else:
            result = dispatcher.dispatch(args.task, payload)

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 1 if "error" in result else 0


if __name__ == "__main__":
    sys.exit(main())
