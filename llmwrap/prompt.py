from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import InvalidInput

SYSTEM_PROMPT = (
    "You translate natural-language requests into a single shell command. "
    "Respond with exactly one runnable command line, no explanations, no markdown "
    "or code fences. Prefer safe quoting for filenames."
)


@dataclass(frozen=True)
class Request:
    """A tool name plus the free-text task the operator wants done with it."""

    tool: str
    task: str


def build_request(tool: Optional[str], task: Optional[str]) -> Request:
    """Validate operator input and build a Request from it."""
    tool = (tool or "").strip()
    task = (task or "").strip()
    if not tool:
        raise InvalidInput("Please name the tool to use, e.g. `llmwrap tar extract archive.tar.gz`")
    if not task:
        raise InvalidInput(f"Please describe what to do with {tool}, e.g. `llmwrap {tool} <task>`")
    return Request(tool=tool, task=task)


def _message(role: str, text: str) -> Dict[str, Any]:
    return {"role": role, "content": [{"type": "input_text", "text": text}]}


def build_payload(request: Request, model: str, instructions: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the Responses API body for a request.

    Args:
        request: The validated tool and task.
        model: Model name to ask.
        instructions: Optional replacement for the default system prompt.

    Returns:
        A JSON-serializable payload dict.
    """
    base_prompt = instructions or SYSTEM_PROMPT
    system_text = (
        f"{base_prompt}\n"
        f"The command must use the `{request.tool}` program."
    )
    return {
        "model": model,
        "input": [
            _message("system", system_text),
            _message("user", request.task),
        ],
    }
