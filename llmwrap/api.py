import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

from .config import DEFAULT_API_BASE, DEFAULT_MODEL
from .errors import ApiError, MissingCredential, NetworkError, ParseError

# Configure logging
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletionResult:
    """The single shell command proposed by the model."""

    command: str


def _first_text(contents: Any) -> Optional[str]:
    if not isinstance(contents, list):
        return None
    for part in contents:
        if isinstance(part, dict) and isinstance(part.get("text"), str):
            return part["text"]
    return None


def extract_text(data: Any) -> Optional[str]:
    """
    Find the generated text in a Responses API body.

    Looks at `output` as a list of messages, then as a single message,
    then falls back to `output_text` as a string or list of strings.
    """
    if not isinstance(data, dict):
        return None

    output = data.get("output")
    if isinstance(output, list):
        for message in output:
            if isinstance(message, dict):
                text = _first_text(message.get("content"))
                if text is not None:
                    return text
    elif isinstance(output, dict):
        text = _first_text(output.get("content"))
        if text is not None:
            return text

    output_text = data.get("output_text")
    if isinstance(output_text, str):
        return output_text
    if isinstance(output_text, list):
        joined = "\n".join(t for t in output_text if isinstance(t, str))
        if joined:
            return joined

    return None


def sanitize_command(raw: str) -> str:
    """Reduce model output to its first command line, without fences or backticks."""
    for line in raw.splitlines():
        line = line.strip()
        if not line or line.startswith("```"):
            continue
        return line.strip("`").strip()
    return ""


class CompletionClient:
    """A client for the OpenAI Responses API."""

    def __init__(
        self,
        api_key: Optional[str],
        api_base: str = DEFAULT_API_BASE,
        model: str = DEFAULT_MODEL,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initializes the CompletionClient.

        Args:
            api_key: Bearer credential for the API.
            api_base: Base URL, e.g. https://api.openai.com/v1.
            model: The model to use for generation.
            timeout: Request timeout in seconds, None waits indefinitely.
            session: Optional requests session to send through.
        """
        self._api_key = api_key
        self.api_base = api_base.rstrip("/")
        self.model = model
        self.timeout = timeout
        self.session = session or requests.Session()
        logger.info(f"Initialized completion client with model: {self.model}")

    @property
    def url(self) -> str:
        return f"{self.api_base}/responses"

    def complete(self, payload: Dict[str, Any]) -> CompletionResult:
        """Send one request and return the proposed command."""
        if not self._api_key:
            raise MissingCredential(
                "Set LLMWRAP_OPENAI_API_KEY in your environment before running this tool"
            )

        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        logger.info(f"Requesting command from {self.url}")
        try:
            response = self.session.post(self.url, headers=headers, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            raise NetworkError(f"Could not reach {self.url}: {e}") from e

        if not response.ok:
            logger.info(f"API error {response.status_code}")
            raise ApiError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"Failed to decode response body: {response.text[:300]}") from e

        raw_text = extract_text(data)
        if raw_text is None:
            raise ParseError("No text output returned from model")

        command = sanitize_command(raw_text)
        if not command:
            raise ParseError("Model returned an empty command")

        logger.info(f"Received command: {command}")
        return CompletionResult(command=command)
