from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    """Process exit codes reported by the llmwrap command."""

    OK = 0
    DECLINED = 1
    INVALID_INPUT = 2
    MISSING_CREDENTIAL = 3
    NETWORK_ERROR = 4
    API_ERROR = 5
    PARSE_ERROR = 6
    EXECUTION_ERROR = 7
    INTERNAL = 70
    INTERRUPTED = 130  # 128 + SIGINT


class LlmwrapError(Exception):
    """Base class for failures that end an invocation."""

    exit_code = ExitCode.INTERNAL


class InvalidInput(LlmwrapError):
    exit_code = ExitCode.INVALID_INPUT


class MissingCredential(LlmwrapError):
    exit_code = ExitCode.MISSING_CREDENTIAL


class NetworkError(LlmwrapError):
    exit_code = ExitCode.NETWORK_ERROR


class ApiError(LlmwrapError):
    """The completion endpoint answered with a non-success status."""

    exit_code = ExitCode.API_ERROR

    def __init__(self, status_code: int, body: Optional[str] = None):
        self.status_code = status_code
        self.body = (body or "")[:300]
        message = f"API returned status {status_code}"
        if self.body:
            message = f"{message}: {self.body}"
        super().__init__(message)


class ParseError(LlmwrapError):
    exit_code = ExitCode.PARSE_ERROR


class ExecutionError(LlmwrapError):
    exit_code = ExitCode.EXECUTION_ERROR
