import argparse
import logging
from typing import List, Optional

from rich.console import Console

from . import __version__
from .api import CompletionClient
from .config import Config
from .errors import ExitCode, LlmwrapError
from .executor import CommandExecutor
from .logger import setup_logging
from .prompt import build_payload, build_request
from .ui import ConfirmationGate

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="llmwrap",
        description="Describe a shell task in plain English and get a runnable command back.",
        epilog="""
        Exit codes: 0 success (or the command's own exit code), 1 declined,
        2 invalid input, 3 missing LLMWRAP_OPENAI_API_KEY, 4 network failure,
        5 API error, 6 unreadable API response, 7 shell could not be started.
        """,
    )
    parser.add_argument("tool", nargs="?", help="The program to build a command for, e.g. tar or ffmpeg.")
    parser.add_argument(
        "task",
        nargs=argparse.REMAINDER,
        help="Natural language description of the task, e.g. \"extract archive.tar.gz\".",
    )
    parser.add_argument("--model", help="Model to use for the Responses API.")
    parser.add_argument("--api-base", help="Base URL for the OpenAI API (env LLMWRAP_OPENAI_BASE_URL).")
    parser.add_argument("--shell", help="Shell used to run the accepted command (default /bin/sh).")

    default_group = parser.add_mutually_exclusive_group()
    default_group.add_argument(
        "--yes-default", dest="default_yes", action="store_const", const=True,
        help="An empty answer at the prompt runs the command ([Y/n]).",
    )
    default_group.add_argument(
        "--no-default", dest="default_yes", action="store_const", const=False,
        help="An empty answer at the prompt declines ([y/N], the default).",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Command line flags win over environment and config file values."""
    if args.model:
        config.model = args.model
    if args.api_base:
        config.api_base = args.api_base
    if args.shell:
        config.shell = args.shell
    if args.default_yes is not None:
        config.default_yes = args.default_yes
    if args.verbose:
        config.verbose = True
    return config


def run_cli(
    argv: Optional[List[str]] = None,
    config: Optional[Config] = None,
    client: Optional[CompletionClient] = None,
    gate: Optional[ConfirmationGate] = None,
    executor: Optional[CommandExecutor] = None,
) -> int:
    """
    Run one llmwrap invocation and return the process exit code.

    The collaborators can be passed in; otherwise they are built from the
    configuration.
    """
    args = build_parser().parse_args(argv)
    err_console = Console(stderr=True)

    try:
        config = _apply_overrides(config or Config(), args)
        setup_logging(config)

        request = build_request(args.tool, " ".join(args.task))
        payload = build_payload(request, config.model, config.custom_prompt)

        if client is None:
            client = CompletionClient(
                config.api_key,
                api_base=config.api_base,
                model=config.model,
                timeout=config.request_timeout,
            )
        result = client.complete(payload)

        if gate is None:
            gate = ConfirmationGate(default_yes=config.default_yes)
        if not gate.ask(result.command):
            logger.info("Command declined by user")
            gate.report_declined()
            return int(ExitCode.DECLINED)

        gate.report_executing(result.command)
        if executor is None:
            executor = CommandExecutor(shell=config.shell)
        outcome = executor.execute_command(result.command)
        return outcome.exit_code

    except LlmwrapError as e:
        logger.info(f"{type(e).__name__}: {e}")
        err_console.print(f"Error: {e}", markup=False, highlight=False)
        return int(e.exit_code)
