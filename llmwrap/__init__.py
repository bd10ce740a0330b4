"""
Turn a plain-English description of a shell task into a runnable command.

llmwrap asks the OpenAI Responses API for a single command line for a named
tool, shows it, and runs it through the host shell only after the operator
confirms.
"""

__version__ = "0.1.0"
