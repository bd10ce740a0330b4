"""
This allows llmwrap to be run as a module with `python -m llmwrap`.
"""
from .main import main

if __name__ == "__main__":
    main()
