"""Block-based terminal: parse terminal output into styled lines and run commands as searchable blocks."""

__version__ = "0.1.0"