"""fp_todo: a command-line manager for named todo lists."""

__version__ = "0.2.0"
