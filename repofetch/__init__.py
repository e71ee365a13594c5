"""Show a summary of a Git repository in the terminal, or as JSON or YAML."""

__version__ = "0.1.0"