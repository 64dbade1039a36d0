"""A small command shell with aliases, history, pipelines and output redirection."""

__version__ = "0.1.0"
__all__ = ["__version__"]