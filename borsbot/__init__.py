"""Command parsing, events, comments and shared context for a pull-request merge bot."""

__version__ = "0.1.0"
__all__ = ["commands", "parts", "parser", "events", "comment", "context"]