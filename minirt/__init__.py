"""Scene text helpers, colour names and an in-memory display and event model."""

__version__ = "0.1.0"

__all__ = ["colors", "display", "events", "textio", "wordtab"]