from . import escape, model

__all__ = ("escape", "model")
