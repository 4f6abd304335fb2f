from .entropy import entropy
from .generate import generate

__all__ = ("entropy", "generate")
