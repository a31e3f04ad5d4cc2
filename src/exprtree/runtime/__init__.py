from .core import RuntimeContext

__all__ = ["RuntimeContext"]
