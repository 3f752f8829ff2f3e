# In utils/__init__.py
from .decorators import SeedResult, handle_errors

__all__ = [
    "SeedResult",
    "handle_errors",
]
