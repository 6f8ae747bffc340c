# hr/models/__init__.py
from .department import Department

__all__ = ["Department"]
