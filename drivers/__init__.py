"""
Drivers domain package.

Public API:
- Driver
"""
from .models import Driver

__all__ = ["Driver"]
