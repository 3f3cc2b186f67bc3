"""
UI package initialization.
"""

from . import home
from . import export

__all__ = ["home", "export"]
