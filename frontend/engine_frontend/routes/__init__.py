# Import the shared blueprint and *register* routes by importing each module.
from .blueprint import AnyMethodRule, pages_bp

from . import health       # noqa: F401
from . import pages        # noqa: F401

__all__ = ["pages_bp", "AnyMethodRule"]
