# Import the shared blueprint and *register* routes by importing each module.
from .blueprint import AnyMethodRule, api_bp

from . import health       # noqa: F401
from . import api          # noqa: F401
from .api import SuffixConverter

__all__ = ["api_bp", "AnyMethodRule", "SuffixConverter"]
