"""
Artvote CLI package.

Provides the command line interface for authenticating against Google and
building the voting form of an art contest round.
"""

__all__ = ["main", "__version__"]

from .cli import main  # noqa: F401
from .version import __version__  # noqa: F401
