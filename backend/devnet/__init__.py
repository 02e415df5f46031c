"""
Developer network REST backend: accounts, profiles and posts.
"""
from devnet.__version__ import __version__

__all__ = ["__version__"]
