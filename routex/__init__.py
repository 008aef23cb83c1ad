"""Routex - multi-hop swap router for Move DEX venues."""

from routex.routex import Routex, create_default_routex

__version__ = "0.1.0"
__all__ = ["Routex", "create_default_routex", "__version__"]
