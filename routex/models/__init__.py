"""Data models for Routex.

- types.py: validated primitives (type identifiers, u64 amounts)
- registry.py: Asset and Venue registries
- api.py: pydantic request/response models of the HTTP service
"""

from routex.models.types import U64, TypeId, parse_u64

__all__ = ["TypeId", "U64", "parse_u64"]
