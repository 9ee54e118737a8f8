"""Domain primitives shared across feature modules."""

from .owner import OwnerKind, OwnerRef

__all__ = ["OwnerKind", "OwnerRef"]
