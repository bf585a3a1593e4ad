from segintersect.core.vector import Vector3

__all__ = ["Vector3"]
