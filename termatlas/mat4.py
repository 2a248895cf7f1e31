"""Column-major 4x4 matrices for projecting terminal cells."""

from __future__ import annotations

import struct
from dataclasses import dataclass

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


@dataclass(frozen=True)
class Mat4:
    """A 4x4 matrix stored as 16 floats in column-major order."""

    data: tuple[float, ...] = _IDENTITY

    def __post_init__(self) -> None:
        if len(self.data) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(self.data)}")
        object.__setattr__(self, "data", tuple(float(v) for v in self.data))

    @classmethod
    def identity(cls) -> Mat4:
        return cls(_IDENTITY)

    @classmethod
    def orthographic(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> Mat4:
        """Orthographic projection mapping the given box onto clip space."""
        if right == left or top == bottom or far == near:
            raise ValueError("orthographic projection needs a non-empty volume")
        data = list(_IDENTITY)
        data[0] = 2.0 / (right - left)
        data[5] = 2.0 / (top - bottom)
        data[10] = -2.0 / (far - near)
        data[12] = -(right + left) / (right - left)
        data[13] = -(top + bottom) / (top - bottom)
        data[14] = -(far + near) / (far - near)
        return cls(tuple(data))

    @classmethod
    def orthographic_from_size(cls, width: float, height: float) -> Mat4:
        """Projection for pixel coordinates with the origin at the top left."""
        return cls.orthographic(0.0, width, height, 0.0, -1.0, 1.0)

    def to_bytes(self) -> bytes:
        """The matrix as 16 little-endian 32-bit floats."""
        return struct.pack("<16f", *self.data)