"""Font atlas metadata and its binary file format."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from termatlas.glyph import Glyph
from termatlas.serialization import (
    Deserializer,
    SerializationError,
    Serializer,
    deserialize_glyph,
    serialize_glyph,
)

ATLAS_HEADER = bytes([0xBA, 0xB1, 0xF0, 0xA5])
ATLAS_VERSION = 0x01


class FontAtlasDeserializationError(Exception):
    """Raised when an atlas file cannot be decoded."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


@dataclass
class FontAtlasConfig:
    """Layout of a bitmap font texture: sizes, cell dimensions and glyphs."""

    font_size: float
    texture_width: int
    texture_height: int
    cell_width: int
    cell_height: int
    glyphs: list[Glyph] = field(default_factory=list)

    PADDING: ClassVar[int] = 1

    def serialize(self) -> bytes:
        ser = Serializer()
        ser.write_bytes(ATLAS_HEADER)
        ser.write_u8(ATLAS_VERSION)
        ser.write_f32(self.font_size)
        ser.write_u32(self.texture_width)
        ser.write_u32(self.texture_height)
        ser.write_i32(self.cell_width)
        ser.write_i32(self.cell_height)
        ser.write_u16(len(self.glyphs))
        for glyph in self.glyphs:
            ser.write_bytes(serialize_glyph(glyph))
        return ser.getvalue()

    @classmethod
    def deserialize(cls, deserializer: Deserializer) -> FontAtlasConfig:
        header = bytes(deserializer.read_u8() for _ in range(len(ATLAS_HEADER)))
        if header != ATLAS_HEADER:
            raise SerializationError("Invalid font atlas header (wrong file format?)")

        version = deserializer.read_u8()
        if version != ATLAS_VERSION:
            raise SerializationError(f"Unsupported font atlas version 0x{version:02x}")

        font_size = deserializer.read_f32()
        texture_width = deserializer.read_u32()
        texture_height = deserializer.read_u32()
        cell_width = deserializer.read_i32()
        cell_height = deserializer.read_i32()

        glyph_count = deserializer.read_u16()
        glyphs = [deserialize_glyph(deserializer) for _ in range(glyph_count)]

        return cls(
            font_size=font_size,
            texture_width=texture_width,
            texture_height=texture_height,
            cell_width=cell_width,
            cell_height=cell_height,
            glyphs=glyphs,
        )

    @classmethod
    def from_binary(cls, data: bytes) -> FontAtlasConfig:
        """Decode an atlas file, raising FontAtlasDeserializationError on failure."""
        try:
            return cls.deserialize(Deserializer(data))
        except SerializationError as exc:
            raise FontAtlasDeserializationError(
                f"Failed to deserialize font atlas: {exc.message}"
            ) from exc

    def to_binary(self) -> bytes:
        return self.serialize()

    def terminal_size(self, viewport_width: int, viewport_height: int) -> tuple[int, int]:
        """Number of whole cells (columns, rows) that fit in the viewport."""
        return (
            _trunc_div(viewport_width, self.cell_width),
            _trunc_div(viewport_height, self.cell_height),
        )

    def cell_size(self) -> tuple[int, int]:
        return (self.cell_width, self.cell_height)