"""Little-endian binary reader and writer used by the font atlas format."""

from __future__ import annotations

import struct

from termatlas.glyph import Glyph


class SerializationError(Exception):
    """Raised when binary data cannot be read or written."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class Serializer:
    """Accumulates little-endian encoded values."""

    def __init__(self) -> None:
        self._data = bytearray()

    def write_u8(self, value: int) -> None:
        self._data += value.to_bytes(1, "little")

    def write_u16(self, value: int) -> None:
        self._data += value.to_bytes(2, "little")

    def write_u32(self, value: int) -> None:
        self._data += value.to_bytes(4, "little")

    def write_i32(self, value: int) -> None:
        self._data += value.to_bytes(4, "little", signed=True)

    def write_f32(self, value: float) -> None:
        self._data += struct.pack("<f", value)

    def write_string(self, value: str) -> None:
        """Write a string as a one-byte length followed by its UTF-8 bytes."""
        encoded = value.encode("utf-8")
        if len(encoded) > 0xFF:
            raise SerializationError(
                f"String too long to serialize ({len(encoded)} bytes, max 255)"
            )
        self.write_u8(len(encoded))
        self._data += encoded

    def write_bytes(self, value: bytes) -> None:
        self._data += value

    def getvalue(self) -> bytes:
        """Return everything written so far."""
        return bytes(self._data)


class Deserializer:
    """Reads little-endian values from a byte buffer, advancing a cursor."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    def _take(self, length: int) -> bytes:
        end = self._position + length
        if end > len(self._data):
            raise SerializationError("Out of bounds read")
        chunk = self._data[self._position:end]
        self._position = end
        return chunk

    def read_u8(self) -> int:
        return self._take(1)[0]

    def read_u16(self) -> int:
        return int.from_bytes(self._take(2), "little")

    def read_u32(self) -> int:
        return int.from_bytes(self._take(4), "little")

    def read_i32(self) -> int:
        return int.from_bytes(self._take(4), "little", signed=True)

    def read_f32(self) -> float:
        (value,) = struct.unpack("<f", self._take(4))
        return value

    def read_string(self) -> str:
        """Read a length-prefixed string; invalid UTF-8 is replaced."""
        length = self.read_u8()
        return self._take(length).decode("utf-8", errors="replace")


def serialize_string(value: str) -> bytes:
    ser = Serializer()
    ser.write_string(value)
    return ser.getvalue()


def deserialize_string(deserializer: Deserializer) -> str:
    return deserializer.read_string()


def serialize_glyph(glyph: Glyph) -> bytes:
    ser = Serializer()
    ser.write_u16(glyph.id)
    x, y = glyph.pixel_coords
    ser.write_i32(x)
    ser.write_i32(y)
    ser.write_string(glyph.symbol)
    return ser.getvalue()


def deserialize_glyph(deserializer: Deserializer) -> Glyph:
    glyph_id = deserializer.read_u16()
    x = deserializer.read_i32()
    y = deserializer.read_i32()
    symbol = deserializer.read_string()
    return Glyph(id=glyph_id, symbol=symbol, pixel_coords=(x, y))