"""Glyph records stored in a font atlas."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class Glyph:
    """A single glyph: its texture layer id, its symbol and its texture position."""

    id: int
    symbol: str
    pixel_coords: tuple[int, int]

    UNASSIGNED_ID: ClassVar[int] = 0xFFFF

    @classmethod
    def from_symbol(cls, symbol: str, pixel_coords: tuple[int, int]) -> Glyph:
        """Create a glyph; single ASCII characters use their code point as id."""
        if not symbol:
            raise ValueError("glyph symbol must not be empty")
        if _is_single_ascii(symbol):
            glyph_id = ord(symbol)
        else:
            glyph_id = cls.UNASSIGNED_ID
        return cls(id=glyph_id, symbol=symbol, pixel_coords=tuple(pixel_coords))

    def is_ascii(self) -> bool:
        """True when the symbol is exactly one ASCII character."""
        return _is_single_ascii(self.symbol)


def _is_single_ascii(symbol: str) -> bool:
    return len(symbol.encode("utf-8")) == 1 and symbol.isascii()