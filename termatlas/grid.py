"""Terminal cell grid: instance data for rendering glyphs from a font atlas."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from termatlas.atlas import FontAtlasConfig

QUAD_INDICES = (0, 1, 2, 0, 3, 1)
DEFAULT_FG = 0xFFFF_FFFF
DEFAULT_BG = 0x0000_00FF
_U16_MAX = 0xFFFF


@dataclass(frozen=True)
class CellData:
    """Content of one terminal cell: a symbol and RGBA colours (0xRRGGBBAA)."""

    symbol: str
    fg: int
    bg: int


@dataclass(frozen=True)
class CellDynamic:
    """Packed per-cell instance data: 2-byte layer, fg RGB, bg RGB."""

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != 8:
            raise ValueError(f"cell data must be 8 bytes, got {len(self.data)}")

    @classmethod
    def from_colors(cls, layer: int, fg: int, bg: int) -> CellDynamic:
        """Pack a glyph layer and the RGB parts of two colours; alpha is dropped."""
        layer &= _U16_MAX
        packed = bytes(
            (
                layer & 0xFF,
                (layer >> 8) & 0xFF,
                (fg >> 24) & 0xFF,
                (fg >> 16) & 0xFF,
                (fg >> 8) & 0xFF,
                (bg >> 24) & 0xFF,
                (bg >> 16) & 0xFF,
                (bg >> 8) & 0xFF,
            )
        )
        return cls(packed)

    @property
    def layer(self) -> int:
        return self.data[0] | (self.data[1] << 8)


def create_grid(cols: int, rows: int) -> list[tuple[int, int]]:
    """Grid positions (col, row) of every cell in row-major order."""
    if not 0 < cols < _U16_MAX:
        raise ValueError(f"cols: {cols}")
    if not 0 < rows < _U16_MAX:
        raise ValueError(f"rows: {rows}")
    return [(col, row) for row in range(rows) for col in range(cols)]


def create_cell_data(cols: int, rows: int) -> list[CellDynamic]:
    """Initial cells: layer 0, white foreground, black background."""
    blank = CellDynamic.from_colors(0, DEFAULT_FG, DEFAULT_BG)
    return [blank] * max(cols * rows, 0)


def quad_vertices(cell_size: tuple[int, int]) -> tuple[float, ...]:
    """The four (x, y, u, v) vertices of one cell quad."""
    w, h = float(cell_size[0]), float(cell_size[1])
    return (
        w, 0.0, 1.0, 0.0,    # top-right
        0.0, h, 0.0, 1.0,    # bottom-left
        w, h, 1.0, 1.0,      # bottom-right
        0.0, 0.0, 0.0, 0.0,  # top-left
    )


def _is_single_ascii(key: str) -> bool:
    return len(key.encode("utf-8")) == 1 and key.isascii()


@dataclass
class GlyphLayers:
    """Maps symbols to texture-array layers; ASCII characters map to their code."""

    cell_size: tuple[int, int]
    layers: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_config(cls, config: FontAtlasConfig) -> GlyphLayers:
        layers = {g.symbol: g.id for g in config.glyphs if not g.is_ascii()}
        return cls(cell_size=config.cell_size(), layers=layers)

    def get(self, key: str) -> int | None:
        """The layer for key, or None when the atlas has no such glyph."""
        if _is_single_ascii(key):
            return ord(key)
        return self.layers.get(key)


class TerminalGrid:
    """A grid of terminal cells sized to fit a screen."""

    def __init__(self, atlas: GlyphLayers, screen_size: tuple[int, int]) -> None:
        cell_w, cell_h = atlas.cell_size
        if cell_w <= 0 or cell_h <= 0:
            raise ValueError(f"invalid cell size {cell_w}x{cell_h}")
        cols = screen_size[0] // cell_w
        rows = screen_size[1] // cell_h
        self.atlas = atlas
        self.positions = create_grid(cols, rows)
        self.cells = create_cell_data(cols, rows)
        self._terminal_size = (cols, rows)

    def cell_size(self) -> tuple[int, int]:
        return self.atlas.cell_size

    def terminal_size(self) -> tuple[int, int]:
        return self._terminal_size

    def cell_count(self) -> int:
        return len(self.cells)

    def update_cells(self, cells: Iterable[CellData]) -> None:
        """Replace cell contents in row-major order; unknown symbols draw as space."""
        fallback = self.atlas.get(" ")
        if fallback is None:
            fallback = 0
        for index, data in zip(range(len(self.cells)), cells):
            layer = self.atlas.get(data.symbol)
            if layer is None:
                layer = fallback
            self.cells[index] = CellDynamic.from_colors(layer, data.fg, data.bg)

    def instance_bytes(self) -> bytes:
        """All cells' packed instance data, concatenated."""
        return b"".join(cell.data for cell in self.cells)