"""Rasterises a character set into a monospaced bitmap font atlas."""

from __future__ import annotations

import struct
from array import array
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Union

import regex
from PIL import Image, ImageDraw, ImageFont

from termatlas.atlas import FontAtlasConfig
from termatlas.glyph import Glyph

PADDING = 1
DEFAULT_FONT_PATH = "./data/NimbusMonoPS-Regular.otf"
GLYPHS = (
    "!\"#$%&'()*+,-./0123456789:;<=>?@ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_`abcdefghijklmnop\n"
    "qrstuvwxyz{|}~¡¢£¤¥¦§¨©ª«¬®¯°±²³´µ¶¸¹º»¼½¾¿ÀÁÂÃÄÅÆÇÈÉÊËÌÍÎÏÐÑÒÓÔÕÖ×ØÙÚÛÜÝÞßàáâãä\n"
    "åæçèéêëìíîïðñòóôõö÷øùúûüýþÿıƒ‗•←↑→↓↔↕─│┌┐└┘├┤┬┴┼═║╒╓╔╕╖╗╘╙╚╛╜╝╞╟╠╡╢╣╤╥╦╧╨╩╪╫╬▀▄█\n"
    "░▒▓ ■□▪▫▬▭▮▯▲▶▼◀◆◇◈◉○◎●◐◑◒◓◕◖◗◢◣◤◥"
)

_MEASURE_SIZE = 100
_WHITE_RGB = 0xFFFFFF00

_Font = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def split_graphemes(text: str) -> list[str]:
    """Split text into extended grapheme clusters."""
    return regex.findall(r"\X", text)


def next_pow2(n: int) -> int:
    """Round up to the next power of two; zero and negatives give 0."""
    if n <= 0:
        return 0
    return 1 << (n - 1).bit_length()


def assign_missing_glyph_ids(glyphs: list[Glyph]) -> None:
    """Give unassigned glyphs the lowest free ids, then sort the list by id."""
    used = {g.id for g in glyphs if g.id != Glyph.UNASSIGNED_ID}
    candidate = 0
    for glyph in glyphs:
        if glyph.id != Glyph.UNASSIGNED_ID:
            continue
        while candidate in used:
            candidate += 1
        glyph.id = candidate
        candidate += 1
    glyphs.sort(key=lambda g: g.id)


@dataclass
class BitmapFont:
    """A rasterised font texture together with its atlas metadata."""

    texture_data: array
    metadata: FontAtlasConfig

    def to_image(self) -> Image.Image:
        """The texture as an RGBA image; each pixel is stored as 0xRRGGBBAA."""
        width = self.metadata.texture_width
        height = self.metadata.texture_height
        count = width * height
        pixels = list(self.texture_data[:count])
        pixels.extend([0] * (count - len(pixels)))
        raw = struct.pack(f">{count}I", *pixels)
        return Image.frombytes("RGBA", (width, height), raw)

    def save_texture(self, path: str | Path) -> None:
        self.to_image().save(path)

    def save_metadata(self, path: str | Path) -> None:
        Path(path).write_bytes(self.metadata.to_binary())


def _render(font: _Font, text: str, width: int, height: int) -> Image.Image:
    image = Image.new("L", (width, height), 0)
    ImageDraw.Draw(image).text((0, 0), text, font=font, fill=255)
    return image


def _lit_pixels(image: Image.Image) -> Iterator[tuple[int, int, int]]:
    """Yield (x, y, coverage) for every pixel with non-zero coverage."""
    bbox = image.getbbox()
    if bbox is None:
        return
    left, top, right, _ = bbox
    row_width = right - left
    for index, alpha in enumerate(image.crop(bbox).tobytes()):
        if alpha:
            dy, dx = divmod(index, row_width)
            yield left + dx, top + dy, alpha


class BitmapFontGenerator:
    """Builds bitmap fonts from a font file at a fixed size and texture width."""

    def __init__(
        self,
        font_size: float,
        texture_width: int,
        font_path: str | Path | None = DEFAULT_FONT_PATH,
    ) -> None:
        self.font_size = float(font_size)
        self.texture_width = int(texture_width)
        if font_path is None:
            self._font: _Font = ImageFont.load_default(size=self.font_size)
        else:
            self._font = ImageFont.truetype(str(font_path), self.font_size)

    def _cell_dimensions(self, graphemes: list[str]) -> tuple[int, int]:
        max_x = 0
        max_y = 0
        for symbol in graphemes:
            image = _render(self._font, symbol, _MEASURE_SIZE, _MEASURE_SIZE)
            bbox = image.getbbox()
            if bbox is None:
                continue
            max_x = max(max_x, bbox[2] - 1)
            max_y = max(max_y, bbox[3] - 1)
        return max_x + PADDING * 2, max_y + PADDING * 2

    def generate(self, chars: str) -> BitmapFont:
        """Rasterise every grapheme of chars into a grid texture."""
        graphemes = split_graphemes(chars)
        cell_w, cell_h = self._cell_dimensions(graphemes)

        grid_cols = self.texture_width // cell_w
        if grid_cols <= 0:
            raise ValueError(
                f"texture width {self.texture_width} is narrower than one cell ({cell_w})"
            )
        grid_rows = len(graphemes) // grid_cols + 1
        texture_width = self.texture_width
        texture_height = next_pow2(grid_rows * cell_h)
        texture = array("I", [0]) * (texture_width * texture_height)

        glyphs: list[Glyph] = []
        for i, symbol in enumerate(graphemes[: grid_cols * grid_rows]):
            grid_y, grid_x = divmod(i, grid_cols)
            pixel_x = grid_x * cell_w
            pixel_y = grid_y * cell_h
            glyphs.append(Glyph.from_symbol(symbol, (pixel_x + PADDING, pixel_y + PADDING)))

            image = _render(self._font, symbol, 2 * cell_w, 2 * cell_h)
            for x, y, alpha in _lit_pixels(image):
                if x >= cell_w or y >= cell_h:
                    continue
                px = x + pixel_x + PADDING
                py = y + pixel_y + PADDING
                if px >= texture_width or py >= texture_height:
                    continue
                texture[py * texture_width + px] = _WHITE_RGB | alpha

        assign_missing_glyph_ids(glyphs)

        return BitmapFont(
            texture_data=texture,
            metadata=FontAtlasConfig(
                font_size=self.font_size,
                texture_width=texture_width,
                texture_height=texture_height,
                cell_width=cell_w,
                cell_height=cell_h,
                glyphs=glyphs,
            ),
        )