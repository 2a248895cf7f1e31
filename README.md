# termatlas

Tools for building and reading bitmap font atlases meant for terminal-style
renderers that draw a grid of fixed-size character cells.

A font atlas is made of two parts:

- a PNG texture in which every glyph sits in its own cell of a regular grid;
- a small binary metadata file (`.atlas`) that records the font size, the
  texture and cell dimensions, and for each glyph its id, its symbol and the
  pixel position of its cell in the texture.

ASCII glyphs use their code point as id; every other glyph gets the lowest id
that no ASCII glyph has taken. The id doubles as the layer index when the
cells are uploaded into a texture array.

## Installation

```
pip install termatlas
```

## Generating an atlas

The package installs a `termatlas` command that rasterises a glyph set with
Pillow and writes the texture and its metadata:

```
termatlas --font path/to/font.otf
```

Options:

- `--font PATH` – the font file to rasterise (default
  `./data/NimbusMonoPS-Regular.otf`);
- `--default-font` – use Pillow's built-in font instead of a file;
- `--size` – font size in pixels (default `10.0`);
- `--width` – texture width in pixels (default `1024`);
- `--chars` – the characters to include (default: a built-in set of ASCII,
  Latin-1, box-drawing and geometric symbols);
- `--texture` – output PNG (default `./data/bitmap_font.png`);
- `--metadata` – output atlas file (default `./data/bitmap_font.atlas`).

The output directories must already exist. On success the command prints the
texture size, the cell size and the glyph count; if the font cannot be loaded
or a file cannot be written it prints an error and exits with status 1.

The same can be done from Python:

```python
from termatlas.generator import GLYPHS, BitmapFontGenerator

font = BitmapFontGenerator(10.0, 1024, font_path=None).generate(GLYPHS)
font.save_texture("bitmap_font.png")
font.save_metadata("bitmap_font.atlas")
image = font.to_image()   # a Pillow RGBA image
```

The cell size is the largest glyph extent found in the set plus one pixel of
padding on each side. The texture height is rounded up to a power of two
(`next_pow2`). Input text is split into grapheme clusters (`split_graphemes`),
so a cluster of several code points becomes one glyph.

## Reading atlas metadata

```python
from pathlib import Path

from termatlas.atlas import FontAtlasConfig, FontAtlasDeserializationError

try:
    config = FontAtlasConfig.from_binary(Path("bitmap_font.atlas").read_bytes())
except FontAtlasDeserializationError as exc:
    raise SystemExit(str(exc))

print(config.cell_size())             # (cell_width, cell_height)
print(config.terminal_size(800, 600)) # columns and rows that fit the viewport

for glyph in config.glyphs:
    print(glyph.id, glyph.symbol, glyph.pixel_coords)

assert FontAtlasConfig.from_binary(config.to_binary()) == config
```

A file with the wrong header or an unsupported version is rejected with
`FontAtlasDeserializationError`, as is a file that ends too early. The
lower-level `Serializer` and `Deserializer` in `termatlas.serialization` read
and write the little-endian integers, floats and length-prefixed strings the
format is built from; they raise `SerializationError`.

## Glyphs

```python
from termatlas.glyph import Glyph

Glyph.from_symbol("A", (1, 1)).id          # 65
Glyph.from_symbol("A", (1, 1)).is_ascii()  # True
Glyph.from_symbol("€", (1, 1)).id          # 0xFFFF until an id is assigned
```

`termatlas.generator.assign_missing_glyph_ids(glyphs)` gives every unassigned
glyph the lowest free id and sorts the list by id.

## Looking up glyph layers

`GlyphLayers` maps a symbol to the texture-array layer holding its glyph.
ASCII characters map to their own code point; other symbols are looked up in
the atlas.

```python
from termatlas.grid import GlyphLayers

layers = GlyphLayers.from_config(config)
layers.get("A")   # 65
layers.get("█")   # the layer assigned to that glyph, or None if absent
```

## Terminal cells

`termatlas.grid` packs per-cell instance data the way a GPU renderer consumes
it: `CellDynamic.from_colors(layer, fg, bg)` packs a glyph layer and the RGB
parts of two `0xRRGGBBAA` colours into eight bytes, `create_grid(cols, rows)`
lists the cell positions row by row, and `quad_vertices(cell_size)` gives the
four `(x, y, u, v)` vertices of one cell. `TerminalGrid(layers, screen_size)`
keeps the cells of a whole screen, is updated with `update_cells` from
`CellData` values (unknown symbols fall back to the space glyph) and is
exported with `instance_bytes()`.

## Projection matrix

```python
from termatlas.mat4 import Mat4

projection = Mat4.orthographic_from_size(800.0, 600.0)
payload = projection.to_bytes()   # 16 little-endian 32-bit floats
```

## What it does not do

termatlas prepares textures, metadata and per-cell data but draws nothing
itself: it has no window, canvas or GPU renderer, and it does not upload
textures or buffers anywhere.