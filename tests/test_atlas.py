import pytest

from termatlas.atlas import FontAtlasConfig, FontAtlasDeserializationError
from termatlas.glyph import Glyph
from termatlas.serialization import Deserializer, SerializationError


def _sample_config():
    glyphs = [
        Glyph(id=65, symbol="A", pixel_coords=(0, 0)),
        Glyph(id=66, symbol="B", pixel_coords=(16, 0)),
        Glyph(id=8364, symbol="€", pixel_coords=(32, 0)),
        Glyph(id=10000, symbol="🚀", pixel_coords=(48, 0)),
    ]
    return FontAtlasConfig(
        font_size=16.5,
        texture_width=512,
        texture_height=256,
        cell_width=12,
        cell_height=18,
        glyphs=glyphs,
    )


def test_round_trip():
    original = _sample_config()
    restored = FontAtlasConfig.deserialize(Deserializer(original.serialize()))
    assert restored.font_size == original.font_size
    assert restored.texture_width == original.texture_width
    assert restored.texture_height == original.texture_height
    assert restored.cell_width == original.cell_width
    assert restored.cell_height == original.cell_height
    assert len(restored.glyphs) == len(original.glyphs)
    for orig, deser in zip(original.glyphs, restored.glyphs):
        assert orig.id == deser.id
        assert orig.symbol == deser.symbol
        assert orig.pixel_coords == deser.pixel_coords


def test_binary_round_trip():
    original = _sample_config()
    assert FontAtlasConfig.from_binary(original.to_binary()) == original


def test_header_and_version_bytes():
    data = _sample_config().to_binary()
    assert data[:5] == bytes([0xBA, 0xB1, 0xF0, 0xA5, 0x01])


def test_empty_glyph_list_round_trip():
    config = FontAtlasConfig(10.0, 1024, 64, 7, 13, [])
    assert FontAtlasConfig.from_binary(config.to_binary()) == config


def test_invalid_header():
    data = bytearray(_sample_config().to_binary())
    data[0] = 0x00
    with pytest.raises(SerializationError) as info:
        FontAtlasConfig.deserialize(Deserializer(bytes(data)))
    assert info.value.message == "Invalid font atlas header (wrong file format?)"


def test_unsupported_version():
    data = bytearray(_sample_config().to_binary())
    data[4] = 0x02
    with pytest.raises(SerializationError) as info:
        FontAtlasConfig.deserialize(Deserializer(bytes(data)))
    assert info.value.message == "Unsupported font atlas version 0x02"


def test_from_binary_wraps_error_message():
    with pytest.raises(FontAtlasDeserializationError) as info:
        FontAtlasConfig.from_binary(b"\x00\x00\x00\x00\x01")
    assert info.value.message == (
        "Failed to deserialize font atlas: Invalid font atlas header (wrong file format?)"
    )


def test_from_binary_truncated():
    data = _sample_config().to_binary()
    with pytest.raises(FontAtlasDeserializationError) as info:
        FontAtlasConfig.from_binary(data[:-2])
    assert info.value.message == "Failed to deserialize font atlas: Out of bounds read"


def test_from_binary_empty():
    with pytest.raises(FontAtlasDeserializationError):
        FontAtlasConfig.from_binary(b"")


def test_cell_size():
    assert _sample_config().cell_size() == (12, 18)


def test_terminal_size_whole_cells():
    config = _sample_config()
    assert config.terminal_size(120, 180) == (10, 10)
    assert config.terminal_size(11, 17) == (0, 0)


def test_terminal_size_times_cell_fits_viewport():
    config = _sample_config()
    cols, rows = config.terminal_size(800, 600)
    assert cols * 12 <= 800 < (cols + 1) * 12
    assert rows * 18 <= 600 < (rows + 1) * 18


def test_negative_pixel_coords_round_trip():
    config = FontAtlasConfig(
        font_size=8.0,
        texture_width=256,
        texture_height=128,
        cell_width=9,
        cell_height=14,
        glyphs=[Glyph(id=7, symbol="x", pixel_coords=(-3, -100))],
    )
    restored = FontAtlasConfig.from_binary(config.to_binary())
    assert restored.glyphs[0].pixel_coords == (-3, -100)
    assert restored.glyphs[0].id == 7
    assert restored.glyphs[0].symbol == "x"