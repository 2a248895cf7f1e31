from PIL import Image

from termatlas.atlas import FontAtlasConfig
from termatlas.cli import main
from termatlas.generator import GLYPHS, split_graphemes


def _paths(tmp_path):
    return tmp_path / "font.png", tmp_path / "font.atlas"


def test_main_writes_files(tmp_path, capsys):
    texture, metadata = _paths(tmp_path)
    rc = main(
        [
            "--default-font",
            "--chars", "AB",
            "--width", "64",
            "--texture", str(texture),
            "--metadata", str(metadata),
        ]
    )
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Bitmap font generated!"
    assert out[3] == "Glyph count: 2"

    config = FontAtlasConfig.from_binary(metadata.read_bytes())
    assert [g.symbol for g in config.glyphs] == ["A", "B"]
    assert out[1] == f"Texture size: {config.texture_width}x{config.texture_height}"
    assert out[2] == f"Cell size: {config.cell_width}x{config.cell_height}"
    with Image.open(texture) as image:
        assert image.size == (config.texture_width, config.texture_height)


def test_main_default_glyph_set(tmp_path, capsys):
    texture, metadata = _paths(tmp_path)
    rc = main(["--default-font", "--texture", str(texture), "--metadata", str(metadata)])
    assert rc == 0
    config = FontAtlasConfig.from_binary(metadata.read_bytes())
    assert len(config.glyphs) == len(split_graphemes(GLYPHS))
    assert config.texture_width == 1024
    assert f"Glyph count: {len(config.glyphs)}" in capsys.readouterr().out


def test_main_missing_font(tmp_path, capsys):
    texture, metadata = _paths(tmp_path)
    rc = main(
        [
            "--font", str(tmp_path / "missing.otf"),
            "--texture", str(texture),
            "--metadata", str(metadata),
        ]
    )
    assert rc == 1
    assert capsys.readouterr().err.startswith("error:")
    assert not metadata.exists()


def test_main_texture_too_narrow(tmp_path):
    texture, metadata = _paths(tmp_path)
    rc = main(
        [
            "--default-font",
            "--chars", "AB",
            "--width", "1",
            "--texture", str(texture),
            "--metadata", str(metadata),
        ]
    )
    assert rc == 1
    assert not texture.exists()