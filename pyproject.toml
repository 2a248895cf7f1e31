[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termatlas"
version = "0.1.0"
description = "Bitmap font atlases for grid-based terminal renderers: generation, binary metadata format and cell packing"
requires-python = ">=3.10"
dependencies = [
    "pillow>=10.1",
    "regex",
]
keywords = ["bitmap font", "font atlas", "terminal", "glyph", "texture array"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Fonts",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
termatlas = "termatlas.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["termatlas"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
