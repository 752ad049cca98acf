[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pixkit"
version = "0.1.0"
description = "Building blocks for a headless code editor: a tab-aware glyph buffer, C-style tokenizers, palettes, a float variable cache and a viewport rectangle"
requires-python = ">=3.10"
dependencies = []
keywords = ["text editor", "text buffer", "tokenizer", "syntax highlighting", "palette"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Editors",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pixkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
