from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest

from composeon.indexer import IconIndexer

SVG_TEMPLATE = (
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" width="24" height="24">'
    "<title>{title}</title><path d=\"M0 0h24v24H0z\"/></svg>"
)

SAMPLE_FILES = [
    "aws.svg",
    "aws-color.svg",
    "aws-text.svg",
    "docker.svg",
    "figma.svg",
    "github.svg",
    "github-color.svg",
    "openai.svg",
    "openai-mono.svg",
    "readme.txt",
]


def write_icons(directory: Path, filenames: Iterable[str]) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    for filename in filenames:
        title = filename.rsplit(".", 1)[0]
        (directory / filename).write_text(SVG_TEMPLATE.format(title=title), encoding="utf-8")
    return directory


@pytest.fixture
def indexer() -> IconIndexer:
    return IconIndexer()


@pytest.fixture
def icons_dir(tmp_path: Path) -> Path:
    return write_icons(tmp_path / "icons", SAMPLE_FILES)
