import pathlib

import pytest


def write_bundle(path: pathlib.Path, entries: dict[str, str]) -> pathlib.Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    lines = [f"{key}={value}" for key, value in entries.items()]
    path.write_text("\n".join(lines) + "\n", encoding="iso-8859-1")
    return path


@pytest.fixture
def bundle_writer():
    return write_bundle
