import json
from pathlib import Path

import pytest

from gridnav.nav.errors import MapLoadError
from gridnav.nav.map_loader import load_field, load_map_descriptor


def test_load_field_reads_descriptor_and_map(tmp_path: Path) -> None:
    path = _write_map(
        tmp_path,
        ["..#", "...", "#.."],
        origin=[1.0, -2.0],
        resolution=0.5,
    )

    field = load_field(path)

    assert (field.width, field.height) == (3, 3)
    assert field.origin == (1.0, -2.0)
    assert field.resolution == 0.5
    assert field.blocked_coordinates() == [(0, 0), (2, 2)]


def test_descriptor_defaults(tmp_path: Path) -> None:
    path = _write_map(tmp_path, ["..."])

    descriptor = load_map_descriptor(path)

    assert descriptor.blocked_tiles == "#"
    assert descriptor.origin == (0.0, 0.0)
    assert descriptor.resolution == 1.0


def test_invalid_descriptor_raises(tmp_path: Path) -> None:
    path = _write_map(tmp_path, ["..."], resolution=0)
    with pytest.raises(MapLoadError):
        load_field(path)

    path = _write_map(tmp_path, ["..."], blocked_tiles="")
    with pytest.raises(MapLoadError):
        load_field(path)


def test_unknown_descriptor_keys_raise(tmp_path: Path) -> None:
    path = tmp_path / "map.json"
    path.write_text(
        json.dumps({"map_file": "map.txt", "layer": 3}), encoding="utf-8"
    )

    with pytest.raises(MapLoadError):
        load_map_descriptor(path)


def test_missing_files_raise(tmp_path: Path) -> None:
    with pytest.raises(MapLoadError):
        load_field(tmp_path / "missing.json")

    path = tmp_path / "map.json"
    path.write_text(json.dumps({"map_file": "nowhere.txt"}), encoding="utf-8")
    with pytest.raises(MapLoadError):
        load_field(path)


def test_malformed_inputs_raise(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(MapLoadError):
        load_field(path)

    ragged = _write_map(tmp_path, ["...", ".."])
    with pytest.raises(MapLoadError):
        load_field(ragged)


def test_undecodable_files_raise(tmp_path: Path) -> None:
    path = tmp_path / "map.json"
    path.write_bytes(b'{"map_file": "\xff"}')
    with pytest.raises(MapLoadError):
        load_field(path)

    (tmp_path / "map.txt").write_bytes(b"..\xff\n...\n")
    path.write_text(json.dumps({"map_file": "map.txt"}), encoding="utf-8")
    with pytest.raises(MapLoadError):
        load_field(path)


def _write_map(tmp_path: Path, lines: list[str], **descriptor: object) -> Path:
    (tmp_path / "map.txt").write_text("\n".join(lines) + "\n", encoding="utf-8")
    path = tmp_path / "map.json"
    path.write_text(
        json.dumps({"map_file": "map.txt", **descriptor}), encoding="utf-8"
    )
    return path
