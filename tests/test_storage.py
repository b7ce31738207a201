"""Tests for the local filesystem storage backend."""

from __future__ import annotations

import re
from io import BytesIO

import pytest

from storage.local_storage import LocalStorage, build_timestamped_filename


def test_timestamped_filename_keeps_extension():
    name = build_timestamped_filename("Holiday Photo.JPG", timestamp_ms=1700000000123)

    assert re.fullmatch(r"1700000000123-[0-9a-f]{8}\.jpg", name)


def test_timestamped_filenames_are_unique_within_a_millisecond():
    names = {build_timestamped_filename("a.png", timestamp_ms=1) for _ in range(20)}

    assert len(names) == 20


def test_save_then_delete(tmp_path):
    upload_dir = tmp_path / "uploads"
    storage = LocalStorage(str(upload_dir))

    stored = storage.save(BytesIO(b"pixels"), "1-abc.png")

    assert stored == "1-abc.png"
    assert (upload_dir / stored).read_bytes() == b"pixels"

    storage.delete(stored)
    assert not (upload_dir / stored).exists()
    storage.delete(stored)


def test_save_rejects_empty_filename(tmp_path):
    storage = LocalStorage(str(tmp_path))

    with pytest.raises(ValueError):
        storage.save(BytesIO(b""), "../")
