import json

import pytest

from andamio_cli.nft_metadata import (
    build_metadata,
    split_for_metadata,
    write_metadata,
)


def test_split_empty_gives_no_chunks():
    assert split_for_metadata("") == []


def test_split_short_text_is_one_chunk():
    assert split_for_metadata("ipfs://abc") == ["ipfs://abc"]


@pytest.mark.parametrize("length", [1, 55, 56, 57, 112, 130, 300])
def test_split_chunks_rejoin_and_respect_limit(length):
    text = "x" * length
    chunks = split_for_metadata(text)
    assert "".join(chunks) == text
    assert all(len(chunk.encode("utf-8")) <= 56 for chunk in chunks)
    assert all(len(chunk) == 56 for chunk in chunks[:-1])
    assert len(chunks) == -(-length // 56)


def test_split_multibyte_on_boundary_rejoins():
    text = "\u00e9" * 56
    chunks = split_for_metadata(text)
    assert "".join(chunks) == text
    assert all(len(chunk.encode("utf-8")) == 56 for chunk in chunks)


def test_build_metadata_layout():
    image = "ipfs://" + "q" * 120
    metadata = build_metadata("policy", "asset", "My NFT", image, "image/png", "short")
    asset = metadata["721"]["policy"]["asset"]
    assert asset["name"] == "My NFT"
    assert "".join(asset["image"]) == image
    assert asset["mediaType"] == "image/png"
    assert asset["description"] == ["short"]
    assert asset["files"] == [{"mediaType": "image/png", "src": asset["image"]}]
    assert list(asset) == ["name", "image", "mediaType", "description", "files"]


def test_build_metadata_empty_fields_are_null():
    metadata = build_metadata("p", "a", "n", "", "image/png", "")
    asset = metadata["721"]["p"]["a"]
    assert asset["image"] is None
    assert asset["description"] is None
    assert asset["files"][0]["src"] is None


def test_write_metadata_round_trip(tmp_path):
    metadata = build_metadata("p", "a", "<b>&", "ipfs://x", "image/png", "desc")
    path = write_metadata(tmp_path / "meta.json", metadata)
    text = path.read_text(encoding="utf-8")
    assert json.loads(text) == metadata
    assert "\\u003cb\\u003e\\u0026" in text
    assert text.startswith('{\n  "721"')