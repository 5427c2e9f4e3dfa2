"""NFT metadata following the CIP-25 layout."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from .output import to_json

METADATA_LABEL = "721"
CHUNK_SIZE = 56


def split_for_metadata(text: str) -> list[str]:
    """Cut text into pieces of at most 56 bytes of UTF-8.

    A multi-byte character cut in two comes out as U+FFFD on each side.
    """
    raw = text.encode("utf-8")
    return [
        raw[start:start + CHUNK_SIZE].decode("utf-8", errors="replace")
        for start in range(0, len(raw), CHUNK_SIZE)
    ]


def _chunks_or_none(text: str) -> Optional[list[str]]:
    return split_for_metadata(text) or None


def build_metadata(
    policy_id: str,
    asset_name: str,
    name: str,
    image: str,
    media_type: str,
    description: str,
) -> dict[str, Any]:
    """Build the metadata document for one asset under one policy.

    Image and description are split into chunks; an empty one becomes null.
    """
    image_chunks = _chunks_or_none(image)
    asset = {
        "name": name,
        "image": image_chunks,
        "mediaType": media_type,
        "description": _chunks_or_none(description),
        "files": [{"mediaType": media_type, "src": image_chunks}],
    }
    return {METADATA_LABEL: {policy_id: {asset_name: asset}}}


def write_metadata(path: Union[str, Path], metadata: Any) -> Path:
    """Write metadata as indented JSON to path and return the path written."""
    target = Path(path)
    target.write_text(to_json(metadata), encoding="utf-8")
    return target