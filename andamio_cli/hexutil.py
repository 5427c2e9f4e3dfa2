"""Decoding of hex-encoded Cardano asset units."""

import binascii

POLICY_ID_HEX_LENGTH = 56


def hex_to_string(hex_str: str) -> str:
    """Drop the 56-character policy id from an asset unit and decode the asset name.

    Raises ValueError when the unit is too short or the remainder is not valid hex.
    """
    if len(hex_str) <= POLICY_ID_HEX_LENGTH:
        raise ValueError("hex string is too short")
    try:
        raw = binascii.unhexlify(hex_str[POLICY_ID_HEX_LENGTH:])
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"failed to decode hex string: {exc}") from exc
    return raw.decode("utf-8", errors="replace")