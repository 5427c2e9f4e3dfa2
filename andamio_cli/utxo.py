"""Course instance and global state UTxOs: decoding, fetching and display."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from .client import AndamioClient, ApiError, ApiResponse
from .hexutil import hex_to_string

LOVELACE = "lovelace"
SEPARATOR = "-" * 45


def _get(data: Any, key: str) -> Any:
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    if key in data:
        return data[key]
    folded = key.casefold()
    return next(
        (
            value
            for name, value in data.items()
            if isinstance(name, str) and name.casefold() == folded
        ),
        None,
    )


def _text(data: Any, key: str) -> str:
    value = _get(data, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r}: expected a string")
    return value


def _optional_text(data: Any, key: str) -> Optional[str]:
    value = _get(data, key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r}: expected a string")
    return value


def _number(data: Any, key: str) -> int:
    value = _get(data, key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r}: expected an integer")
    return value


@dataclass
class Asset:
    """A unit of value held in a UTxO."""

    unit: str = ""
    amount: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Asset:
        return cls(unit=_text(data, "unit"), amount=_text(data, "amount"))

    def display_unit(self) -> str:
        """The unit as shown to users: lovelace as is, other units as their asset name."""
        if self.unit == LOVELACE:
            return self.unit
        try:
            return hex_to_string(self.unit)
        except ValueError:
            return ""


@dataclass
class Datum:
    """The datum attached to a UTxO."""

    type: str = ""
    hash: str = ""
    bytes: str = ""
    json: Any = None

    @classmethod
    def from_dict(cls, data: Any) -> Datum:
        return cls(
            type=_text(data, "type"),
            hash=_text(data, "hash"),
            bytes=_text(data, "bytes"),
            json=_get(data, "json"),
        )


@dataclass
class Utxo:
    """An unspent transaction output as reported by the API."""

    tx_hash: str = ""
    index: int = 0
    slot: int = 0
    assets: list[Asset] = field(default_factory=list)
    address: str = ""
    datum: Datum = field(default_factory=Datum)
    reference_script: Optional[str] = None
    txout_cbor: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> Utxo:
        raw_assets = _get(data, "assets")
        if raw_assets is None:
            raw_assets = []
        elif not isinstance(raw_assets, list):
            raise ValueError("field 'assets': expected a list")
        return cls(
            tx_hash=_text(data, "tx_hash"),
            index=_number(data, "index"),
            slot=_number(data, "slot"),
            assets=[Asset.from_dict(item) for item in raw_assets],
            address=_text(data, "address"),
            datum=Datum.from_dict(_get(data, "datum")),
            reference_script=_optional_text(data, "reference_script"),
            txout_cbor=_optional_text(data, "txout_cbor"),
        )


def format_utxo(utxo: Utxo) -> str:
    """Render a UTxO as the multi-line listing shown by the query commands."""
    lines = [
        f"TxHash: {utxo.tx_hash}",
        f"Index: {utxo.index}",
        f"Slot: {utxo.slot}",
        f"Address: {utxo.address}",
        "Assets:",
    ]
    lines.extend(
        f"  - Unit: {asset.display_unit()}, Amount: {asset.amount}"
        for asset in utxo.assets
    )
    lines.extend(
        [
            "Datum:",
            f"  Type: {utxo.datum.type}",
            f"  Hash: {utxo.datum.hash}",
            f"  Bytes: {utxo.datum.bytes}",
            SEPARATOR,
        ]
    )
    return "\n".join(lines)


def _decode(response: ApiResponse) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise ApiError(f"Failed to unmarshal JSON: {exc}") from exc


def _utxo_list(data: Any) -> list[Utxo]:
    if data is None:
        return []
    if not isinstance(data, list):
        raise ApiError("Failed to unmarshal JSON: expected an array of UTxOs")
    try:
        return [Utxo.from_dict(item) for item in data]
    except ValueError as exc:
        raise ApiError(f"Failed to unmarshal JSON: {exc}") from exc


def fetch_course_instances(client: AndamioClient) -> list[Utxo]:
    """Fetch every course instance UTxO on the network."""
    return _utxo_list(_decode(client.all_course_instance_utxos()))


def fetch_global_state(client: AndamioClient, token_name: str = "") -> list[Utxo]:
    """Fetch all global state UTxOs, or only the one for token_name when given."""
    if not token_name:
        return _utxo_list(_decode(client.all_global_state_utxos()))
    data = _decode(client.global_state_utxo(token_name))
    try:
        return [Utxo.from_dict(data)]
    except ValueError as exc:
        raise ApiError(f"Failed to unmarshal JSON: {exc}") from exc