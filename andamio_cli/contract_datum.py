"""Contract token datum and manage redeemer generation from a project file."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from .output import to_json

LOVELACE_PER_UNIT = 1_000_000
_EXTENSION_LENGTH = len(".json")


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


def _number(data: Any, key: str) -> int:
    value = _get(data, key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r}: expected an integer")
    return value


def _list(data: Any, key: str) -> list:
    value = _get(data, key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r}: expected a list")
    return value


@dataclass
class ProjectData:
    """One project listed in a contract token input file."""

    title: str = ""
    expiration: int = 0
    ada: int = 0
    gimbals: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> ProjectData:
        return cls(
            title=_text(data, "title"),
            expiration=_number(data, "expiration"),
            ada=_number(data, "ada"),
            gimbals=_number(data, "gimbals"),
        )


@dataclass
class ContractTokenInput:
    """The content of a contract token input file."""

    contributor_policy_ids: list[str] = field(default_factory=list)
    projects: list[ProjectData] = field(default_factory=list)
    escrow_hash: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> ContractTokenInput:
        policies = _list(data, "contributorPolicyIds")
        for policy in policies:
            if policy is not None and not isinstance(policy, str):
                raise ValueError("field 'contributorPolicyIds': expected strings")
        return cls(
            contributor_policy_ids=[policy or "" for policy in policies],
            projects=[ProjectData.from_dict(item) for item in _list(data, "projects")],
            escrow_hash=_text(data, "escrowHash"),
        )


def load_input(path: Union[str, Path]) -> ContractTokenInput:
    """Read and parse a contract token input file."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except ValueError as exc:
        raise ValueError(f"Failed to unmarshal input JSON: {exc}") from exc
    return ContractTokenInput.from_dict(data)


def _bytes_field(value: str) -> dict:
    return {"bytes": value} if value else {}


def _int_field(value: int) -> dict:
    return {"int": value} if value else {}


def _list_field(items: list) -> dict:
    return {"list": items} if items else {}


def _project(project: ProjectData) -> dict:
    return {
        "constructor": 0,
        "fields": [
            _bytes_field(project.title.encode("utf-8").hex()),
            _int_field(project.expiration),
            _int_field(project.ada * LOVELACE_PER_UNIT),
            _int_field(project.gimbals * LOVELACE_PER_UNIT),
        ],
    }


def _common_fields(data: ContractTokenInput) -> list[dict]:
    projects = [_project(project) for project in data.projects]
    policies = [_bytes_field(policy) for policy in data.contributor_policy_ids]
    return [{"list": projects or None}, _list_field(policies)]


def contract_token_datum(data: ContractTokenInput) -> dict:
    """Build the contract token datum (constructor 1)."""
    return {
        "constructor": 1,
        "fields": [{"constructor": 0, "fields": _common_fields(data)}],
    }


def manage_redeemer(data: ContractTokenInput) -> dict:
    """Build the manage redeemer (constructor 2), which also carries the escrow hash."""
    fields = _common_fields(data) + [_bytes_field(data.escrow_hash)]
    return {"constructor": 2, "fields": [{"constructor": 0, "fields": fields}]}


def write_json(path: Union[str, Path], datum: Any) -> None:
    """Write a datum as indented JSON and report where it went."""
    Path(path).write_text(to_json(datum), encoding="utf-8")
    print("Output written to", path)


def write_contract_token_datum(input_file_name: str) -> tuple[str, str]:
    """Write the datum and redeemer files next to the input file.

    The input name loses its last five characters (its ".json" extension) and
    gains "-contract-token-datum.json" and "-manage-redeemer.json".
    Returns the paths of the two files written.
    """
    if len(input_file_name) < _EXTENSION_LENGTH:
        raise ValueError(f"input file name is too short: {input_file_name!r}")
    stem = input_file_name[:-_EXTENSION_LENGTH] if input_file_name else ""
    datum_path = stem + "-contract-token-datum.json"
    redeemer_path = stem + "-manage-redeemer.json"

    data = load_input(input_file_name)
    write_json(datum_path, contract_token_datum(data))
    write_json(redeemer_path, manage_redeemer(data))
    return datum_path, redeemer_path