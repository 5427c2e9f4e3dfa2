"""Decoded datum records returned by the Andamio API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional


def _lookup(data: Any, key: str) -> Any:
    if data is None:
        return None
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    if key in data:
        return data[key]
    folded = key.casefold()
    for name, value in data.items():
        if isinstance(name, str) and name.casefold() == folded:
            return value
    return None


def _str(data: Any, key: str) -> str:
    value = _lookup(data, key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r}: expected a string")
    return value


def _int(data: Any, key: str) -> int:
    value = _lookup(data, key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r}: expected an integer")
    return value


def _bool(data: Any, key: str) -> bool:
    value = _lookup(data, key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r}: expected a boolean")
    return value


def _str_list(data: Any, key: str) -> Optional[list[str]]:
    value = _lookup(data, key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError(f"field {key!r}: expected a list")
    result = []
    for item in value:
        if item is None:
            result.append("")
        elif isinstance(item, str):
            result.append(item)
        else:
            raise ValueError(f"field {key!r}: expected a list of strings")
    return result


def _objects(data: Any, key: str, cls: Any) -> Optional[list]:
    value = _lookup(data, key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError(f"field {key!r}: expected a list")
    return [cls.from_dict(item) for item in value]


def _dicts(items: Optional[list]) -> Optional[list]:
    return None if items is None else [item.to_dict() for item in items]


@dataclass
class Slt:
    slt_id: int = 0
    content: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Slt:
        return cls(slt_id=_int(data, "SltId"), content=_str(data, "Content"))

    def to_dict(self) -> dict:
        return {"SltId": self.slt_id, "Content": self.content}


@dataclass
class Assignment:
    assignment_content: str = ""
    assignment_decider: str = ""
    allowed_learners: Optional[list[str]] = None
    prerequisite_assignments: Optional[list[str]] = None

    @classmethod
    def from_dict(cls, data: Any) -> Assignment:
        return cls(
            assignment_content=_str(data, "AssignmentContent"),
            assignment_decider=_str(data, "AssignmentDecider"),
            allowed_learners=_str_list(data, "AllowedLearners"),
            prerequisite_assignments=_str_list(data, "PrerequisiteAssignments"),
        )

    def to_dict(self) -> dict:
        return {
            "AssignmentContent": self.assignment_content,
            "AssignmentDecider": self.assignment_decider,
            "AllowedLearners": self.allowed_learners,
            "PrerequisiteAssignments": self.prerequisite_assignments,
        }


@dataclass
class DecodedDatum:
    module_cs: str = ""
    slts: Optional[list[Slt]] = None
    assignment: Assignment = field(default_factory=Assignment)

    @classmethod
    def from_dict(cls, data: Any) -> DecodedDatum:
        return cls(
            module_cs=_str(data, "ModuleCs"),
            slts=_objects(data, "Slts", Slt),
            assignment=Assignment.from_dict(_lookup(data, "Assignment")),
        )

    def to_dict(self) -> dict:
        return {
            "ModuleCs": self.module_cs,
            "Slts": _dicts(self.slts),
            "Assignment": self.assignment.to_dict(),
        }


@dataclass
class ModuleTokenResponse:
    module_token: str = ""
    decoded_datum: DecodedDatum = field(default_factory=DecodedDatum)

    @classmethod
    def from_dict(cls, data: Any) -> ModuleTokenResponse:
        return cls(
            module_token=_str(data, "module_token"),
            decoded_datum=DecodedDatum.from_dict(_lookup(data, "decoded_datum")),
        )

    def to_dict(self) -> dict:
        return {
            "module_token": self.module_token,
            "decoded_datum": self.decoded_datum.to_dict(),
        }


@dataclass
class CourseStateDatumResponse:
    completed_assignments: Optional[list[str]] = None
    course_cs: str = ""
    global_cs: str = ""
    csd_user_name: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> CourseStateDatumResponse:
        return cls(
            completed_assignments=_str_list(data, "CompletedAssignments"),
            course_cs=_str(data, "CourseCs"),
            global_cs=_str(data, "GlobalCs"),
            csd_user_name=_str(data, "CsdUserName"),
        )

    def to_dict(self) -> dict:
        return {
            "CompletedAssignments": self.completed_assignments,
            "CourseCs": self.course_cs,
            "GlobalCs": self.global_cs,
            "CsdUserName": self.csd_user_name,
        }


@dataclass
class TokenInfo:
    ls_cs: str = ""
    assignment_list: Optional[list[str]] = None
    minted: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> TokenInfo:
        return cls(
            ls_cs=_str(data, "LsCs"),
            assignment_list=_str_list(data, "AssignmentList"),
            minted=_bool(data, "Minted"),
        )

    def to_dict(self) -> dict:
        return {
            "LsCs": self.ls_cs,
            "AssignmentList": self.assignment_list,
            "Minted": self.minted,
        }


@dataclass
class GlobalStateDatumResponse:
    user_cs: str = ""
    user_name: str = ""
    token_infos: Optional[list[TokenInfo]] = None
    user_info: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> GlobalStateDatumResponse:
        return cls(
            user_cs=_str(data, "UserCs"),
            user_name=_str(data, "UserName"),
            token_infos=_objects(data, "TokenInfos", TokenInfo),
            user_info=_str(data, "UserInfo"),
        )

    def to_dict(self) -> dict:
        return {
            "UserCs": self.user_cs,
            "UserName": self.user_name,
            "TokenInfos": _dicts(self.token_infos),
            "UserInfo": self.user_info,
        }