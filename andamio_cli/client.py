"""HTTP client for the Andamio API."""

from __future__ import annotations

import json
import sys
import time
from dataclasses import dataclass
from typing import Any, Optional

import requests

from .models import (
    CourseStateDatumResponse,
    GlobalStateDatumResponse,
    ModuleTokenResponse,
)

DEFAULT_BASE_URL = "https://dev.andamio.io/api"


class ApiError(Exception):
    """A request to the API failed or returned an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class ApiResponse:
    """Status and body of an API response."""

    status_code: int
    status: str
    text: str

    @property
    def is_error(self) -> bool:
        return self.status_code > 399

    def json(self) -> Any:
        return json.loads(self.text)


def log_response(response: ApiResponse) -> None:
    """Write the status and trimmed body of a response to stderr."""
    stamp = time.strftime("%Y/%m/%d %H:%M:%S")
    sys.stderr.write(f"{stamp} Response Status: {response.status}\n")
    sys.stderr.write(f"{stamp} Response Body: {response.text.strip()}\n")


class AndamioClient:
    """Issues GET requests against the Andamio API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self._headers = {"Content-Type": "application/json"}

    def get(self, path: str, **kwargs: str) -> ApiResponse:
        """GET base_url + path with the keyword arguments as query parameters."""
        try:
            resp = self.session.get(
                self.base_url + path, params=kwargs or None, headers=self._headers
            )
        except requests.RequestException as exc:
            raise ApiError(str(exc)) from exc
        status = f"{resp.status_code} {resp.reason or ''}".strip()
        return ApiResponse(resp.status_code, status, resp.text)

    def get_json(self, path: str, **kwargs: str) -> Any:
        """GET and decode a JSON body, raising ApiError on error statuses."""
        response = self.get(path, **kwargs)
        if response.is_error:
            raise ApiError(
                f"API request failed with status code: {response.status_code}",
                response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise ApiError(f"invalid JSON in response: {exc}") from exc

    # Network

    def alias_availability(self, alias: str) -> ApiResponse:
        return self.get("/aliasAvailability", alias=alias)

    def all_global_state_utxos(self) -> ApiResponse:
        return self.get("/global-state/utxos")

    def global_state_utxo(self, alias: str) -> ApiResponse:
        return self.get("/global-state/utxoByAlias", alias=alias)

    def all_index_validator_utxos(self) -> ApiResponse:
        return self.get("/index-validator/utxos")

    def input_utxo(self, alias: str) -> ApiResponse:
        return self.get("/index-validator/utxoByNewAlias", alias=alias)

    def all_instance_validator_utxos(self) -> ApiResponse:
        return self.get("/instance-validator/utxos")

    def all_course_instance_utxos(self) -> ApiResponse:
        return self.get("/instance-validator/courseInstanceUtxos")

    def course_instance_utxo(self, policy: str) -> ApiResponse:
        return self.get(
            "/instance-validator/courseInstanceUtxoByCourseNftPolicy", policy=policy
        )

    def decoded_course_instance_datum(self, policy: str) -> ApiResponse:
        return self.get(
            "/instance-validator/decodedCourseInstanceDatumByCourseNftPolicy",
            policy=policy,
        )

    def local_state_policy_ref_utxo(self, policy: str) -> ApiResponse:
        return self.get(
            "/instance-validator/localStatePolicyRefUtxoByCourseNftPolicy",
            policy=policy,
        )

    def local_state_validator_ref_utxo(self, policy: str) -> ApiResponse:
        return self.get(
            "/instance-validator/localStateValildatorRefUtxoByCourseNftPolicy",
            policy=policy,
        )

    def module_token_policy_ref_utxo(self, policy: str) -> ApiResponse:
        return self.get(
            "/instance-validator/moduleTokenPolicyRefUtxoByCourseNftPolicy",
            policy=policy,
        )

    def module_validator_ref_utxo(self, policy: str) -> ApiResponse:
        return self.get(
            "/instance-validator/moduleValidatorRefUtxoByCourseNftPolicy",
            policy=policy,
        )

    def assignment_validator_ref_utxo(self, policy: str) -> ApiResponse:
        return self.get(
            "/instance-validator/assignmentValidatorRefUtxoByCourseNftPolicy",
            policy=policy,
        )

    # Course state

    def course_state_address(self, policy: str) -> ApiResponse:
        return self.get(
            "/course-state/courseStateAddressByCourseNftPolicy", policy=policy
        )

    def course_state_utxos(self, policy: str) -> ApiResponse:
        return self.get(
            "/course-state/courseStateUtxosByCourseNftPolicy", policy=policy
        )

    def course_state_utxo(self, policy: str, alias: str) -> ApiResponse:
        return self.get(
            "/course-state/courseStateUtxoByCourseNftPolicyAndAlias",
            policy=policy,
            alias=alias,
        )

    # Assignment validator

    def assignment_validator_addresses(self, policy: str) -> ApiResponse:
        return self.get(
            "/assignment-validator/assignmentValidatorAddressesByCourseNftPolicy",
            policy=policy,
        )

    def assignment_validator_utxos(self, policy: str) -> ApiResponse:
        return self.get(
            "/assignment-validator/assignmentValidatorUtxosByCourseNftPolicy",
            policy=policy,
        )

    def assignment_validator_utxo(self, policy: str, alias: str) -> ApiResponse:
        return self.get(
            "/assignment-validator/assignmentValidatorUtxoByCourseNftPolicyAndAlias",
            policy=policy,
            alias=alias,
        )

    def decoded_assignment_validator_utxo_datum(
        self, policy: str, alias: str
    ) -> ApiResponse:
        return self.get(
            "/assignment-validator/"
            "decodedAssignmentValidatorUtxoByCourseNftPolicyAndAlias",
            policy=policy,
            alias=alias,
        )

    def decoded_assignment_datums(self, policy: str) -> ApiResponse:
        return self.get(
            "/assignment-validator/decodedAssignmentDatumsByCourseNftPolicy",
            policy=policy,
        )

    # Module references

    def module_ref_validator_address(self, policy: str) -> ApiResponse:
        return self.get(
            "/module-ref/moduleRefValidatorAddressByCourseNftPolicy", policy=policy
        )

    def module_ref_validator_utxos(self, policy: str) -> ApiResponse:
        return self.get(
            "/module-ref/moduleRefValidatorUtxosByCourseNftPolicy", policy=policy
        )

    def module_ref_validator_utxo(self, policy: str, token_name: str) -> ApiResponse:
        return self.get(
            "/module-ref/moduleRefValidatorUtxoByCourseNftPolicyAndTokenName",
            policy=policy,
            token_name=token_name,
        )

    # Course governance

    def all_course_governance_validator_utxos(self) -> ApiResponse:
        return self.get("/course-governance-validator/utxos")

    def course_governance_validator_utxo(self, policy: str) -> ApiResponse:
        return self.get(
            "/course-governance-validator/utxoByCourseNftPolicy", policy=policy
        )

    def all_decoded_course_gov_datums(self) -> ApiResponse:
        return self.get("/course-governance-validator/decodedCourseGovDatums")

    def course_policies(self, alias: str) -> ApiResponse:
        return self.get(
            "/course-governance-validator/creatorsCoursePoliciesByAlias", alias=alias
        )

    # Transactions

    def mint_access_token(
        self, user_address: str, alias: str, user_info: str
    ) -> ApiResponse:
        return self.get(
            "/txs/mintAccessToken",
            userAddress=user_address,
            alias=alias,
            userInfo=user_info,
        )

    def mint_local_state(self, user_access_token: str, policy: str) -> ApiResponse:
        return self.get(
            "/txs/student-actions/mintLocalState",
            userAccessToken=user_access_token,
            policy=policy,
        )

    def commit_to_assignment(
        self,
        user_access_token: str,
        policy: str,
        assignment_code: str,
        assignment_info: str,
    ) -> ApiResponse:
        return self.get(
            "/txs/student-actions/commitToAssignment",
            userAccessToken=user_access_token,
            policy=policy,
            assignmentCode=assignment_code,
            assignmentInfo=assignment_info,
        )

    def update_assignment(
        self, user_access_token: str, policy: str, assignment_info: str
    ) -> ApiResponse:
        return self.get(
            "/txs/student-actions/update-assignment",
            userAccessToken=user_access_token,
            policy=policy,
            assignmentInfo=assignment_info,
        )

    def leave_assignment(self, user_access_token: str, policy: str) -> ApiResponse:
        return self.get(
            "/txs/student-actions/leave-assignment",
            userAccessToken=user_access_token,
            policy=policy,
        )

    def burn_local_state(self, user_access_token: str, policy: str) -> ApiResponse:
        return self.get(
            "/txs/student-actions/burnLocalState",
            userAccessToken=user_access_token,
            policy=policy,
        )

    def mint_module_tokens(
        self, user_access_token: str, policy: str, module_infos: str
    ) -> ApiResponse:
        return self.get(
            "/txs/course-creator-actions/mintModuleTokens",
            userAccessToken=user_access_token,
            policy=policy,
            moduleInfos=module_infos,
        )

    def accept_assignment(
        self, user_access_token: str, student_alias: str, policy: str
    ) -> ApiResponse:
        return self.get(
            "/txs/course-creator-actions/acceptAssignment",
            userAccessToken=user_access_token,
            studentAlias=student_alias,
            policy=policy,
        )

    def deny_assignment(
        self, user_access_token: str, student_alias: str, policy: str
    ) -> ApiResponse:
        return self.get(
            "/txs/course-creator-actions/denyAssignment",
            userAccessToken=user_access_token,
            studentAlias=student_alias,
            policy=policy,
        )

    # Decoded datums

    def decoded_course_state_datum(
        self, policy: str, alias: str
    ) -> CourseStateDatumResponse:
        data = self.get_json(
            "/course-state/decodedCourseStateDatumByCourseNftPolicyAndAlias",
            policy=policy,
            alias=alias,
        )
        return CourseStateDatumResponse.from_dict(data)

    def decoded_global_state_datum(self, alias: str) -> GlobalStateDatumResponse:
        data = self.get_json(
            "/global-state/decodedGlobalStateDatumByAlias", alias=alias
        )
        return GlobalStateDatumResponse.from_dict(data)

    def decoded_module_ref_datums(self, policy: str) -> list[ModuleTokenResponse]:
        data = self.get_json(
            "/module-ref/decodedModuleRefDatumsByCourseNftPolicy", policy=policy
        )
        if data is None:
            return []
        if not isinstance(data, list):
            raise ApiError("expected a JSON array of module datums")
        return [ModuleTokenResponse.from_dict(item) for item in data]