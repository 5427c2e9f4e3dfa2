import json
from urllib.parse import parse_qs, urlsplit

import pytest
import responses
from click.testing import CliRunner

from andamio_cli.client import AndamioClient
from andamio_cli.query_course import course

BASE = "https://api.example.com"


def _run(args):
    client = AndamioClient(base_url=BASE)
    return CliRunner().invoke(course, args, obj=client)


def _last_request(rsps):
    parts = urlsplit(rsps.calls[-1].request.url)
    return parts.path, parse_qs(parts.query, keep_blank_values=True)


def test_bare_course_shows_help():
    result = _run([])
    assert result.exit_code == 0
    assert "assignments" in result.output
    assert "course-state" in result.output
    assert "modules" in result.output


def test_unknown_course_subcommand_is_rejected():
    result = _run(["bogus"])
    assert result.exit_code == 1
    assert "Error: 'bogus' is not a valid subcommand for 'course'" in result.output
    assert "./andamio-cli query course --help" in result.output


def test_unknown_assignments_subcommand_uses_validator_name():
    result = _run(["assignments", "bogus"])
    assert result.exit_code == 1
    assert "for 'assignment-validator'" in result.output
    assert "query course assignment-validator --help" in result.output


def test_unknown_modules_subcommand_uses_validator_name():
    result = _run(["modules", "bogus"])
    assert result.exit_code == 1
    assert "for 'module-ref-validator'" in result.output


@pytest.mark.parametrize(
    "args, path, params",
    [
        (
            ["assignments", "assignment-validator-address", "--policy", "p1"],
            "/assignment-validator/assignmentValidatorAddressesByCourseNftPolicy",
            {"policy": ["p1"]},
        ),
        (
            ["assignments", "assignment-validator-utxos", "--policy", "p1"],
            "/assignment-validator/assignmentValidatorUtxosByCourseNftPolicy",
            {"policy": ["p1"]},
        ),
        (
            ["assignments", "current-commitments", "--policy", "p1"],
            "/assignment-validator/decodedAssignmentDatumsByCourseNftPolicy",
            {"policy": ["p1"]},
        ),
        (
            [
                "assignments",
                "decoded-assignment-validator-utxo-datum",
                "--policy",
                "p1",
                "--alias",
                "bob",
            ],
            "/assignment-validator/"
            "decodedAssignmentValidatorUtxoByCourseNftPolicyAndAlias",
            {"policy": ["p1"], "alias": ["bob"]},
        ),
        (
            ["course-governance-validator", "all-course-governance-validator-utxos"],
            "/course-governance-validator/utxos",
            {},
        ),
        (
            ["course-governance-validator", "all-decoded-course-gov-datums"],
            "/course-governance-validator/decodedCourseGovDatums",
            {},
        ),
        (
            [
                "course-governance-validator",
                "course-governance-validator-utxo",
                "--policy",
                "p1",
            ],
            "/course-governance-validator/utxoByCourseNftPolicy",
            {"policy": ["p1"]},
        ),
        (
            ["course-governance-validator", "course-policies", "--alias", "bob"],
            "/course-governance-validator/creatorsCoursePoliciesByAlias",
            {"alias": ["bob"]},
        ),
        (
            ["course-state", "course-state-address", "--policy", "p1"],
            "/course-state/courseStateAddressByCourseNftPolicy",
            {"policy": ["p1"]},
        ),
        (
            ["course-state", "course-state-utxos", "--policy", "p1"],
            "/course-state/courseStateUtxosByCourseNftPolicy",
            {"policy": ["p1"]},
        ),
        (
            ["course-state", "course-state-utxo", "--policy", "p1", "--alias", "bob"],
            "/course-state/courseStateUtxoByCourseNftPolicyAndAlias",
            {"policy": ["p1"], "alias": ["bob"]},
        ),
        (
            ["modules", "module-ref-validator-address", "--policy", "p1"],
            "/module-ref/moduleRefValidatorAddressByCourseNftPolicy",
            {"policy": ["p1"]},
        ),
        (
            ["modules", "module-ref-validator-utxos", "--policy", "p1"],
            "/module-ref/moduleRefValidatorUtxosByCourseNftPolicy",
            {"policy": ["p1"]},
        ),
        (
            [
                "modules",
                "module-ref-validator-utxo",
                "--policy",
                "p1",
                "--token-name",
                "mod1",
            ],
            "/module-ref/moduleRefValidatorUtxoByCourseNftPolicyAndTokenName",
            {"policy": ["p1"], "token_name": ["mod1"]},
        ),
    ],
)
def test_commands_hit_endpoints(args, path, params):
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + path, body="{}", status=200)
        result = _run(args)
        assert result.exit_code == 0, result.output
        sent_path, sent_params = _last_request(rsps)
    assert sent_path == path
    assert sent_params == params


@pytest.mark.parametrize(
    "args",
    [
        ["assignments", "assignment-validator-address"],
        ["assignments", "current-commitments"],
        ["course-state", "course-state-utxo", "--policy", "p1"],
        ["course-governance-validator", "course-policies"],
        ["modules", "module-ref-validator-utxo", "--policy", "p1"],
        ["modules", "list"],
    ],
)
def test_missing_required_option_is_usage_error(args):
    result = _run(args)
    assert result.exit_code == 2


def test_assignment_validator_utxo_flags_are_optional():
    path = "/assignment-validator/assignmentValidatorUtxoByCourseNftPolicyAndAlias"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + path, body="{}", status=200)
        result = _run(["assignments", "assignment-validator-utxo"])
        sent_path, sent_params = _last_request(rsps)
    assert result.exit_code == 0
    assert sent_path == path
    assert sent_params == {"policy": [""], "alias": [""]}


LEARNER = {
    "CompletedAssignments": ["a1", "a2"],
    "CourseCs": "cc",
    "GlobalCs": "gc",
    "CsdUserName": "bob",
}


def test_learner_status_prints_json():
    path = "/course-state/decodedCourseStateDatumByCourseNftPolicyAndAlias"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + path, json=LEARNER, status=200)
        result = _run(
            ["course-state", "learner-status", "--policy", "p1", "--alias", "bob"]
        )
        sent_params = _last_request(rsps)[1]
    assert result.exit_code == 0
    assert json.loads(result.output) == LEARNER
    assert sent_params == {"policy": ["p1"], "alias": ["bob"]}


def test_learner_status_writes_out_file(tmp_path):
    path = "/course-state/decodedCourseStateDatumByCourseNftPolicyAndAlias"
    target = tmp_path / "learner.json"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + path, json=LEARNER, status=200)
        result = _run(
            [
                "course-state",
                "learner-status",
                "--policy",
                "p1",
                "--alias",
                "bob",
                "--out-file",
                str(target),
            ]
        )
    assert result.exit_code == 0
    assert json.loads(target.read_text(encoding="utf-8")) == LEARNER
    assert f"Response saved as JSON to file: {target}" in result.output


def test_learner_status_reports_api_failure():
    path = "/course-state/decodedCourseStateDatumByCourseNftPolicyAndAlias"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + path, body="oops", status=500)
        result = _run(
            ["course-state", "learner-status", "--policy", "p1", "--alias", "bob"]
        )
    assert result.exit_code == 1
    assert "Falied to get learner status" in result.output
    assert "status code: 500" in result.output


MODULES = [
    {
        "module_token": "mod1",
        "decoded_datum": {
            "ModuleCs": "cs",
            "Slts": [{"SltId": 1, "Content": "learn"}],
            "Assignment": {
                "AssignmentContent": "do it",
                "AssignmentDecider": "teacher",
                "AllowedLearners": ["bob"],
                "PrerequisiteAssignments": [],
            },
        },
    }
]


def test_module_list_prints_json():
    path = "/module-ref/decodedModuleRefDatumsByCourseNftPolicy"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + path, json=MODULES, status=200)
        result = _run(["modules", "list", "--policy", "p1"])
    assert result.exit_code == 0
    assert json.loads(result.output) == MODULES


def test_module_list_reports_api_failure():
    path = "/module-ref/decodedModuleRefDatumsByCourseNftPolicy"
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + path, body="missing", status=404)
        result = _run(["modules", "list", "--policy", "p1"])
    assert result.exit_code == 1
    assert "Falied to get list of module datums" in result.output