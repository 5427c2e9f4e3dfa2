"""The "transaction" command group: student and course creator transactions."""

from __future__ import annotations

import click

from .client import AndamioClient
from .query_course import _CourseGroup
from .query_network import _help_if_bare, _report, pass_client

_STUDENT_TOKEN_HELP = (
    "Cardano Asset ID of student access token. The wallet holding this asset "
    "must sign the generated transaction."
)
_TEACHER_TOKEN_HELP = (
    "Cardano Asset ID of teacher access token. The wallet holding this asset "
    "must sign the generated transaction."
)
_POLICY_HELP = "Course NFT policy id"
_ASSIGNMENT_INFO_HELP = "Evidence of assignment completion"
_STUDENT_ALIAS_HELP = "Access token name of student with committed assignment"

_SIGNED_BY_HOLDER = "The transaction must be signed by the holder of userAccessToken."


def _token_option(help_text: str):
    return click.option(
        "--userAccessToken", "user_access_token", required=True, help=help_text
    )


_policy_option = click.option("--policy", "policy", required=True, help=_POLICY_HELP)
_student_alias_option = click.option(
    "--studentAlias", "student_alias", required=True, help=_STUDENT_ALIAS_HELP
)
_assignment_info_option = click.option(
    "--assignmentInfo", "assignment_info", required=True, help=_ASSIGNMENT_INFO_HELP
)


# Student actions


@click.command(
    "mint-local-state",
    short_help="Enroll in a course on Andamio network",
    help="About:\n\n"
    "The holder of an access token can enroll in courses on the Andamio Network.\n\n"
    "This transaction enrolls userAccessToken in the course specified by policy.\n\n"
    + _SIGNED_BY_HOLDER,
)
@_token_option(_STUDENT_TOKEN_HELP)
@_policy_option
@pass_client
def mint_local_state(
    client: AndamioClient, user_access_token: str, policy: str
) -> None:
    _report(client.mint_local_state, user_access_token, policy)


@click.command(
    "commit-to-assignment",
    short_help="Commit to an assignment",
    help="About:\n\n"
    "When a student is enrolled in a course, they can commit to assignments "
    "and earn credentials.\n\n"
    "This transaction commits userAccessToken to assignmentCode in the course "
    "specified by policy.\n\n"
    "To make a commitment, the student must provide assignmentInfo as evidence.\n\n"
    + _SIGNED_BY_HOLDER
    + "\n\nTo view valid assigmentCodes, use andamio-cli query course module "
    "decoded-module-ref-datums",
)
@_token_option(_STUDENT_TOKEN_HELP)
@_policy_option
@click.option(
    "--assignmentCode",
    "assignment_code",
    required=True,
    help="Identifier for Assignment, corresponding to the asset name of a "
    "course module token.",
)
@_assignment_info_option
@pass_client
def commit_to_assignment(
    client: AndamioClient,
    user_access_token: str,
    policy: str,
    assignment_code: str,
    assignment_info: str,
) -> None:
    _report(
        client.commit_to_assignment,
        user_access_token,
        policy,
        assignment_code,
        assignment_info,
    )


@click.command(
    "update-assignment",
    short_help="Update assginment evidence",
    help="About:\n\n"
    "A student can update assignment info any time.\n\n"
    "This transaction allows the holder of userAccessToken to update "
    "assignmentInfo in the course specified by policy.\n\n" + _SIGNED_BY_HOLDER,
)
@_token_option(_STUDENT_TOKEN_HELP)
@_policy_option
@_assignment_info_option
@pass_client
def update_assignment(
    client: AndamioClient, user_access_token: str, policy: str, assignment_info: str
) -> None:
    _report(client.update_assignment, user_access_token, policy, assignment_info)


@click.command(
    "leave-assignment",
    short_help="Cancel assignment commitment",
    help="About:\n\n"
    "A student can cancel a commitment to an assignment any time.\n\n"
    "This transaction cancels the current commitment of userAccessToken in the "
    "course specified by policy.\n\n" + _SIGNED_BY_HOLDER,
)
@_token_option(_STUDENT_TOKEN_HELP)
@_policy_option
@pass_client
def leave_assignment(
    client: AndamioClient, user_access_token: str, policy: str
) -> None:
    _report(client.leave_assignment, user_access_token, policy)


@click.command(
    "burn-local-state",
    short_help="Un-enroll in a course",
    help="About:\n\n"
    "When a student is ready to leave a course, they can un-enroll. "
    "Un-enrollment can happen any time, whether the student has completed all "
    "course modules or not.\n\n"
    "This transaction un-enrolls userAccessToken in the course specified by "
    "policy.\n\n"
    "In this transaction, any earned course credentials are moved to the access "
    "token credentials of userAccessToken.\n\n" + _SIGNED_BY_HOLDER,
)
@_token_option(_STUDENT_TOKEN_HELP)
@_policy_option
@pass_client
def burn_local_state(
    client: AndamioClient, user_access_token: str, policy: str
) -> None:
    _report(client.burn_local_state, user_access_token, policy)


# Course creator actions


@click.command(
    "mint-module-tokens",
    short_help="Publish course credential criteria on-chain",
    help="About:\n\n"
    "Before a student can commit to an assignment, the course creator must "
    "publish credential criteria on-chain.\n\n"
    "This transaction mints course module tokens specifying Student Learning "
    "Targets (SLTs) and an assignment for each course module.\n\n"
    + _SIGNED_BY_HOLDER,
)
@_token_option(_TEACHER_TOKEN_HELP)
@_policy_option
@click.option(
    "--moduleInfos",
    "module_infos",
    required=True,
    help="List of course module information. Use andamio-cli write module-info "
    "to generate valid module-info",
)
@pass_client
def mint_module_tokens(
    client: AndamioClient, user_access_token: str, policy: str, module_infos: str
) -> None:
    _report(client.mint_module_tokens, user_access_token, policy, module_infos)


@click.command(
    "accept-assignment",
    short_help="Approve a student commitment to course assignment and issue "
    "credential for completion.",
    help="About:\n\n"
    "A teacher can accept or deny student commitments to assignments.\n\n"
    "This transaction accepts the current assignment for the student with "
    "studentAlias in the course specified by policy.\n\n" + _SIGNED_BY_HOLDER,
)
@_token_option(_TEACHER_TOKEN_HELP)
@_student_alias_option
@_policy_option
@pass_client
def accept_assignment(
    client: AndamioClient, user_access_token: str, student_alias: str, policy: str
) -> None:
    _report(client.accept_assignment, user_access_token, student_alias, policy)


@click.command(
    "deny-assignment",
    short_help="Deny a student commitment to course assignment",
    help="About:\n\n"
    "A teacher can accept or deny student commitments to assignments.\n\n"
    "This transaction denies the current assignment for the student with "
    "studentAlias in the course specified by policy.\n\n" + _SIGNED_BY_HOLDER,
)
@_token_option(_TEACHER_TOKEN_HELP)
@_student_alias_option
@_policy_option
@pass_client
def deny_assignment(
    client: AndamioClient, user_access_token: str, student_alias: str, policy: str
) -> None:
    _report(client.deny_assignment, user_access_token, student_alias, policy)


# Groups


@click.group(
    "student",
    cls=_CourseGroup,
    usage_path="build transaction student-actions",
    label="student-actions",
    short_help="Transactions for students",
    help="Students can enroll in courses, complete assignments, and earn "
    "credentials.\n\n"
    "These transactions provide endpoints to each feature.\n\n"
    "\b\n"
    "- Course enrollment: mint-local-state and burn-local-state\n"
    "- Assignments and Credentials: commit, update, and leave assignments",
)
def student() -> None:
    _help_if_bare()


@click.group(
    "course-creator",
    cls=_CourseGroup,
    usage_path="build transaction course-creator-actions",
    label="course-creator-actions",
    short_help="Transactions for course creators",
    help="Course creators are responsible for publishing credential criteria "
    "and issuing credentials.\n\n"
    "mint-module-tokens publishes credential criteria by minting a token on "
    "Cardano, accompanied by a list of SLTs and an Assignment reference\n\n"
    "After credentials are published, students can commit to assignments. "
    "Creators can accept and deny student commitments with the transactions "
    "included here.",
)
def course_creator() -> None:
    _help_if_bare()


@click.group(
    "transaction",
    cls=_CourseGroup,
    usage_path="build transaction",
    short_help="build transaction",
    help="The Andamio Network is home to valuable, public data that becomes even "
    "more valuable when you have tools to make sense of it. Andamio CLI gives "
    "developers instant access to transactions, making it easier to explore "
    "possibilities and build new tools on Andamio.\n\n"
    "\b\n"
    "This release of andamio-cli features transactions for\n"
    "1. Minting access tokens\n"
    "2. Student interactions\n"
    "3. Course creator interactions\n\n"
    "Transactions for Andamio contributors will be added in a future release.",
)
def transaction() -> None:
    _help_if_bare()


for _command in (
    mint_local_state,
    commit_to_assignment,
    update_assignment,
    leave_assignment,
    burn_local_state,
):
    student.add_command(_command)

for _command in (mint_module_tokens, accept_assignment, deny_assignment):
    course_creator.add_command(_command)

for _command in (student, course_creator):
    transaction.add_command(_command)