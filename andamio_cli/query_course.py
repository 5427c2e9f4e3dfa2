"""The "query course" command group."""

from __future__ import annotations

from typing import Any, Optional

import click

from .client import AndamioClient, ApiError
from .output import save_output
from .query_network import _help_if_bare, _report, pass_client

_OUT_FILE_HELP = "Optional: specify a JSON file to save the response"


class _CourseGroup(click.Group):
    """A group that shows help when bare and rejects unknown subcommands.

    The label is the name used in the error message, which need not match the
    name the group is invoked by.
    """

    def __init__(
        self,
        *args: Any,
        usage_path: str = "",
        label: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        kwargs.setdefault("invoke_without_command", True)
        super().__init__(*args, **kwargs)
        self.usage_path = usage_path
        self.label = label or self.name

    def resolve_command(self, ctx: click.Context, args: list[str]):
        name = args[0] if args else ""
        if (
            name
            and not name.startswith("-")
            and not ctx.resilient_parsing
            and self.get_command(ctx, name) is None
        ):
            click.echo(f"Error: '{name}' is not a valid subcommand for '{self.label}'")
            click.echo(
                f"Run './andamio-cli {self.usage_path} --help' "
                "for available subcommands."
            )
            ctx.exit(1)
        return super().resolve_command(ctx, args)


def _save(response: Any, out_file: str) -> None:
    try:
        save_output(response, out_file)
    except OSError as exc:
        raise click.ClickException(
            f"Failed to write response to file: {exc}"
        ) from exc


_policy_option = click.option("--policy", required=True, help="Course NFT policy id")
_alias_option = click.option("--alias", required=True, help="Access token alias")
_out_file_option = click.option(
    "--out-file", "out_file", default="", help=_OUT_FILE_HELP
)


# Assignment validator


@click.command(
    "assignment-validator-address",
    help="Get a list of assignment validator addresses for course",
)
@_policy_option
@pass_client
def assignment_validator_address(client: AndamioClient, policy: str) -> None:
    _report(client.assignment_validator_addresses, policy)


@click.command(
    "assignment-validator-utxo",
    help="View commitment UTxO currently locked at assignment validator address "
    "for specified alias",
)
@click.option("--alias", default="", help="Access token alias")
@click.option("--policy", default="", help="Course NFT policy id")
@pass_client
def assignment_validator_utxo(client: AndamioClient, policy: str, alias: str) -> None:
    _report(client.assignment_validator_utxo, policy, alias)


@click.command(
    "assignment-validator-utxos",
    help="View all commitment UTxOs currently locked at assignment validator address",
)
@_policy_option
@pass_client
def assignment_validator_utxos(client: AndamioClient, policy: str) -> None:
    _report(client.assignment_validator_utxos, policy)


@click.command("current-commitments", help="View all current assignment commitments")
@_policy_option
@pass_client
def current_commitments(client: AndamioClient, policy: str) -> None:
    _report(client.decoded_assignment_datums, policy)


@click.command(
    "decoded-assignment-validator-utxo-datum",
    help="View assignment datum for specified alias in course with specified policy",
)
@_alias_option
@_policy_option
@pass_client
def decoded_assignment_validator_utxo_datum(
    client: AndamioClient, policy: str, alias: str
) -> None:
    _report(client.decoded_assignment_validator_utxo_datum, policy, alias)


# Course governance validator


@click.command(
    "all-course-governance-validator-utxos", help="View all course governance utxos"
)
@pass_client
def all_course_governance_validator_utxos(client: AndamioClient) -> None:
    _report(client.all_course_governance_validator_utxos)


@click.command("all-decoded-course-gov-datums", help="View all course governance datums")
@pass_client
def all_decoded_course_gov_datums(client: AndamioClient) -> None:
    _report(client.all_decoded_course_gov_datums)


@click.command(
    "course-governance-validator-utxo",
    help="View course governance utxo for specified course policy",
)
@_policy_option
@pass_client
def course_governance_validator_utxo(client: AndamioClient, policy: str) -> None:
    _report(client.course_governance_validator_utxo, policy)


@click.command(
    "course-policies",
    help="View a list of course policies where specified alias has creator access",
)
@_alias_option
@pass_client
def course_policies(client: AndamioClient, alias: str) -> None:
    _report(client.course_policies, alias)


# Course state


@click.command(
    "course-state-address",
    help="View course state address for course with specified policy",
)
@_policy_option
@pass_client
def course_state_address(client: AndamioClient, policy: str) -> None:
    _report(client.course_state_address, policy)


@click.command(
    "course-state-utxo",
    help="View the courses status of specified alias in course with specified policy",
)
@_alias_option
@_policy_option
@pass_client
def course_state_utxo(client: AndamioClient, policy: str, alias: str) -> None:
    _report(client.course_state_utxo, policy, alias)


@click.command(
    "course-state-utxos",
    help="View all course state utxos for course with specified policy",
)
@_policy_option
@pass_client
def course_state_utxos(client: AndamioClient, policy: str) -> None:
    _report(client.course_state_utxos, policy)


@click.command(
    "learner-status",
    help="View course datum for specified alias in course with specified policy",
)
@_alias_option
@_policy_option
@_out_file_option
@pass_client
def learner_status(
    client: AndamioClient, policy: str, alias: str, out_file: str
) -> None:
    try:
        response = client.decoded_course_state_datum(policy, alias)
    except (ApiError, ValueError) as exc:
        raise click.ClickException(f"Falied to get learner status: {exc}") from exc
    _save(response, out_file)


# Modules


@click.command("list", help="View module datum for course with specified policy")
@_policy_option
@_out_file_option
@pass_client
def module_list(client: AndamioClient, policy: str, out_file: str) -> None:
    try:
        response = client.decoded_module_ref_datums(policy)
    except (ApiError, ValueError) as exc:
        raise click.ClickException(
            f"Falied to get list of module datums: {exc}"
        ) from exc
    _save(response, out_file)


@click.command(
    "module-ref-validator-address",
    help="View module reference validator address for course with specified policy",
)
@_policy_option
@pass_client
def module_ref_validator_address(client: AndamioClient, policy: str) -> None:
    _report(client.module_ref_validator_address, policy)


@click.command(
    "module-ref-validator-utxo",
    help="View module reference utxo for module with specified token-name "
    "in course with specified policy",
)
@_policy_option
@click.option("--token-name", "token_name", required=True, help="Module token name")
@pass_client
def module_ref_validator_utxo(
    client: AndamioClient, policy: str, token_name: str
) -> None:
    _report(client.module_ref_validator_utxo, policy, token_name)


@click.command(
    "module-ref-validator-utxos",
    help="View all module reference utxos for course with specified policy",
)
@_policy_option
@pass_client
def module_ref_validator_utxos(client: AndamioClient, policy: str) -> None:
    _report(client.module_ref_validator_utxos, policy)


# Groups


@click.group(
    "assignments",
    cls=_CourseGroup,
    usage_path="query course assignment-validator",
    label="assignment-validator",
    help="View network assignment data",
)
def assignments() -> None:
    _help_if_bare()


@click.group(
    "course-governance-validator",
    cls=_CourseGroup,
    usage_path="query course course-governance-validator",
    help="View network course governance data",
)
def course_governance_validator() -> None:
    _help_if_bare()


@click.group(
    "course-state",
    cls=_CourseGroup,
    usage_path="query course course-state",
    help="View course details",
)
def course_state() -> None:
    _help_if_bare()


@click.group(
    "modules",
    cls=_CourseGroup,
    usage_path="query course module-ref-validator",
    label="module-ref-validator",
    help="View course module credential details",
)
def modules() -> None:
    _help_if_bare()


@click.group(
    "course",
    cls=_CourseGroup,
    usage_path="query course",
    help="View course details",
)
def course() -> None:
    _help_if_bare()


for _command in (
    assignment_validator_address,
    assignment_validator_utxo,
    assignment_validator_utxos,
    current_commitments,
    decoded_assignment_validator_utxo_datum,
):
    assignments.add_command(_command)

for _command in (
    all_course_governance_validator_utxos,
    all_decoded_course_gov_datums,
    course_governance_validator_utxo,
    course_policies,
):
    course_governance_validator.add_command(_command)

for _command in (
    course_state_address,
    course_state_utxo,
    course_state_utxos,
    learner_status,
):
    course_state.add_command(_command)

for _command in (
    module_list,
    module_ref_validator_address,
    module_ref_validator_utxo,
    module_ref_validator_utxos,
):
    modules.add_command(_command)

for _command in (assignments, course_governance_validator, course_state, modules):
    course.add_command(_command)