"""The "query network" command group."""

from __future__ import annotations

from typing import Any, Callable

import click

from .client import AndamioClient, ApiError, log_response
from .output import save_output

pass_client = click.make_pass_decorator(AndamioClient, ensure=True)


class _DispatchGroup(click.Group):
    """A group that shows help when bare and rejects unknown subcommands."""

    def __init__(self, *args: Any, usage_path: str = "", **kwargs: Any) -> None:
        kwargs.setdefault("invoke_without_command", True)
        super().__init__(*args, **kwargs)
        self.usage_path = usage_path

    def resolve_command(self, ctx: click.Context, args: list[str]):
        name = args[0] if args else ""
        if (
            name
            and not name.startswith("-")
            and not ctx.resilient_parsing
            and self.get_command(ctx, name) is None
        ):
            click.echo(f"Error: '{name}' is not a valid subcommand for '{self.name}'")
            click.echo(
                f"Run './andamio-cli {self.usage_path} --help' "
                "for available subcommands."
            )
            ctx.exit(1)
        return super().resolve_command(ctx, args)


def _help_if_bare() -> None:
    ctx = click.get_current_context()
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _report(call: Callable[..., Any], *args: str) -> None:
    try:
        response = call(*args)
    except ApiError as exc:
        raise click.ClickException(str(exc)) from exc
    log_response(response)


_policy_option = click.option("--policy", required=True, help="Course NFT policy id")
_alias_option = click.option("--alias", required=True, help="Access token alias")


# Network


@click.command(
    "alias-availability",
    short_help="Check alias availability",
    help="Check whether a given alias is available.",
)
@click.option("--alias", required=True, help="Alias to check availability for")
@pass_client
def alias_availability(client: AndamioClient, alias: str) -> None:
    click.echo(f"Checking availability for alias: {alias}")
    _report(client.alias_availability, alias)


# Global state


@click.command(
    "all-global-state-utxos",
    help="List UTxOs for all access tokens on Andamio Network",
)
@pass_client
def all_global_state_utxos(client: AndamioClient) -> None:
    _report(client.all_global_state_utxos)


@click.command("global-state-utxo", help="View global state utxo for specified alias")
@_alias_option
@pass_client
def global_state_utxo(client: AndamioClient, alias: str) -> None:
    _report(client.global_state_utxo, alias)


@click.command(
    "view-access-token", help="View access token datum for specified alias"
)
@_alias_option
@click.option(
    "--out-file",
    "out_file",
    default="",
    help="Optional: specify a JSON file to save the response",
)
@pass_client
def view_access_token(client: AndamioClient, alias: str, out_file: str) -> None:
    try:
        response = client.decoded_global_state_datum(alias)
    except (ApiError, ValueError) as exc:
        raise click.ClickException(
            f"Falied to get list of access token datums: {exc}"
        ) from exc
    try:
        save_output(response, out_file)
    except OSError as exc:
        raise click.ClickException(
            f"Failed to write response to file: {exc}"
        ) from exc


# Index validator


@click.command(
    "all-index-validator-utxos", help="View all access token alias index utxos"
)
@pass_client
def all_index_validator_utxos(client: AndamioClient) -> None:
    _report(client.all_index_validator_utxos)


@click.command(
    "input-utxo",
    help="Find input utxo for minting a new access token with specified alias",
)
@_alias_option
@pass_client
def input_utxo(client: AndamioClient, alias: str) -> None:
    _report(client.input_utxo, alias)


# Instance validator


@click.command(
    "all-instance-validator-utxos", help="View all instance validator UTxOs"
)
@pass_client
def all_instance_validator_utxos(client: AndamioClient) -> None:
    _report(client.all_instance_validator_utxos)


@click.command("all-course-instance-utxos", help="View all course instance UTxOs")
@pass_client
def all_course_instance_utxos(client: AndamioClient) -> None:
    _report(client.all_course_instance_utxos)


@click.command(
    "assignment-validator-ref-utxo",
    help="View the assignment validator reference UTxOs for course "
    "with specified policy",
)
@_policy_option
@pass_client
def assignment_validator_ref_utxo(client: AndamioClient, policy: str) -> None:
    _report(client.assignment_validator_ref_utxo, policy)


@click.command(
    "course-instance-utxo",
    help="View the course instance UTxO for course with specified policy",
)
@_policy_option
@pass_client
def course_instance_utxo(client: AndamioClient, policy: str) -> None:
    _report(client.course_instance_utxo, policy)


@click.command(
    "decoded-course-instance-datum",
    help="View course instance datum for course with specified policy",
)
@_policy_option
@pass_client
def decoded_course_instance_datum(client: AndamioClient, policy: str) -> None:
    _report(client.decoded_course_instance_datum, policy)


@click.command(
    "local-state-policy-ref-utxo",
    help="View the local state policy reference UTxO for course "
    "with specified policy",
)
@_policy_option
@pass_client
def local_state_policy_ref_utxo(client: AndamioClient, policy: str) -> None:
    _report(client.local_state_policy_ref_utxo, policy)


@click.command(
    "local-state-validator-ref-utxo",
    help="View the local state validator reference UTxO for course "
    "with specified policy",
)
@_policy_option
@pass_client
def local_state_validator_ref_utxo(client: AndamioClient, policy: str) -> None:
    _report(client.local_state_validator_ref_utxo, policy)


@click.command(
    "module-token-policy-ref-utxo",
    help="View the module token minting reference UTxO for course "
    "with specified policy",
)
@_policy_option
@pass_client
def module_token_policy_ref_utxo(client: AndamioClient, policy: str) -> None:
    _report(client.module_token_policy_ref_utxo, policy)


@click.command(
    "module-validator-ref-utxo",
    help="View the module validator reference UTxO for course "
    "with specified policy",
)
@_policy_option
@pass_client
def module_validator_ref_utxo(client: AndamioClient, policy: str) -> None:
    _report(client.module_validator_ref_utxo, policy)


# Groups


@click.group(
    "global-state",
    cls=_DispatchGroup,
    usage_path="query network global-state",
    help="View Andamio Network data",
)
def global_state() -> None:
    _help_if_bare()


@click.group(
    "index-validator",
    cls=_DispatchGroup,
    usage_path="query network index-validator",
    help="View Andamio Access Token naming index",
)
def index_validator() -> None:
    _help_if_bare()


@click.group(
    "instance-validator",
    cls=_DispatchGroup,
    usage_path="query network instance-validator",
    help="View course instance details",
)
def instance_validator() -> None:
    _help_if_bare()


@click.group(
    "network",
    cls=_DispatchGroup,
    usage_path="query network",
    help="View Andamio network data",
)
def network() -> None:
    _help_if_bare()


for _command in (all_global_state_utxos, global_state_utxo, view_access_token):
    global_state.add_command(_command)

for _command in (all_index_validator_utxos, input_utxo):
    index_validator.add_command(_command)

for _command in (
    all_instance_validator_utxos,
    all_course_instance_utxos,
    assignment_validator_ref_utxo,
    course_instance_utxo,
    decoded_course_instance_datum,
    local_state_policy_ref_utxo,
    local_state_validator_ref_utxo,
    module_token_policy_ref_utxo,
    module_validator_ref_utxo,
):
    instance_validator.add_command(_command)

for _command in (alias_availability, global_state, index_validator, instance_validator):
    network.add_command(_command)