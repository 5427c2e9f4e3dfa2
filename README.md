# andamio-cli

A Python library for the Andamio Network API. It provides:

1. An HTTP client for every query and transaction endpoint of the API
2. Typed records for the decoded datums the API returns
3. Writers for NFT metadata and contract token datums
4. Click command groups for network queries, course queries and transactions

## Installation

```
pip install .
```

## The API client

`andamio_cli.client.AndamioClient` issues GET requests against
`https://dev.andamio.io/api` (or another `base_url`), optionally over a
`requests.Session` you pass in.

```python
from andamio_cli.client import AndamioClient, log_response

client = AndamioClient()
response = client.alias_availability("myalias")
print(response.status_code, response.status)
log_response(response)          # writes status and body to stderr
data = response.json()
```

Most methods return an `ApiResponse` with `status_code`, `status`, `text`,
`is_error` (true for status codes above 399) and `json()`. Network failures
raise `ApiError`.

Three methods decode their result into records from `andamio_cli.models`, and
raise `ApiError` when the API answers with an error status:

- `decoded_course_state_datum(policy, alias)` returns a `CourseStateDatumResponse`
- `decoded_global_state_datum(alias)` returns a `GlobalStateDatumResponse`
- `decoded_module_ref_datums(policy)` returns a list of `ModuleTokenResponse`

Every record has `from_dict` and `to_dict`, which use the API's field names.

Transaction endpoints such as `mint_local_state`, `commit_to_assignment`,
`update_assignment`, `leave_assignment`, `burn_local_state`,
`mint_module_tokens`, `accept_assignment`, `deny_assignment` and
`mint_access_token` return the API's response as an `ApiResponse`; the
transaction it describes must be signed by the wallet holding the access token.

## UTxO listings

`andamio_cli.utxo` decodes UTxOs into `Utxo`, `Asset` and `Datum` records:

```python
from andamio_cli.utxo import fetch_course_instances, fetch_global_state, format_utxo

for utxo in fetch_course_instances(client):
    print(format_utxo(utxo))

for utxo in fetch_global_state(client, "myalias"):
    print(format_utxo(utxo))
```

`Asset.display_unit()` shows `lovelace` as is and decodes other units to their
asset name with `andamio_cli.hexutil.hex_to_string`, which drops the
56-character policy id and decodes the rest of the hex.

## Writing data

CIP-25 NFT metadata, with image and description split into chunks of at most
56 bytes:

```python
from andamio_cli.nft_metadata import build_metadata, write_metadata

metadata = build_metadata(
    "<policy-id>", "<asset>", "My NFT", "ipfs://...", "image/png", "A description"
)
write_metadata("metadata.json", metadata)
```

A contract token datum and a manage redeemer from a project file:

```python
from andamio_cli.contract_datum import write_contract_token_datum

write_contract_token_datum("projects.json")
```

This reads `projects.json` and writes `projects-contract-token-datum.json` and
`projects-manage-redeemer.json` next to it. `load_input`,
`contract_token_datum`, `manage_redeemer` and `write_json` do the individual
steps.

`andamio_cli.output.to_json` renders any of these records as two-space
indented JSON, and `save_output(response, out_file)` writes it to a file or
prints it.

## Command groups

Three Click groups wrap the client:

- `andamio_cli.query_network.network` — `alias-availability`, `global-state`,
  `index-validator`, `instance-validator`
- `andamio_cli.query_course.course` — `assignments`,
  `course-governance-validator`, `course-state`, `modules`
- `andamio_cli.transaction.transaction` — `student`, `course-creator`

Each group prints its help when run without a subcommand and rejects unknown
subcommands. They can be embedded in your own Click program or run directly,
with a client passed as the context object:

```python
from andamio_cli.client import AndamioClient
from andamio_cli.query_course import course

course.main(
    ["course-state", "learner-status", "--policy", "<policy-id>",
     "--alias", "myalias", "--out-file", "status.json"],
    obj=AndamioClient(),
    standalone_mode=False,
)
```

Without `obj`, a default `AndamioClient` is created. Commands that take
`--out-file` save their result as JSON to that file; the others log the
response status and body to stderr.

## What this package does not do

- It installs no command-line program: there is no top-level command joining
  the groups above, and no `write`, `sync` or `docs` commands.
- It does not generate Markdown documentation for the commands.
- It does not query the chain tip or run a chain-sync indexer.
- It builds no transactions locally; it only requests them from the API.

## Running the tests

```
pip install ".[test]"
pytest
```