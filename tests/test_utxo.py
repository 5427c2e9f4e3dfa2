import json

import pytest
import responses
from responses import matchers

from andamio_cli.client import AndamioClient, ApiError
from andamio_cli.utxo import (
    Asset,
    Datum,
    Utxo,
    fetch_course_instances,
    fetch_global_state,
    format_utxo,
)

BASE = "https://api.example.com"
POLICY = "ab" * 28


def _sample(name="hello"):
    return {
        "tx_hash": "txhash1",
        "index": 2,
        "slot": 99,
        "assets": [
            {"unit": "lovelace", "amount": "5000000"},
            {"unit": POLICY + name.encode().hex(), "amount": "1"},
        ],
        "address": "addr_test1",
        "datum": {"type": "inline", "hash": "dhash", "bytes": "d8799f", "json": {"constructor": 0}},
        "reference_script": None,
        "txout_cbor": "cbor",
    }


def test_display_unit_lovelace():
    assert Asset("lovelace", "10").display_unit() == "lovelace"


def test_display_unit_decodes_asset_name():
    assert Asset(POLICY + "hello".encode().hex(), "1").display_unit() == "hello"


def test_display_unit_short_unit_is_blank():
    assert Asset("abcd", "1").display_unit() == ""


def test_utxo_from_dict_reads_fields():
    utxo = Utxo.from_dict(_sample())
    assert utxo.tx_hash == "txhash1"
    assert utxo.index == 2
    assert utxo.slot == 99
    assert [a.amount for a in utxo.assets] == ["5000000", "1"]
    assert utxo.datum == Datum("inline", "dhash", "d8799f", {"constructor": 0})
    assert utxo.reference_script is None
    assert utxo.txout_cbor == "cbor"


def test_utxo_from_null_is_zero_value():
    assert Utxo.from_dict(None) == Utxo()


def test_utxo_rejects_wrong_type():
    with pytest.raises(ValueError):
        Utxo.from_dict({"index": "two"})


def test_format_utxo_layout():
    text = format_utxo(Utxo.from_dict(_sample()))
    assert text.splitlines() == [
        "TxHash: txhash1",
        "Index: 2",
        "Slot: 99",
        "Address: addr_test1",
        "Assets:",
        "  - Unit: lovelace, Amount: 5000000",
        "  - Unit: hello, Amount: 1",
        "Datum:",
        "  Type: inline",
        "  Hash: dhash",
        "  Bytes: d8799f",
        "---------------------------------------------",
    ]


def test_fetch_course_instances():
    client = AndamioClient(base_url=BASE)
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            BASE + "/instance-validator/courseInstanceUtxos",
            body=json.dumps([_sample("one"), _sample("two")]),
        )
        utxos = fetch_course_instances(client)
    assert [u.assets[1].display_unit() for u in utxos] == ["one", "two"]


def test_fetch_global_state_all():
    client = AndamioClient(base_url=BASE)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/global-state/utxos", body="null")
        assert fetch_global_state(client) == []


def test_fetch_global_state_by_alias():
    client = AndamioClient(base_url=BASE)
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            BASE + "/global-state/utxoByAlias",
            body=json.dumps(_sample("bob")),
            match=[matchers.query_param_matcher({"alias": "bob"})],
        )
        utxos = fetch_global_state(client, "bob")
    assert len(utxos) == 1
    assert utxos[0].assets[1].display_unit() == "bob"


def test_fetch_invalid_json_raises():
    client = AndamioClient(base_url=BASE)
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET, BASE + "/instance-validator/courseInstanceUtxos", body="not json"
        )
        with pytest.raises(ApiError):
            fetch_course_instances(client)


def test_fetch_object_instead_of_list_raises():
    client = AndamioClient(base_url=BASE)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, BASE + "/global-state/utxos", body=json.dumps(_sample()))
        with pytest.raises(ApiError):
            fetch_global_state(client, "")