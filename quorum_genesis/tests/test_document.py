"""
Test suite for reading the genesis template and writing the genesis document.
"""

import json
from pathlib import Path

import pytest

from quorum_genesis import (
    GOVERNANCE_CONTRACT_ADDRESS,
    VOTING_CONTRACT_ADDRESS,
    GenesisDocument,
    TemplateError,
    dump_genesis,
    load_template,
    parse_template,
    write_genesis,
)

MINIMAL_TEMPLATE = {
    "config": {"chainId": 10},
    "nonce": "0x0",
    "mixhash": "0x" + "00" * 32,
    "alloc": {
        "0x0000000000000000000000000000000000000020": {"code": "0x6060", "storage": {}},
        "0x000000000000000000000000000000000000002A": {"code": "0x6060", "storage": {}},
    },
}


def test_default_template_has_both_contracts(template: GenesisDocument):
    """
    Test that the packaged template carries both fixed contracts.
    """
    assert VOTING_CONTRACT_ADDRESS in template.alloc
    assert GOVERNANCE_CONTRACT_ADDRESS in template.alloc
    assert template.config == {"homesteadBlock": 0}


def test_template_fields_are_kept():
    """
    Test that fields unknown to the model are written back unchanged.
    """
    document = parse_template(MINIMAL_TEMPLATE, "test")
    output = json.loads(dump_genesis(document))
    assert output["nonce"] == "0x0"
    assert output["mixhash"] == "0x" + "00" * 32
    assert output["config"] == {"chainId": 10}
    assert "gasLimit" not in output
    assert output["alloc"]["0x000000000000000000000000000000000000002a"] == {
        "code": "0x6060",
        "storage": {},
    }


def test_template_without_contract():
    """
    Test that a template missing a fixed contract is rejected.
    """
    data = json.loads(json.dumps(MINIMAL_TEMPLATE))
    del data["alloc"]["0x000000000000000000000000000000000000002A"]
    with pytest.raises(TemplateError) as e:
        parse_template(data, "broken.json")
    assert "0x000000000000000000000000000000000000002a" in str(e.value)


def test_template_with_malformed_account():
    """
    Test that an account address that is not 20 bytes is rejected.
    """
    data = json.loads(json.dumps(MINIMAL_TEMPLATE))
    data["alloc"]["0x1234"] = {"balance": "1"}
    with pytest.raises(TemplateError):
        parse_template(data, "broken.json")


def test_load_template_from_file(tmp_path: Path):
    """
    Test loading a template given on the command line.
    """
    path = tmp_path / "template.json"
    path.write_text(json.dumps(MINIMAL_TEMPLATE))
    document = load_template(path)
    assert document.alloc[VOTING_CONTRACT_ADDRESS].code == b"\x60\x60"


@pytest.mark.parametrize("content", [None, "{", "[]"])
def test_load_unusable_template(tmp_path: Path, content):
    """
    Test the errors for a missing, unparsable or non-object template.
    """
    path = tmp_path / "template.json"
    if content is not None:
        path.write_text(content)
    with pytest.raises(TemplateError):
        load_template(path)


def test_write_genesis(tmp_path: Path, template: GenesisDocument):
    """
    Test that the written file is the indented JSON of the document.
    """
    path = tmp_path / "quorum-genesis.json"
    write_genesis(template, path)
    text = path.read_text()
    assert text == dump_genesis(template)
    assert text.endswith("}\n")
    assert json.loads(text)["gasLimit"] == "0x2FEFD800"
