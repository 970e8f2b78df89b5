import json

import pytest

from sysdesign.errors import PayloadError
from sysdesign.llm.parser import parse_design_payload, to_proposals
from sysdesign.utils.json_extract import extract_json

PAYLOAD = {
    "components": [
        {"name": "Load Balancer", "type": "load-balancer", "description": "Spreads traffic"},
        {"name": "App Server", "type": "api-server", "description": "Business logic"},
    ],
    "connections": [
        {"from": "Load Balancer", "to": "App Server", "description": "HTTP"},
    ],
    "description": "A two tier web app",
}


def test_parses_plain_json_text():
    payload = parse_design_payload(json.dumps(PAYLOAD))

    assert len(payload.components) == 2
    assert payload.connections[0].from_ == "Load Balancer"
    assert payload.description == "A two tier web app"


def test_tolerates_fences_and_prose():
    fenced = "```json\n" + json.dumps(PAYLOAD) + "\n```"
    assert len(parse_design_payload(fenced).components) == 2

    chatty = "Sure! Here is the design:\n" + json.dumps(PAYLOAD) + "\nLet me know."
    assert len(parse_design_payload(chatty).connections) == 1


def test_accepts_decoded_dict_and_missing_optional_fields():
    payload = parse_design_payload({"components": [{"name": "Cache"}, {"type": "cdn"}]})

    assert payload.connections == []
    assert payload.components[0].type is None
    assert payload.components[1].name is None


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "no json here",
        "[1, 2, 3]",
        {"connections": []},
        {"components": "Load Balancer"},
        {"components": [{"name": 12}]},
        {"components": [], "connections": [{"from": ["a"], "to": "b"}]},
        None,
    ],
)
def test_rejects_structurally_invalid_payloads(raw):
    with pytest.raises(PayloadError):
        parse_design_payload(raw)


def test_to_proposals():
    components, connections = to_proposals(parse_design_payload(PAYLOAD))

    assert [c.name for c in components] == ["Load Balancer", "App Server"]
    assert components[0].type == "load-balancer"
    assert connections[0].from_name == "Load Balancer"
    assert connections[0].to_name == "App Server"
    assert connections[0].description == "HTTP"


def test_extract_json_returns_none_on_garbage():
    assert extract_json("{not json}") is None
    assert extract_json(None) is None
    assert extract_json('{"a": 1}') == {"a": 1}
