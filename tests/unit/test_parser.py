import json

import pytest

from proxy_config import EndpointFact, ParseError, ServiceFact
from proxy_config.parser import parse_snapshot


EXAMPLE = {
    "Services": [
        {
            "Name": "nodejs",
            "Port": 10000,
            "Endpoints": ["10.240.180.168:8000", "10.240.254.199:8000"],
        },
        {
            "Name": "mysql",
            "Port": 10001,
            "Endpoints": ["10.240.180.168:9000", "10.240.254.199:9000"],
        },
    ]
}


def encode(payload) -> bytes:
    return json.dumps(payload).encode()


def test_parse_example_document():
    snapshot = parse_snapshot(encode(EXAMPLE))

    assert snapshot.services == (
        ServiceFact("nodejs", 10000),
        ServiceFact("mysql", 10001),
    )
    assert snapshot.endpoints == (
        EndpointFact("nodejs", ("10.240.180.168:8000", "10.240.254.199:8000")),
        EndpointFact("mysql", ("10.240.180.168:9000", "10.240.254.199:9000")),
    )


def test_field_names_are_case_insensitive_and_unknown_fields_ignored():
    snapshot = parse_snapshot(
        encode(
            {
                "services": [
                    {"name": "web", "PORT": 80, "endpoints": [], "Weight": 3}
                ],
                "Version": 2,
            }
        )
    )

    assert snapshot.services == (ServiceFact("web", 80),)
    assert snapshot.endpoints == (EndpointFact("web", ()),)


def test_empty_service_list_is_valid():
    snapshot = parse_snapshot(b'{"Services": []}')

    assert snapshot.services == ()
    assert snapshot.endpoints == ()


def test_ipv6_endpoint_is_accepted():
    snapshot = parse_snapshot(
        encode({"Services": [{"Name": "v6", "Port": 1, "Endpoints": ["[::1]:8080"]}]})
    )

    assert snapshot.endpoints[0].addresses == ("[::1]:8080",)


@pytest.mark.parametrize(
    "data",
    [
        b'{"Services": [{"Name": "nodejs", "Port": 10000',
        b"[]",
        b'{"Other": []}',
        b'{"Services": {}}',
        b"\xff\xfe",
    ],
)
def test_malformed_documents_are_rejected(data):
    with pytest.raises(ParseError):
        parse_snapshot(data)


@pytest.mark.parametrize(
    "entry",
    [
        {"Port": 1, "Endpoints": []},
        {"Name": "", "Port": 1, "Endpoints": []},
        {"Name": 7, "Port": 1, "Endpoints": []},
        {"Name": "a", "Endpoints": []},
        {"Name": "a", "Port": "80", "Endpoints": []},
        {"Name": "a", "Port": True, "Endpoints": []},
        {"Name": "a", "Port": 70000, "Endpoints": []},
        {"Name": "a", "Port": 1},
        {"Name": "a", "Port": 1, "Endpoints": "10.0.0.1:80"},
        {"Name": "a", "Port": 1, "Endpoints": ["10.0.0.1"]},
        {"Name": "a", "Port": 1, "Endpoints": [42]},
        "not-an-object",
    ],
)
def test_invalid_entries_are_rejected(entry):
    document = {"Services": [EXAMPLE["Services"][0], entry]}

    with pytest.raises(ParseError):
        parse_snapshot(encode(document))


def test_duplicate_names_are_rejected():
    document = {"Services": [EXAMPLE["Services"][0], EXAMPLE["Services"][0]]}

    with pytest.raises(ParseError, match="duplicate"):
        parse_snapshot(encode(document))


def test_null_endpoints_are_treated_as_empty():
    snapshot = parse_snapshot(
        encode({"Services": [{"Name": "idle", "Port": 81, "Endpoints": None}]})
    )

    assert snapshot.endpoints == (EndpointFact("idle", ()),)
