"""Shared fixtures for HanLP client tests."""

import json
from unittest.mock import MagicMock

import pytest

from hanlp_client.client.hanlp import HanLPClient
from hanlp_client.client.options import ClientOptions


# ---------------------------------------------------------------------------
# Sample payloads
# ---------------------------------------------------------------------------


@pytest.fixture
def parse_payload() -> dict:
    """`/parse` response for one sentence covering every task family."""
    return {
        "tok/fine": [["阿婆主", "来到", "北京", "立方庭"]],
        "tok/coarse": [["阿婆主", "来到", "北京立方庭"]],
        "pos/ctb": [["NN", "VV", "NR", "NR"]],
        "pos/pku": [["n", "v", "ns", "ns"]],
        "pos/863": [["n", "v", "ns", "n"]],
        "ner/pku": [[["北京立方庭", "ns", 2, 4]]],
        "ner/msra": [[["北京", "LOCATION", 2, 3], ["立方庭", "LOCATION", 3, 4]]],
        "ner/ontonotes": [[["北京立方庭", "FAC", 2.0, 4.0]]],
        "srl": [[[["阿婆主", "ARG0", 0, 1], ["来到", "PRED", 1, 2], ["北京立方庭", "ARG1", 2, 4]]]],
        "dep": [[[2, "nsubj"], [0, "root"], [4, "nn"], [2, "dobj"]]],
        "sdp": [[[[2, "Agt"]], [[0, "Root"]], [[4, "Nmod"]], [[2, "Lfin"]]]],
        "con": [
            ["TOP", [["IP", [
                ["NP", [["NN", ["阿婆主"]]]],
                ["VP", [["VV", ["来到"]], ["NP", [["NR", ["北京"]], ["NR", ["立方庭"]]]]]],
            ]]]]
        ],
    }


@pytest.fixture
def parse_body(parse_payload) -> bytes:
    return json.dumps(parse_payload, ensure_ascii=False).encode("utf-8")


# ---------------------------------------------------------------------------
# Transport stubs
# ---------------------------------------------------------------------------


def make_response(status_code: int = 200, body=b"{}") -> MagicMock:
    """Build a `requests.Response` stand-in."""
    if not isinstance(body, (bytes, str)):
        body = json.dumps(body, ensure_ascii=False)
    if isinstance(body, str):
        body = body.encode("utf-8")
    response = MagicMock()
    response.status_code = status_code
    response.content = body
    response.text = body.decode("utf-8")
    return response


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def client() -> HanLPClient:
    return HanLPClient(ClientOptions(url="http://hanlp.test/api", auth="secret"))
