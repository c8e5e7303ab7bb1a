"""Unit tests for the command-line adapter."""

import json
from unittest.mock import patch

import pytest
import requests

from hanlp_client.api import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("HANLP_URL", "HANLP_AUTH", "HANLP_AUTH_FILE", "HANLP_LANGUAGE", "HANLP_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("hanlp_client.client.options.load_dotenv", lambda *a, **k: False)


@pytest.fixture
def mock_post():
    with patch("hanlp_client.client.transport.requests.post") as mocked:
        yield mocked


class TestArguments:
    """Tests for argument parsing."""

    def test_parse_lists(self):
        args = cli.build_parser().parse_args(["parse", "你好", "--tasks", "tok/fine, ner/pku"])
        assert args.text == ["你好"]
        assert args.tasks == ["tok/fine", "ner/pku"]

    def test_similarity_pairs(self):
        args = cli.build_parser().parse_args(["similarity", "a|||b"])
        assert args.pairs == [("a", "b")]

    def test_bad_pair(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["similarity", "no separator"])

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args([])


class TestMain:
    """End-to-end runs with a stubbed transport."""

    def test_parse_raw(self, mock_post, response_factory, capsys):
        mock_post.return_value = response_factory(200, '{"tok/fine": [["北京"]]}')
        assert cli.main(["--url", "http://x/api", "parse", "北京"]) == 0
        assert capsys.readouterr().out.strip() == '{"tok/fine": [["北京"]]}'
        assert mock_post.call_args.args[0] == "http://x/api/parse"

    def test_parse_json(self, mock_post, response_factory, capsys):
        mock_post.return_value = response_factory(200, '{"ner/pku": [[["北京", "ns", 0.0, 1.0]]]}')
        assert cli.main(["parse", "北京", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == {"ner/pku": [[["北京", "ns", 0, 1]]]}

    def test_parse_con(self, mock_post, response_factory, capsys):
        mock_post.return_value = response_factory(200, '{"con": [["TOP", [["NN", ["北京"]]]]]}')
        assert cli.main(["parse", "北京", "--con"]) == 0
        assert capsys.readouterr().out.strip() == "(TOP (NN (北京)))"

    def test_tokenize(self, mock_post, response_factory, capsys):
        mock_post.return_value = response_factory(200, '{"tok/fine": [["北京", "立方庭"], ["你好"]]}')
        assert cli.main(["tokenize", "北京立方庭。你好"]) == 0
        assert capsys.readouterr().out.splitlines() == ["北京 立方庭", "你好"]

    def test_classify(self, mock_post, response_factory, capsys):
        mock_post.return_value = response_factory(200, '"体育"')
        assert cli.main(["--auth", "k", "classify", "比赛", "--model", "news_zh"]) == 0
        body = mock_post.call_args.kwargs["json"]
        assert body == {"text": "比赛", "language": "zh", "model": "news_zh"}
        assert mock_post.call_args.kwargs["headers"]["Authorization"] == "Basic k"

    def test_http_error_exit_code(self, mock_post, response_factory, capsys):
        mock_post.return_value = response_factory(429, '{"code":429,"msg":"rate limited"}')
        assert cli.main(["keyphrase", "文本"]) == 1
        assert "429" in capsys.readouterr().err

    def test_transport_error_exit_code(self, mock_post, capsys):
        mock_post.side_effect = requests.exceptions.ConnectionError("unreachable")
        assert cli.main(["sentiment", "好"]) == 1
        assert "unreachable" in capsys.readouterr().err

    def test_bad_timeout_exit_code(self, monkeypatch, capsys):
        monkeypatch.setenv("HANLP_TIMEOUT", "abc")
        assert cli.main(["about"]) == 1
        err = capsys.readouterr().err
        assert err.startswith("hanlp-client: HANLP_TIMEOUT")
        assert "Traceback" not in err

    @patch("hanlp_client.client.transport.requests.get")
    def test_about(self, mock_get, response_factory, capsys):
        mock_get.return_value = response_factory(200, '{"version": "2.1"}')
        assert cli.main(["about"]) == 0
        assert "2.1" in capsys.readouterr().out
