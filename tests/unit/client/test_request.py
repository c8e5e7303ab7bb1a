"""Unit tests for request body composition."""

from hanlp_client.client.options import ClientOptions
from hanlp_client.client.request import HanLPRequest, build_request


class TestToBody:
    """Zero-value fields are omitted from the wire body."""

    def test_minimal(self):
        assert HanLPRequest(text="你好", language="zh").to_body() == {"text": "你好", "language": "zh"}

    def test_false_topk_omitted(self):
        assert "topk" not in HanLPRequest(text="x", topk=False).to_body()

    def test_zero_topk_omitted(self):
        assert "topk" not in HanLPRequest(text="x", topk=0).to_body()

    def test_true_and_int_topk_kept(self):
        assert HanLPRequest(text="x", topk=True).to_body()["topk"] is True
        assert HanLPRequest(text="x", topk=3).to_body()["topk"] == 3

    def test_empty_task_lists_omitted(self):
        body = HanLPRequest(text="x", tasks=[], skip_tasks=[]).to_body()
        assert "tasks" not in body
        assert "skip_tasks" not in body

    def test_pairs_serialized_as_lists(self):
        body = HanLPRequest(text=[("看图猜一电影名", "看图猜电影")]).to_body()
        assert body["text"] == [["看图猜一电影名", "看图猜电影"]]

    def test_empty_text_kept(self):
        assert HanLPRequest(text="").to_body() == {"text": ""}

    def test_tokens_instead_of_text(self):
        body = HanLPRequest(tokens=[["北京", "立方庭"]]).to_body()
        assert body == {"tokens": [["北京", "立方庭"]]}


class TestBuildRequest:
    """Tests for composing requests from options."""

    def test_parse_carries_tasks(self):
        options = ClientOptions(tasks=["ner/pku"], skip_tasks=["tok/fine"])
        body = build_request("x", options, parse=True).to_body()
        assert body["tasks"] == ["ner/pku"]
        assert body["skip_tasks"] == ["tok/fine"]
        assert body["language"] == "zh"

    def test_non_parse_ignores_tasks(self):
        options = ClientOptions(tasks=["ner/pku"])
        assert "tasks" not in build_request("x", options).to_body()

    def test_endpoint_fields(self):
        body = build_request("x", ClientOptions(), model="news_zh", target_style="gov_doc").to_body()
        assert body["model"] == "news_zh"
        assert body["target_style"] == "gov_doc"
