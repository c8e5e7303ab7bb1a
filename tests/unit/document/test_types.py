"""Unit tests for result records."""

import dataclasses

import pytest

from hanlp_client.document.types import ConTuple, DepTuple, Document, NerTuple, SrlTuple


class TestTuples:
    """Named tuple records keep wire order and field names."""

    def test_ner_fields(self):
        ner = NerTuple("北京", "ns", 0, 1)
        assert (ner.entity, ner.type, ner.begin, ner.end) == ("北京", "ns", 0, 1)
        assert ner.end - ner.begin == 1

    def test_srl_fields(self):
        srl = SrlTuple("来到", "PRED", 1, 2)
        assert srl.arg_pred == "来到"
        assert srl.label == "PRED"

    def test_dep_fields(self):
        assert DepTuple(0, "root").head == 0


class TestConTuple:
    """Tests for constituency nodes."""

    def test_leaf_default(self):
        node = ConTuple("NN")
        assert node.children is None
        assert node.is_leaf
        assert node.leaves() == ["NN"]
        assert node.pformat() == "(NN)"

    def test_internal_with_no_children(self):
        node = ConTuple("NP", ())
        assert not node.is_leaf
        assert node.leaves() == []
        assert node.pformat() == "(NP)"

    def test_unlabeled_pformat(self):
        node = ConTuple("", (ConTuple("DT"), ConTuple("NN")))
        assert node.pformat() == "((DT) (NN))"


class TestDocument:
    """Tests for the Document container."""

    def test_defaults_absent(self):
        doc = Document()
        assert all(getattr(doc, f.name) is None for f in dataclasses.fields(doc))

    def test_frozen(self):
        doc = Document(tok_fine=(("a",),))
        with pytest.raises(dataclasses.FrozenInstanceError):
            doc.tok_fine = None

    def test_sections_use_wire_keys(self):
        doc = Document(pos_863=(("n",),), ner_ontonotes=((),))
        assert doc.sections() == {"pos/863": (("n",),), "ner/ontonotes": ((),)}

    def test_count_sentences(self):
        doc = Document(tok_fine=(("a",), ("b",)), dep=((DepTuple(0, "root"),),))
        assert doc.count_sentences() == 2

    def test_to_dict(self):
        doc = Document(
            ner_pku=((NerTuple("北京", "ns", 0, 1),),),
            con=(ConTuple("NP", (ConTuple("NN"),)), None),
        )
        assert doc.to_dict() == {
            "ner/pku": [[["北京", "ns", 0, 1]]],
            "con": [["NP", [["NN"]]], None],
        }
