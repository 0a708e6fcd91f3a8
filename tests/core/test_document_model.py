"""Tests for the Document model and its traversal helpers."""

import pytest


def _req(req_id, name="Name"):
    from reqdoc.core.models import Requirement

    return Requirement(id=req_id, name=name, description=f"{req_id} text")


class TestVersion:
    def test_parse_and_str_round_trip(self):
        from reqdoc.core.models import Version

        version = Version.parse("1.20.3")
        assert version == Version(1, 20, 3)
        assert str(version) == "1.20.3"

    @pytest.mark.parametrize("text", ["1.0", "1.0.0.0", "v1.0.0", "1.a.0", "-1.0.0", ""])
    def test_parse_rejects_malformed(self, text):
        from reqdoc.core.models import Version

        with pytest.raises(ValueError, match="major.minor.patch"):
            Version.parse(text)


class TestDocumentTraversal:
    def test_topics_in_declaration_order(self, sample_document):
        assert [t.id for t in sample_document.topics()] == ["TOPIC-1", "TOPIC-2"]

    def test_requirements_of_topic(self, sample_document):
        topic = sample_document.topics()[0]
        assert [r.id for r in sample_document.requirements_of(topic)] == ["REQ-1.1", "REQ-1.2"]

    def test_find_requirement_is_global(self, sample_document):
        nested = sample_document.find_requirement("REQ-2.2")
        assert nested is not None
        assert nested.name == "Delta"
        assert sample_document.find_requirement("REQ-9.9") is None

    def test_find_topic_includes_subtopics(self, sample_document):
        assert sample_document.find_topic("TOPIC-2.1").name == "Nested Topic"
        assert sample_document.find_topic("TOPIC-9") is None

    def test_topic_of(self, sample_document):
        assert sample_document.topic_of("REQ-2.2").id == "TOPIC-2.1"
        assert sample_document.topic_of("REQ-1.1").id == "TOPIC-1"

    def test_all_requirement_ids(self, sample_document):
        assert sample_document.all_requirement_ids() == frozenset(
            {"REQ-1.1", "REQ-1.2", "REQ-2.1", "REQ-2.2"}
        )

    def test_all_requirements_in_document_order(self, sample_document):
        ids = [r.id for r in sample_document.all_requirements()]
        assert ids == ["REQ-1.1", "REQ-1.2", "REQ-2.1", "REQ-2.2"]

    def test_walk_topics_depth_first(self, sample_document):
        walked = [(t.id, depth) for t, depth in sample_document.walk_topics()]
        assert walked == [("TOPIC-1", 0), ("TOPIC-2", 0), ("TOPIC-2.1", 1)]


class TestDocumentInvariants:
    def test_document_is_immutable(self, sample_document):
        from dataclasses import FrozenInstanceError

        with pytest.raises(FrozenInstanceError):
            sample_document.name = "Other"

    def test_duplicate_requirement_across_topics_rejected(self):
        from reqdoc.core.models import Document, Topic, Version

        with pytest.raises(ValueError, match="duplicate requirement ID 'REQ-1.1'"):
            Document(
                name="Dup",
                version=Version(1, 0, 0),
                description="",
                root_topics=(
                    Topic(id="TOPIC-1", name="A", requirements=(_req("REQ-1.1"),)),
                    Topic(id="TOPIC-2", name="B", requirements=(_req("REQ-1.1"),)),
                ),
            )

    def test_duplicate_topic_in_subtopics_rejected(self):
        from reqdoc.core.models import Document, Topic, Version

        nested = Topic(id="TOPIC-1", name="Nested")
        with pytest.raises(ValueError, match="duplicate topic ID 'TOPIC-1'"):
            Document(
                name="Dup",
                version=Version(1, 0, 0),
                description="",
                root_topics=(Topic(id="TOPIC-1", name="A", subtopics=(nested,)),),
            )
