"""Tests for the format registry and format conversion."""

from pathlib import Path

import pytest


class TestRegistry:
    def test_builtin_formats(self):
        from reqdoc.formats import list_formats

        assert set(list_formats()) == {"yaml", "json", "toml", "rsn"}

    @pytest.mark.parametrize("filename,name", [
        ("reqs.yml", "yaml"),
        ("reqs.YAML", "yaml"),
        ("reqs.json", "json"),
        ("reqs.toml", "toml"),
        ("reqs.rsn", "rsn"),
        ("reqs.ron", "rsn"),
    ])
    def test_format_for_path(self, filename, name):
        from reqdoc.formats import format_for_path

        assert format_for_path(Path(filename)).name == name

    def test_unknown_suffix(self):
        from reqdoc.formats import format_for_path, get_format

        assert format_for_path(Path("reqs.txt")) is None
        assert get_format("xml") is None

    @pytest.mark.parametrize("module_name,name", [
        ("yaml_format", "yaml"),
        ("json_format", "json"),
        ("rsn_format", "rsn"),
        ("toml_format", "toml"),
    ])
    def test_registry_holds_factory_formats(self, module_name, name):
        import importlib

        from reqdoc.formats import get_format

        module = importlib.import_module(f"reqdoc.formats.{module_name}")
        assert type(get_format(name)) is type(module.create_format())

    def test_get_format_case_insensitive(self):
        from reqdoc.formats import get_format

        assert get_format("YAML").name == "yaml"


class TestConversion:
    @pytest.mark.parametrize("target", ["yaml", "json", "toml", "rsn"])
    def test_encode_then_load_preserves_document(self, sample_document, target):
        """Validates REQ-2.1: every format can carry the same document."""
        from reqdoc.core.loader import load_document
        from reqdoc.core.serialize import document_to_dict
        from reqdoc.formats import get_format

        text = get_format(target).encode(document_to_dict(sample_document))
        assert load_document(text, fmt=target) == sample_document

    def test_document_to_dict_omits_empty_values(self, sample_document):
        from reqdoc.core.serialize import document_to_dict

        data = document_to_dict(sample_document)
        assert data["version"] == "2.1.0"
        assert "additional_info" not in data["topics"]["TOPIC-1"]["requirements"]["REQ-1.1"]
        assert "subtopics" not in data["topics"]["TOPIC-1"]
        assert "unit" not in data["config_defaults"][1]

    def test_yaml_multiline_uses_block_style(self, sample_document):
        from reqdoc.core.serialize import document_to_dict
        from reqdoc.formats import get_format

        text = get_format("yaml").encode(document_to_dict(sample_document))
        assert "description: |" in text
