"""Tests for the RSN reader and writer."""

import pytest


class TestLoads:
    def test_named_struct_decodes_to_dict(self):
        from reqdoc.formats import rsn

        assert rsn.loads('Topic { name: "A", requirements: {} }') == {"name": "A", "requirements": {}}

    def test_anonymous_map_with_string_keys(self):
        from reqdoc.formats import rsn

        assert rsn.loads('{"REQ-1.1": 1, "REQ-1.2": 2}') == {"REQ-1.1": 1, "REQ-1.2": 2}

    def test_key_order_preserved(self):
        from reqdoc.formats import rsn

        data = rsn.loads('{"b": 1, "a": 2, "c": 3}')
        assert list(data) == ["b", "a", "c"]

    def test_comments_and_trailing_commas(self):
        from reqdoc.formats import rsn

        text = """
        // leading comment
        Doc {
            /* block /* nested */ comment */
            items: [1, 2, 3,],
            flag: true, // trailing comment
        }
        """
        assert rsn.loads(text) == {"items": [1, 2, 3], "flag": True}

    def test_raw_strings(self):
        from reqdoc.formats import rsn

        assert rsn.loads(r'r"C:\path"') == r"C:\path"
        assert rsn.loads('r#"say "hi""#') == 'say "hi"'
        assert rsn.loads('r##"a "# b"##') == 'a "# b'

    def test_string_escapes(self):
        from reqdoc.formats import rsn

        assert rsn.loads(r'"tab\tnew\nquote\" \u{48}\x41"') == 'tab\tnew\nquote" HA'

    def test_line_continuation(self):
        from reqdoc.formats import rsn

        assert rsn.loads('"one \\\n     two"') == "one two"

    def test_option_values(self):
        from reqdoc.formats import rsn

        assert rsn.loads('{a: Some("x"), b: None}') == {"a": "x", "b": None}

    def test_tuples_and_newtypes(self):
        from reqdoc.formats import rsn

        assert rsn.loads("(1, 2)") == [1, 2]
        assert rsn.loads('Name("x")') == "x"
        assert rsn.loads("Variant") == "Variant"

    @pytest.mark.parametrize("text,value", [
        ("42", 42),
        ("-7", -7),
        ("1_000", 1000),
        ("0x1F", 31),
        ("0o17", 15),
        ("0b101", 5),
        ("1.5", 1.5),
        ("2e3", 2000.0),
    ])
    def test_numbers(self, text, value):
        from reqdoc.formats import rsn

        assert rsn.loads(text) == value

    def test_duplicate_key_flagged(self):
        from reqdoc.formats import rsn

        with pytest.raises(rsn.RSNError) as exc_info:
            rsn.loads('{a: 1,\n a: 2}')
        assert exc_info.value.duplicate_key is True
        assert exc_info.value.line == 2

    @pytest.mark.parametrize("text", [
        '{a: 1',
        '"unterminated',
        "[1 2]",
        "{a: 1} extra",
        "/* open",
        '"bad \\q escape"',
    ])
    def test_malformed_input(self, text):
        from reqdoc.formats import rsn

        with pytest.raises(rsn.RSNError):
            rsn.loads(text)


class TestDumps:
    def test_layout(self):
        from reqdoc.formats import rsn

        text = rsn.dumps({"name": "A", "topics": {"TOPIC-1": {"name": "B"}}, "tags": ["x"]})
        assert text == (
            "{\n"
            '    name: "A",\n'
            "    topics: {\n"
            '        "TOPIC-1": {\n'
            '            name: "B",\n'
            "        },\n"
            "    },\n"
            "    tags: [\n"
            '        "x",\n'
            "    ],\n"
            "}\n"
        )

    def test_multiline_strings_written_raw(self):
        from reqdoc.formats import rsn

        value = 'first "line"\nsecond'
        text = rsn.dumps({"d": value})
        assert 'r#"' in text
        assert rsn.loads(text) == {"d": value}

    def test_escaped_strings_read_back(self):
        from reqdoc.formats import rsn

        value = 'tab\tand "quotes" and \\ backslash'
        assert rsn.loads(rsn.dumps(value)) == value
