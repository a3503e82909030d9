"""Tests for manifest -> table row builders."""

import pytest

from readme_sync.tables.builders import (
    COMMANDS_HEADER,
    PREFERENCES_HEADER,
    commands_table,
    generate_markdown,
    markdown_escape,
    preferences_table,
    stringify_default,
)


class TestEscape:
    def test_escapes_each_character(self):
        assert markdown_escape("a & b") == "a &amp; b"
        assert markdown_escape("<x>") == "&lt;x&gt;"
        assert markdown_escape("a|b") == "a&vert;b"

    def test_ampersand_escaped_first(self):
        assert markdown_escape("&<>|") == "&amp;&lt;&gt;&vert;"

    def test_existing_entity_escaped_once(self):
        assert markdown_escape("&lt;") == "&amp;lt;"

    def test_plain_text_untouched(self):
        assert markdown_escape("List scripts") == "List scripts"


class TestStringifyDefault:
    @pytest.mark.parametrize("value,expected", [
        (3, "3"),
        (1.5, "1.5"),
        (2.0, "2"),
        (True, "true"),
        (False, "false"),
        (None, "null"),
        ("npm", "npm"),
        ([1, "a", None], "1,a,"),
        ({"k": "v"}, "[object Object]"),
        (1e21, "1e+21"),
        (1.5e22, "1.5e+22"),
        (10**22, "1e+22"),
        (1e-7, "1e-7"),
        (-2.5e-8, "-2.5e-8"),
        (1e-6, "0.000001"),
        (0.00015, "0.00015"),
        (1e20, "100000000000000000000"),
        (-0.0, "0"),
        (float("inf"), "Infinity"),
        (float("nan"), "NaN"),
    ])
    def test_values(self, value, expected):
        assert stringify_default(value) == expected

    def test_absent(self):
        assert stringify_default(present=False) == "undefined"


class TestCommandsTable:
    def test_rows(self, manifest):
        table = commands_table(manifest["commands"])
        assert table[0] == COMMANDS_HEADER
        assert table[1] == ["`Search Scripts`", "List scripts in package.json"]
        assert table[2] == [
            "`Run Script`",
            "Run a script with &lt;args&gt; &vert; filters &amp; more",
        ]

    @pytest.mark.parametrize("commands", [None, []])
    def test_empty_is_zero_rows(self, commands):
        assert commands_table(commands) == []

    def test_non_object_entries_skipped(self):
        table = commands_table([{"title": "A", "description": "a"}, "junk"])
        assert len(table) == 2

    def test_missing_description(self):
        assert commands_table([{"title": "A"}])[1] == ["`A`", ""]

    def test_missing_title_reads_undefined(self):
        assert commands_table([{"description": "d"}])[1] == ["`undefined`", "d"]

    def test_header_not_shared(self):
        table = commands_table([{"title": "A", "description": "a"}])
        table[0].append("extra")
        assert COMMANDS_HEADER == ["Title", "Description"]


class TestPreferencesTable:
    def test_rows(self, manifest):
        table = preferences_table(manifest["preferences"])
        assert table[0] == PREFERENCES_HEADER
        assert table[1] == ["`projectRoot`", "Directory to scan for projects", "`Yes`", "undefined"]
        assert table[2] == ["`depth`", "How deep to search", "`No`", "3"]
        assert table[3] == ["`showHidden`", "Include dot folders", "`No`", "false"]

    def test_missing_name_reads_undefined(self):
        table = preferences_table([{"description": "d"}])
        assert table[1] == ["`undefined`", "d", "`No`", "undefined"]

    def test_default_escaped(self):
        table = preferences_table([
            {"name": "sep", "description": "d", "default": "a|b"},
        ])
        assert table[1][3] == "a&vert;b"

    @pytest.mark.parametrize("prefs", [None, []])
    def test_empty_is_zero_rows(self, prefs):
        assert preferences_table(prefs) == []


class TestGenerateMarkdown:
    def test_both_sections(self, manifest):
        md = generate_markdown(manifest)
        assert set(md) == {"commands", "configs"}
        lines = md["commands"].splitlines()
        assert lines[0].startswith("| Title ")
        assert len(lines) == 4
        assert len({len(line) for line in lines}) == 1
        assert md["configs"].splitlines()[0].startswith("| Key ")

    def test_missing_lists_render_no_data(self):
        md = generate_markdown({"name": "x"})
        assert md == {"commands": "**No data**", "configs": "**No data**"}

    def test_exact_rendering(self):
        md = generate_markdown({
            "commands": [{"title": "Go", "description": "Run it"}],
            "preferences": [{"name": "k", "description": "d", "required": True}],
        })
        assert md["commands"] == (
            "| Title | Description |\n"
            "| ----- | ----------- |\n"
            "| `Go`  | Run it      |"
        )
        assert md["configs"] == (
            "| Key | Description | Required | Default   |\n"
            "| --- | ----------- | -------- | --------- |\n"
            "| `k` | d           | `Yes`    | undefined |"
        )
