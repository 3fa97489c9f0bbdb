#!/usr/bin/env python3

import json

import pytest
from click.testing import CliRunner

from fruko_bindgen.cli_utils import reconstruct_command_line
from fruko_bindgen.fruko_bindgen import fruko_bindgen

SOURCE = "struct point { x: f32, y: f32 }\n"


@pytest.fixture
def definition(tmp_path):
    path = tmp_path / "point.fdd"
    path.write_text(SOURCE, encoding="utf-8")
    return path


def run(*args):
    return CliRunner().invoke(fruko_bindgen, [str(arg) for arg in args])


class TestCli:
    """Test cases for the fruko_bindgen command"""

    def test_generate_cpp(self, definition, tmp_path):
        output = tmp_path / "point.hpp"
        result = run(definition, "cpp", output)
        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8") == "struct point { float x;float y; };"

    def test_generate_ts_mobx(self, definition, tmp_path):
        output = tmp_path / "point.ts"
        result = run(definition, "typescript-mobx", output)
        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8") == (
            "// This file has been generated from 'point.fdd'\n"
            "export const point = types.model({ x: types.num, y: types.num,  }); "
            "export type pointSnapshotType = SnapshotIn<typeof point>;"
        )

    def test_existing_output_requires_force(self, definition, tmp_path):
        output = tmp_path / "point.hpp"
        output.write_text("old", encoding="utf-8")

        result = run(definition, "cpp", output)
        assert result.exit_code == 1
        assert "already exists" in result.output
        assert output.read_text(encoding="utf-8") == "old"

        result = run("--force", definition, "cpp", output)
        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8") == "struct point { float x;float y; };"

    def test_unknown_target(self, definition, tmp_path):
        output = tmp_path / "point.out"
        result = run(definition, "java", output)
        assert result.exit_code == 1
        assert "Unknown compilation target: java" in result.output
        assert not output.exists()

    def test_lex_error(self, tmp_path):
        source = tmp_path / "bad.fdd"
        source.write_text("struct bad { a: u8; }", encoding="utf-8")
        output = tmp_path / "bad.hpp"
        result = run(source, "cpp", output)
        assert result.exit_code == 1
        assert "Unknown character at 1:19" in result.output
        assert not output.exists()

    def test_parse_error(self, tmp_path):
        source = tmp_path / "bad.fdd"
        source.write_text("struct bad {", encoding="utf-8")
        result = run(source, "cpp", tmp_path / "bad.hpp")
        assert result.exit_code == 1
        assert not (tmp_path / "bad.hpp").exists()

    def test_missing_source(self, tmp_path):
        result = run(tmp_path / "missing.fdd", "cpp", tmp_path / "out.hpp")
        assert result.exit_code == 2

    def test_comments(self, definition, tmp_path):
        output = tmp_path / "point.ts"
        result = run("-m", "Do not edit", "--comment", "Second line", definition, "ts-mobx", output)
        assert result.exit_code == 0, result.output
        lines = output.read_text(encoding="utf-8").split("\n")
        assert lines[:3] == [
            "// This file has been generated from 'point.fdd'",
            "// Do not edit",
            "// Second line",
        ]

    def test_config_file(self, definition, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(
            json.dumps(
                {
                    "add_generation_comment": False,
                    "add_command_line_comment": True,
                    "preamble_comments": ["From config"],
                    "output": {"mode": "force"},
                }
            ),
            encoding="utf-8",
        )
        output = tmp_path / "point.ts"
        output.write_text("old", encoding="utf-8")

        result = run("--config", config, "-m", "From cli", definition, "ts-mobx", output)
        assert result.exit_code == 0, result.output

        lines = output.read_text(encoding="utf-8").split("\n")
        assert lines[0] == "// From config"
        assert lines[1] == "// From cli"
        assert lines[2].startswith("// Generated by fruko_bindgen v")
        assert "fruko_bindgen point.fdd ts-mobx" in lines[2]
        assert lines[3].startswith("export const point = ")

    def test_unbalanced_bracket_in_comment(self, definition, tmp_path):
        output = tmp_path / "point.ts"
        result = run("-m", "see section (3", definition, "ts-mobx", output)
        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8").split("\n")[1] == "// see section (3"

    def test_unbalanced_bracket_in_source_file_name(self, tmp_path):
        source = tmp_path / "defs[v2.fdd"
        source.write_text(SOURCE, encoding="utf-8")
        output = tmp_path / "point.ts"
        result = run(source, "ts-mobx", output)
        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8").startswith("// This file has been generated from 'defs[v2.fdd'\n")

    def test_multi_line_comment(self, definition, tmp_path):
        output = tmp_path / "point.ts"
        result = run("-m", "first\nsecond", definition, "ts-mobx", output)
        assert result.exit_code == 0, result.output
        lines = output.read_text(encoding="utf-8").split("\n")
        assert lines[1:3] == ["// first", "// second"]
        assert lines[3].startswith("export const point = ")

    def test_source_is_not_utf8(self, tmp_path):
        source = tmp_path / "latin1.fdd"
        source.write_bytes(b"struct caf\xe9 { }")
        output = tmp_path / "out.hpp"
        result = run(source, "cpp", output)
        assert result.exit_code == 1
        assert "not valid UTF-8" in result.output
        assert not output.exists()

    @pytest.mark.parametrize(
        "contents,message",
        [
            ("{not json", "Expecting property name"),
            ('{"output": {"mode": "merge"}}', "'merge' is not a valid OutputMode"),
            ("[1, 2]", "must contain a JSON object"),
        ],
    )
    def test_invalid_config_file(self, definition, tmp_path, contents, message):
        config = tmp_path / "config.json"
        config.write_text(contents, encoding="utf-8")
        output = tmp_path / "point.hpp"
        result = run("--config", config, definition, "cpp", output)
        assert result.exit_code == 1
        assert message in result.output
        assert "Traceback" not in result.output
        assert not output.exists()


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        # No active Click context in tests, so this returns the fallback
        assert reconstruct_command_line(fruko_bindgen) == "fruko_bindgen"


if __name__ == "__main__":
    pytest.main([__file__])
