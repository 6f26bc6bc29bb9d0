"""
Tests for the minitpl command line.
"""

import io
import json

from minitpl.cli import describe_tags, main

from tests.infrastructure import write


def test_render_to_stdout(tmp_path, capsys):
    tpl = write(tmp_path / "page.html", "<h1>{{title}}</h1>{{#each xs}}<i>{{this}}</i>{{/each}}")
    data = write(tmp_path / "data.yaml", "title: A & B\nxs: [1, 2]\n")

    rc = main(["render", str(tpl), "-d", str(data)])

    assert rc == 0
    assert capsys.readouterr().out == "<h1>A &amp; B</h1><i>1</i><i>2</i>"


def test_render_frontmatter_defaults_and_overrides(tmp_path, capsys):
    tpl = write(tmp_path / "page.html", "---\ntitle: Default\nlang: en\n---\n{{title}}/{{lang}}")

    rc = main(["render", str(tpl), "--set", "title=Custom"])

    assert rc == 0
    assert capsys.readouterr().out == "Custom/en"


def test_render_without_frontmatter(tmp_path, capsys):
    tpl = write(tmp_path / "page.txt", "---\ntitle: Default\n---\n{{title}}")

    rc = main(["render", str(tpl), "--no-frontmatter"])

    assert rc == 0
    assert capsys.readouterr().out == "---\ntitle: Default\n---\n"


def test_render_to_file(tmp_path, capsys):
    tpl = write(tmp_path / "page.html", "{{{body}}}")
    out = tmp_path / "build" / "page.html"

    rc = main(["render", str(tpl), "--set", "body=<b>x</b>", "-o", str(out)])

    assert rc == 0
    assert out.read_text(encoding="utf-8") == "<b>x</b>"
    assert capsys.readouterr().out == ""


def test_render_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Hi {{name}}"))

    rc = main(["render", "-", "--set", "name=Ann"])

    assert rc == 0
    assert capsys.readouterr().out == "Hi Ann"


def test_missing_template(tmp_path, capsys):
    rc = main(["render", str(tmp_path / "nope.html")])

    assert rc == 2
    assert "Template file not found" in capsys.readouterr().err


def test_bad_data_file(tmp_path, capsys):
    tpl = write(tmp_path / "page.html", "{{x}}")
    data = write(tmp_path / "data.yaml", "- not\n- a mapping\n")

    rc = main(["render", str(tpl), "-d", str(data)])

    assert rc == 2
    assert "Cannot load context" in capsys.readouterr().err


def test_bad_override(tmp_path, capsys):
    tpl = write(tmp_path / "page.html", "{{x}}")

    rc = main(["render", str(tpl), "--set", "novalue"])

    assert rc == 2
    assert "Invalid override 'novalue'" in capsys.readouterr().err


def test_tags_command(tmp_path, capsys):
    tpl = write(tmp_path / "page.html", "{{#each xs}}{{{this}}}{{/each}}")

    rc = main(["tags", str(tpl)])

    assert rc == 0
    data = json.loads(capsys.readouterr().out)
    assert [(t["kind"], t["text"]) for t in data["tags"]] == [
        ("each", "#each xs"),
        ("raw", "this"),
        ("marker", "/each"),
    ]
    assert data["tags"][0]["expression"] == "xs"
    assert data["tags"][0]["open"] == 0


def test_describe_tags_escaped():
    tags = describe_tags("a {{ name }}")
    assert tags == [{"open": 2, "end": 12, "kind": "escaped", "text": "name", "expression": None}]
