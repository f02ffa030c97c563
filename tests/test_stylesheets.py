from pathlib import Path

import pytest

from sorg.errors import StylesheetError
from sorg.stylesheets import STYLESHEETS, compile_stylesheets


def _write(directory: Path, files):
    directory.mkdir(parents=True, exist_ok=True)
    for name, source in files.items():
        (directory / name).write_text(source, encoding="utf-8")


def test_bundle_sections_follow_configured_order(tmp_path):
    source_dir = tmp_path / "stylesheets"
    _write(
        source_dir,
        {
            "main.sass": "body\n  color: red\n",
            "solarized-light.css": ".hll { background-color: #ffffcc }\n",
            "runs.sass": "$accent: #0af\n.runs\n  a\n    color: $accent\n",
        },
    )
    target = tmp_path / "app.css"

    compile_stylesheets(source_dir, target, ["main.sass", "solarized-light.css", "runs.sass"])
    output = target.read_text(encoding="utf-8")

    assert output.startswith("/* main.sass */\n\n")
    positions = [output.index(f"/* {name} */\n") for name in ("main.sass", "solarized-light.css", "runs.sass")]
    assert positions == sorted(positions)
    assert "color: red" in output
    assert ".runs a" in output and "#0af" in output
    assert ".hll { background-color: #ffffcc }\n" in output
    assert "$accent" not in output
    assert output.endswith("\n\n")


def test_order_is_taken_from_the_list(tmp_path):
    source_dir = tmp_path / "stylesheets"
    _write(source_dir, {"a.css": "a {}\n", "b.css": "b {}\n"})
    target = tmp_path / "app.css"

    compile_stylesheets(source_dir, target, ["b.css", "a.css"])

    assert target.read_text(encoding="utf-8") == "/* b.css */\n\nb {}\n\n\n/* a.css */\n\na {}\n\n\n"


def test_css_is_copied_verbatim(tmp_path):
    source_dir = tmp_path / "stylesheets"
    css = "/* keep me */\npre{color:#586e75}"
    _write(source_dir, {"solarized-light.css": css})
    target = tmp_path / "app.css"

    compile_stylesheets(source_dir, target, ["solarized-light.css"])

    assert target.read_text(encoding="utf-8") == f"/* solarized-light.css */\n\n{css}\n\n"


def test_missing_stylesheet_is_fatal(tmp_path):
    source_dir = tmp_path / "stylesheets"
    _write(source_dir, {"main.sass": "body\n  margin: 0\n"})

    with pytest.raises(FileNotFoundError):
        compile_stylesheets(source_dir, tmp_path / "app.css", ["main.sass", "missing.sass"])


def test_compile_error_names_the_file(tmp_path):
    source_dir = tmp_path / "stylesheets"
    _write(source_dir, {"broken.sass": "body\n  color: $undefined\n"})

    with pytest.raises(StylesheetError) as excinfo:
        compile_stylesheets(source_dir, tmp_path / "app.css", ["broken.sass"])
    assert "broken.sass" in str(excinfo.value)


def test_default_order():
    assert STYLESHEETS[0] == "_reset.sass"
    assert STYLESHEETS[1] == "main.sass"
    assert STYLESHEETS.index("solarized-light.css") < STYLESHEETS.index("tenets.sass")
    assert STYLESHEETS[-1] == "twitter.sass"
    assert len(STYLESHEETS) == 13
