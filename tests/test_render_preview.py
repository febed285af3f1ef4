from pathlib import Path

from scripts.render_preview import _paths, preview

HERE = Path(__file__).parent


def test_preview_shows_labels():
    out = preview("test.html", [str(HERE / "views")], [str(HERE / "locale" / "locale1.json")])
    assert out == "<p>html foo</p>"


def test_preview_without_locales_shows_keys():
    assert preview("test.html", [str(HERE / "views")]) == "<p>html [test1]</p>"


def test_paths_splits_on_pathsep():
    import os

    assert _paths(None) == []
    assert _paths(os.pathsep.join(["a", "", "b"])) == ["a", "b"]
