import pytest

import hypergeo.__main__ as cli


def test_main_writes_tikz_document(tmp_path, capsys):
    tikz_path = tmp_path / "out" / "triangle.tex"

    cli.main(
        [
            "--tikz-output-path",
            str(tikz_path),
            "--title",
            "Triangle",
            "triangle",
            "-A",
            "30",
            "-B",
            "10",
            "-C",
            "120",
        ]
    )

    document = tikz_path.read_text(encoding="utf-8")
    assert "\\begin{tikzpicture}" in document
    assert "\\textbf{Triangle}" in document
    assert document.count("\\draw[") == 4

    out = capsys.readouterr().out
    assert "Shape: triangle" in out
    assert "Primitives (3):" in out


def test_main_dispatches_to_drawer(monkeypatch, capsys):
    calls = []

    def _create_polygon(self, n, angle, rotation):
        calls.append((n, angle, rotation))
        return []

    monkeypatch.setattr(cli.HyperbolicDrawer, "create_polygon", _create_polygon)

    cli.main(["--size", "400", "polygon", "6", "40", "--rotation", "15"])

    assert calls == [(6, 40.0, 15.0)]
    out = capsys.readouterr().out
    assert "Disk: center=(200.000, 200.000) radius=190.000" in out
    assert "Primitives (0):" in out


def test_main_reports_geometry_errors(monkeypatch):
    monkeypatch.setattr(
        cli,
        "generate_tikz_document",
        lambda surface, **kwargs: pytest.fail("no document for a failed drawing"),
    )

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["polygon", "3", "70"])

    assert excinfo.value.code == 1
