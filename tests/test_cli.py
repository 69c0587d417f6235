import sys  # noqa: F401
from pathlib import Path
from shutil import copytree
from typing import Any
from unittest.mock import patch

from bs4 import BeautifulSoup
from pytest import CaptureFixture, fixture, raises

from autofragment.cli import main
from autofragment.configuring import paths


@fixture
def working_dir(tmp_path: Path, monkeypatch: Any) -> Path:
    data_dir = Path(__file__).parent / __name__
    working_dir = tmp_path / "data"
    copytree(data_dir, working_dir)
    user_dir = tmp_path / "user"
    user_dir.mkdir()
    monkeypatch.chdir(working_dir)
    monkeypatch.setattr(paths, "appdirs_user_config_dir", lambda _: str(user_dir))
    return working_dir


def extract_indices(html_path: Path) -> dict[str, list[str]]:
    soup = BeautifulSoup(html_path.read_text(encoding="utf8"), "lxml")
    return {
        section["id"]: [
            tag["data-fragment-index"]
            for tag in section.select(".fragment[data-fragment-index]")
        ]
        for section in soup.select("section")
    }


def run_autofragment(*args: str) -> None:
    with patch("sys.argv", ["autofragment", *args]):
        try:
            main()
        except SystemExit as e:
            if e.code != 0:
                raise e


def test_run(working_dir: Path) -> None:
    run_autofragment("run", "deck.html", "--enable")

    assert extract_indices(working_dir / "deck.html") == {
        "title-slide": [],
        "agenda": ["10", "20", "30"],
        "details": ["5", "15"],
    }


def test_run_with_settings(working_dir: Path) -> None:
    (working_dir / "autofragment.yml").write_text(
        "plugins:\n  autoFragment:\n    enabled: true\n    indexStep: 1\n",
        encoding="utf8",
    )

    run_autofragment("run", "deck.html", "--output", "out/deck.html")

    assert extract_indices(working_dir / "out" / "deck.html")["agenda"] == [
        "10",
        "11",
        "12",
    ]
    assert "data-fragment-index" not in (working_dir / "deck.html").read_text(
        encoding="utf8"
    )


def test_run_disabled(working_dir: Path) -> None:
    run_autofragment("run", "deck.html")

    assert extract_indices(working_dir / "deck.html") == {
        "title-slide": [],
        "agenda": [],
        "details": ["5", "15"],
    }


def test_run_missing_deck(working_dir: Path) -> None:
    with raises(SystemExit):
        run_autofragment("run", "missing.html")


def test_tree(working_dir: Path, capsys: CaptureFixture[str]) -> None:
    original = (working_dir / "deck.html").read_text(encoding="utf8")

    run_autofragment("tree", "deck.html", "--enable")

    out = capsys.readouterr().out
    assert "slide 2 #agenda" in out
    assert "slide 3 #details" in out
    assert "#title-slide" not in out
    assert (working_dir / "deck.html").read_text(encoding="utf8") == original


def test_print_options(working_dir: Path, capsys: CaptureFixture[str]) -> None:
    (working_dir / "autofragment.yml").write_text(
        "plugins:\n  autoFragment:\n    indexStep: 7\n", encoding="utf8"
    )

    run_autofragment("print-options")

    out = capsys.readouterr().out
    assert "indexStep" in out
    assert "7" in out


def test_print_settings(working_dir: Path, capsys: CaptureFixture[str]) -> None:
    run_autofragment("print-settings")

    out = capsys.readouterr().out
    assert "data-auto-fragment" in out
    assert "autoFragment" in out
