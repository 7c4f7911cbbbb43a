import pytest

from kbopt.cli import Flags, UsageError, main, parse_flags
from kbopt.layout import load_layout

LAYOUT_TEXT = (
    "ortho\n"
    "no q w e r t y u i o p no\n"
    "no a s d f g h j k l ; no\n"
    "no z x c v b n m , . / no\n"
    "no no spc no no no\n"
)

PINS_TEXT = (
    "x x . . x x x x x x x x\n"
    "x x x x x x x x x x x x\n"
    "x x x x x x x x x x x x\n"
    "x x x x x x\n"
)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    for sub in ("layouts", "corpus", "pins"):
        (tmp_path / "data" / sub).mkdir(parents=True)
    (tmp_path / "data" / "layouts" / "qwerty.kb").write_text(LAYOUT_TEXT, encoding="utf-8")
    (tmp_path / "data" / "corpus" / "text.txt").write_text(
        "Deed fred bet\n\nthe cat sat on the mat\n", encoding="utf-8"
    )
    (tmp_path / "data" / "pins" / "pins.txt").write_text(PINS_TEXT, encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_parse_flags_defaults():
    flags = parse_flags(["-l", "a.kb", "-c", "c.txt"])
    assert flags == Flags(layout="a.kb", corpus="c.txt", generations=1000,
                          accept_worse="drop-slow")


def test_parse_flags_all_options():
    flags = parse_flags(["-l", "a.kb", "-c", "c.txt", "-o", "-p", "p.txt",
                         "-g", "5", "-f", "never"])
    assert flags.optimize is True
    assert flags.pins == "p.txt"
    assert flags.generations == 5
    assert flags.accept_worse == "never"


def test_parse_flags_requires_layout_and_corpus():
    with pytest.raises(UsageError, match="-l flag"):
        parse_flags(["-l", "a.kb"])


def test_parse_flags_rejects_accept_worse():
    with pytest.raises(UsageError, match="invalid accept worse function: bogus"):
        parse_flags(["-l", "a", "-c", "b", "-f", "bogus"])


def test_parse_flags_rejects_zero_generations():
    with pytest.raises(UsageError, match="must be above 0"):
        parse_flags(["-l", "a", "-c", "b", "-g", "0"])


def test_parse_flags_help():
    with pytest.raises(UsageError, match="please specify flags"):
        parse_flags(["-h"])


def test_main_analysis(workdir, capsys):
    assert main(["-l", "qwerty.kb", "-c", "text.txt"]) == 0
    out = capsys.readouterr().out
    assert "Same Finger Bigrams" in out
    assert "Same Finger Skipgrams" in out
    assert "Lateral Stretch Bigrams" in out
    assert "Hands:" in out


def test_main_missing_layout(workdir, capsys):
    assert main(["-l", "nothere.kb", "-c", "text.txt"]) == 1
    assert "nothere.kb" in capsys.readouterr().out


def test_main_optimise_with_pins(workdir, capsys):
    assert main(["-l", "qwerty.kb", "-c", "text.txt", "-o", "-p", "pins.txt",
                 "-g", "20", "-f", "always"]) == 0
    out = capsys.readouterr().out
    assert "Best fitness at generation 0:" in out
    original = load_layout(workdir / "data" / "layouts" / "qwerty.kb")
    best = load_layout(workdir / "best.kb")
    assert best.runes[4:] == original.runes[4:]
    assert best.runes[:2] == original.runes[:2]
    assert sorted(best.runes[2:4]) == sorted(original.runes[2:4])