from pathlib import Path
from scramble.datasets import validate_wordlists, pretty_summary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_validate_wordlists_happy_path(tmp_path: Path):
    start = tmp_path / "start.txt"
    words = tmp_path / "words.txt"
    _write(start, ["silkworm", "listener"])
    _write(words, ["silkworm", "listener", "silk", "Aaron", "o'clock"])

    rep = validate_wordlists(str(start), str(words))
    assert rep["passed"] is True
    assert rep["start_subset_dictionary"] is True
    assert rep["dictionary"]["invalid_lines"] == 1  # o'clock
    s = pretty_summary(rep)
    assert "start=2" in s and "start⊆dictionary=True" in s and s.endswith("OK")


def test_validate_wordlists_flags_errors(tmp_path: Path):
    start = tmp_path / "start.txt"
    words = tmp_path / "words.txt"
    # 'Listen' not lowercase, 'it' too short, '???' invalid chars, 'silkworm' twice
    start.write_text("silkworm\nListen\nit\n???\nsilkworm\n", encoding="utf-8")
    _write(words, ["silkworm", "listen", "it"])

    rep = validate_wordlists(str(start), str(words))
    assert rep["passed"] is False
    assert rep["start"]["invalid_lines"] == 3
    assert any("invalid" in msg for msg in rep["issues"])
    assert any("duplicate" in msg for msg in rep["issues"])


def test_validate_wordlists_subset_violation(tmp_path: Path):
    start = tmp_path / "start.txt"
    words = tmp_path / "words.txt"
    _write(start, ["silkworm", "listener"])
    _write(words, ["silkworm"])

    rep = validate_wordlists(str(start), str(words))
    assert rep["passed"] is False
    assert rep["start_subset_dictionary"] is False
    assert any("subset" in msg for msg in rep["issues"])


def test_validate_wordlists_missing_file(tmp_path: Path):
    rep = validate_wordlists(str(tmp_path / "start.txt"), str(tmp_path / "words.txt"))
    assert rep["passed"] is False
    assert len(rep["issues"]) == 2
    assert "FAIL" in pretty_summary(rep)
