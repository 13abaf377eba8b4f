import json

import pytest

import five_words


def _write(tmp_path, words):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(words) + "\n", encoding="utf-8")
    return str(path)


def test_batch_listing(tmp_path, capsys, cover_words):
    path = _write(tmp_path, cover_words + ["hello", "x", "ab-cd"])
    five_words.main([path, "-workers", "1", "-progress", "off"])
    listing = json.loads(capsys.readouterr().out)
    assert len(listing) == 1
    assert sorted(w for group in listing[0] for w in group) == sorted(cover_words)


def test_incremental_listing(tmp_path, capsys, cover_words):
    path = _write(tmp_path, cover_words)
    five_words.main([path, "-incremental", "-workers", "1", "-progress", "off"])
    out = capsys.readouterr().out
    assert out.startswith("[\n")
    assert len(json.loads(out)) == 1


def test_dup_flag(tmp_path, capsys):
    path = _write(tmp_path, ["aabcd", "efghi", "jklmn", "opqrs", "tuvwx"])
    five_words.main([path, "-workers", "1", "-progress", "off"])
    assert json.loads(capsys.readouterr().out) == []
    five_words.main([path, "-dup", "-workers", "1", "-progress", "off"])
    assert len(json.loads(capsys.readouterr().out)) == 1


def test_missing_file_is_fatal(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        five_words.main([str(tmp_path / "nope.txt"), "-progress", "off"])
    assert "cannot read word list" in str(exc.value)
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("flag", ["-workers", "-chunk-size"])
def test_rejects_non_positive_counts(flag):
    with pytest.raises(SystemExit):
        five_words.parse_args(["words.txt", flag, "0"])


def test_undecodable_line_is_dropped(tmp_path, capsys, cover_words):
    path = tmp_path / "words.txt"
    path.write_bytes(("\n".join(cover_words) + "\n").encode("ascii") + b"caf\xe9s\n")
    five_words.main([str(path), "-workers", "1", "-progress", "off"])
    listing = json.loads(capsys.readouterr().out)
    assert len(listing) == 1
    assert sorted(w for group in listing[0] for w in group) == sorted(cover_words)
