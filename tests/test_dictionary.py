import threading
from pathlib import Path

import pytest
from wordler.datasets import DictionaryLoader, StaticLoader, read_words
from wordler.engine import Puzzle, contains, delete_filter, keep_only_filter, of_length


def test_loader_normalizes(tmp_path: Path):
    p = tmp_path / "words"
    p.write_text("Foo\nbar\n\nBAR\n baz \n", encoding="utf-8")
    loader = DictionaryLoader(p)
    assert loader.words() == ("foo", "bar", "baz")
    assert loader.load() == ["bar", "baz", "foo"]


def test_loader_reads_once(tmp_path: Path):
    p = tmp_path / "words"
    p.write_text("abc\nabd\n", encoding="utf-8")
    loader = DictionaryLoader(p)
    assert len(loader.words()) == 2
    p.unlink()
    # served from the cache
    assert loader.load() == ["abc", "abd"]


def test_loader_filters_and_copies(tmp_path: Path):
    p = tmp_path / "words"
    p.write_text("a\nab\nabc\nxyz\n", encoding="utf-8")
    loader = DictionaryLoader(p)
    got = loader.load([keep_only_filter(of_length(3)), delete_filter(contains("x"))])
    assert got == ["abc"]
    got.append("mutated")
    assert loader.load([keep_only_filter(of_length(3))]) == ["abc", "xyz"]


def test_missing_file_propagates(tmp_path: Path):
    loader = DictionaryLoader(tmp_path / "missing")
    with pytest.raises(FileNotFoundError):
        loader.words()
    with pytest.raises(FileNotFoundError):
        Puzzle(loader, word_length=3)


def test_concurrent_first_load():
    class CountingLoader(StaticLoader):
        reads = 0

        def _read(self):
            CountingLoader.reads += 1
            return super()._read()

    loader = CountingLoader(["one", "two"])
    threads = [threading.Thread(target=loader.words) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert CountingLoader.reads == 1
    assert loader.words() == ("one", "two")


def test_puzzles_do_not_share_sets():
    loader = StaticLoader(["abc", "abd", "xyz"])
    p1 = Puzzle(loader, word_length=3, solution="abc")
    p2 = Puzzle(loader, word_length=3, solution="abc")
    p1.guess("xyz")
    assert p1.remaining == 2
    assert p2.remaining == 3
    assert len(loader.words()) == 3


def test_read_words_strips_newlines(tmp_path: Path):
    p = tmp_path / "crlf"
    p.write_bytes(b"abc\r\ndef\r\n")
    assert read_words(p) == ["abc", "def"]
