import pytest

from kbopt.corpus import Corpus, load_corpus


def test_add_text_counts_ngrams():
    corpus = Corpus("t")
    corpus.add_text("abc")
    assert dict(corpus.unigrams) == {"a": 1, "b": 1, "c": 1}
    assert dict(corpus.bigrams) == {"ab": 1, "bc": 1}
    assert dict(corpus.trigrams) == {"abc": 1}


def test_add_text_lowercases():
    corpus = Corpus("t")
    corpus.add_text("AbC")
    assert "abc" in corpus.trigrams
    assert "A" not in corpus.unigrams


@pytest.mark.parametrize("text", ["hello world", "the quick brown fox", "aaaa", "xy"])
def test_totals_match_counts(text):
    corpus = Corpus("t")
    corpus.add_text(text)
    n = len(text)
    assert corpus.total_unigrams_count == n == sum(corpus.unigrams.values())
    assert corpus.total_bigrams_count == max(n - 1, 0) == sum(corpus.bigrams.values())
    assert corpus.total_trigrams_count == max(n - 2, 0) == sum(corpus.trigrams.values())
    assert corpus.total_unigrams_no_space <= corpus.total_unigrams_count
    assert corpus.total_bigrams_no_space <= corpus.total_bigrams_count
    assert corpus.total_trigrams_no_space <= corpus.total_trigrams_count


def test_space_excluded_from_no_space_totals():
    corpus = Corpus("t")
    corpus.add_text("a b")
    assert corpus.total_unigrams_no_space == 2
    assert corpus.total_bigrams_no_space == 0
    assert corpus.total_trigrams_no_space == 0
    assert corpus.bigrams["a "] == 1


def test_add_individual_ngrams():
    corpus = Corpus("t")
    corpus.add_bigram("xy")
    corpus.add_bigram("xy")
    corpus.add_trigram("x y")
    assert corpus.bigrams["xy"] == 2
    assert corpus.total_bigrams_no_space == 2
    assert corpus.total_trigrams_count == 1
    assert corpus.total_trigrams_no_space == 0


def test_load_corpus_skips_blank_lines_and_does_not_span_lines(tmp_path):
    path = tmp_path / "text.txt"
    path.write_text("ab\n\n   \ncd\r\n", encoding="utf-8")
    corpus = load_corpus("sample", path)
    assert corpus.name == "sample"
    assert dict(corpus.bigrams) == {"ab": 1, "cd": 1}
    assert "\r" not in corpus.unigrams
    assert corpus.total_unigrams_count == 4


def test_load_corpus_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_corpus("x", tmp_path / "absent.txt")


def test_string_sorted_layout():
    corpus = Corpus("demo")
    corpus.add_text("aab")
    text = corpus.string_sorted(0)
    assert text.startswith("Corpus: demo\nUnigrams:\na: 2\n")
    assert "Bigrams:\n" in text
    assert "\nTrigrams:\naab: 1\n" in text


def test_string_sorted_limit():
    corpus = Corpus("demo")
    corpus.add_text("abcdefgh")
    text = corpus.string_sorted(1)
    entry_lines = [line for line in text.splitlines() if ": " in line and not line.startswith("Corpus")]
    assert len(entry_lines) == 3


def test_str_uses_limit_ten():
    corpus = Corpus("demo")
    corpus.add_text("the quick brown fox jumps over the lazy dog")
    assert str(corpus) == corpus.string_sorted(10)