"""Tests for tokenization, stopwords and n-gram extraction."""

from collections import Counter

from serp_term_analyzer.ngrams import extract_ngrams
from serp_term_analyzer.stopwords import GERMAN_STOPWORDS, is_stopword
from serp_term_analyzer.tokenizer import tokenize


class TestTokenize:
    """Tests for the tokenize function."""

    def test_basic_tokenization(self):
        """Test lowercasing and punctuation removal."""
        tokens = tokenize("Laufschuhe im Test: Größe & Passform!")
        assert tokens == ["laufschuhe", "test", "größe", "passform"]

    def test_short_tokens_dropped(self):
        """Test that tokens of length two or less are removed."""
        tokens = tokenize("Da ist es so gut an")
        assert tokens == ["ist", "gut"]

    def test_hyphen_kept(self):
        """Test that hyphenated words stay one token."""
        assert tokenize("Trail-Running Schuhe") == ["trail-running", "schuhe"]

    def test_umlauts_kept(self):
        """Test that German umlauts and eszett survive."""
        assert tokenize("ÜBERGRÖSSE Füße Straße") == ["übergrösse", "füße", "straße"]

    def test_accented_letters_kept(self):
        """Test that non-German accented letters stay part of the word."""
        assert tokenize("Café Crème Laufschuhe") == ["café", "crème", "laufschuhe"]

    def test_abbreviations_split(self):
        """Test that dotted abbreviations break into short fragments."""
        assert tokenize("z.B. 42 Modelle") == ["modelle"]

    def test_numbers_kept_by_default(self):
        """Test that numeric tokens are kept unless requested otherwise."""
        assert tokenize("Testsieger 2024") == ["testsieger", "2024"]
        assert tokenize("Testsieger 2024", drop_numeric=True) == ["testsieger"]

    def test_empty_and_none(self):
        """Test that empty input yields no tokens."""
        assert tokenize("") == []
        assert tokenize(None) == []
        assert tokenize("   ...   ") == []

    def test_custom_min_length(self):
        """Test a custom minimum token length."""
        assert tokenize("Schuh Test Lauf", min_length=5) == ["schuh"]

    def test_deterministic(self):
        """Test that repeated calls give identical tokens."""
        text = "Die besten Laufschuhe für Damen und Herren"
        assert tokenize(text) == tokenize(text)


class TestStopwords:
    """Tests for stopword membership."""

    def test_common_stopwords(self):
        """Test German and English function words."""
        for word in ("der", "und", "für", "über", "können", "the", "with"):
            assert is_stopword(word)

    def test_case_insensitive(self):
        """Test that lookup lowercases the token."""
        assert is_stopword("Für")
        assert is_stopword("SIE")

    def test_content_words_pass(self):
        """Test that content words are not stopwords."""
        assert not is_stopword("laufschuhe")
        assert not is_stopword("test")

    def test_custom_set(self):
        """Test lookup against a caller-supplied set."""
        assert is_stopword("laufschuhe", {"laufschuhe"})
        assert not is_stopword("der", {"laufschuhe"})

    def test_list_is_lowercase(self):
        """Test that every stopword entry is lowercase."""
        assert all(word == word.lower() for word in GERMAN_STOPWORDS)


class TestExtractNgrams:
    """Tests for unigram and bigram extraction."""

    def test_unigrams_and_bigrams(self):
        """Test extraction from a clean token sequence."""
        counts = extract_ngrams(["laufschuhe", "damen", "test"])
        assert counts == Counter({
            "laufschuhe": 1,
            "damen": 1,
            "test": 1,
            "laufschuhe damen": 1,
            "damen test": 1,
        })

    def test_stopword_blocks_unigram_and_bigrams(self):
        """Test that a stopword gates both neighbouring bigrams."""
        counts = extract_ngrams(["laufschuhe", "für", "damen", "test"])
        assert "für" not in counts
        assert "laufschuhe für" not in counts
        assert "für damen" not in counts
        assert counts["damen test"] == 1
        assert counts["laufschuhe"] == 1

    def test_repeated_terms_counted(self):
        """Test that repeated occurrences accumulate within one text."""
        counts = extract_ngrams(["test", "test", "test"])
        assert counts["test"] == 3
        assert counts["test test"] == 2

    def test_first_appearance_order(self):
        """Test that terms keep their order of first appearance."""
        counts = extract_ngrams(["schuhe", "test", "damen"])
        assert list(counts) == ["schuhe", "schuhe test", "test", "test damen", "damen"]

    def test_empty_tokens(self):
        """Test that no tokens yield no terms."""
        assert extract_ngrams([]) == Counter()

    def test_custom_stopwords(self):
        """Test gating with a caller-supplied stopword set."""
        counts = extract_ngrams(["online", "kaufen"], stopwords={"online"})
        assert dict(counts) == {"kaufen": 1}
