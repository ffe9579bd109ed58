import pytest

from wikisearch.indexer import InvertedIndexer, build_index, tokenize
from wikisearch.models import PageRecord, Posting


@pytest.fixture
def corpus():
    return {
        "Cat": PageRecord("Cat", "a cat sat on a mat"),
        "Dog": PageRecord("Dog", "the cat chased the dog the cat ran"),
        "Empty": PageRecord("Empty", ""),
    }


def test_tokenize_splits_on_whitespace_only():
    assert tokenize("c++ is  fun\nagain") == ["c++", "is", "fun", "again"]


def test_positions_are_token_indices(corpus):
    index = build_index(corpus)

    assert index.postings("cat") == [Posting("Cat", (1,)), Posting("Dog", (1, 6))]
    assert index.positions("a", "Cat") == (0, 4)
    assert index.positions("the", "Dog") == (0, 3, 5)


def test_terms_are_exactly_the_tokens_of_the_corpus(corpus):
    index = build_index(corpus)

    expected = set()
    for record in corpus.values():
        expected.update(record.text.split())
    assert set(index.terms) == expected
    assert len(index) == len(expected)


def test_every_posting_matches_the_tokenized_text(corpus):
    index = build_index(corpus)

    for term in index.terms:
        for posting in index.postings(term):
            tokens = corpus[posting.page].text.split()
            assert list(posting.positions) == [
                i for i, token in enumerate(tokens) if token == term
            ]


def test_unknown_term_has_no_postings(corpus):
    index = build_index(corpus)

    assert "unicorn" not in index
    assert index.postings("unicorn") == []
    assert index.positions("unicorn", "Cat") == ()


def test_document_lengths_are_recorded(corpus):
    index = build_index(corpus)

    assert index.page_count == 3
    assert index.pages == ["Cat", "Dog", "Empty"]
    assert index.doc_length("Dog") == 8
    assert index.doc_length("Empty") == 0


def test_built_index_is_independent_of_the_indexer():
    indexer = InvertedIndexer()
    indexer.add_document(PageRecord("A", "x y"))
    index = indexer.build()
    indexer.add_document(PageRecord("B", "x"))

    assert index.postings("x") == [Posting("A", (0,))]


def test_adding_a_page_twice_is_rejected():
    indexer = InvertedIndexer()
    indexer.add_document(PageRecord("A", "x"))
    with pytest.raises(ValueError):
        indexer.add_document(PageRecord("A", "y"))


def test_empty_corpus_builds_empty_index():
    index = build_index({})
    assert len(index) == 0
    assert index.page_count == 0
