from wikisearch.engine import QueryEngine
from wikisearch.models import PageRecord


def test_initial_generation_reflects_persisted_corpus(store):
    store.clear()
    store.save(PageRecord("/wiki/Cat", "a cat", ()))

    engine = QueryEngine(store)

    assert engine.generation.number == 0
    assert engine.generation.page_count == 1
    assert [r.name for r in engine.query("cat")] == ["Cat"]


def test_empty_store_serves_empty_results(store):
    engine = QueryEngine(store)

    assert engine.generation.page_count == 0
    assert engine.query("cat") == []


def test_scrape_completion_publishes_a_new_generation(store):
    store.clear()
    store.save(PageRecord("/wiki/Old", "old cat", ()))
    engine = QueryEngine(store)
    held = engine.generation

    store.clear()
    store.save(PageRecord("/wiki/New", "new cat", ()))
    published = engine.on_scrape_complete()

    assert published.number == held.number + 1
    assert engine.generation is published
    assert [r.name for r in engine.query("cat")] == ["New"]
    # A reader holding the previous handle still sees a consistent generation.
    assert sorted(held.corpus) == ["Old"]
    assert [r.name for r in engine.query("cat", held)] == ["Old"]


def test_corpus_and_index_belong_to_the_same_generation(store):
    store.clear()
    store.save(PageRecord("/wiki/A", "alpha", ()))
    engine = QueryEngine(store)
    store.save(PageRecord("/wiki/B", "beta", ()))

    generation = engine.generation
    assert sorted(generation.corpus) == generation.index.pages == ["A"]

    generation = engine.on_scrape_complete()
    assert sorted(generation.corpus) == generation.index.pages == ["A", "B"]
