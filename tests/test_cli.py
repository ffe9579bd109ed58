import pytest

from wikisearch import cli
from wikisearch.models import PageRecord


@pytest.fixture(autouse=True)
def in_tmp_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)


def test_search_prints_top_results(store, capsys):
    store.clear()
    store.save(PageRecord("/wiki/Cat", "a cat sat on a mat", ()))
    store.save(PageRecord("/wiki/Dog", "the cat chased the dog the cat ran", ()))
    store.save(PageRecord("/wiki/Alan_Turing", "cat", ()))

    code = cli.main(["--data-dir", store.data_dir, "search", "cat", "--limit", "2"])

    out = capsys.readouterr().out
    assert code == 0
    assert "(3 results)" in out
    assert "Alan Turing" in out
    assert "Dog" in out
    assert "Cat " not in out


def test_empty_query_is_an_error(store, capsys):
    code = cli.main(["--data-dir", store.data_dir, "search", "  "])

    assert code == 2
    assert "error:" in capsys.readouterr().err


def test_invalid_page_count_is_an_error(store):
    assert cli.main(["--data-dir", store.data_dir, "scrape", "cat", "-n", "0"]) == 2


def test_scrape_command_uses_the_service(store, monkeypatch, capsys):
    calls = []

    def fake_scrape_phrase(self, phrase, pages):
        calls.append((phrase, pages))
        return type(
            "Summary", (), {"pages": 1, "seed": "/wiki/Cat", "seconds": 0.0}
        )()

    monkeypatch.setattr(cli.SearchService, "scrape_phrase", fake_scrape_phrase)

    assert cli.main(["--data-dir", store.data_dir, "scrape", "cat", "-n", "1"]) == 0
    assert calls == [("cat", 1)]
    assert "Crawled 1 pages from /wiki/Cat." in capsys.readouterr().out
