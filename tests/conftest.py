import pytest


@pytest.fixture(autouse=True)
def no_default_word_lists(monkeypatch, tmp_path):
    """Keep system and working-directory word lists out of the tests."""
    monkeypatch.setattr(
        "prefixtrie.wordlist.DEFAULT_SEARCH_PATHS",
        [str(tmp_path / "missing-words.txt")],
    )


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text(
        "# sample list\n"
        "hello\n"
        "\n"
        "  world  \n"
        "help\n"
        "Help\n",
        encoding="utf-8",
    )
    return path
