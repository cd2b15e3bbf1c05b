import pytest

CONFIG_KEYS = ("LRU_CACHE_SIZE", "LOOKUP_CACHE_SIZE")


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so teardown also removes what load_dotenv writes
    for key in CONFIG_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
