import pytest

from yourel.core.config import Settings


def test_default_search_settings() -> None:
    settings = Settings(_env_file=None)

    assert settings.search_page_size == 20
    assert settings.search_max_results == 100
    assert settings.search_timeout_seconds == 15


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FUNCTIONS_BASE_URL", "https://abc.supabase.co/functions/v1")
    monkeypatch.setenv("SEARCH_PAGE_SIZE", "10")

    settings = Settings(_env_file=None)

    assert settings.functions_base_url == "https://abc.supabase.co/functions/v1"
    assert settings.search_page_size == 10
