from standards_compare.core.config import KeywordMatchMode, Settings


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.host == "0.0.0.0"
    assert settings.port == 8000
    assert settings.keyword_match_mode == KeywordMatchMode.SUBSTRING
    assert not settings.whole_word_matching


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("KEYWORD_MATCH_MODE", "word")
    settings = Settings(_env_file=None)
    assert settings.host == "127.0.0.1"
    assert settings.port == 9001
    assert settings.whole_word_matching


def test_cors_origins_split_on_commas():
    settings = Settings(_env_file=None, cors_allow_origins="http://a.test, http://b.test")
    assert settings.get_cors_origins() == ["http://a.test", "http://b.test"]
    assert Settings(_env_file=None, cors_allow_origins="").get_cors_origins() == ["*"]
