from callserver.config import Settings


def test_from_env_defaults(monkeypatch):
    for name in (
        "DAILY_API_KEY", "DAILY_DOMAIN", "DAILY_API_URL", "DAILY_ROOM_PRIVACY",
        "DAILY_TIMEOUT_SEC", "MANAGER_PASS", "PORT", "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    s = Settings.from_env()
    assert s.manager_pass == "museflow"
    assert s.room_privacy == "public"
    assert s.port == 3000
    assert s.daily_api_url == "https://api.daily.co/v1"
    assert s.daily_timeout == 5.0
    assert s.missing() == ["DAILY_API_KEY", "DAILY_DOMAIN"]


def test_from_env_reads_and_normalizes(monkeypatch):
    monkeypatch.setenv("DAILY_API_KEY", "k")
    monkeypatch.setenv("DAILY_DOMAIN", "https://brand.daily.co/")
    monkeypatch.setenv("DAILY_ROOM_PRIVACY", "PRIVATE")
    monkeypatch.setenv("MANAGER_PASS", "pw")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("DAILY_TIMEOUT_SEC", "2.5")
    s = Settings.from_env()
    assert s.daily_domain == "brand.daily.co"
    assert s.room_privacy == "private"
    assert s.manager_pass == "pw"
    assert s.port == 8080
    assert s.daily_timeout == 2.5
    assert s.missing() == []


def test_unknown_privacy_falls_back_to_public(monkeypatch):
    monkeypatch.setenv("DAILY_ROOM_PRIVACY", "secret")
    assert Settings.from_env().room_privacy == "public"
