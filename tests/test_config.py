from weather_mcp.config import DEMO_API_KEY, Settings


def test_settings_defaults(monkeypatch):
    for name in ("WEATHER_API_KEY", "WEATHER_API_BASE", "MCP_TRANSPORT", "PORT"):
        monkeypatch.delenv(name, raising=False)

    s = Settings(_env_file=None)

    assert s.WEATHER_API_KEY == DEMO_API_KEY
    assert s.WEATHER_API_BASE == "http://api.openweathermap.org/data/2.5"
    assert s.MCP_TRANSPORT == "stdio"
    assert s.PORT == 8000
    assert s.api_key_configured is False


def test_settings_env_override(monkeypatch):
    monkeypatch.setenv("WEATHER_API_KEY", "real-key")
    monkeypatch.setenv("PORT", "9001")
    monkeypatch.setenv("MCP_TRANSPORT", "http")

    s = Settings(_env_file=None)

    assert s.api_key_configured is True
    assert s.PORT == 9001
    assert s.MCP_TRANSPORT == "http"


def test_empty_key_is_not_configured():
    assert Settings(_env_file=None, WEATHER_API_KEY="").api_key_configured is False
