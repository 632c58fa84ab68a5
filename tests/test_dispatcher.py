import httpx
import pytest
from conftest import RecordingTransport, current_payload, forecast_payload, local_epoch

from weather_mcp.servers.capability_catalog import CapabilityCatalog
from weather_mcp.servers.dispatcher import WeatherDispatcher


def ok(payload):
    return lambda request: httpx.Response(200, json=payload)


@pytest.fixture
def dispatch(make_client):
    def factory(handler):
        transport = RecordingTransport(handler)
        dispatcher = WeatherDispatcher(
            CapabilityCatalog(api_key_configured=True),
            make_client(transport),
        )
        return dispatcher, transport

    return factory


async def test_missing_city_is_rejected_without_network(dispatch):
    dispatcher, transport = dispatch(ok(current_payload()))

    result = await dispatcher.invoke("get_weather", {})

    assert result.is_error
    assert result.text == "Error: Missing required argument: city"
    assert transport.requests == []


async def test_unknown_tool(dispatch):
    dispatcher, transport = dispatch(ok(current_payload()))

    result = await dispatcher.invoke("get_alerts", {"city": "London"})

    assert result.is_error
    assert result.text == "Error: Unknown tool: get_alerts"
    assert transport.requests == []


async def test_current_weather_success(dispatch):
    dispatcher, _ = dispatch(ok(current_payload()))

    result = await dispatcher.invoke("get_weather", {"city": "London"})

    assert not result.is_error
    assert result.text.startswith("Current weather in London, GB:")
    assert "Visibility: 10 km" in result.text


async def test_not_found_becomes_failure_envelope(dispatch):
    dispatcher, _ = dispatch(
        lambda request: httpx.Response(404, json={"cod": "404", "message": "city not found"})
    )

    result = await dispatcher.invoke("get_weather", {"city": "Atlantis"})

    assert result.is_error
    assert "Atlantis" in result.text
    assert result.text == 'Error: City "Atlantis" not found'


async def test_unauthorized_becomes_failure_envelope(dispatch):
    dispatcher, _ = dispatch(lambda request: httpx.Response(401, json={"cod": 401}))

    result = await dispatcher.invoke("get_forecast", {"city": "London"})

    assert result.is_error
    assert "Invalid API key" in result.text


async def test_forecast_is_bucketed_and_formatted(dispatch):
    entries = [(local_epoch(2024, 1, day, hour), 10, "clouds") for day in range(1, 8) for hour in (0, 6, 12, 18)]
    dispatcher, transport = dispatch(ok(forecast_payload(entries)))

    result = await dispatcher.invoke("get_forecast", {"city": "London", "units": "imperial"})

    assert not result.is_error
    assert transport.requests[0].url.params["units"] == "imperial"
    lines = result.text.splitlines()
    assert lines[0] == "5-day weather forecast for London, GB:"
    day_headers = [line for line in lines if line.endswith("2024:")]
    assert day_headers == [
        "Mon Jan 01 2024:",
        "Tue Jan 02 2024:",
        "Wed Jan 03 2024:",
        "Thu Jan 04 2024:",
        "Fri Jan 05 2024:",
    ]
    sample_lines = [line for line in lines if line.startswith("  ")]
    assert len(sample_lines) == 15
    assert sample_lines[0] == "  12:00 AM: 10°F, clouds"


async def test_forecast_with_unusable_timestamp(dispatch):
    dispatcher, _ = dispatch(ok(forecast_payload([(10**13, 10, "clouds")])))

    result = await dispatcher.invoke("get_forecast", {"city": "London"})

    assert result.is_error
    assert result.text == "Error: Failed to fetch weather forecast: malformed provider payload"


async def test_unexpected_handler_error_is_contained(dispatch, monkeypatch):
    dispatcher, _ = dispatch(ok(current_payload()))

    def explode(*args, **kwargs):
        raise RuntimeError("formatter broke")

    monkeypatch.setattr("weather_mcp.servers.dispatcher.format_current", explode)

    result = await dispatcher.invoke("get_weather", {"city": "London"})

    assert result.is_error
    assert result.text == "Error: formatter broke"


class RecordingObservability:
    def __init__(self):
        self.lookups: list[dict] = []

    def set_lookup_attributes(self, **attributes):
        self.lookups.append(attributes)


@pytest.mark.parametrize(
    ("status", "outcome"),
    [(200, "ok"), (404, "not_found"), (401, "unauthorized"), (503, "upstream_failure")],
)
async def test_span_carries_lookup_fields(dispatch, monkeypatch, status, outcome):
    observability = RecordingObservability()
    monkeypatch.setattr(
        "weather_mcp.servers.dispatcher.get_observability_manager", lambda: observability
    )
    dispatcher, _ = dispatch(lambda request: httpx.Response(status, json=current_payload()))

    await dispatcher.invoke("get_weather", {"city": "Oslo", "units": "kelvin"})

    assert observability.lookups == [
        {"tool": "get_weather", "city": "Oslo", "units": "kelvin", "outcome": outcome}
    ]


async def test_rejected_invocation_is_not_tagged(dispatch, monkeypatch):
    observability = RecordingObservability()
    monkeypatch.setattr(
        "weather_mcp.servers.dispatcher.get_observability_manager", lambda: observability
    )
    dispatcher, _ = dispatch(ok(current_payload()))

    await dispatcher.invoke("get_weather", {"units": "kelvin"})

    assert observability.lookups == []
