"""Tests for the text presentation and the CLI arguments."""

from datetime import datetime, timezone

import pytest

from weather_lookup.ui.cli import main
from weather_lookup.ui.render import render_state
from weather_lookup.ui.state import WeatherState
from weather_lookup.weather.models import CurrentWeather, ForecastSeries

NOW = datetime(2024, 6, 1, 8, 30, tzinfo=timezone.utc)


def loaded_state(current_payload, forecast_payload) -> WeatherState:
    state = WeatherState()
    state.commit_snapshot(
        CurrentWeather.from_api(current_payload),
        ForecastSeries.from_api(forecast_payload(40))
    )
    return state


def test_loading_state():
    assert render_state(WeatherState()) == "Loading..."


def test_error_without_data():
    state = WeatherState()
    state.fail("Network error")

    assert render_state(state) == "Error: Network error"


def test_full_view(current_payload, forecast_payload):
    text = render_state(loaded_state(current_payload, forecast_payload), tz=timezone.utc, now=NOW)
    lines = text.splitlines()

    assert lines[0] == "Manila  2024-06-01 08:30"
    assert lines[1] == "31.2°  Scattered clouds"
    # 2024-06-01 is a Saturday; first day averages steps 0..7 (20..27)
    assert lines[4].startswith("Sat 24° step 0  Sun 32° step 8")
    assert lines[6] == "Hourly Forecast"
    assert len(lines[7:]) == 9
    assert lines[7] == "  00:00  20°  step 0"


def test_error_is_shown_above_kept_snapshot(current_payload, forecast_payload):
    state = loaded_state(current_payload, forecast_payload)
    state.begin_loading()
    state.fail("Weather service returned 500")

    text = render_state(state, tz=timezone.utc, now=NOW)

    assert text.startswith("Error: Weather service returned 500\nManila")


def test_cli_requires_lat_and_lon_together():
    with pytest.raises(SystemExit) as excinfo:
        main(["--lat", "14.6"])

    assert excinfo.value.code == 2


@pytest.mark.parametrize("argv", [["--lat", "200", "--lon", "10"], ["--lat", "14.6", "--lon", "-181"]])
def test_cli_rejects_out_of_range_coordinates(argv, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)

    assert excinfo.value.code == 2
    assert "--lat must be within [-90, 90]" in capsys.readouterr().err
