from core.errors import NotFoundError, RemoteStatusError
from core.forecast import Weather
from core.geocoding import Location
from core.report import render_error, render_weather_report


def _tokyo() -> Location:
    return Location(name="Tokyo", latitude=35.6762, longitude=139.6503, country="JP")


def test_report_layout():
    weather = Weather(
        temperature=15.5,
        apparent_temperature=14.2,
        wind_speed=10.5,
        weather_code=0,
        weather_code_description="Clear",
    )

    assert render_weather_report(_tokyo(), weather) == "Tokyo, JP\nClear ☀️\nTemp: 15.5°C\nFeels like: 14.2°C\n"


def test_report_rounds_to_one_decimal_and_keeps_sign():
    weather = Weather.from_code(temperature=-15.3, apparent_temperature=-22.06, wind_speed=5.0, weather_code=65)
    location = Location(name="Moscow", latitude=55.7558, longitude=37.6173, country="RU")

    report = render_weather_report(location, weather)

    assert report.splitlines() == ["Moscow, RU", "Heavy rain 🌧️", "Temp: -15.3°C", "Feels like: -22.1°C"]


def test_report_for_unknown_code_uses_fallbacks():
    weather = Weather.from_code(temperature=20.0, apparent_temperature=19.0, wind_speed=0.0, weather_code=42)

    assert "Unknown 🌡️\n" in render_weather_report(_tokyo(), weather)


def test_report_is_pure():
    weather = Weather.from_code(temperature=0.04, apparent_temperature=-0.04, wind_speed=1.0, weather_code=2)

    first = render_weather_report(_tokyo(), weather)
    second = render_weather_report(_tokyo(), weather)

    assert first == second
    assert "Temp: 0.0°C" in first


def test_render_error_messages():
    assert render_error(NotFoundError()) == "Error: location not found\n"
    assert render_error(RemoteStatusError(500)) == "Error: API returned status 500\n"
    assert render_error(ValueError("city name cannot be empty")) == "Error: city name cannot be empty\n"
