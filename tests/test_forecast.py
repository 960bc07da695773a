"""Tests for forecast parsing, day grouping and the hourly slice."""

from datetime import date, datetime, timedelta, timezone

from weather_lookup.weather.models import DailyBucket, ForecastEntry, ForecastSeries
from weather_lookup.weather.service import get_hourly_forecast, group_forecast_by_day

UTC = timezone.utc


def test_five_days_of_eight_entries(make_series):
    series = make_series(40)

    buckets = group_forecast_by_day(series, UTC)

    assert [bucket.day for bucket in buckets] == [date(2024, 6, d) for d in range(1, 6)]
    assert all(len(bucket.entries) == 8 for bucket in buckets)
    assert [e for bucket in buckets for e in bucket.entries] == series.entries


def test_extra_days_are_dropped(make_series):
    series = make_series(48)

    buckets = group_forecast_by_day(series, UTC)

    assert len(buckets) == 5
    assert buckets[-1].day == date(2024, 6, 5)
    assert [e for bucket in buckets for e in bucket.entries] == series.entries[:40]


def test_fewer_dates_are_not_padded(make_series):
    buckets = group_forecast_by_day(make_series(10), UTC)

    assert [len(bucket.entries) for bucket in buckets] == [8, 2]


def test_empty_series_gives_no_buckets():
    assert group_forecast_by_day(ForecastSeries(), UTC) == []


def test_bucket_order_follows_first_occurrence(make_series):
    day2 = datetime(2024, 6, 2, 9, tzinfo=UTC)
    day1 = datetime(2024, 6, 1, 9, tzinfo=UTC)
    series = make_series(timestamps=[day2, day1, day2 + timedelta(hours=3)])

    buckets = group_forecast_by_day(series, UTC)

    assert [bucket.day for bucket in buckets] == [date(2024, 6, 2), date(2024, 6, 1)]
    assert buckets[0].entries == [series.entries[0], series.entries[2]]


def test_dates_use_the_viewer_time_zone(make_series):
    manila = timezone(timedelta(hours=8))
    series = make_series(timestamps=[datetime(2024, 6, 1, 15, tzinfo=UTC), datetime(2024, 6, 1, 18, tzinfo=UTC)])

    assert [b.day for b in group_forecast_by_day(series, UTC)] == [date(2024, 6, 1)]
    assert [b.day for b in group_forecast_by_day(series, manila)] == [date(2024, 6, 1), date(2024, 6, 2)]


def test_regrouping_flattened_output_is_stable(make_series):
    buckets = group_forecast_by_day(make_series(45, start=datetime(2024, 6, 1, 7, tzinfo=UTC)), UTC)
    flattened = ForecastSeries(entries=[e for bucket in buckets for e in bucket.entries])

    assert group_forecast_by_day(flattened, UTC) == buckets
    assert all(bucket.entries for bucket in buckets)


def test_hourly_forecast_is_a_prefix(make_series):
    series = make_series(40)

    assert get_hourly_forecast(series) == series.entries[:9]
    assert get_hourly_forecast(make_series(5)) == make_series(5).entries


def test_bucket_summary():
    entries = [
        ForecastEntry(timestamp=datetime(2024, 6, 1, h, tzinfo=UTC), temperature=t, description=d)
        for h, t, d in [(0, 20.0, "clear sky"), (3, 24.0, "light rain")]
    ]
    bucket = DailyBucket(day=date(2024, 6, 1), entries=entries)

    assert bucket.average_temperature == 22.0
    assert bucket.description == "clear sky"


def test_entry_from_api_prefers_unix_time():
    entry = ForecastEntry.from_api({
        "dt": 1717200000,
        "dt_txt": "2024-06-01 00:00:00",
        "main": {"temp": 28.5},
        "weather": [{"description": "overcast clouds"}],
    })

    assert entry.timestamp == datetime(2024, 6, 1, 0, tzinfo=UTC)
    assert entry.temperature == 28.5
    assert entry.description == "overcast clouds"


def test_entry_from_api_reads_dt_txt_as_utc():
    entry = ForecastEntry.from_api({"dt_txt": "2024-06-01 21:00:00", "main": {"temp": 25}, "weather": []})

    assert entry.timestamp == datetime(2024, 6, 1, 21, tzinfo=UTC)
    assert entry.description == ""


def test_series_from_api(forecast_payload):
    series = ForecastSeries.from_api(forecast_payload(12))

    assert len(series.entries) == 12
    assert series.city == "Manila"
    assert series.entries[1].timestamp - series.entries[0].timestamp == timedelta(hours=3)
