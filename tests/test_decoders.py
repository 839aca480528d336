import logging

from ics2org.decoders import parse_date_time, parse_organizer
from ics2org.models import DateTime, DateTimeFormat, Organizer


def test_local_time_without_marker():
    dt = parse_date_time("20240115T093000")

    assert dt == DateTime(DateTimeFormat.LOCAL, 2024, 1, 15, 9, 30, 0)
    assert dt.tzid is None


def test_trailing_z_is_utc():
    dt = parse_date_time("20240115T093000Z")

    assert dt == DateTime(DateTimeFormat.UTC, 2024, 1, 15, 9, 30, 0)


def test_tzid_label_is_kept_verbatim():
    dt = parse_date_time("TZID=America/New_York:20240115T093000")

    assert dt.format is DateTimeFormat.TIMEZONE
    assert dt.tzid == "America/New_York"
    assert (dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second) == (2024, 1, 15, 9, 30, 0)


def test_out_of_range_values_pass_through():
    dt = parse_date_time("20241399T996161")

    assert (dt.month, dt.day, dt.hour, dt.minute, dt.second) == (13, 99, 99, 61, 61)


def test_malformed_value_falls_back_to_epoch_and_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="ics2org.decoders"):
        dt = parse_date_time("VALUE=DATE:20240115")

    assert dt == DateTime()
    assert dt.format is DateTimeFormat.UTC
    assert (dt.year, dt.month, dt.day) == (1970, 1, 1)
    assert "Failed to parse DateTime: VALUE=DATE:20240115" in caplog.text


def test_partial_matches_are_rejected():
    assert parse_date_time("20240115T093000ZZ") == DateTime()
    assert parse_date_time("20240115T0930") == DateTime()
    assert parse_date_time("x20240115T093000") == DateTime()


def test_organizer_name_and_mail():
    org = parse_organizer("CN=Jane Doe:mailto:jane@example.com")

    assert org == Organizer(calendar="Jane Doe", mail_to="jane@example.com")


def test_organizer_ignores_leading_parameters():
    org = parse_organizer("SENT-BY=x;CN=Team Calendar:mailto:team@example.com")

    assert org.calendar == "Team Calendar"
    assert org.mail_to == "team@example.com"


def test_organizer_name_runs_to_last_mailto():
    org = parse_organizer("CN=a:mailto:b:mailto:c@example.com")

    assert org.calendar == "a:mailto:b"
    assert org.mail_to == "c@example.com"


def test_unrecognized_organizer_is_empty():
    assert parse_organizer("mailto:jane@example.com") == Organizer()
    assert parse_organizer("CN=Jane:mailto:") == Organizer()
