from rental_agency.utils.filters import fmt_iso_local, fmt_money


def test_fmt_money():
    assert fmt_money(180) == "$180.00"
    assert fmt_money(315.0) == "$315.00"
    assert fmt_money(1234.5) == "$1,234.50"
    assert fmt_money("n/a") == "n/a"


def test_fmt_iso_local_converts_utc_to_auckland():
    # NZDT (UTC+13) in January
    assert fmt_iso_local("2030-01-10T09:30:00+00:00") == "10/01/2030 22:30"
    assert fmt_iso_local("2030-01-10T09:30:00Z") == "10/01/2030 22:30"


def test_fmt_iso_local_naive_is_utc():
    assert fmt_iso_local("2030-07-01 00:00:00", tz_name="UTC") == "01/07/2030 00:00"


def test_fmt_iso_local_12h():
    assert fmt_iso_local("2030-01-10T01:05:00+00:00", tz_name="UTC", use_12h=True) == "10 Jan 2030, 1:05 AM"


def test_fmt_iso_local_bad_input_returned_as_is():
    assert fmt_iso_local(None) == ""
    assert fmt_iso_local("  ") == ""
    assert fmt_iso_local("yesterday") == "yesterday"


def test_fmt_iso_local_unknown_zone_falls_back_to_utc():
    assert fmt_iso_local("2030-01-10T09:30:00+00:00", tz_name="Mars/Olympus") == "10/01/2030 09:30"
