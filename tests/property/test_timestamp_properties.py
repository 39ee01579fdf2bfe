"""Property tests: TimestampNano invariants over the whole u64 range.

Uses hypothesis to check that the raw count survives every conversion
that claims to be lossless, that the unit adders agree with plain
nanosecond addition, and that month arithmetic keeps the sub-microsecond
remainder.
"""

from datetime import datetime, timezone

from hypothesis import given, settings, strategies as st

from timestamp_nano.core.constants import U64_MAX
from timestamp_nano.core.enums import OverflowPolicy
from timestamp_nano.core.errors import TimestampOverflowError
from timestamp_nano.core.timestamp import TimestampNano

u64 = st.integers(min_value=0, max_value=U64_MAX)
i64 = st.integers(min_value=-(2**63), max_value=2**63 - 1)
i32 = st.integers(min_value=-(2**31), max_value=2**31 - 1)

# 1980-01-01 .. 2200-01-01, so ten years either way stays after the epoch
calendar_range = st.integers(min_value=315_532_800 * 10**9, max_value=7_258_118_400 * 10**9)


@given(n=u64)
@settings(max_examples=200)
def test_raw_round_trip(n):
    assert TimestampNano(n).to_unix_nanoseconds() == n


@given(n=u64)
@settings(max_examples=200)
def test_parse_inverts_to_string(n):
    ts = TimestampNano(n)
    assert TimestampNano.parse(ts.to_string()) == ts


@given(n=u64)
@settings(max_examples=200)
def test_derived_views_are_consistent(n):
    ts = TimestampNano(n)
    assert 0 <= ts.sub_tick_nanoseconds <= 999
    assert 0 <= ts.sub_second_nanoseconds <= 999_999_999
    assert ts.sub_second_nanoseconds == n % 1_000_000_000
    assert TimestampNano.from_calendar_utc(ts.to_calendar_utc()).add_nanoseconds(
        ts.sub_tick_nanoseconds
    ) == ts


@given(n=u64)
def test_add_zero_is_identity(n):
    assert TimestampNano(n).add_nanoseconds(0) == TimestampNano(n)


@given(n=u64, k=i64)
@settings(max_examples=200)
def test_unit_adders_match_nanosecond_addition(n, k):
    ts = TimestampNano(n)
    assert ts.add_microseconds(k) == ts.add_nanoseconds(k * 1_000)
    assert ts.add_milliseconds(k) == ts.add_nanoseconds(k * 1_000_000)
    assert ts.add_seconds(k) == ts.add_nanoseconds(k * 1_000_000_000)
    assert ts.add_minutes(k) == ts.add_nanoseconds(k * 60 * 1_000_000_000)
    assert ts.add_hours(k) == ts.add_nanoseconds(k * 3_600 * 1_000_000_000)


@given(n=u64, days=i32)
def test_add_days_matches_nanosecond_addition(n, days):
    ts = TimestampNano(n)
    assert ts.add_days(days) == ts.add_nanoseconds(days * 86_400 * 1_000_000_000)


@given(n=u64, delta=i64)
@settings(max_examples=200)
def test_add_wraps_like_unsigned_64_bit(n, delta):
    result = TimestampNano(n).add_nanoseconds(delta)
    assert result.to_unix_nanoseconds() == (n + (delta & U64_MAX)) & U64_MAX
    assert result.add_nanoseconds(-delta) == TimestampNano(n)


@given(n=u64, delta=i64)
def test_checked_agrees_with_wrap_in_range(n, delta):
    ts = TimestampNano(n)
    try:
        checked = ts.checked_add_nanoseconds(delta)
    except TimestampOverflowError:
        assert not 0 <= n + delta <= U64_MAX
    else:
        assert checked == ts.add_nanoseconds(delta)


@given(n=u64, delta=i64)
def test_saturate_stays_in_range(n, delta):
    result = TimestampNano(n).shift(delta, OverflowPolicy.SATURATE)
    assert result.to_unix_nanoseconds() == min(max(n + delta, 0), U64_MAX)


@given(n=calendar_range, months=st.integers(min_value=-120, max_value=120))
@settings(max_examples=200)
def test_add_months_preserves_sub_tick(n, months):
    ts = TimestampNano(n)
    shifted = ts.add_months(months)
    assert shifted.sub_tick_nanoseconds == ts.sub_tick_nanoseconds
    before = ts.to_calendar_utc()
    after = shifted.to_calendar_utc()
    assert (after.year * 12 + after.month) - (before.year * 12 + before.month) == months
    assert after.day <= before.day
    assert after.time() == before.time()


@given(
    dt=st.datetimes(
        min_value=datetime(1970, 1, 1),
        max_value=datetime(2500, 12, 31),
        timezones=st.just(timezone.utc),
    )
)
def test_calendar_round_trip_is_exact_to_the_microsecond(dt):
    assert TimestampNano.from_calendar_utc(dt).to_calendar_utc() == dt
