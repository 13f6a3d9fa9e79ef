"""
Tests for window building and event projection.
"""

import pendulum

from openslots.domain.projection import apply_appointment, apply_opening
from openslots.domain.window import WINDOW_DAYS, build_window


MORNING = ["9:30", "10:00", "10:30", "11:00", "11:30", "12:00"]


class TestBuildWindow:
    """Tests for build_window."""
    
    def test_seven_consecutive_empty_days(self):
        window = build_window(pendulum.date(2020, 4, 13))
        
        assert len(window) == WINDOW_DAYS == 7
        for offset, bucket in enumerate(window):
            assert bucket.date == pendulum.date(2020, 4, 13).add(days=offset)
            assert bucket.slots == ()
    
    def test_datetime_anchor_drops_time_of_day(self, parse):
        window = build_window(parse("2020-04-13 15:45"))
        
        assert window[0].date == pendulum.date(2020, 4, 13)
    
    def test_window_crosses_month_end(self):
        window = build_window(pendulum.date(2020, 4, 28))
        
        assert window[-1].date == pendulum.date(2020, 5, 4)


class TestApplyOpening:
    """Tests for apply_opening."""
    
    def test_one_off_opening_fills_its_date_only(self, opening):
        window = build_window(pendulum.date(2020, 4, 13))
        
        result = apply_opening(window, opening("2020-04-17 09:30", "2020-04-17 12:30"))
        
        assert list(result[4].slots) == MORNING
        assert all(bucket.slots == () for i, bucket in enumerate(result) if i != 4)
    
    def test_original_window_is_untouched(self, opening):
        window = build_window(pendulum.date(2020, 4, 13))
        
        apply_opening(window, opening("2020-04-17 09:30", "2020-04-17 12:30"))
        
        assert window[4].slots == ()
    
    def test_weekly_opening_matches_every_same_weekday(self, opening):
        """Test a Thursday opening lands on every Thursday of a two-week span."""
        window = build_window(pendulum.date(2020, 4, 13))
        window = window + build_window(pendulum.date(2020, 4, 20))
        
        result = apply_opening(
            window,
            opening("2020-04-02 10:30", "2020-04-02 12:30", weekly_recurring=True)
        )
        
        thursdays = [bucket for bucket in result if bucket.slots]
        assert [bucket.date for bucket in thursdays] == [
            pendulum.date(2020, 4, 16),
            pendulum.date(2020, 4, 23),
        ]
        for bucket in thursdays:
            assert list(bucket.slots) == ["10:30", "11:00", "11:30", "12:00"]
    
    def test_non_recurring_opening_outside_window_is_ignored(self, opening):
        window = build_window(pendulum.date(2020, 4, 13))
        
        result = apply_opening(window, opening("2020-04-02 10:30", "2020-04-02 12:30"))
        
        assert result == window
    
    def test_later_opening_replaces_earlier_one(self, opening):
        """Test that openings on the same day are not merged."""
        window = build_window(pendulum.date(2020, 4, 13))
        
        window = apply_opening(window, opening("2020-04-17 09:30", "2020-04-17 12:30"))
        window = apply_opening(window, opening("2020-04-17 14:00", "2020-04-17 15:00"))
        
        assert list(window[4].slots) == ["14:00", "14:30"]
    
    def test_applying_same_opening_twice_is_idempotent(self, opening):
        event = opening("2020-04-17 09:30", "2020-04-17 12:30")
        window = build_window(pendulum.date(2020, 4, 13))
        
        once = apply_opening(window, event)
        twice = apply_opening(once, event)
        
        assert twice == once
    
    def test_cross_midnight_opening_contributes_nothing(self, opening):
        window = build_window(pendulum.date(2020, 4, 13))
        
        result = apply_opening(window, opening("2020-04-17 22:00", "2020-04-18 02:00"))
        
        assert result == window


class TestApplyAppointment:
    """Tests for apply_appointment."""
    
    def test_removes_busy_slots_and_keeps_order(self, opening, appointment):
        window = apply_opening(
            build_window(pendulum.date(2020, 4, 13)),
            opening("2020-04-17 09:30", "2020-04-17 12:30")
        )
        
        result = apply_appointment(window, appointment("2020-04-17 10:00", "2020-04-17 11:00"))
        
        assert list(result[4].slots) == ["9:30", "11:00", "11:30", "12:00"]
    
    def test_appointment_inside_opening_leaves_last_slot(self, opening, appointment):
        window = apply_opening(
            build_window(pendulum.date(2020, 4, 13)),
            opening("2020-04-17 09:30", "2020-04-17 12:30")
        )
        
        result = apply_appointment(window, appointment("2020-04-17 09:30", "2020-04-17 12:00"))
        
        assert list(result[4].slots) == ["12:00"]
    
    def test_appointment_without_opening_leaves_day_empty(self, appointment):
        window = build_window(pendulum.date(2020, 4, 13))
        
        result = apply_appointment(window, appointment("2020-04-15 09:30", "2020-04-15 10:30"))
        
        assert result[2].slots == ()
    
    def test_appointment_only_touches_its_date(self, opening, appointment):
        """Test that appointments do not recur onto the same weekday."""
        window = build_window(pendulum.date(2020, 4, 13)) + build_window(pendulum.date(2020, 4, 20))
        window = apply_opening(
            window,
            opening("2020-04-02 10:30", "2020-04-02 12:30", weekly_recurring=True)
        )
        
        result = apply_appointment(window, appointment("2020-04-16 10:30", "2020-04-16 11:30"))
        
        assert list(result[3].slots) == ["11:30", "12:00"]
        assert list(result[10].slots) == ["10:30", "11:00", "11:30", "12:00"]
    
    def test_appointment_outside_window_is_noop(self, opening, appointment):
        window = apply_opening(
            build_window(pendulum.date(2020, 4, 13)),
            opening("2020-04-17 09:30", "2020-04-17 12:30")
        )
        
        result = apply_appointment(window, appointment("2020-04-23 09:30", "2020-04-23 11:30"))
        
        assert result == window
    
    def test_cross_midnight_appointment_removes_nothing(self, opening, appointment):
        window = apply_opening(
            build_window(pendulum.date(2020, 4, 13)),
            opening("2020-04-17 09:30", "2020-04-17 12:30")
        )
        
        result = apply_appointment(window, appointment("2020-04-17 09:30", "2020-04-18 09:30"))
        
        assert list(result[4].slots) == MORNING
