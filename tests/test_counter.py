"""Tests for instance accounting."""

from __future__ import annotations

import copy
import gc
import threading

import pytest

from calendate.core.counter import InstanceCounter
from calendate.core.date import CalendarDate, default_counter
from calendate.errors import InvalidDateError


class TestInstanceCounter:
    """Tests for the InstanceCounter itself."""

    def test_starts_at_zero(self) -> None:
        counter = InstanceCounter()
        assert counter.alive == 0
        assert counter.total_created == 0

    def test_register_and_release(self) -> None:
        counter = InstanceCounter()
        counter.register()
        counter.register()
        counter.release()
        assert counter.alive == 1
        assert counter.total_created == 2

    def test_reset(self) -> None:
        counter = InstanceCounter()
        counter.register()
        counter.reset()
        assert (counter.alive, counter.total_created) == (0, 0)

    def test_repr(self) -> None:
        counter = InstanceCounter()
        counter.register()
        assert repr(counter) == "InstanceCounter(alive=1, total_created=1)"

    def test_release_while_lock_held(self) -> None:
        """Test a finalizer can release on a thread already holding the lock."""
        counter = InstanceCounter()
        counter.register()
        with counter._lock:
            counter.release()
        assert counter.alive == 0

    def test_thread_safety(self) -> None:
        """Test concurrent registrations are not lost."""
        counter = InstanceCounter()

        def work() -> None:
            for _ in range(1000):
                counter.register()
                counter.release()

        threads = [threading.Thread(target=work) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert counter.total_created == 8000
        assert counter.alive == 0


class TestCalendarDateCounting:
    """Tests for how CalendarDate drives its counter."""

    def test_default_counter_is_shared(self) -> None:
        assert CalendarDate.counter is default_counter

    def test_fixture_isolates_counter(self, counter: InstanceCounter) -> None:
        assert CalendarDate.counter is counter
        assert CalendarDate.total_created() == 0
        assert CalendarDate.alive_count() == 0

    def test_construction_counts(self, counter: InstanceCounter) -> None:
        a = CalendarDate()
        b = CalendarDate(15, 1, 2024)
        assert counter.total_created == 2
        assert counter.alive == 2
        assert a != b

    def test_copy_counts(self, counter: InstanceCounter) -> None:
        original = CalendarDate(15, 1, 2024)
        clones = [original.copy(), copy.copy(original), copy.deepcopy(original)]
        assert counter.total_created == 4
        assert counter.alive == 4
        assert len(clones) == 3

    def test_from_string_counts(self, counter: InstanceCounter) -> None:
        d = CalendarDate.from_string("15.01.2024")
        assert counter.total_created == 1
        assert d.year == 2024

    def test_failed_construction_is_not_counted(self, counter: InstanceCounter) -> None:
        with pytest.raises(InvalidDateError):
            CalendarDate(29, 2, 2023)
        assert counter.total_created == 0
        assert counter.alive == 0

    def test_in_place_operations_do_not_count(self, counter: InstanceCounter) -> None:
        d = CalendarDate(15, 1, 2024)
        d.add_days(10)
        d.subtract_days(3)
        d.set_day(1)
        d.parse("02.02.2022")
        d.increment()
        d += 5
        assert counter.total_created == 1

    def test_alive_drops_when_released(self, counter: InstanceCounter) -> None:
        """Test N created and M released leaves alive == N - M."""
        dates = [CalendarDate(1, 1, 2000 + i) for i in range(10)]
        del dates[:4]
        gc.collect()

        assert counter.total_created == 10
        assert counter.alive == 6
        assert len(dates) == 6

    def test_total_is_monotonic(self, counter: InstanceCounter) -> None:
        for _ in range(5):
            CalendarDate()
        gc.collect()
        assert counter.total_created == 5
        assert counter.alive == 0

    def test_release_goes_to_creating_counter(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a date releases into the counter it was registered with."""
        first = InstanceCounter()
        second = InstanceCounter()
        monkeypatch.setattr(CalendarDate, "counter", first)
        d = CalendarDate()
        monkeypatch.setattr(CalendarDate, "counter", second)

        del d
        gc.collect()

        assert first.alive == 0
        assert first.total_created == 1
        assert second.total_created == 0
