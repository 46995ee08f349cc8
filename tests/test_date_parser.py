"""
Tests for date/time parsing and formatting used by the booking steps.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from app.application.utils.date_parser import is_past_date, parse_booking_date, parse_booking_time
from app.application.utils.formatting import (
    compute_end_time,
    format_day_month,
    format_full_date,
    format_price,
    totals_for,
)
from app.domain.entities.catalog import Service

REFERENCE = date(2024, 6, 10)


def test_relative_dates():
    assert parse_booking_date("hoje", REFERENCE) == REFERENCE
    assert parse_booking_date("Hoje mesmo", REFERENCE) == REFERENCE
    assert parse_booking_date("today", REFERENCE) == REFERENCE
    assert parse_booking_date("amanhã", REFERENCE) == REFERENCE + timedelta(days=1)
    assert parse_booking_date("amanha", REFERENCE) == REFERENCE + timedelta(days=1)
    assert parse_booking_date("tomorrow", REFERENCE) == REFERENCE + timedelta(days=1)


def test_numeric_dates():
    assert parse_booking_date("25/12/2024", REFERENCE) == date(2024, 12, 25)
    assert parse_booking_date("5/7/2024", REFERENCE) == date(2024, 7, 5)
    assert parse_booking_date(" 01/08/2024 ", REFERENCE) == date(2024, 8, 1)


def test_generic_iso_date():
    assert parse_booking_date("2024-12-25", REFERENCE) == date(2024, 12, 25)
    assert parse_booking_date("2024-06-11", REFERENCE) == date(2024, 6, 11)


@pytest.mark.parametrize("text", ["December 25, 2024", "25 Dec 2024", "2024/12/25", "25.12.2024"])
def test_written_dates(text):
    assert parse_booking_date(text, REFERENCE) == date(2024, 12, 25)


def test_written_dates_read_day_first():
    assert parse_booking_date("05-07-2024", REFERENCE) == date(2024, 7, 5)
    assert parse_booking_date("2024/06/10", REFERENCE) == date(2024, 6, 10)


@pytest.mark.parametrize("text", ["31/02/2024", "25-12", "semana que vem", "", "12/2024", "25 Dec", "14:30"])
def test_unparseable_dates(text):
    assert parse_booking_date(text, REFERENCE) is None


def test_past_date_is_returned_but_flagged():
    yesterday = parse_booking_date("09/06/2024", REFERENCE)
    assert yesterday == date(2024, 6, 9)
    assert is_past_date(yesterday, REFERENCE)
    assert not is_past_date(REFERENCE, REFERENCE)


@pytest.mark.parametrize("text", ["14h30", "1430", "14:30", " 14 : 30 ", "14H30"])
def test_time_normalization(text):
    assert parse_booking_time(text) == "14:30"


def test_time_is_zero_padded():
    assert parse_booking_time("9:05") == "09:05"
    assert parse_booking_time("0:00") == "00:00"
    assert parse_booking_time("23:59") == "23:59"


@pytest.mark.parametrize("text", ["25:00", "14:75", "14h", "143", "14:30:00", "meio-dia", "ab:cd", "-1:30"])
def test_invalid_times(text):
    assert parse_booking_time(text) is None


def test_end_time_crosses_hour_boundary():
    assert compute_end_time("14:45", 75) == "16:00"
    assert compute_end_time("09:00", 30) == "09:30"
    assert compute_end_time("23:30", 45) == "00:15"


def test_totals_and_formatting():
    services = [
        Service(id="a", name="Barba", price=40.0, duration_minutes=30),
        Service(id="b", name="Navalhado", price=60.0, duration_minutes=45),
    ]
    assert totals_for(services) == (100.0, 75)
    assert totals_for([]) == (0, 0)
    assert format_price(100) == "R$ 100.00"
    assert format_day_month(date(2024, 12, 25)) == "25 de dezembro"
    assert format_full_date(date(2024, 3, 5)) == "05 de março de 2024"
