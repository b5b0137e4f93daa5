from datetime import timedelta, date
from typing import Optional, Tuple


def inclusive_days(start_date: date, end_date: date) -> int:
    """Number of days in [start_date, end_date], both ends counted."""
    return (end_date - start_date).days + 1


def ranges_overlap(start_a: date, end_a: date, start_b: date, end_b: date) -> bool:
    """Closed-interval intersection test."""
    return start_a <= end_b and end_a >= start_b


def get_date_range(filter_type: str, today: Optional[date] = None) -> Tuple[date, date]:
    """
    Returns (start_date, end_date) for filter types.

    Supported filter types:
    - 'today': Current day
    - 'this_week' or 'current_week': Monday to Sunday of current week
    - 'last_week': Monday to Sunday of previous week
    - 'this_month': First to last day of current month
    - 'last_month': First to last day of previous month
    - 'next_month': First to last day of next month
    - 'this_year': First to last day of current year
    """
    today = today or date.today()

    if filter_type == 'today':
        return (today, today)

    elif filter_type == 'this_week' or filter_type == 'current_week':
        # Monday of current week (weekday: 0=Monday, 6=Sunday)
        start = today - timedelta(days=today.weekday())
        return (start, start + timedelta(days=6))

    elif filter_type == 'last_week':
        current_week_start = today - timedelta(days=today.weekday())
        start = current_week_start - timedelta(days=7)
        return (start, start + timedelta(days=6))

    elif filter_type == 'this_month':
        return _month_bounds(today)

    elif filter_type == 'last_month':
        last_of_last_month = today.replace(day=1) - timedelta(days=1)
        return _month_bounds(last_of_last_month)

    elif filter_type == 'next_month':
        first_of_next_month = _month_bounds(today)[1] + timedelta(days=1)
        return _month_bounds(first_of_next_month)

    elif filter_type == 'this_year':
        return (today.replace(month=1, day=1), today.replace(month=12, day=31))

    else:
        raise ValueError(f"Unknown filter type: {filter_type}")


def _month_bounds(day: date) -> Tuple[date, date]:
    start = day.replace(day=1)
    if day.month == 12:
        end = day.replace(day=31)
    else:
        end = day.replace(month=day.month + 1, day=1) - timedelta(days=1)
    return (start, end)
