from datetime import datetime, timedelta

KEY_FORMAT = '%Y-%m-%d'

def today():
    # Host local calendar date, not UTC
    return datetime.now().date()

def to_key(d):
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"

def today_key():
    return to_key(today())

def from_key(key):
    """Parse a canonical YYYY-MM-DD key. Raises ValueError for anything else."""
    if not isinstance(key, str) or len(key) != 10:
        raise ValueError(f"Invalid date key: {key!r}")
    parsed = datetime.strptime(key, KEY_FORMAT).date()
    # strptime accepts '2024-1-01' style input, so compare against the canonical form
    if to_key(parsed) != key:
        raise ValueError(f"Invalid date key: {key!r}")
    return parsed

def is_valid_key(key):
    try:
        from_key(key)
    except ValueError:
        return False
    return True

def previous_day(d):
    return d - timedelta(days=1)

def shift_month(year, month, delta):
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1

def month_of(key):
    d = from_key(key)
    return d.year, d.month
