import calendar
from datetime import date

from services import dates
from services.habit_service import is_all_complete
from services.tracker_store import HABITS, HABIT_LABELS, get

MILESTONES = (7, 30, 100)


def monthly_count(store, habit, year, month):
    count = 0
    for key, record in store.entries.items():
        if not record.get(habit):
            continue
        if dates.month_of(key) == (year, month):
            count += 1
    return count

def total_count(store, habit):
    return sum(1 for record in store.entries.values() if record.get(habit))

def current_streak(store, habit, today=None):
    """Count consecutive completed days ending today, walking backwards.

    Today not done yet means a streak of 0, whatever happened before.
    """
    day = today or dates.today()
    streak = 0
    while True:
        record = store.entries.get(dates.to_key(day))
        if not record or not record.get(habit):
            break
        streak += 1
        day = dates.previous_day(day)
    return streak

def milestone_reached(streak):
    return streak in MILESTONES

def habit_summary(store, year, month, today=None):
    summary = {}
    for habit in HABITS:
        summary[habit] = {
            'label': HABIT_LABELS[habit],
            'month': monthly_count(store, habit, year, month),
            'total': total_count(store, habit),
            'streak': current_streak(store, habit, today=today),
        }
    return summary

def month_entries(store, year, month):
    days_in_month = calendar.monthrange(year, month)[1]
    days = []
    for day in range(1, days_in_month + 1):
        key = dates.to_key(date(year, month, day))
        record = get(store, key)
        entry = {'date': key, 'day': day}
        entry.update(record)
        entry['all_done'] = is_all_complete(record)
        days.append(entry)
    return days

def today_status(record):
    done = [habit for habit in HABITS if record.get(habit)]
    if not done:
        return 'Make today count.'
    if len(done) == len(HABITS):
        return 'Everything is complete. Beautiful work.'

    left = [HABIT_LABELS[habit] for habit in HABITS if habit not in done]
    finished = ', '.join(HABIT_LABELS[habit] for habit in done)
    return f"{finished} done. Still to go: {', '.join(left)}."
