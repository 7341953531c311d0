from datetime import date
from services.stats_service import (
    monthly_count, total_count, current_streak, milestone_reached,
    habit_summary, month_entries, today_status,
)
from services.tracker_store import TrackerStore

TODAY = date(2024, 3, 2)

def test_streak_zero_without_today(make_store):
    store = make_store({
        '2024-03-01': {'med': True},
        '2024-02-29': {'med': True},
    })
    assert current_streak(store, 'med', today=TODAY) == 0

def test_streak_stops_at_gap(make_store):
    store = make_store({
        '2024-03-02': {'med': True},
        '2024-03-01': {'med': True},
        '2024-02-29': {'med': False},
        '2024-02-28': {'med': True},
    })
    assert current_streak(store, 'med', today=TODAY) == 2

def test_streak_crosses_month_boundary(make_store):
    store = make_store({
        '2024-03-02': {'walk': True},
        '2024-03-01': {'walk': True},
        '2024-02-29': {'walk': True},
    })
    assert current_streak(store, 'walk', today=TODAY) == 3

def test_streak_ignores_future(make_store):
    store = make_store({
        '2024-03-03': {'vit': True},
        '2024-03-02': {'vit': True},
    })
    assert current_streak(store, 'vit', today=TODAY) == 1

def test_streak_is_per_habit(make_store):
    store = make_store({'2024-03-02': {'med': True}})
    assert current_streak(store, 'med', today=TODAY) == 1
    assert current_streak(store, 'walk', today=TODAY) == 0

def test_monthly_count_stays_in_month(make_store):
    entries = {}
    for day in range(1, 32):
        entries[f'2024-01-{day:02d}'] = {'med': True}
    for day in range(1, 31):
        entries[f'2024-04-{day:02d}'] = {'med': True}
    entries['2024-03-10'] = {'med': True}
    entries['2024-03-11'] = {'walk': True}
    entries['2023-03-12'] = {'med': True}
    store = make_store(entries)

    assert monthly_count(store, 'med', 2024, 3) == 1
    assert monthly_count(store, 'walk', 2024, 3) == 1
    assert monthly_count(store, 'med', 2024, 2) == 0
    assert monthly_count(store, 'med', 2024, 1) == 31

def test_total_count(make_store):
    store = make_store({
        '2023-12-31': {'med': True},
        '2024-01-01': {'med': True, 'walk': True},
        '2024-01-02': {'walk': True},
    })
    assert total_count(store, 'med') == 2
    assert total_count(store, 'walk') == 2
    assert total_count(store, 'vit') == 0
    assert total_count(TrackerStore(), 'med') == 0

def test_milestones():
    assert milestone_reached(7) is True
    assert milestone_reached(30) is True
    assert milestone_reached(100) is True
    assert milestone_reached(6) is False
    assert milestone_reached(8) is False
    assert milestone_reached(0) is False

def test_habit_summary(make_store):
    store = make_store({
        '2024-03-02': {'med': True},
        '2024-03-01': {'med': True, 'vit': True},
        '2024-02-10': {'walk': True},
    })
    summary = habit_summary(store, 2024, 3, today=TODAY)
    assert summary['med'] == {'label': 'Meditation', 'month': 2, 'total': 2, 'streak': 2}
    assert summary['walk']['month'] == 0
    assert summary['walk']['total'] == 1
    assert summary['vit']['streak'] == 0

def test_month_entries(make_store):
    store = make_store({'2024-02-14': {'med': True, 'walk': True, 'vit': True}})
    days = month_entries(store, 2024, 2)
    assert len(days) == 29
    assert days[0]['date'] == '2024-02-01'
    assert days[13]['all_done'] is True
    assert days[14] == {'date': '2024-02-15', 'day': 15, 'med': False, 'walk': False, 'vit': False, 'all_done': False}

def test_today_status():
    assert today_status({'med': False, 'walk': False, 'vit': False}) == 'Make today count.'
    assert 'Beautiful work' in today_status({'med': True, 'walk': True, 'vit': True})
    message = today_status({'med': True, 'walk': False, 'vit': False})
    assert message.startswith('Meditation done.')
    assert 'Walk' in message and 'Vitamin' in message
