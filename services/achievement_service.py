from services.stats_service import current_streak, milestone_reached
from services.tracker_store import HABIT_LABELS

# Streak badges, keyed by the exact streak length that unlocks them
STREAK_BADGES = {
    7: ('One Week', '🌱'),
    30: ('One Month', '🔥'),
    100: ('Centurion', '👑'),
}

def check_celebrations(store, habit, transition, today=None):
    """Build the notices to show right after `habit` was marked done.

    Returns the notice list together with the freshly computed streak.
    Milestones fire on the exact day the streak hits a threshold; nothing is
    remembered between calls, so a streak that breaks and regrows fires again.
    """
    notices = []

    if transition.completed_all:
        notices.append({
            'type': 'success',
            'kind': 'all_done',
            'message': 'All habits complete for today!',
        })

    streak = current_streak(store, habit, today=today)
    if milestone_reached(streak):
        name, icon = STREAK_BADGES[streak]
        notices.append({
            'type': 'success',
            'kind': 'milestone',
            'streak': streak,
            'message': f"{icon} {name}: {streak}-day {HABIT_LABELS[habit]} streak!",
        })

    return notices, streak
