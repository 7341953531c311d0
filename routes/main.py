from flask import jsonify
from . import main_bp
from services import dates
from services.habit_service import is_all_complete
from services.stats_service import habit_summary, today_status
from services.tracker_store import HABITS, HABIT_LABELS, get
from utils import get_store

@main_bp.route('/')
def index():
    store = get_store()
    today = dates.today()
    key = dates.to_key(today)
    record = get(store, key)

    return jsonify({
        'date': key,
        'habits': [{'id': h, 'label': HABIT_LABELS[h]} for h in HABITS],
        'record': record,
        'all_done': is_all_complete(record),
        'message': today_status(record),
        'stats': habit_summary(store, today.year, today.month, today=today),
    })
