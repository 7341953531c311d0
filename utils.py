from datetime import datetime
from flask import request, abort
from services import dates, tracker_store

SAVE_WARNING = 'Your changes could not be saved. They are kept for this session only.'

def get_store():
    # Always read from the storage slot so every request sees the latest save.
    # Corrupt data is logged by the store and comes back empty.
    return tracker_store.load().store

def save_store(store):
    # Returns extra response fields describing the save outcome
    if tracker_store.save(store):
        return {'saved': True}
    return {'saved': False, 'warning': SAVE_WARNING}

def date_key_arg():
    date_str = request.args.get('date')
    if not date_str:
        return dates.today_key()
    if not dates.is_valid_key(date_str):
        abort(400)
    return date_str

def month_args():
    now = datetime.now()
    year = request.args.get('year', now.year, type=int)
    month = request.args.get('month', now.month, type=int)

    # Out of range months roll into the neighbouring year, like calendar navigation
    if month > 12 or month < 1:
        year, month = dates.shift_month(year, 1, month - 1)
    if not 1 <= year <= 9999:
        abort(400)
    return year, month
