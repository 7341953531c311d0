import calendar
from flask import request, jsonify, abort, current_app, make_response
from . import api_bp
from services import dates
from services.achievement_service import check_celebrations
from services.export_service import EXPORT_FILENAME, TrackerImportError, export_document, import_document
from services.habit_service import is_all_complete, mark_complete, reset_day
from services.stats_service import habit_summary, month_entries, today_status
from services.tracker_store import HABITS, get
from utils import get_store, save_store, date_key_arg, month_args

@api_bp.route('/today', methods=['GET'])
def today():
    store = get_store()
    key = dates.today_key()
    record = get(store, key)
    return jsonify({
        'date': key,
        'record': record,
        'all_done': is_all_complete(record),
        'message': today_status(record),
    })

@api_bp.route('/habits/<habit>/complete', methods=['POST'])
def complete_habit(habit):
    if habit not in HABITS:
        abort(404)
    key = date_key_arg()

    store = get_store()
    store, transition = mark_complete(store, key, habit)
    result = save_store(store)

    notices, streak = check_celebrations(store, habit, transition)

    return jsonify({
        'status': 'success',
        'date': key,
        'record': get(store, key),
        'completed_all': transition.completed_all,
        'streak': streak,
        'milestone': any(n['kind'] == 'milestone' for n in notices),
        'notices': notices,
        **result,
    })

@api_bp.route('/today/reset', methods=['POST'])
def reset_today():
    key = date_key_arg()

    store = reset_day(get_store(), key)
    result = save_store(store)
    current_app.logger.info("Reset tracker entry for %s", key)

    return jsonify({
        'status': 'success',
        'date': key,
        'record': get(store, key),
        **result,
    })

@api_bp.route('/stats', methods=['GET'])
def stats():
    year, month = month_args()
    return jsonify({
        'year': year,
        'month': month,
        'habits': habit_summary(get_store(), year, month),
    })

@api_bp.route('/month', methods=['GET'])
def month_view():
    year, month = month_args()
    return jsonify({
        'year': year,
        'month': month,
        'month_name': calendar.month_name[month],
        'today': dates.today_key(),
        'days': month_entries(get_store(), year, month),
    })

@api_bp.route('/export', methods=['GET'])
def export_data():
    response = make_response(export_document(get_store()))
    response.headers['Content-Type'] = 'application/json'
    response.headers['Content-Disposition'] = f'attachment; filename={EXPORT_FILENAME}'
    return response

@api_bp.route('/import', methods=['POST'])
def import_data():
    upload = request.files.get('file')
    data = upload.read() if upload else request.get_data()

    try:
        store = import_document(data)
    except TrackerImportError as e:
        current_app.logger.info("Rejected tracker import: %s", e)
        return jsonify({'error': e.message}), 400

    result = save_store(store)

    return jsonify({'status': 'success', 'days': len(store), **result})
