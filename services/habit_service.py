from collections import namedtuple

from services.dates import is_valid_key
from services.tracker_store import HABITS, empty_record


class Transition(namedtuple('Transition', ['was_all', 'now_all'])):
    __slots__ = ()

    @property
    def completed_all(self):
        # True only on the call that finished the last remaining habit
        return not self.was_all and self.now_all


def is_all_complete(record):
    if not record:
        return False
    return all(record.get(habit, False) for habit in HABITS)

def _check(key, habit=None):
    if not is_valid_key(key):
        raise ValueError(f"Invalid date key: {key!r}")
    if habit is not None and habit not in HABITS:
        raise ValueError(f"Unknown habit: {habit!r}")

def mark_complete(store, key, habit):
    """Mark `habit` done for the day `key`.

    Marking an already completed habit leaves the record as it was. The caller
    is responsible for saving the store afterwards.
    """
    _check(key, habit)

    record = store.entries.get(key)
    was_all = is_all_complete(record)

    if record is None:
        record = empty_record()
        store.entries[key] = record
    record[habit] = True

    return store, Transition(was_all, is_all_complete(record))

def reset_day(store, key):
    _check(key)
    store.entries.pop(key, None)
    return store
