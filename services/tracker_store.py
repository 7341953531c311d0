import enum
import json
import logging
from collections import namedtuple

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from models import db, TrackerState
from services.dates import is_valid_key

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = 'dw-data'

HABITS = ('med', 'walk', 'vit')
HABIT_LABELS = {
    'med': 'Meditation',
    'walk': 'Walk',
    'vit': 'Vitamin',
}


class StorageError(enum.Enum):
    CORRUPT = 'corrupt'


LoadResult = namedtuple('LoadResult', ['store', 'error'])


def empty_record():
    return {habit: False for habit in HABITS}

def normalize_record(raw):
    """Coerce a stored day record onto the current habit set.

    Unknown habit ids are dropped and missing ones default to False, so
    documents written with an older or newer habit set still load.
    """
    record = empty_record()
    if isinstance(raw, dict):
        for habit in HABITS:
            record[habit] = bool(raw.get(habit, False))
    return record

def normalize_entries(raw):
    if not isinstance(raw, dict):
        raise TypeError('entries must be a mapping')
    entries = {}
    for key, record in raw.items():
        if not is_valid_key(key):
            logger.warning("Dropping entry with invalid date key %r", key)
            continue
        entries[key] = normalize_record(record)
    return entries


class TrackerStore:
    def __init__(self, entries=None):
        self.entries = entries if entries is not None else {}

    @classmethod
    def from_document(cls, doc):
        """Build a store from a parsed `{'entries': {...}}` document.

        Raises TypeError when the document has no entries mapping.
        """
        if not isinstance(doc, dict) or not isinstance(doc.get('entries'), dict):
            raise TypeError('document has no entries mapping')
        return cls(normalize_entries(doc['entries']))

    def to_document(self):
        return {'entries': {key: dict(self.entries[key]) for key in sorted(self.entries)}}

    def __contains__(self, key):
        return key in self.entries

    def __len__(self):
        return len(self.entries)

    def __eq__(self, other):
        if not isinstance(other, TrackerStore):
            return NotImplemented
        return self.entries == other.entries

    def __repr__(self):
        return f"<TrackerStore days={len(self.entries)}>"


def get(store, key):
    record = store.entries.get(key)
    if record is None:
        return empty_record()
    return dict(record)

def _storage_key():
    return current_app.config.get('TRACKER_STORAGE_KEY', DEFAULT_STORAGE_KEY)

def load():
    row = db.session.get(TrackerState, _storage_key())
    if row is None or not row.value:
        return LoadResult(TrackerStore(), None)

    try:
        doc = json.loads(row.value)
        store = TrackerStore.from_document(doc)
    except (ValueError, TypeError, RecursionError) as e:
        logger.warning("Stored tracker data is corrupt, starting empty: %s", e)
        return LoadResult(TrackerStore(), StorageError.CORRUPT)

    return LoadResult(store, None)

def save(store):
    """Overwrite the storage slot with the full store. Returns False if the write failed."""
    payload = json.dumps(store.to_document())
    try:
        row = db.session.get(TrackerState, _storage_key())
        if row is None:
            row = TrackerState(key=_storage_key(), value=payload)
            db.session.add(row)
        else:
            row.value = payload
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.warning("Could not save tracker data: %s", e)
        return False
    return True
