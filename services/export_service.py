import json
import logging

from services.tracker_store import TrackerStore

logger = logging.getLogger(__name__)

EXPORT_FILENAME = 'daily-tracker-data.json'


class TrackerImportError(Exception):
    message = 'Import failed.'

    def __init__(self, detail=None):
        super().__init__(detail or self.message)


class ImportMalformed(TrackerImportError):
    message = 'Could not parse JSON.'


class ImportInvalidSchema(TrackerImportError):
    message = 'Invalid JSON format.'


def export_document(store):
    return json.dumps(store.to_document(), indent=2).encode('utf-8')

def import_document(data):
    """Parse an exported document into a fresh store.

    The result is meant to replace the current store wholesale. Raises
    ImportMalformed for undecodable input and ImportInvalidSchema when the
    document has no `entries` mapping.
    """
    if isinstance(data, (bytes, bytearray)):
        try:
            data = data.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise ImportMalformed(str(e)) from e

    try:
        doc = json.loads(data)
    except (ValueError, RecursionError) as e:
        raise ImportMalformed(str(e)) from e

    try:
        store = TrackerStore.from_document(doc)
    except TypeError as e:
        raise ImportInvalidSchema(str(e)) from e

    logger.info("Imported tracker document with %d days", len(store))
    return store
