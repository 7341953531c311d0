import sys
from app import app
from services import tracker_store
from services.export_service import EXPORT_FILENAME, export_document

def export(path=EXPORT_FILENAME):
    with app.app_context():
        result = tracker_store.load()
        if result.error is not None:
            print(f"WARNING: stored data was unreadable ({result.error.value}), exporting an empty store.")
        with open(path, 'wb') as f:
            f.write(export_document(result.store))
        print(f"Exported {len(result.store)} days to {path}")

if __name__ == "__main__":
    export(sys.argv[1] if len(sys.argv) > 1 else EXPORT_FILENAME)
