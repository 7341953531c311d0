from app import app
from models import db, TrackerState

def force_init():
    with app.app_context():
        print("Dropping all tables...")
        db.drop_all()
        print("Creating all tables...")
        db.create_all()

        # Stamp the migration so flask-migrate thinks we are up to date
        from flask_migrate import stamp
        stamp()
        print("Database initialized and stamped.")

if __name__ == "__main__":
    force_init()
