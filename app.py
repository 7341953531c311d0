import os
import logging
from flask import Flask
from flask_migrate import Migrate
from dotenv import load_dotenv
from models import db

load_dotenv()

app = Flask(__name__)

app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev_key_change_in_prod')
app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('SQLALCHEMY_DATABASE_URI', 'sqlite:///db.sqlite3')
app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
app.config['TRACKER_STORAGE_KEY'] = os.environ.get('TRACKER_STORAGE_KEY', 'dw-data')

logging.basicConfig(level=os.environ.get('LOG_LEVEL', 'INFO'))

db.init_app(app)
migrate = Migrate(app, db)

from routes import main_bp, api_bp

app.register_blueprint(main_bp)
app.register_blueprint(api_bp, url_prefix='/api')

with app.app_context():
    db.create_all()

if __name__ == '__main__':
    app.run(debug=True)
