import os

from flask import Blueprint, Flask, jsonify
from flask_migrate import Migrate

from config import get_config
from models import db
from services import OptionService
from utils import setup_logging

migrate = Migrate()

admin = Blueprint('admin', __name__, url_prefix='/admin')


def create_app(env=None):
    """Build the Flask app for the given environment name."""
    app = Flask(__name__)
    app.config.from_object(get_config(env))

    setup_logging(app.config['LOG_LEVEL'])

    db.init_app(app)
    migrate.init_app(app, db)

    app.register_blueprint(admin)
    return app


# ============================================
# ROUTES - OPTIONS
# ============================================

@admin.route('/options')
def options_list():
    outputs = OptionService().list_outputs()
    return jsonify([output.model_dump() for output in outputs])


# ============================================
# INITIALIZE DATABASE
# ============================================

def init_db(app):
    with app.app_context():
        db.create_all()


app = create_app(os.environ.get('FLASK_ENV'))


if __name__ == '__main__':
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
