from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
import click
from leaderboard.config import Config

db = SQLAlchemy()

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    CORS(flask_app, origins=flask_app.config.get('CORS_ORIGINS', '*'))

    from leaderboard.api import scores
    # Mounted under /api/scores to match the game client
    flask_app.register_blueprint(scores, url_prefix='/api/scores')

    with flask_app.app_context():
        import leaderboard.models  # noqa: F401
        db.create_all()

    @click.command('db-reset')
    def db_reset_command():
        """Drops and recreates the scores table."""
        with flask_app.app_context():
            db.drop_all()
            db.create_all()
            print('Database has been reset!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
