import os
import logging
from library_app import create_app
from library_app.extensions import db
from library_app.models import User, Library


class ColoredFormatter(logging.Formatter):
    """Custom formatter to add colors to log levels"""

    # ANSI color codes
    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
        'RESET': '\033[0m'       # Reset color
    }

    def format(self, record):
        original_format = super().format(record)

        level_name = record.levelname
        if level_name in self.COLORS:
            colored_level = f"{self.COLORS[level_name]}{level_name}{self.COLORS['RESET']}"
            return original_format.replace(level_name, colored_level, 1)

        return original_format


def setup_colored_logging(app):
    """Setup colored logging for the Flask app"""
    colored_formatter = ColoredFormatter(
        fmt='%(asctime)s %(name)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    for handler in logging.getLogger().handlers + app.logger.handlers:
        # RotatingFileHandler is a StreamHandler too; keep escape codes out of log files.
        if type(handler) is logging.StreamHandler:
            handler.setFormatter(colored_formatter)


app = create_app()

setup_colored_logging(app)


@app.shell_context_processor
def make_shell_context():
    """
    Makes additional variables available in the Flask shell context.
    Useful for debugging and managing the app via `flask shell`.
    """
    return {
        'db': db,
        'User': User,
        'Library': Library,
    }


@app.cli.command("init-db")
def init_db_command():
    """
    Initializes the database: creates tables.
    This is an alternative to `flask db upgrade` for a first local setup.
    """
    db.create_all()
    print("Initialized the database.")


if __name__ == '__main__':
    # Flask's development server; use gunicorn (`gunicorn run:app`) in production.
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 5000)))
