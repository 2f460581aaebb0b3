# ========================
# app.py
# ========================

from flask import Flask, render_template

from golf.config import Config
from golf.extensions import db, login_manager
from golf.hydration import HydrationError
from golf.logger import configure_logging, golf_logger
from golf.models.user import User
from golf.routes.auth import auth
from golf.routes.hole import holes


# =========================
# Login Manager
# =========================
@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))


def handle_hydration_error(e):
    golf_logger.error("hole page aborted: %s", e, exc_info=e)
    return render_template("500.html"), 500


# =========================
# Flask initialisation
# =========================
def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app.config["LOG_LEVEL"], app.config.get("LOG_FILE_PATH"))

    db.init_app(app)
    login_manager.init_app(app)

    app.register_blueprint(auth)
    app.register_blueprint(holes)
    app.register_error_handler(HydrationError, handle_hydration_error)

    with app.app_context():
        db.create_all()

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, debug=True, use_reloader=True, threaded=True)
