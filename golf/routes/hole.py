from flask import Blueprint, current_app, render_template

from golf.holes import HOLES, LANGS, hole_by_id
from golf.logger import golf_logger
from golf.page import HolePage
from golf.routes.auth import resolve_user_id

holes = Blueprint("holes", __name__)


@holes.route("/")
def index():
    return render_template("index.html", holes=HOLES)


@holes.route("/<hole_id>")
def hole(hole_id):
    config = current_app.config
    user_id = resolve_user_id()

    page = HolePage(
        hole_by_id(hole_id),
        LANGS,
        user_id,
        css_path=config["HOLE_CSS_PATH"],
        js_path=config["HOLE_JS_PATH"],
        client_id=config["GITHUB_CLIENT_ID"],
    )

    # Built fully in memory; a store failure raises before anything is sent.
    html = page.render()
    golf_logger.debug("rendered hole %r for user %s", hole_id, user_id)

    return render_template("hole.html", page=html)
