from flask import Blueprint, redirect
from flask_login import current_user, logout_user

auth = Blueprint("auth", __name__)


def resolve_user_id():
    """Id of the logged in user, 0 for anonymous callers."""
    if current_user.is_authenticated:
        return current_user.id
    return 0


@auth.route("/logout")
def logout():
    logout_user()
    return redirect("/")
