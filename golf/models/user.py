# =========================
# models/user.py
# =========================

from flask_login import UserMixin
from golf.extensions import db

# =========================
# User model (GitHub account)
# =========================
class User(UserMixin, db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)  # GitHub user id
    login = db.Column(db.String(64), nullable=False)
