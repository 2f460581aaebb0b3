# =========================
# models/solution.py
# =========================

from datetime import datetime
from golf.extensions import db

# =========================
# Solution model
# one row per (user, hole, lang), written by the judge
# =========================
class Solution(db.Model):
    __tablename__ = "solutions"

    user_id = db.Column(db.Integer, primary_key=True)
    hole = db.Column(db.String(64), primary_key=True)
    lang = db.Column(db.String(32), primary_key=True)
    code = db.Column(db.Text, nullable=False)
    success = db.Column(db.Boolean, nullable=False, default=False)
    submitted = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
