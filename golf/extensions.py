# ========================
# extensions.py
# ========================

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# ========================
# Flask extensions
# ========================
db = SQLAlchemy()
login_manager = LoginManager()
