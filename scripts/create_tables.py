"""Create database tables. Run from project root: python3 scripts/create_tables.py"""
import sys
from pathlib import Path

from dotenv import load_dotenv

_root = Path(__file__).resolve().parent.parent
if str(_root) not in sys.path:
    sys.path.insert(0, str(_root))

# DATABASE_URL must be in the environment before the config module is imported
load_dotenv(_root / ".env")

from enquiry_intake import create_app
from enquiry_intake.models import db

app = create_app()
with app.app_context():
    db.create_all()
    print("Tables created:", app.config["SQLALCHEMY_DATABASE_URI"].split("@")[-1])
