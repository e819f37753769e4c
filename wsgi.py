"""WSGI entry point.

Production: ``gunicorn wsgi:app``. Local dev: ``flask --app wsgi run --debug``
(Flask loads ``.env`` itself when python-dotenv is installed).
"""
from enquiry_intake import create_app

app = create_app()
