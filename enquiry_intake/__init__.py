"""Enquiry intake Flask application factory."""
from flask import Flask, jsonify, request

from enquiry_intake.cors import apply_cors_headers
from enquiry_intake.models import db
from enquiry_intake.routes.main import main_bp


def create_app(config_object="enquiry_intake.config.Config") -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_object)

    db.init_app(app)
    with app.app_context():
        from enquiry_intake.models import Enquiry  # noqa: F401
        db.create_all()

    app.register_blueprint(main_bp)

    @app.errorhandler(404)
    def page_not_found(e):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify({"error": "Method not allowed"}), 405

    @app.after_request
    def cors_headers(response):
        """CORS headers on every response, error responses included."""
        return apply_cors_headers(
            response,
            request.headers.get("Origin", ""),
            app.config.get("CORS_ALLOWED_ORIGINS") or (),
        )

    return app
