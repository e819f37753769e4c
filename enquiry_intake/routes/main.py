"""Public contact form endpoint."""
from flask import Blueprint, current_app, jsonify, request

from enquiry_intake.models import Enquiry, db
from enquiry_intake.notifications import send_enquiry_notification
from enquiry_intake.validation import EnquiryValidationError, client_ip, is_spam, validate_submission

main_bp = Blueprint("main", __name__)


def _save_enquiry(fields: dict[str, str], origin: str, ip: str) -> Enquiry:
    """Persist the enquiry and commit. Raises on failure; the caller answers 500."""
    enquiry = Enquiry(
        first_name=fields["firstName"],
        last_name=fields["lastName"],
        email=fields["email"],
        message=fields["message"],
        status="new",
        meta={
            "origin": origin,
            "ip": ip,
            "pageUrl": fields["pageUrl"],
            "userAgent": fields["userAgent"],
            "tz": fields["tz"],
        },
    )
    db.session.add(enquiry)
    db.session.commit()
    return enquiry


@main_bp.route("/submit-contact-enquiry", methods=["POST", "OPTIONS"])
def submit_contact_enquiry():
    """Validate and store a contact enquiry, then email staff (best effort)."""
    if request.method == "OPTIONS":
        return "", 204

    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}

        # Same answer as a real submission so bots can't tell they were caught
        if is_spam(data):
            current_app.logger.info("Honeypot triggered, discarding submission")
            return jsonify({"ok": True})

        try:
            fields = validate_submission(data)
        except EnquiryValidationError as e:
            return jsonify({"error": e.message}), 400

        origin = request.headers.get("Origin", "")
        ip = client_ip(request.headers.get("X-Forwarded-For"), request.remote_addr)

        enquiry = _save_enquiry(fields, origin, ip)
        current_app.logger.info("Enquiry %s stored", enquiry.id)

        send_enquiry_notification(enquiry)
        return jsonify({"ok": True})
    except Exception:
        current_app.logger.exception("Failed to handle contact enquiry")
        db.session.rollback()
        return jsonify({"error": "Internal error."}), 500
