"""Staff notification emails for new enquiries, sent through the Maileroo API."""
import requests
from flask import current_app

from enquiry_intake.models import Enquiry


def build_notification_payload(enquiry: Enquiry, config) -> dict:
    """Maileroo v2 send payload for a stored enquiry. Replies go straight to the submitter."""
    full_name = f"{enquiry.first_name} {enquiry.last_name}"
    page_url = (enquiry.meta or {}).get("pageUrl", "")
    plain = (
        "New contact form enquiry\n\n"
        f"Name: {full_name}\n"
        f"Email: {enquiry.email}\n\n"
        f"Message:\n{enquiry.message}\n\n"
        f"Submitted from: {page_url}\n"
        f"Enquiry ID: {enquiry.id}\n"
    )
    return {
        "from": {
            "address": config["ENQUIRY_FROM_ADDRESS"],
            "display_name": config["ENQUIRY_FROM_NAME"],
        },
        "to": [
            {
                "address": config["ENQUIRY_TO_ADDRESS"],
                "display_name": config["ENQUIRY_TO_NAME"],
            },
        ],
        "reply_to": {"address": enquiry.email, "display_name": full_name},
        "subject": f"New website enquiry: {full_name}",
        "plain": plain,
        "tags": {
            "source": config["ENQUIRY_TAG_SOURCE"],
            "type": "contact-enquiry",
        },
    }


def send_enquiry_notification(enquiry: Enquiry) -> bool:
    """Email the staff mailbox about an enquiry. Logs errors, does not raise."""
    api_key = (current_app.config.get("MAILEROO_SENDING_KEY") or "").strip()
    if not api_key:
        current_app.logger.warning(
            "Maileroo: MAILEROO_SENDING_KEY not set, skipping notification for enquiry %s", enquiry.id
        )
        return False
    try:
        payload = build_notification_payload(enquiry, current_app.config)
        r = requests.post(
            current_app.config["MAILEROO_API_URL"],
            json=payload,
            headers={"X-Api-Key": api_key, "Content-Type": "application/json"},
            timeout=current_app.config.get("MAILEROO_TIMEOUT", 10),
        )
        try:
            body = r.json()
        except ValueError:
            body = {}
        if not r.ok or (isinstance(body, dict) and body.get("success") is False):
            current_app.logger.warning(
                "Maileroo send failed for enquiry %s: HTTP %s – %s",
                enquiry.id,
                r.status_code,
                (r.text or "")[:400],
            )
            return False
    except Exception as e:
        current_app.logger.warning("Maileroo send error for enquiry %s: %s", enquiry.id, e)
        return False
    current_app.logger.info("Maileroo: notification sent for enquiry %s", enquiry.id)
    return True
