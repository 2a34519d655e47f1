"""Contact form blueprint."""

from __future__ import annotations
from http import HTTPStatus

from flask import Blueprint, jsonify

from models import db
from models.contact import ContactSubmission
from utils.request_validation import validated
from validators import ContactSchema

contact_bp = Blueprint("contact", __name__)


@contact_bp.route("/contact", methods=["POST"])
@validated(ContactSchema)
def submit_contact(payload: ContactSchema) -> tuple:
    """Store a contact form submission."""
    submission = ContactSubmission(
        email=payload.email,
        subject=payload.subject,
        message=payload.message,
    )
    db.session.add(submission)
    db.session.commit()

    return (
        jsonify({"message": "Message sent successfully", "formData": submission.to_dict()}),
        HTTPStatus.CREATED,
    )
