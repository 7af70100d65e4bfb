"""Tests for contact form validation."""

import pytest
from pydantic import ValidationError

from medcoders.core.modules.lead.models import ContactSubmission

VALID_FORM = {
    "name": "Jane Doe",
    "email": "jane@clinic.example.com",
    "organization": "Clinic",
    "role": "Practice Manager",
    "services_needed": ["Surgical Coding"],
    "message": "We need help with modifiers.",
    "phi_acknowledgment": True,
}


class TestContactSubmission:
    """Tests for ContactSubmission model."""

    def test_valid(self):
        assert ContactSubmission(**VALID_FORM).services_needed == ["Surgical Coding"]

    def test_phi_acknowledgment_required(self):
        """Test that the sender must confirm the message holds no PHI."""
        with pytest.raises(ValidationError, match="PHI acknowledgment is required"):
            ContactSubmission(**{**VALID_FORM, "phi_acknowledgment": False})

    def test_at_least_one_service(self):
        with pytest.raises(ValidationError):
            ContactSubmission(**{**VALID_FORM, "services_needed": []})

    @pytest.mark.parametrize("field", ["name", "organization", "role", "message"])
    def test_required_fields(self, field):
        with pytest.raises(ValidationError):
            ContactSubmission(**{**VALID_FORM, field: ""})

    def test_invalid_email(self):
        with pytest.raises(ValidationError):
            ContactSubmission(**{**VALID_FORM, "email": "jane"})
