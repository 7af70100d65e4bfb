"""Liquid templates for transactional emails.

Templates are rendered with autoescaping on, so every value coming from a form
submission is HTML-escaped. Multi-line text goes through `newline_to_br`.
"""

from typing import Any

from liquid import Environment
from pydantic import BaseModel

COMPANY_SIGNATURE = "<p>Best regards,<br>Elite Surgical Coders Team</p>"

LEAD_INTERNAL_TEMPLATE = """
<h2>New Contact Form Submission</h2>
<p><strong>Name:</strong> {{ lead.name }}</p>
<p><strong>Email:</strong> {{ lead.email }}</p>
<p><strong>Organization:</strong> {{ lead.organization }}</p>
<p><strong>Role:</strong> {{ lead.role }}</p>
<p><strong>Services Needed:</strong></p>
<ul>
{% for service in lead.services_needed %}  <li>{{ service }}</li>
{% endfor %}</ul>
<p><strong>Message:</strong></p>
<p>{{ lead.message | newline_to_br }}</p>
<p><strong>Submitted:</strong> {{ submitted_at }}</p>
"""

LEAD_AUTO_REPLY_TEMPLATE = (
    """
<p>Dear {{ lead.name }},</p>
<p>Thank you for reaching out to Elite Surgical Coders and Medical Billing LLC. \
We've received your message and will get back to you within 1 business day.</p>
<p><strong>Important:</strong> Please do not share patient-identifying information (PHI) by email. \
Once we connect, we'll provide secure methods for exchanging PHI as needed.</p>
"""
    + COMPANY_SIGNATURE
)

APPLICATION_INTERNAL_TEMPLATE = """
<h2>New Job Application Received</h2>
<p><strong>Position:</strong> {{ application.position_title }}</p>
<p><strong>Applicant:</strong> {{ application.first_name }} {{ application.last_name }}</p>
<p><strong>Email:</strong> {{ application.email }}</p>
<p><strong>Phone:</strong> {{ application.phone }}</p>
{% if application.experience %}<p><strong>Experience:</strong> {{ application.experience }}</p>
{% endif %}{% if application.certifications %}<p><strong>Certifications:</strong> {{ application.certifications }}</p>
{% endif %}{% if application.cover_letter %}<p><strong>Cover Letter:</strong><br>{{ application.cover_letter | newline_to_br }}</p>
{% endif %}<p><strong>Resume:</strong> <a href="{{ resume_url }}">View Resume</a></p>
<p><strong>Submitted:</strong> {{ submitted_at }}</p>
<hr>
<p><a href="{{ admin_url }}">Review Application in Admin Portal</a></p>
"""

APPLICATION_CONFIRMATION_TEMPLATE = (
    """
<p>Dear {{ application.first_name }} {{ application.last_name }},</p>
<p>Thank you for your interest in the <strong>{{ application.position_title }}</strong> position at Elite Surgical Coders.</p>
<p>We have successfully received your application and resume. \
Our team will review your application and get back to you soon.</p>
<p>If you have any questions, please don't hesitate to contact us.</p>
"""
    + COMPANY_SIGNATURE
)

APPLICATION_STATUS_TEMPLATE = (
    """
<p>Dear {{ application.first_name }} {{ application.last_name }},</p>
{% if application.status == "accepted" %}<p>Congratulations! We are pleased to inform you that your application \
for the {{ application.position_title }} position has been accepted. \
Our team will contact you shortly to discuss next steps.</p>
{% elsif application.status == "rejected" %}<p>Thank you for your interest in the {{ application.position_title }} \
position at Elite Surgical Coders. After careful consideration, we have decided to move forward with other candidates \
at this time. We appreciate your time and interest in our organization.</p>
{% else %}<p>Your application for the {{ application.position_title }} position is currently under review. \
We will update you as soon as we have more information.</p>
{% endif %}{% if application.notes %}<p><strong>Additional Notes:</strong><br>{{ application.notes | newline_to_br }}</p>
{% endif %}"""
    + COMPANY_SIGNATURE
)

_env = Environment(autoescape=True)


def render_email(template: str, **context: Any) -> str:
    """Render an email body. Context values may be pydantic models, they are dumped to JSON-compatible dicts."""
    prepared = {key: value.model_dump(mode="json") if isinstance(value, BaseModel) else value for key, value in context.items()}
    return str(_env.from_string(template).render(**prepared))
