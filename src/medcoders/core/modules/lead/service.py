from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from medcoders.core.core import Service
from medcoders.core.modules.lead.models import ContactSubmission, Lead
from medcoders.core.modules.mail.templates import LEAD_AUTO_REPLY_TEMPLATE, LEAD_INTERNAL_TEMPLATE, render_email

logger = structlog.get_logger(__name__)


class LeadService(Service):
    """Contact form submissions."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("leads")

    async def on_start(self) -> None:
        await self._collection.create_index([("created_at", -1)])

    async def submit_contact(self, submission: ContactSubmission) -> Lead:
        """Store the lead, then send the internal notification and the auto-reply."""
        lead = Lead(**submission.model_dump(exclude={"phi_acknowledgment"}))
        await self._collection.insert_one(lead.to_mongo())
        logger.info("lead_created", lead_id=lead.id, organization=lead.organization)

        mail = self.core.services.mail
        mail.send_in_background(
            to=self.core.config.internal_notification_email,
            subject=f"New Contact Form: {lead.name} from {lead.organization}",
            html=render_email(
                LEAD_INTERNAL_TEMPLATE, lead=lead, submitted_at=lead.created_at.strftime("%Y-%m-%d %H:%M UTC")
            ),
        )
        mail.send_in_background(
            to=lead.email,
            subject="We've received your message - Elite Surgical Coders",
            html=render_email(LEAD_AUTO_REPLY_TEMPLATE, lead=lead),
        )
        return lead
