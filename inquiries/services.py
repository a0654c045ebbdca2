"""
Inquiry service - visitor submissions and admin responses.
"""
from django.db import transaction
from django.utils import timezone
from core.constants import InquirerType, InquiryStatus
from core.exceptions import NotFoundError
from core.repositories import BaseRepository
from core.services import BaseService
from .models import Inquiry


class InquiryService(BaseService):
    """Service for inquiry workflows"""

    def __init__(self):
        super().__init__()
        self.inquiry_repo = BaseRepository(Inquiry)

    @staticmethod
    def default_subject(prop, room=None) -> str:
        """Subject used when a visitor leaves it blank"""
        if room is not None:
            return f"{prop.name} room {room.room_number}"
        return prop.name

    def submit_visitor_inquiry(self, prop, data: dict) -> Inquiry:
        """
        Record an inquiry from the public listing.
        Visitor inquiries always start as NEW.
        """
        room = data.get('room')
        subject = (data.get('subject') or '').strip() or self.default_subject(prop, room)
        inquiry = self.inquiry_repo.create(
            property=prop,
            room=room,
            inquirer_type=InquirerType.VISITOR,
            name=data['name'],
            email=data['email'],
            phone=data.get('phone') or None,
            subject=subject,
            message=data['message'],
            status=InquiryStatus.NEW,
        )
        self.log_info("Visitor inquiry received", inquiry_id=inquiry.id, property_id=prop.id,
                      room_id=getattr(room, 'id', None))
        return inquiry

    def respond(self, actor, inquiry_id: int, status: str, response=None) -> Inquiry:
        """
        Set an inquiry's status and response text.
        responded_at is stamped when a response is given and cleared otherwise.
        """
        with transaction.atomic():
            inquiry = self.inquiry_repo.get_for_update(inquiry_id)
            if inquiry is None:
                raise NotFoundError(resource_type="Inquiry", resource_id=inquiry_id)
            response = response or None
            self.inquiry_repo.update(
                inquiry,
                status=status,
                response=response,
                responded_at=timezone.now() if response else None,
            )

        self.log_info(f"Inquiry updated: {status}", inquiry_id=inquiry_id,
                      actor_id=getattr(actor, 'id', None), responded=bool(response))
        return inquiry
