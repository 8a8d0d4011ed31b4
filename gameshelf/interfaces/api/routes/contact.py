"""Support contact form endpoint."""

from fastapi import APIRouter, status

from gameshelf.application.use_cases.contact import send_contact_message
from gameshelf.interfaces.api.routes_helpers import raise_http_error
from gameshelf.interfaces.api.schemas import ContactMessageCreate, SuccessResponse

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post("", response_model=SuccessResponse, status_code=status.HTTP_202_ACCEPTED)
def submit_contact_message(payload: ContactMessageCreate):
    """Forward the message to the support mailbox."""

    try:
        send_contact_message(
            name=payload.name,
            email=payload.email,
            subject=payload.subject,
            message=payload.message,
        )
    except ValueError as exc:
        raise_http_error(exc)
    return SuccessResponse()
