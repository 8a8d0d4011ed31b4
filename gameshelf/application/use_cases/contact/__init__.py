"""Use cases for the support contact form."""

from .send_contact_message import send_contact_message

__all__ = ["send_contact_message"]
