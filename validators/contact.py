"""Request schema for the contact form."""

from pydantic import BaseModel, ConfigDict

from .fields import Email, ShortText


class ContactSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    email: Email
    subject: ShortText
    message: ShortText
