"""Request schemas for registration and login."""

from pydantic import BaseModel, ConfigDict

from .fields import Email, Password, Phone, Username


class RegisterSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    username: Username
    email: Email
    phone: Phone
    password: Password


class LoginSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    email: Email
    password: Password
