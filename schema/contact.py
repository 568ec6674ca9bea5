from datetime import datetime, timezone
from typing import Optional
from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, field_validator
from util.enum import SubmissionStatus

NAME_MAX_LENGTH = 255
EMAIL_MAX_LENGTH = 254
PHONE_MAX_LENGTH = 50
MESSAGE_MAX_LENGTH = 5000


class ContactFormIn(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None
    message: str

    @field_validator("name", "email", "phone", "message", mode="before")
    @classmethod
    def strip_text(cls, value):
        if isinstance(value, str):
            value = value.strip()
        return value

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if len(value) < 3:
            raise ValueError("Nome deve ter pelo menos 3 caracteres")
        if len(value) > NAME_MAX_LENGTH:
            raise ValueError(f"Nome deve ter no máximo {NAME_MAX_LENGTH} caracteres")
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        # Stored as typed; the normalized form is only used for checking
        if len(value) > EMAIL_MAX_LENGTH:
            raise ValueError("Email inválido")
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise ValueError("Email inválido")
        return value

    @field_validator("phone")
    @classmethod
    def check_phone(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        if len(value) > PHONE_MAX_LENGTH:
            raise ValueError(f"Telefone deve ter no máximo {PHONE_MAX_LENGTH} caracteres")
        return value

    @field_validator("message")
    @classmethod
    def check_message(cls, value: str) -> str:
        if len(value) < 10:
            raise ValueError("Mensagem deve ter pelo menos 10 caracteres")
        if len(value) > MESSAGE_MAX_LENGTH:
            raise ValueError(
                f"Mensagem deve ter no máximo {MESSAGE_MAX_LENGTH} caracteres"
            )
        return value


class StatusUpdateIn(BaseModel):
    status: SubmissionStatus


class SuccessOut(BaseModel):
    success: bool = True
    message: str


class ContactSubmissionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    phone: Optional[str] = None
    message: str
    status: SubmissionStatus
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands back naive datetimes
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class StatusCountOut(BaseModel):
    total: int
    new: int
    read: int
    replied: int


class StatusOptionOut(BaseModel):
    value: SubmissionStatus
    label: str
    color: str
