import re

from models.constants import MIN_PASSWORD_LENGTH
from pydantic import BaseModel, ConfigDict, Field, field_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class CreateAdminRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    email: str
    password: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v):
        v = v.strip().lower()
        if not EMAIL_PATTERN.match(v):
            raise ValueError("email must be a valid email address")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v):
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(
                f"password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        return v


class DeleteAdminRequest(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    admin_id: str = Field(alias="adminId", min_length=1)
