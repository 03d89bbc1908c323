"""Bank source schemas."""

from pydantic import BaseModel


class BankSourceResponse(BaseModel):
    """A bank the user can import from."""

    id: str
    name: str
    logo: str
