"""Account Schemas — registration/login payloads and the account response.

Invariants:
    - Credentials accept missing fields; blank/short checks raise RegistrationError later
    - AccountResponse echoes the stored password (plain-text storage is a known limitation)
"""

from socialmedia.schemas import CamelModel


class AccountCredentials(CamelModel):
    """Body of POST /register and POST /login."""
    username: str | None = None
    password: str | None = None


class AccountResponse(CamelModel):
    account_id: int
    username: str
    password: str
