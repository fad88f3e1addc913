"""
Caller identity as supplied by the identity provider
"""
from typing import Optional
from pydantic import BaseModel


class CurrentUser(BaseModel):
    """Authenticated caller; role decisions happen upstream"""
    id: str
    email: Optional[str] = None
    display_name: Optional[str] = None
    role: str = "client"
