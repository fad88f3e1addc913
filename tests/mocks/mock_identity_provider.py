"""
Mock Identity Provider

Mints bearer tokens the API accepts. For local testing only.
"""
from typing import Any, Dict, Optional
from datetime import datetime, timedelta, timezone
from jose import jwt


class MockIdentityProvider:
    """Issues JWTs signed with the test secret"""

    # Test secret key (only for testing)
    JWT_SECRET = "test-secret-key-minimum-32-characters-for-testing"
    JWT_ALGORITHM = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES = 30

    def create_token(
        self,
        user_id: Optional[str] = "user_001",
        email: Optional[str] = "client@example.com",
        name: Optional[str] = "Test Client",
        role: str = "client",
        expires_delta: Optional[timedelta] = None,
        secret: Optional[str] = None
    ) -> str:
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "role": role,
            "iat": now,
            "exp": now + (expires_delta or timedelta(minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES)),
        }
        if user_id is not None:
            payload["sub"] = user_id
        if email is not None:
            payload["email"] = email
        if name is not None:
            payload["name"] = name

        return jwt.encode(payload, secret or self.JWT_SECRET, algorithm=self.JWT_ALGORITHM)

    def auth_headers(self, **kwargs) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.create_token(**kwargs)}"}
