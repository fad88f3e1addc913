"""
In-Memory Profile Repository Implementation
"""
from .base import MemoryBaseRepository
from ...repositories.profile_repository import ProfileRepository, ProfileEntity


class MemoryProfileRepository(MemoryBaseRepository[ProfileEntity], ProfileRepository):
    """In-memory user profile repository implementation"""

    id_prefix = "usr"

    async def create_if_absent(self, profile: ProfileEntity) -> ProfileEntity:
        async with self._lock:
            key = self._normalize_id(profile.id)
            existing = self._storage.get(key)
            if existing is not None:
                return existing
            self._storage[key] = profile
            return profile
