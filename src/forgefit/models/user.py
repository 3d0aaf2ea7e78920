"""User profile and progression stats models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class AuthMethod(str, Enum):
    """How the profile was created. Stored as a label only."""

    GUEST = "guest"
    PHONE = "phone"


@dataclass
class UserProfile:
    """The local user's profile."""

    id: str
    name: str
    auth_method: AuthMethod
    created_at: datetime
    photo_uri: str | None = None
    phone_number: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        data = {
            "id": self.id,
            "name": self.name,
            "photoUri": self.photo_uri,
            "authMethod": self.auth_method.value,
            "createdAt": self.created_at.isoformat(),
        }
        if self.phone_number is not None:
            data["phoneNumber"] = self.phone_number
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "UserProfile":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data["name"],
            auth_method=AuthMethod(data.get("authMethod", "guest")),
            created_at=datetime.fromisoformat(data["createdAt"]),
            photo_uri=data.get("photoUri"),
            phone_number=data.get("phoneNumber"),
        )


@dataclass
class UserStats:
    """Cumulative training counters plus the level derived from them.

    Only the three counters are authoritative. ``level``, ``current_xp`` and
    ``xp_to_next_level`` are a display cache and get recomputed whenever the
    stats are loaded or updated.
    """

    total_exercises: int = 0
    total_sets: int = 0
    total_reps: int = 0
    level: int = 0
    current_xp: int = 0
    xp_to_next_level: int = 500

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "totalExercises": self.total_exercises,
            "totalSets": self.total_sets,
            "totalReps": self.total_reps,
            "level": self.level,
            "currentXp": self.current_xp,
            "xpToNextLevel": self.xp_to_next_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "UserStats":
        """Create from dictionary (derived fields are taken as stored)."""
        return cls(
            total_exercises=int(data.get("totalExercises", 0)),
            total_sets=int(data.get("totalSets", 0)),
            total_reps=int(data.get("totalReps", 0)),
            level=int(data.get("level", 0)),
            current_xp=int(data.get("currentXp", 0)),
            xp_to_next_level=int(data.get("xpToNextLevel", 500)),
        )
