"""
User Models
Database model definitions for user entities
"""

from typing import Dict, Any
from dataclasses import dataclass, field

DEFAULT_ROLE = "user"
ADMIN_ROLE = "admin"


@dataclass
class User:
    """User database model"""
    id: int
    name: str
    email: str
    password: str = field(repr=False)
    role: str = DEFAULT_ROLE

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "User":
        return cls(
            id=record['id'],
            name=record['name'],
            email=record['email'],
            password=record['password'],
            role=record.get('role') or DEFAULT_ROLE,
        )

    def token_claims(self) -> Dict[str, Any]:
        """Claims embedded in the bearer token"""
        return {'id': self.id, 'role': self.role}
