from dataclasses import dataclass, field
from datetime import datetime, timezone

from models.ids import new_id


# Represents the company created together with its admin at signup
@dataclass(frozen=True)
class Company:
    name: str
    country: str
    currency: str
    id: str = field(default_factory=new_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
