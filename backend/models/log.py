from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from models.ids import new_id


# Represents system audit logs tracking user actions and events
@dataclass(frozen=True)
class Log:
    action: str
    resource: str
    status: str = "SUCCESS"
    user_id: Optional[str] = None
    ip: Optional[str] = None

    # Flexible context data
    meta: Dict[str, Any] = field(default_factory=dict)

    id: str = field(default_factory=new_id)
    ts: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
