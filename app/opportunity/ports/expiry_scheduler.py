from __future__ import annotations

from datetime import datetime
from typing import Protocol


class ExpirySchedulerPort(Protocol):
    def schedule_expiry(
        self, *, opportunity_id: int, published_at: datetime
    ) -> None: ...
