from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class OpportunityPublished:
    """공개 처리 직후 발행되는 이벤트. 알림 발송(fan-out)은 이 이벤트를 구독하는 쪽에서 수행합니다."""

    opportunity_id: int
    category_id: int
    published_at: datetime
    republished: bool = False
