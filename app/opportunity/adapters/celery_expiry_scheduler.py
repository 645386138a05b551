from __future__ import annotations

import logging
from datetime import datetime, timedelta

from celery import current_app
from django.db import transaction
from opportunity.ports.expiry_scheduler import ExpirySchedulerPort

logger = logging.getLogger(__name__)


class CeleryExpiryScheduler(ExpirySchedulerPort):
    """
    만료 삭제 태스크(외부 구현)에 삭제 예정 시각을 알립니다.

    - 태스크 본체는 이 저장소에 없으므로 이름으로 send_task 합니다.
    - 트랜잭션 커밋 이후에 전송하므로 롤백된 공개 처리는 예약되지 않고,
      브로커 지연이 행 잠금(select_for_update)을 붙잡지 않습니다.
    """

    def __init__(self, *, task_name: str, expiry_days: int):
        self._task_name = task_name
        self._expiry_days = expiry_days

    def schedule_expiry(self, *, opportunity_id: int, published_at: datetime) -> None:
        transaction.on_commit(
            lambda: self._send(opportunity_id, published_at), robust=True
        )

    def _send(self, opportunity_id: int, published_at: datetime) -> None:
        expires_at = published_at + timedelta(days=max(1, int(self._expiry_days)))
        try:
            current_app.send_task(
                self._task_name,
                kwargs={
                    "opportunity_id": opportunity_id,
                    "published_at": published_at.isoformat(),
                },
                eta=expires_at,
            )
        except Exception:
            # 커밋 이후이므로 공개 결과는 되돌리지 않음
            logger.warning(
                f"Failed to schedule expiry for opportunity {opportunity_id}",
                exc_info=True,
            )
