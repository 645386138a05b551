from __future__ import annotations

import dataclasses
import logging
from datetime import datetime
from typing import Callable

from common.application.result import NOT_FOUND, STORAGE_ERROR, Err, Ok, Result
from django.utils import timezone
from opportunity.domain.errors import StorageError
from opportunity.domain.events import OpportunityPublished
from opportunity.domain.opportunity import OpportunityDomain
from opportunity.ports.event_publisher import OpportunityEventPublisherPort
from opportunity.ports.expiry_scheduler import ExpirySchedulerPort
from opportunity.ports.opportunity_repo import OpportunityRepositoryPort

logger = logging.getLogger(__name__)


class PublishOpportunityUseCase:
    """
    채용 기회 공개 유스케이스.

    1. published_at = now 로 저장
    2. 만료 삭제 태스크에 삭제 예정 알림
    3. OpportunityPublished 이벤트 발행 (알림 fan-out은 구독 측에서 비동기 수행)

    이미 공개된 기회를 다시 공개해도 성공합니다. renotify_on_republish=False 이면
    재공개 시 이벤트를 발행하지 않습니다.
    """

    def __init__(
        self,
        *,
        opportunity_repo: OpportunityRepositoryPort,
        expiry_scheduler: ExpirySchedulerPort,
        event_publisher: OpportunityEventPublisherPort,
        renotify_on_republish: bool = True,
        clock: Callable[[], datetime] = timezone.now,
    ):
        self._repo = opportunity_repo
        self._expiry_scheduler = expiry_scheduler
        self._event_publisher = event_publisher
        self._renotify_on_republish = renotify_on_republish
        self._clock = clock

    def execute(self, *, opportunity_id: int) -> Result[OpportunityDomain]:
        opportunity = self._repo.get_by_id(opportunity_id)
        if opportunity is None:
            return Err(
                code=NOT_FOUND, message=f"Opportunity {opportunity_id} not found"
            )

        republished = opportunity.is_published
        published_at = self._clock()

        try:
            saved = self._repo.save(
                dataclasses.replace(opportunity, published_at=published_at)
            )
        except StorageError:
            logger.error(
                f"Error encountered in publishing opportunity {opportunity_id}",
                exc_info=True,
            )
            return Err(
                code=STORAGE_ERROR,
                message="Problem encountered! Try publishing again.",
            )

        # 이후 단계 실패는 공개 결과에 영향을 주지 않음 (이미 저장됨)
        try:
            self._expiry_scheduler.schedule_expiry(
                opportunity_id=opportunity_id, published_at=published_at
            )
        except Exception:
            logger.warning(
                f"Failed to schedule expiry for opportunity {opportunity_id}",
                exc_info=True,
            )

        if republished and not self._renotify_on_republish:
            logger.info(
                f"Opportunity {opportunity_id} was already published; "
                "skipping notification"
            )
            return Ok(saved)

        try:
            self._event_publisher.opportunity_published(
                OpportunityPublished(
                    opportunity_id=opportunity_id,
                    category_id=saved.category_id,
                    published_at=published_at,
                    republished=republished,
                )
            )
        except Exception:
            logger.error(
                f"Failed to emit OpportunityPublished for opportunity {opportunity_id}",
                exc_info=True,
            )

        logger.info(f"Published opportunity {opportunity_id}")
        return Ok(saved)
