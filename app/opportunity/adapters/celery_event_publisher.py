from __future__ import annotations

from django.db import transaction
from opportunity.domain.events import OpportunityPublished
from opportunity.ports.event_publisher import OpportunityEventPublisherPort


class CeleryOpportunityEventPublisher(OpportunityEventPublisherPort):
    """
    OpportunityPublished 이벤트를 트랜잭션 커밋 이후 Celery 태스크로 넘깁니다.

    - 공개 응답은 알림 fan-out을 기다리지 않음
    - 롤백된 공개 처리에 대해서는 알림이 나가지 않음
    """

    def opportunity_published(self, event: OpportunityPublished) -> None:
        from opportunity.tasks import notify_matching_seekers

        transaction.on_commit(
            lambda: notify_matching_seekers.delay(event.opportunity_id),
            robust=True,
        )
