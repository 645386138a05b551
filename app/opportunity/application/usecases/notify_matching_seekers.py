from __future__ import annotations

import logging
from typing import Iterable

from common.application.result import NOT_FOUND, Err, Ok, Result
from common.masking import mask_email, mask_secrets
from opportunity.domain.errors import NotificationError
from opportunity.domain.opportunity import OpportunityDomain, SeekerDomain
from opportunity.dtos import (
    DispatchFailureDTO,
    DispatchResultDTO,
    NotificationPayloadDTO,
)
from opportunity.ports.mail_queue import MailQueuePort
from opportunity.ports.opportunity_repo import OpportunityRepositoryPort
from opportunity.ports.seeker_directory import SeekerDirectoryPort

logger = logging.getLogger(__name__)


class NotifyMatchingSeekersUseCase:
    """
    신규 공개된 채용 기회를 관심 카테고리가 같은 사용자에게 알리는 유스케이스.

    - 전체 사용자를 순회하며 category_id 가 같은 사용자만 대상
    - 대상 1명당 알림 1건을 메일 큐에 적재 (전송 완료는 기다리지 않음)
    - 한 명의 적재 실패는 로그/결과에 기록하고 나머지 대상은 계속 처리
    """

    def __init__(
        self,
        *,
        opportunity_repo: OpportunityRepositoryPort,
        seeker_directory: SeekerDirectoryPort,
        mail_queue: MailQueuePort,
    ):
        self._repo = opportunity_repo
        self._seeker_directory = seeker_directory
        self._mail_queue = mail_queue

    def execute(self, *, opportunity_id: int) -> Result[DispatchResultDTO]:
        opportunity = self._repo.get_by_id(opportunity_id)
        if opportunity is None:
            return Err(
                code=NOT_FOUND, message=f"Opportunity {opportunity_id} not found"
            )

        if not opportunity.is_published:
            # 이벤트 발행 후 워커 실행 전에 비공개로 전환된 경우
            logger.info(
                f"Opportunity {opportunity_id} is no longer published; "
                "skipping notification"
            )
            return Ok(DispatchResultDTO(opportunity_id=opportunity_id))

        seekers = self._seeker_directory.list_all()
        return Ok(self.dispatch(opportunity=opportunity, seekers=seekers))

    def dispatch(
        self, *, opportunity: OpportunityDomain, seekers: Iterable[SeekerDomain]
    ) -> DispatchResultDTO:
        attempted = 0
        failed: list[DispatchFailureDTO] = []

        for seeker in seekers:
            if not seeker.is_interested_in(opportunity):
                continue

            attempted += 1
            payload = NotificationPayloadDTO(
                opportunity_id=opportunity.id,
                opportunity_title=opportunity.title,
                category_name=opportunity.category_name,
                seeker_id=seeker.id,
                seeker_email=seeker.email,
                seeker_name=seeker.name,
            )
            try:
                self._mail_queue.enqueue(payload)
            except NotificationError as e:
                reason = mask_secrets(str(e))
                logger.error(
                    "Error queueing opportunity mail opportunity_id=%s seeker_id=%s "
                    "to=%s reason=%s",
                    opportunity.id,
                    seeker.id,
                    mask_email(seeker.email),
                    reason,
                )
                failed.append(DispatchFailureDTO(seeker_id=seeker.id, error=reason))

        logger.info(
            f"Notification fan-out for opportunity {opportunity.id}: "
            f"attempted={attempted} failed={len(failed)}"
        )
        return DispatchResultDTO(
            opportunity_id=opportunity.id, attempted=attempted, failed=failed
        )
