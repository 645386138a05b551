from __future__ import annotations

import dataclasses
import logging

from common.application.result import NOT_FOUND, STORAGE_ERROR, Err, Ok, Result
from opportunity.domain.errors import StorageError
from opportunity.domain.opportunity import OpportunityDomain
from opportunity.ports.opportunity_repo import OpportunityRepositoryPort

logger = logging.getLogger(__name__)


class UnpublishOpportunityUseCase:
    """채용 기회 비공개 전환. 알림 부수효과 없음."""

    def __init__(self, *, opportunity_repo: OpportunityRepositoryPort):
        self._repo = opportunity_repo

    def execute(self, *, opportunity_id: int) -> Result[OpportunityDomain]:
        opportunity = self._repo.get_by_id(opportunity_id)
        if opportunity is None:
            return Err(
                code=NOT_FOUND, message=f"Opportunity {opportunity_id} not found"
            )

        if not opportunity.is_published:
            return Ok(opportunity)

        try:
            saved = self._repo.save(dataclasses.replace(opportunity, published_at=None))
        except StorageError:
            logger.error(
                f"Error encountered in unpublishing opportunity {opportunity_id}",
                exc_info=True,
            )
            return Err(
                code=STORAGE_ERROR,
                message="Problem encountered! Try unpublishing again.",
            )

        logger.info(f"Unpublished opportunity {opportunity_id}")
        return Ok(saved)
