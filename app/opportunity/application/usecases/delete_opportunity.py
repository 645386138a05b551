from __future__ import annotations

import logging

from common.application.result import STORAGE_ERROR, Err, Ok, Result
from opportunity.domain.errors import StorageError
from opportunity.ports.opportunity_repo import OpportunityRepositoryPort

logger = logging.getLogger(__name__)


class DeleteOpportunityUseCase:
    """
    채용 기회 삭제 유스케이스.

    존재하지 않는 ID 삭제는 에러가 아닙니다. Ok(False) 를 반환합니다.
    """

    def __init__(self, *, opportunity_repo: OpportunityRepositoryPort):
        self._repo = opportunity_repo

    def execute(self, *, opportunity_id: int) -> Result[bool]:
        try:
            deleted = self._repo.delete_by_id(opportunity_id)
        except StorageError:
            logger.error(
                f"Error encountered in deleting opportunity {opportunity_id}",
                exc_info=True,
            )
            return Err(
                code=STORAGE_ERROR,
                message="Problem encountered! Try deleting again.",
            )

        if deleted:
            logger.info(f"Deleted opportunity {opportunity_id}")
        return Ok(deleted)
