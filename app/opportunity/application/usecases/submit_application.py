from __future__ import annotations

import logging

from common.application.result import NOT_FOUND, STORAGE_ERROR, Err, Ok, Result
from opportunity.domain.errors import StorageError
from opportunity.domain.opportunity import ApplicationDomain
from opportunity.ports.application_repo import ApplicationRepositoryPort
from opportunity.ports.opportunity_repo import OpportunityRepositoryPort

logger = logging.getLogger(__name__)


class SubmitApplicationUseCase:
    """
    채용 기회 지원 유스케이스.

    공개 중인 채용 기회에만 지원할 수 있습니다. (비공개/초안은 NOT_FOUND)
    """

    def __init__(
        self,
        *,
        opportunity_repo: OpportunityRepositoryPort,
        application_repo: ApplicationRepositoryPort,
    ):
        self._opportunity_repo = opportunity_repo
        self._application_repo = application_repo

    def execute(
        self,
        *,
        opportunity_id: int,
        applicant_id: int | None,
        fields: dict,
        resume_ref: str = "",
    ) -> Result[ApplicationDomain]:
        opportunity = self._opportunity_repo.get_by_id(opportunity_id)
        if opportunity is None or not opportunity.is_published:
            return Err(
                code=NOT_FOUND, message=f"Opportunity {opportunity_id} not found"
            )

        try:
            application = self._application_repo.create(
                opportunity_id=opportunity_id,
                applicant_id=applicant_id,
                resume_url=resume_ref or "",
                fields=fields,
            )
        except StorageError:
            logger.error(
                f"Error encountered in submitting application to {opportunity_id}",
                exc_info=True,
            )
            return Err(
                code=STORAGE_ERROR,
                message="Problem encountered! Try applying again.",
            )

        logger.info(
            f"Application {application.id} submitted to opportunity {opportunity_id}"
        )
        return Ok(application)
