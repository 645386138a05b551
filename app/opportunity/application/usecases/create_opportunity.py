from __future__ import annotations

import logging

from common.application.result import (
    STORAGE_ERROR,
    VALIDATION_ERROR,
    Err,
    Ok,
    Result,
)
from opportunity.application.validation import validate_opportunity_fields
from opportunity.domain.errors import StorageError
from opportunity.domain.opportunity import OpportunityDomain
from opportunity.ports.opportunity_repo import OpportunityRepositoryPort

logger = logging.getLogger(__name__)


class CreateOpportunityUseCase:
    """
    채용 기회 생성 유스케이스.

    - 생성 직후에는 항상 초안(published_at=None) 상태
    - 검증 실패 시 어떤 레코드도 저장하지 않음
    """

    def __init__(self, *, opportunity_repo: OpportunityRepositoryPort):
        self._repo = opportunity_repo

    def execute(
        self,
        *,
        owner_id: int,
        title: str | None,
        description: str | None,
        image_ref: str | None,
        category_id: int | None,
    ) -> Result[OpportunityDomain]:
        fields = {
            "title": title,
            "description": description,
            "image_url": image_ref,
            "category_id": category_id,
        }
        errors = validate_opportunity_fields(fields)
        if "category_id" not in errors and not self._repo.category_exists(category_id):
            errors["category_id"] = ["Category does not exist."]
        if errors:
            return Err(
                code=VALIDATION_ERROR,
                message="Invalid opportunity data",
                details=errors,
            )

        try:
            opportunity = self._repo.create(
                owner_id=owner_id,
                title=title.strip(),
                description=description.strip(),
                image_url=image_ref,
                category_id=category_id,
            )
        except StorageError:
            logger.error(
                "Error encountered in creating opportunity owner_id=%s",
                owner_id,
                exc_info=True,
            )
            return Err(
                code=STORAGE_ERROR,
                message="Problem encountered! Try creating again.",
            )

        logger.info(f"Created opportunity {opportunity.id} (owner={owner_id})")
        return Ok(opportunity)
