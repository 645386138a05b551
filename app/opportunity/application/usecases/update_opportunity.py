from __future__ import annotations

import dataclasses
import logging

from common.application.result import (
    NOT_FOUND,
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


class UpdateOpportunityUseCase:
    """
    채용 기회 수정 유스케이스.

    공개 상태(published_at)는 여기서 바꾸지 않습니다. publish/unpublish 유스케이스 전용.
    """

    def __init__(self, *, opportunity_repo: OpportunityRepositoryPort):
        self._repo = opportunity_repo

    def execute(
        self, *, opportunity_id: int, changes: dict, partial: bool = True
    ) -> Result[OpportunityDomain]:
        errors = validate_opportunity_fields(changes, partial=partial)
        category_id = changes.get("category_id")
        if (
            category_id is not None
            and "category_id" not in errors
            and not self._repo.category_exists(category_id)
        ):
            errors["category_id"] = ["Category does not exist."]
        if errors:
            return Err(
                code=VALIDATION_ERROR,
                message="Invalid opportunity data",
                details=errors,
            )

        opportunity = self._repo.get_by_id(opportunity_id)
        if opportunity is None:
            return Err(
                code=NOT_FOUND, message=f"Opportunity {opportunity_id} not found"
            )

        values = {key: value for key, value in changes.items() if value is not None}
        for key in ("title", "description"):
            if key in values:
                values[key] = values[key].strip()
        updated = dataclasses.replace(opportunity, **values)

        try:
            saved = self._repo.save(updated)
        except StorageError:
            logger.error(
                f"Error encountered in updating opportunity {opportunity_id}",
                exc_info=True,
            )
            return Err(
                code=STORAGE_ERROR,
                message="Problem encountered! Try updating again.",
            )

        logger.info(
            f"Updated opportunity {opportunity_id} fields={sorted(values.keys())}"
        )
        return Ok(saved)
