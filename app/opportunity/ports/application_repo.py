from __future__ import annotations

from typing import Optional, Protocol

from opportunity.domain.opportunity import ApplicationDomain


class ApplicationRepositoryPort(Protocol):
    def create(
        self,
        *,
        opportunity_id: int,
        applicant_id: Optional[int],
        resume_url: str,
        fields: dict,
    ) -> ApplicationDomain: ...
