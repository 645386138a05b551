from __future__ import annotations

from typing import Optional

from django.db import DatabaseError, transaction
from opportunity.domain.errors import StorageError
from opportunity.domain.opportunity import ApplicationDomain
from opportunity.models import Application
from opportunity.ports.application_repo import ApplicationRepositoryPort

APPLICATION_FIELDS = (
    "full_name",
    "email",
    "phone",
    "current_company",
    "bio",
    "linkedin_url",
    "twitter_url",
    "github_url",
    "portfolio_url",
    "other_website",
)


class DjangoApplicationRepository(ApplicationRepositoryPort):
    def create(
        self,
        *,
        opportunity_id: int,
        applicant_id: Optional[int],
        resume_url: str,
        fields: dict,
    ) -> ApplicationDomain:
        values = {key: fields[key] for key in APPLICATION_FIELDS if key in fields}
        try:
            with transaction.atomic():
                obj = Application.objects.create(
                    opportunity_id=opportunity_id,
                    applicant_id=applicant_id,
                    resume_url=resume_url,
                    **values,
                )
        except DatabaseError as e:
            raise StorageError(f"failed to create application: {e}") from e

        return ApplicationDomain(
            id=int(obj.id),
            opportunity_id=int(obj.opportunity_id),
            applicant_id=obj.applicant_id,
            full_name=obj.full_name,
            email=obj.email,
            resume_url=obj.resume_url,
            created_at=obj.created_at,
        )
