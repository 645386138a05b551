from __future__ import annotations

from typing import Optional, Protocol

from opportunity.domain.opportunity import OpportunityDomain


class OpportunityRepositoryPort(Protocol):
    def get_by_id(self, opportunity_id: int) -> Optional[OpportunityDomain]: ...

    def create(
        self,
        *,
        owner_id: int,
        title: str,
        description: str,
        image_url: str,
        category_id: int,
    ) -> OpportunityDomain: ...

    def save(self, opportunity: OpportunityDomain) -> OpportunityDomain: ...

    def delete_by_id(self, opportunity_id: int) -> bool: ...

    def list_published(self) -> list[OpportunityDomain]: ...

    def list_by_owner(self, owner_id: int) -> list[OpportunityDomain]: ...

    def category_exists(self, category_id: int) -> bool: ...
