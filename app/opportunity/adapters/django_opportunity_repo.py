from __future__ import annotations

from typing import Optional

from django.db import DatabaseError, transaction
from opportunity.domain.errors import StorageError
from opportunity.domain.opportunity import OpportunityDomain
from opportunity.models import Category, Opportunity
from opportunity.ports.opportunity_repo import OpportunityRepositoryPort


class DjangoOpportunityRepository(OpportunityRepositoryPort):
    def get_by_id(self, opportunity_id: int) -> Optional[OpportunityDomain]:
        obj = (
            Opportunity.objects.select_related("category")
            .filter(id=opportunity_id)
            .first()
        )
        return _to_domain(obj) if obj is not None else None

    def create(
        self,
        *,
        owner_id: int,
        title: str,
        description: str,
        image_url: str,
        category_id: int,
    ) -> OpportunityDomain:
        try:
            with transaction.atomic():
                obj = Opportunity.objects.create(
                    owner_id=owner_id,
                    title=title,
                    description=description,
                    image_url=image_url,
                    category_id=category_id,
                )
        except DatabaseError as e:
            raise StorageError(f"failed to create opportunity: {e}") from e
        return self.get_by_id(obj.id)  # category 이름까지 채워서 반환

    def save(self, opportunity: OpportunityDomain) -> OpportunityDomain:
        """
        변경 가능한 필드만 갱신합니다. (owner/created_at 은 건드리지 않음)
        """
        try:
            with transaction.atomic():
                obj = Opportunity.objects.select_for_update().get(id=opportunity.id)
                obj.title = opportunity.title
                obj.description = opportunity.description
                obj.image_url = opportunity.image_url
                obj.category_id = opportunity.category_id
                obj.published_at = opportunity.published_at
                obj.save(
                    update_fields=[
                        "title",
                        "description",
                        "image_url",
                        "category",
                        "published_at",
                        "updated_at",
                    ]
                )
        except Opportunity.DoesNotExist as e:
            raise StorageError(f"opportunity {opportunity.id} vanished") from e
        except DatabaseError as e:
            raise StorageError(
                f"failed to save opportunity {opportunity.id}: {e}"
            ) from e
        return self.get_by_id(opportunity.id)

    def delete_by_id(self, opportunity_id: int) -> bool:
        try:
            with transaction.atomic():
                deleted, _ = Opportunity.objects.filter(id=opportunity_id).delete()
        except DatabaseError as e:
            raise StorageError(
                f"failed to delete opportunity {opportunity_id}: {e}"
            ) from e
        return deleted > 0

    def list_published(self) -> list[OpportunityDomain]:
        queryset = (
            Opportunity.objects.select_related("category")
            .filter(published_at__isnull=False)
            .order_by("id")
        )
        return [_to_domain(obj) for obj in queryset]

    def list_by_owner(self, owner_id: int) -> list[OpportunityDomain]:
        queryset = (
            Opportunity.objects.select_related("category")
            .filter(owner_id=owner_id)
            .order_by("id")
        )
        return [_to_domain(obj) for obj in queryset]

    def category_exists(self, category_id: int) -> bool:
        return Category.objects.filter(id=category_id).exists()


def _to_domain(obj: Opportunity) -> OpportunityDomain:
    return OpportunityDomain(
        id=int(obj.id),
        owner_id=int(obj.owner_id),
        title=obj.title,
        description=obj.description,
        image_url=obj.image_url,
        category_id=int(obj.category_id),
        category_name=obj.category.name,
        published_at=obj.published_at,
        created_at=obj.created_at,
        updated_at=obj.updated_at,
    )
