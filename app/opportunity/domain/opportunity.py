from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class OpportunityDomain:
    """
    채용 기회(Opportunity) 도메인 객체.

    published_at 이 None 이면 초안/비공개, 값이 있으면 공개 상태입니다.
    """

    id: int
    owner_id: int
    title: str
    description: str
    image_url: str
    category_id: int
    category_name: str
    published_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_published(self) -> bool:
        return self.published_at is not None


@dataclass(frozen=True, slots=True)
class SeekerDomain:
    """알림 대상이 되는 사용자. category_id 는 관심 카테고리(없으면 None)."""

    id: int
    email: str
    name: str
    category_id: int | None = None

    def is_interested_in(self, opportunity: OpportunityDomain) -> bool:
        # 이메일이 없는 계정은 알림을 받을 수 없음
        return (
            bool(self.email)
            and self.category_id is not None
            and self.category_id == opportunity.category_id
        )


@dataclass(frozen=True, slots=True)
class ApplicationDomain:
    id: int
    opportunity_id: int
    applicant_id: int | None
    full_name: str
    email: str
    resume_url: str = ""
    created_at: datetime | None = None
