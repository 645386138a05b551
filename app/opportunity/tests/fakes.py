"""
유스케이스 테스트용 in-memory 포트 구현
"""

from __future__ import annotations

import dataclasses
import itertools
from datetime import datetime

from opportunity.domain.errors import NotificationError, StorageError
from opportunity.domain.events import OpportunityPublished
from opportunity.domain.opportunity import (
    ApplicationDomain,
    OpportunityDomain,
    SeekerDomain,
)
from opportunity.dtos import NotificationPayloadDTO


class InMemoryOpportunityRepository:
    def __init__(self, categories: dict[int, str] | None = None):
        self.categories = categories or {1: "Tech", 2: "Design"}
        self.items: dict[int, OpportunityDomain] = {}
        self.fail_writes = False
        self.save_calls = 0
        self._ids = itertools.count(1)

    def add(self, **overrides) -> OpportunityDomain:
        values = {
            "id": next(self._ids),
            "owner_id": 1,
            "title": "Backend Engineer",
            "description": "Build APIs",
            "image_url": "/storage/images/a.png",
            "category_id": 1,
            "published_at": None,
        }
        values.update(overrides)
        values["category_name"] = self.categories[values["category_id"]]
        opportunity = OpportunityDomain(**values)
        self.items[opportunity.id] = opportunity
        return opportunity

    def get_by_id(self, opportunity_id: int) -> OpportunityDomain | None:
        return self.items.get(opportunity_id)

    def create(self, *, owner_id, title, description, image_url, category_id):
        if self.fail_writes:
            raise StorageError("database is down")
        return self.add(
            owner_id=owner_id,
            title=title,
            description=description,
            image_url=image_url,
            category_id=category_id,
        )

    def save(self, opportunity: OpportunityDomain) -> OpportunityDomain:
        self.save_calls += 1
        if self.fail_writes:
            raise StorageError("database is down")
        saved = dataclasses.replace(
            opportunity, category_name=self.categories[opportunity.category_id]
        )
        self.items[saved.id] = saved
        return saved

    def delete_by_id(self, opportunity_id: int) -> bool:
        if self.fail_writes:
            raise StorageError("database is down")
        return self.items.pop(opportunity_id, None) is not None

    def list_published(self) -> list[OpportunityDomain]:
        return [o for _, o in sorted(self.items.items()) if o.is_published]

    def list_by_owner(self, owner_id: int) -> list[OpportunityDomain]:
        return [o for _, o in sorted(self.items.items()) if o.owner_id == owner_id]

    def category_exists(self, category_id: int) -> bool:
        return category_id in self.categories


class InMemorySeekerDirectory:
    def __init__(self, seekers: list[SeekerDomain] | None = None):
        self.seekers = list(seekers or [])

    def list_all(self) -> list[SeekerDomain]:
        return list(self.seekers)


class RecordingMailQueue:
    """fail_for 에 포함된 이메일은 NotificationError 를 발생시킴"""

    def __init__(self, fail_for: set[str] | None = None):
        self.fail_for = fail_for or set()
        self.attempts: list[NotificationPayloadDTO] = []
        self.queued: list[NotificationPayloadDTO] = []

    def enqueue(self, payload: NotificationPayloadDTO) -> None:
        self.attempts.append(payload)
        if payload.seeker_email in self.fail_for:
            raise NotificationError("broker unavailable", seeker_id=payload.seeker_id)
        self.queued.append(payload)


class RecordingExpiryScheduler:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.calls: list[tuple[int, datetime]] = []

    def schedule_expiry(self, *, opportunity_id: int, published_at: datetime) -> None:
        self.calls.append((opportunity_id, published_at))
        if self.fail:
            raise ConnectionError("broker unavailable")


class RecordingEventPublisher:
    def __init__(self):
        self.events: list[OpportunityPublished] = []

    def opportunity_published(self, event: OpportunityPublished) -> None:
        self.events.append(event)


class InMemoryApplicationRepository:
    def __init__(self):
        self.items: list[ApplicationDomain] = []
        self.fail_writes = False

    def create(self, *, opportunity_id, applicant_id, resume_url, fields):
        if self.fail_writes:
            raise StorageError("database is down")
        application = ApplicationDomain(
            id=len(self.items) + 1,
            opportunity_id=opportunity_id,
            applicant_id=applicant_id,
            full_name=fields["full_name"],
            email=fields["email"],
            resume_url=resume_url,
        )
        self.items.append(application)
        return application
