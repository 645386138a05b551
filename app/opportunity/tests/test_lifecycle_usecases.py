"""
Tests for Opportunity lifecycle use cases

생성/수정/공개/비공개/삭제 유스케이스 테스트 (in-memory 포트 사용)
"""

from datetime import datetime, timezone

from common.application.result import (
    NOT_FOUND,
    STORAGE_ERROR,
    VALIDATION_ERROR,
    Err,
    Ok,
)
from opportunity.application.usecases.create_opportunity import (
    CreateOpportunityUseCase,
)
from opportunity.application.usecases.delete_opportunity import (
    DeleteOpportunityUseCase,
)
from opportunity.application.usecases.publish_opportunity import (
    PublishOpportunityUseCase,
)
from opportunity.application.usecases.unpublish_opportunity import (
    UnpublishOpportunityUseCase,
)
from opportunity.application.usecases.update_opportunity import (
    UpdateOpportunityUseCase,
)
from opportunity.tests.fakes import (
    InMemoryOpportunityRepository,
    RecordingEventPublisher,
    RecordingExpiryScheduler,
)

NOW = datetime(2026, 10, 19, 9, 0, tzinfo=timezone.utc)
EARLIER = datetime(2026, 1, 1, tzinfo=timezone.utc)


class TestCreateOpportunityUseCase:
    def setup_method(self):
        self.repo = InMemoryOpportunityRepository()
        self.usecase = CreateOpportunityUseCase(opportunity_repo=self.repo)

    def _execute(self, **overrides):
        values = {
            "owner_id": 7,
            "title": "Backend Engineer",
            "description": "Build APIs",
            "image_ref": "/storage/images/logo.png",
            "category_id": 1,
        }
        values.update(overrides)
        return self.usecase.execute(**values)

    def test_creates_draft(self):
        result = self._execute()

        assert isinstance(result, Ok)
        assert result.value.owner_id == 7
        assert result.value.category_name == "Tech"
        assert result.value.published_at is None
        assert len(self.repo.items) == 1

    def test_missing_title_fails_without_persisting(self):
        result = self._execute(title=None)

        assert isinstance(result, Err)
        assert result.code == VALIDATION_ERROR
        assert "title" in result.details
        assert self.repo.items == {}

    def test_blank_fields_report_each_field(self):
        result = self._execute(title="  ", description="", image_ref=None)

        assert isinstance(result, Err)
        assert set(result.details) == {"title", "description", "image_url"}

    def test_unknown_category_is_validation_error(self):
        result = self._execute(category_id=99)

        assert isinstance(result, Err)
        assert result.code == VALIDATION_ERROR
        assert result.details == {"category_id": ["Category does not exist."]}

    def test_non_integer_category_is_validation_error(self):
        result = self._execute(category_id="1")

        assert isinstance(result, Err)
        assert "category_id" in result.details

    def test_storage_failure_returns_generic_message(self):
        self.repo.fail_writes = True

        result = self._execute()

        assert isinstance(result, Err)
        assert result.code == STORAGE_ERROR
        assert "database" not in result.message
        assert result.details is None


class TestUpdateOpportunityUseCase:
    def setup_method(self):
        self.repo = InMemoryOpportunityRepository()
        self.usecase = UpdateOpportunityUseCase(opportunity_repo=self.repo)

    def test_partial_update_changes_only_given_fields(self):
        opportunity = self.repo.add(title="Old", published_at=NOW)

        result = self.usecase.execute(
            opportunity_id=opportunity.id, changes={"title": " New ", "category_id": 2}
        )

        assert isinstance(result, Ok)
        assert result.value.title == "New"
        assert result.value.category_name == "Design"
        assert result.value.description == opportunity.description
        # 공개 상태는 유지
        assert result.value.published_at == NOW

    def test_missing_opportunity_is_not_found(self):
        result = self.usecase.execute(opportunity_id=404, changes={"title": "x"})

        assert isinstance(result, Err)
        assert result.code == NOT_FOUND

    def test_full_update_requires_all_fields(self):
        opportunity = self.repo.add()

        result = self.usecase.execute(
            opportunity_id=opportunity.id, changes={"title": "x"}, partial=False
        )

        assert isinstance(result, Err)
        assert result.code == VALIDATION_ERROR
        assert set(result.details) == {"description", "image_url", "category_id"}


class TestPublishOpportunityUseCase:
    def setup_method(self):
        self.repo = InMemoryOpportunityRepository()
        self.scheduler = RecordingExpiryScheduler()
        self.publisher = RecordingEventPublisher()

    def _usecase(self, **kwargs):
        return PublishOpportunityUseCase(
            opportunity_repo=self.repo,
            expiry_scheduler=kwargs.pop("expiry_scheduler", self.scheduler),
            event_publisher=self.publisher,
            clock=lambda: NOW,
            **kwargs,
        )

    def test_publish_sets_timestamp_schedules_expiry_and_emits_event(self):
        opportunity = self.repo.add(category_id=2)

        result = self._usecase().execute(opportunity_id=opportunity.id)

        assert isinstance(result, Ok)
        assert result.value.published_at == NOW
        assert self.repo.items[opportunity.id].published_at == NOW
        assert self.scheduler.calls == [(opportunity.id, NOW)]
        assert len(self.publisher.events) == 1
        event = self.publisher.events[0]
        assert event.opportunity_id == opportunity.id
        assert event.category_id == 2
        assert event.republished is False

    def test_publish_missing_opportunity_is_not_found(self):
        result = self._usecase().execute(opportunity_id=12345)

        assert isinstance(result, Err)
        assert result.code == NOT_FOUND
        assert self.scheduler.calls == []
        assert self.publisher.events == []

    def test_republish_succeeds_and_renotifies_by_default(self):
        opportunity = self.repo.add(published_at=EARLIER)

        result = self._usecase().execute(opportunity_id=opportunity.id)

        assert isinstance(result, Ok)
        assert result.value.published_at == NOW
        assert len(self.publisher.events) == 1
        assert self.publisher.events[0].republished is True

    def test_republish_guard_skips_notification(self):
        opportunity = self.repo.add(published_at=EARLIER)

        result = self._usecase(renotify_on_republish=False).execute(
            opportunity_id=opportunity.id
        )

        assert isinstance(result, Ok)
        assert self.publisher.events == []
        assert len(self.scheduler.calls) == 1

    def test_scheduler_failure_does_not_fail_publish(self):
        opportunity = self.repo.add()

        result = self._usecase(
            expiry_scheduler=RecordingExpiryScheduler(fail=True)
        ).execute(opportunity_id=opportunity.id)

        assert isinstance(result, Ok)
        assert result.value.is_published
        assert len(self.publisher.events) == 1

    def test_storage_failure_emits_nothing(self):
        opportunity = self.repo.add()
        self.repo.fail_writes = True

        result = self._usecase().execute(opportunity_id=opportunity.id)

        assert isinstance(result, Err)
        assert result.code == STORAGE_ERROR
        assert self.scheduler.calls == []
        assert self.publisher.events == []


class TestUnpublishOpportunityUseCase:
    def setup_method(self):
        self.repo = InMemoryOpportunityRepository()
        self.usecase = UnpublishOpportunityUseCase(opportunity_repo=self.repo)

    def test_unpublish_clears_timestamp(self):
        opportunity = self.repo.add(published_at=NOW)

        result = self.usecase.execute(opportunity_id=opportunity.id)

        assert isinstance(result, Ok)
        assert result.value.published_at is None
        assert self.repo.list_published() == []

    def test_unpublish_draft_is_noop(self):
        opportunity = self.repo.add()

        result = self.usecase.execute(opportunity_id=opportunity.id)

        assert isinstance(result, Ok)
        assert result.value.published_at is None
        assert self.repo.save_calls == 0

    def test_unpublish_missing_is_not_found(self):
        result = self.usecase.execute(opportunity_id=1)

        assert isinstance(result, Err)
        assert result.code == NOT_FOUND


class TestDeleteOpportunityUseCase:
    def setup_method(self):
        self.repo = InMemoryOpportunityRepository()
        self.usecase = DeleteOpportunityUseCase(opportunity_repo=self.repo)

    def test_delete_existing(self):
        opportunity = self.repo.add()

        result = self.usecase.execute(opportunity_id=opportunity.id)

        assert isinstance(result, Ok)
        assert result.value is True
        assert self.repo.items == {}

    def test_delete_missing_is_silent_noop(self):
        kept = self.repo.add()

        result = self.usecase.execute(opportunity_id=kept.id + 100)

        assert isinstance(result, Ok)
        assert result.value is False
        assert list(self.repo.items) == [kept.id]


class TestPublishedListingInvariant:
    def test_listing_matches_published_at(self):
        repo = InMemoryOpportunityRepository()
        publish = PublishOpportunityUseCase(
            opportunity_repo=repo,
            expiry_scheduler=RecordingExpiryScheduler(),
            event_publisher=RecordingEventPublisher(),
            clock=lambda: NOW,
        )
        unpublish = UnpublishOpportunityUseCase(opportunity_repo=repo)
        first, second, third = repo.add(), repo.add(), repo.add()

        publish.execute(opportunity_id=first.id)
        publish.execute(opportunity_id=second.id)
        unpublish.execute(opportunity_id=second.id)

        listed = {o.id for o in repo.list_published()}
        assert listed == {first.id}
        for opportunity in repo.items.values():
            assert (opportunity.published_at is not None) == (opportunity.id in listed)
        assert third.id not in listed
