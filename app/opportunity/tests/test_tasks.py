"""
Tests for Opportunity Celery tasks
"""

from smtplib import SMTPException
from unittest import mock

import pytest
from celery.exceptions import Retry
from django.contrib.auth import get_user_model
from django.core import mail
from django.utils import timezone
from opportunity.dtos import NotificationPayloadDTO
from opportunity.models import Category, Opportunity
from opportunity.tasks import (
    build_new_opportunity_mail,
    notify_matching_seekers,
    send_new_opportunity_mail,
)

User = get_user_model()


def _payload(**overrides):
    values = {
        "opportunity_id": 7,
        "opportunity_title": "Backend Engineer",
        "category_name": "Tech",
        "seeker_id": 3,
        "seeker_email": "ann@example.com",
        "seeker_name": "Ann",
    }
    values.update(overrides)
    return values


def test_build_new_opportunity_mail_links_to_frontend(settings):
    settings.FRONTEND_BASE_URL = "https://board.example.com/"

    subject, body = build_new_opportunity_mail(
        NotificationPayloadDTO.model_validate(_payload())
    )

    assert subject == "New opportunity: Backend Engineer"
    assert body.startswith("Hi Ann,")
    assert "in Tech" in body
    assert "https://board.example.com/opportunities/7" in body


def test_build_new_opportunity_mail_without_name():
    _, body = build_new_opportunity_mail(
        NotificationPayloadDTO.model_validate(
            _payload(seeker_name="", category_name="")
        )
    )

    assert body.startswith("Hi,\n")
    assert "opportunity in" not in body


def test_tasks_run_eagerly_without_broker(celery_eager_app):
    assert celery_eager_app.conf.task_always_eager is True
    assert send_new_opportunity_mail.app.conf.task_always_eager is True
    assert notify_matching_seekers.app.conf.task_eager_propagates is True


class TestSendNewOpportunityMail:
    def test_sends_mail_to_seeker(self, settings):
        settings.DEFAULT_FROM_EMAIL = "noreply@board.example.com"

        result = send_new_opportunity_mail.delay(_payload()).get()

        assert result == {"success": True, "opportunity_id": 7, "seeker_id": 3}
        assert len(mail.outbox) == 1
        assert mail.outbox[0].to == ["ann@example.com"]
        assert mail.outbox[0].from_email == "noreply@board.example.com"

    def test_retries_when_transport_fails(self):
        with mock.patch(
            "opportunity.tasks.send_mail", side_effect=SMTPException("down")
        ), mock.patch.object(
            send_new_opportunity_mail, "retry", side_effect=Retry()
        ) as retry:
            with pytest.raises(Retry):
                send_new_opportunity_mail(_payload())

        retry.assert_called_once()
        assert retry.call_args.kwargs["countdown"] == 60
        assert mail.outbox == []

    def test_gives_up_after_max_retries(self):
        """재시도 소진 시 실패 결과를 반환 (예외 미전파)"""
        with mock.patch(
            "opportunity.tasks.send_mail", side_effect=SMTPException("down")
        ):
            result = send_new_opportunity_mail.apply(
                args=[_payload()], retries=send_new_opportunity_mail.max_retries
            ).get()

        assert result == {"success": False, "error": "down"}
        assert mail.outbox == []


@pytest.mark.django_db
class TestNotifyMatchingSeekersTask:
    def setup_method(self):
        self.tech = Category.objects.create(name="Tech")
        self.design = Category.objects.create(name="Design")
        self.owner = User.objects.create_user(
            username="owner", email="owner@example.com", password="testpass123"
        )

    def _published(self, **overrides):
        values = {
            "owner": self.owner,
            "category": self.tech,
            "title": "Backend Engineer",
            "description": "Build APIs",
            "image_url": "/storage/images/logo.png",
            "published_at": timezone.now(),
        }
        values.update(overrides)
        return Opportunity.objects.create(**values)

    def test_fans_out_to_matching_seekers(self):
        """Tech/Design/Tech 사용자 중 Tech 두 명에게만 발송"""
        # Given
        opportunity = self._published()
        for username, category in (
            ("ann", self.tech),
            ("dan", self.design),
            ("kim", self.tech),
        ):
            User.objects.create_user(
                username=username, email=f"{username}@example.com", category=category
            )

        # When
        result = notify_matching_seekers.delay(opportunity.id).get()

        # Then
        assert result["success"] is True
        assert result["attempted"] == 2
        assert result["failed"] == []
        assert sorted(m.to[0] for m in mail.outbox) == [
            "ann@example.com",
            "kim@example.com",
        ]

    def test_missing_opportunity_is_reported(self):
        result = notify_matching_seekers.delay(9999).get()

        assert result["success"] is False
        assert mail.outbox == []

    def test_unpublished_opportunity_sends_nothing(self):
        opportunity = self._published(published_at=None)
        User.objects.create_user(
            username="ann", email="ann@example.com", category=self.tech
        )

        result = notify_matching_seekers.delay(opportunity.id).get()

        assert result["success"] is True
        assert result["attempted"] == 0
        assert mail.outbox == []
