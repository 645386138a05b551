from __future__ import annotations

from django.conf import settings
from opportunity.adapters.celery_event_publisher import CeleryOpportunityEventPublisher
from opportunity.adapters.celery_expiry_scheduler import CeleryExpiryScheduler
from opportunity.adapters.celery_mail_queue import CeleryMailQueue
from opportunity.adapters.django_application_repo import DjangoApplicationRepository
from opportunity.adapters.django_file_storage import DjangoFileStorage
from opportunity.adapters.django_opportunity_repo import DjangoOpportunityRepository
from opportunity.adapters.django_seeker_directory import DjangoSeekerDirectory
from opportunity.application.usecases.create_opportunity import (
    CreateOpportunityUseCase,
)
from opportunity.application.usecases.delete_opportunity import (
    DeleteOpportunityUseCase,
)
from opportunity.application.usecases.notify_matching_seekers import (
    NotifyMatchingSeekersUseCase,
)
from opportunity.application.usecases.publish_opportunity import (
    PublishOpportunityUseCase,
)
from opportunity.application.usecases.submit_application import (
    SubmitApplicationUseCase,
)
from opportunity.application.usecases.unpublish_opportunity import (
    UnpublishOpportunityUseCase,
)
from opportunity.application.usecases.update_opportunity import (
    UpdateOpportunityUseCase,
)
from opportunity.ports.file_storage import FileStoragePort
from opportunity.ports.opportunity_repo import OpportunityRepositoryPort

# 유스케이스 조립(Dependency Injection).
# services/tasks/views에서는 이 모듈의 함수만 통해 유스케이스/포트를 얻도록 통일합니다.


def build_opportunity_repo() -> OpportunityRepositoryPort:
    return DjangoOpportunityRepository()


def build_file_storage() -> FileStoragePort:
    return DjangoFileStorage()


def build_create_opportunity_usecase() -> CreateOpportunityUseCase:
    return CreateOpportunityUseCase(opportunity_repo=DjangoOpportunityRepository())


def build_update_opportunity_usecase() -> UpdateOpportunityUseCase:
    return UpdateOpportunityUseCase(opportunity_repo=DjangoOpportunityRepository())


def build_publish_opportunity_usecase() -> PublishOpportunityUseCase:
    return PublishOpportunityUseCase(
        opportunity_repo=DjangoOpportunityRepository(),
        expiry_scheduler=CeleryExpiryScheduler(
            task_name=getattr(
                settings,
                "OPPORTUNITY_CLEANUP_TASK",
                "opportunity.cleanup.delete_expired_opportunity",
            ),
            expiry_days=getattr(settings, "OPPORTUNITY_EXPIRY_DAYS", 30),
        ),
        event_publisher=CeleryOpportunityEventPublisher(),
        renotify_on_republish=bool(
            getattr(settings, "OPPORTUNITY_RENOTIFY_ON_REPUBLISH", True)
        ),
    )


def build_unpublish_opportunity_usecase() -> UnpublishOpportunityUseCase:
    return UnpublishOpportunityUseCase(opportunity_repo=DjangoOpportunityRepository())


def build_delete_opportunity_usecase() -> DeleteOpportunityUseCase:
    return DeleteOpportunityUseCase(opportunity_repo=DjangoOpportunityRepository())


def build_notify_matching_seekers_usecase() -> NotifyMatchingSeekersUseCase:
    return NotifyMatchingSeekersUseCase(
        opportunity_repo=DjangoOpportunityRepository(),
        seeker_directory=DjangoSeekerDirectory(),
        mail_queue=CeleryMailQueue(),
    )


def build_submit_application_usecase() -> SubmitApplicationUseCase:
    return SubmitApplicationUseCase(
        opportunity_repo=DjangoOpportunityRepository(),
        application_repo=DjangoApplicationRepository(),
    )
