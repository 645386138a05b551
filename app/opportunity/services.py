"""
Opportunity Service

채용 기회 조회 및 유스케이스 호출 창구 (views/tasks 에서 사용)
"""

from __future__ import annotations

import logging
from typing import IO, Dict, List, Optional

from common.application.result import STORAGE_ERROR, Err, Ok, Result
from django.conf import settings
from django.db import transaction
from opportunity.application import container
from opportunity.domain.errors import StorageError
from opportunity.domain.opportunity import ApplicationDomain, OpportunityDomain
from opportunity.dtos import DispatchResultDTO
from opportunity.models import Category

logger = logging.getLogger(__name__)


class OpportunityService:
    """
    채용 기회 서비스

    상태 전이(공개/비공개)와 알림은 유스케이스에 위임하고,
    업로드 파일 저장과 트랜잭션 경계만 담당합니다.
    """

    @staticmethod
    def list_published() -> List[OpportunityDomain]:
        """공개 중인 채용 기회 목록 (id 순)"""
        return container.build_opportunity_repo().list_published()

    @staticmethod
    def list_owned(owner_id: int) -> List[OpportunityDomain]:
        """작성자의 채용 기회 목록 (초안 포함)"""
        return container.build_opportunity_repo().list_by_owner(owner_id)

    @staticmethod
    def get_opportunity(opportunity_id: int) -> Optional[OpportunityDomain]:
        opportunity = container.build_opportunity_repo().get_by_id(opportunity_id)
        if opportunity is None:
            logger.warning(f"Opportunity {opportunity_id} not found")
        return opportunity

    @staticmethod
    def list_categories():
        return Category.objects.all().order_by("name")

    @staticmethod
    def create_opportunity(
        *, owner_id: int, data: Dict, image: Optional[IO]
    ) -> Result[OpportunityDomain]:
        """
        채용 기회 생성

        Args:
            owner_id: 작성자 ID
            data: title, description, category (검증된 요청 데이터)
            image: 업로드 이미지 파일

        Returns:
            Ok(OpportunityDomain) 또는 Err
        """
        image_ref = None
        if image is not None:
            stored = OpportunityService._store_upload(
                image, settings.OPPORTUNITY_IMAGE_UPLOAD_DIR
            )
            if isinstance(stored, Err):
                return stored
            image_ref = stored.value

        usecase = container.build_create_opportunity_usecase()
        with transaction.atomic():
            return usecase.execute(
                owner_id=owner_id,
                title=data.get("title"),
                description=data.get("description"),
                image_ref=image_ref,
                category_id=data.get("category"),
            )

    @staticmethod
    def update_opportunity(
        *,
        opportunity_id: int,
        data: Dict,
        image: Optional[IO] = None,
        partial: bool = True,
    ) -> Result[OpportunityDomain]:
        changes = {
            key: data[key] for key in ("title", "description") if key in data
        }
        if "category" in data:
            changes["category_id"] = data["category"]
        if image is not None:
            stored = OpportunityService._store_upload(
                image, settings.OPPORTUNITY_IMAGE_UPLOAD_DIR
            )
            if isinstance(stored, Err):
                return stored
            changes["image_url"] = stored.value

        usecase = container.build_update_opportunity_usecase()
        with transaction.atomic():
            return usecase.execute(
                opportunity_id=opportunity_id, changes=changes, partial=partial
            )

    @staticmethod
    def publish_opportunity(opportunity_id: int) -> Result[OpportunityDomain]:
        usecase = container.build_publish_opportunity_usecase()
        # 알림 이벤트는 커밋 이후 전송됨 (CeleryOpportunityEventPublisher)
        with transaction.atomic():
            return usecase.execute(opportunity_id=opportunity_id)

    @staticmethod
    def unpublish_opportunity(opportunity_id: int) -> Result[OpportunityDomain]:
        usecase = container.build_unpublish_opportunity_usecase()
        with transaction.atomic():
            return usecase.execute(opportunity_id=opportunity_id)

    @staticmethod
    def delete_opportunity(opportunity_id: int) -> Result[bool]:
        usecase = container.build_delete_opportunity_usecase()
        return usecase.execute(opportunity_id=opportunity_id)

    @staticmethod
    def notify_matching_seekers(opportunity_id: int) -> Result[DispatchResultDTO]:
        usecase = container.build_notify_matching_seekers_usecase()
        return usecase.execute(opportunity_id=opportunity_id)

    @staticmethod
    def submit_application(
        *,
        opportunity_id: int,
        applicant_id: Optional[int],
        data: Dict,
        resume: Optional[IO] = None,
    ) -> Result[ApplicationDomain]:
        resume_ref = ""
        if resume is not None:
            stored = OpportunityService._store_upload(
                resume, settings.OPPORTUNITY_RESUME_UPLOAD_DIR
            )
            if isinstance(stored, Err):
                return stored
            resume_ref = stored.value

        usecase = container.build_submit_application_usecase()
        with transaction.atomic():
            return usecase.execute(
                opportunity_id=opportunity_id,
                applicant_id=applicant_id,
                fields=data,
                resume_ref=resume_ref,
            )

    @staticmethod
    def _store_upload(file: IO, directory: str) -> Result[str]:
        try:
            return Ok(container.build_file_storage().store(file, directory=directory))
        except StorageError:
            logger.error(f"Failed to store upload into {directory}", exc_info=True)
            return Err(code=STORAGE_ERROR, message="Problem encountered! Try again.")
