"""
Opportunity Celery Tasks

알림 fan-out(OpportunityPublished 구독) 및 알림 메일 전송 태스크
"""

import logging

from celery import shared_task
from common.application.result import Err
from common.masking import mask_email
from django.conf import settings
from django.core.mail import send_mail
from opportunity.dtos import NotificationPayloadDTO
from opportunity.services import OpportunityService

logger = logging.getLogger(__name__)


@shared_task
def notify_matching_seekers(opportunity_id: int):
    """
    OpportunityPublished 이벤트 처리 태스크

    관심 카테고리가 일치하는 사용자마다 send_new_opportunity_mail 태스크를 적재합니다.
    수신자별 실패는 결과에 기록되며 재시도하지 않습니다. (at-most-once)

    Args:
        opportunity_id: 공개된 Opportunity ID

    Returns:
        dict: DispatchResultDTO 또는 에러 정보
    """
    result = OpportunityService.notify_matching_seekers(opportunity_id)
    if isinstance(result, Err):
        logger.warning(
            f"Skipped notification for opportunity {opportunity_id}: {result.message}"
        )
        return {"success": False, "error": result.message}

    return {"success": True, **result.value.model_dump()}


def build_new_opportunity_mail(payload: NotificationPayloadDTO) -> tuple[str, str]:
    """알림 메일 (subject, body) 생성"""
    base_url = getattr(settings, "FRONTEND_BASE_URL", "").rstrip("/")
    link = f"{base_url}/opportunities/{payload.opportunity_id}"
    greeting = f"Hi {payload.seeker_name}," if payload.seeker_name else "Hi,"
    category = f" in {payload.category_name}" if payload.category_name else ""

    subject = f"New opportunity: {payload.opportunity_title}"
    body = (
        f"{greeting}\n\n"
        f"A new opportunity{category} has just been published: "
        f"{payload.opportunity_title}\n\n"
        f"View it here: {link}\n"
    )
    return subject, body


@shared_task(bind=True, max_retries=3)
def send_new_opportunity_mail(self, payload: dict):
    """
    신규 채용 기회 알림 메일 전송 태스크

    Args:
        payload: NotificationPayloadDTO.model_dump() 결과

    Returns:
        dict: 처리 결과
    """
    notification = NotificationPayloadDTO.model_validate(payload)
    subject, body = build_new_opportunity_mail(notification)

    try:
        send_mail(
            subject=subject,
            message=body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[notification.seeker_email],
            fail_silently=False,
        )
    except Exception as e:
        logger.warning(
            "Error sending email to %s (opportunity %s): %s",
            mask_email(notification.seeker_email),
            notification.opportunity_id,
            e,
        )
        if self.request.retries >= self.max_retries:
            logger.error(
                f"Max retries exceeded for opportunity mail "
                f"{notification.opportunity_id} -> seeker {notification.seeker_id}"
            )
            return {"success": False, "error": str(e)}
        raise self.retry(exc=e, countdown=60)

    return {
        "success": True,
        "opportunity_id": notification.opportunity_id,
        "seeker_id": notification.seeker_id,
    }
