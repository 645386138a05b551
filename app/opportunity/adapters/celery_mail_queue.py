from __future__ import annotations

from opportunity.domain.errors import NotificationError
from opportunity.dtos import NotificationPayloadDTO
from opportunity.ports.mail_queue import MailQueuePort


class CeleryMailQueue(MailQueuePort):
    """
    알림 메일을 Celery 태스크로 적재합니다. (fire-and-forget)

    실제 SMTP 전송은 워커에서 send_new_opportunity_mail 태스크가 수행합니다.
    """

    def enqueue(self, payload: NotificationPayloadDTO) -> None:
        from opportunity.tasks import send_new_opportunity_mail

        try:
            send_new_opportunity_mail.delay(payload.model_dump(mode="json"))
        except Exception as e:
            # 브로커 연결 실패 등 (kombu OperationalError 포함)
            raise NotificationError(
                f"enqueue_failed: {type(e).__name__}: {e}",
                seeker_id=payload.seeker_id,
            ) from e
