from __future__ import annotations

from typing import Protocol

from opportunity.dtos import NotificationPayloadDTO


class MailQueuePort(Protocol):
    def enqueue(self, payload: NotificationPayloadDTO) -> None:
        """
        알림 메일을 비동기 큐에 적재합니다. 전송 완료를 기다리지 않습니다.

        Raises:
            NotificationError: 큐 적재 실패
        """
        ...
