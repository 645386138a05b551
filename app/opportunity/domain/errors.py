from __future__ import annotations


class StorageError(Exception):
    """영속화(DB/파일 저장소) 실패. 상세 내용은 서버 로그에만 남깁니다."""


class NotificationError(Exception):
    """수신자 한 명에 대한 알림 큐 적재 실패."""

    def __init__(self, message: str, *, seeker_id: int | None = None):
        super().__init__(message)
        self.seeker_id = seeker_id
