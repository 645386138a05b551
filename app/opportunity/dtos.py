from typing import List

from pydantic import BaseModel, Field


class NotificationPayloadDTO(BaseModel):
    """
    신규 채용 기회 알림 메일 페이로드

    메일 큐(Celery)로 직렬화되어 전달되며, DB에는 저장되지 않습니다.
    """

    opportunity_id: int = Field(description="채용 기회 ID")
    opportunity_title: str = Field(description="채용 기회 제목")
    category_name: str = Field(default="", description="카테고리 표시명")
    seeker_id: int = Field(description="수신자 사용자 ID")
    seeker_email: str = Field(description="수신자 이메일")
    seeker_name: str = Field(default="", description="수신자 표시 이름")


class DispatchFailureDTO(BaseModel):
    seeker_id: int = Field(description="실패한 수신자 ID")
    error: str = Field(description="실패 사유")


class DispatchResultDTO(BaseModel):
    """
    알림 발송(fan-out) 결과 DTO

    attempted 는 카테고리가 일치해 큐 적재를 시도한 수신자 수입니다.
    """

    opportunity_id: int = Field(description="채용 기회 ID")
    attempted: int = Field(default=0, ge=0, description="큐 적재 시도 수")
    failed: List[DispatchFailureDTO] = Field(
        default_factory=list, description="수신자별 실패 목록"
    )

    @property
    def succeeded(self) -> int:
        return self.attempted - len(self.failed)
