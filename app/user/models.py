from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    서비스 사용자

    category: 관심 카테고리. 같은 카테고리의 채용 기회가 공개되면 알림 메일을 받습니다.
    """

    display_name = models.CharField(max_length=150, blank=True, default="")
    category = models.ForeignKey(
        "opportunity.Category",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="interested_users",
        help_text="관심 카테고리 (알림 대상 매칭 기준)",
    )
