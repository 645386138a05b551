from django.conf import settings
from django.db import models


class Category(models.Model):
    name = models.CharField(max_length=100, unique=True, help_text="카테고리 표시명")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "opportunity_category"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name


class Opportunity(models.Model):
    """
    채용 기회 게시물

    published_at 이 NULL 이면 초안(비공개), 값이 있으면 공개 상태입니다.
    만료 삭제는 외부 정리 태스크가 담당합니다.
    """

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="opportunities",
    )
    category = models.ForeignKey(
        Category,
        on_delete=models.PROTECT,
        related_name="opportunities",
    )
    title = models.CharField(max_length=255)
    description = models.TextField()
    image_url = models.CharField(max_length=500, help_text="업로드 이미지 공개 경로")
    published_at = models.DateTimeField(
        null=True, blank=True, db_index=True, help_text="공개 시각 (NULL=비공개)"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "opportunity"
        ordering = ["id"]

    def __str__(self):
        return f"{self.title} ({self.category_id})"


class Application(models.Model):
    """채용 기회 지원서"""

    opportunity = models.ForeignKey(
        Opportunity, on_delete=models.CASCADE, related_name="applications"
    )
    applicant = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="applications",
        help_text="로그인하지 않은 지원자는 NULL",
    )
    full_name = models.CharField(max_length=255)
    email = models.EmailField()
    phone = models.CharField(max_length=50, blank=True, default="")
    current_company = models.CharField(max_length=255, blank=True, default="")
    resume_url = models.CharField(max_length=500, blank=True, default="")
    bio = models.TextField(blank=True, default="", help_text="자기소개/커버레터")
    linkedin_url = models.URLField(max_length=500, blank=True, default="")
    twitter_url = models.URLField(max_length=500, blank=True, default="")
    github_url = models.URLField(max_length=500, blank=True, default="")
    portfolio_url = models.URLField(max_length=500, blank=True, default="")
    other_website = models.URLField(max_length=500, blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "opportunity_application"
        ordering = ["-created_at"]

    def __str__(self):
        return f"Application {self.id} for opportunity {self.opportunity_id}"
