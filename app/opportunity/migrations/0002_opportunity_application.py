from __future__ import annotations

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    dependencies = [
        ("opportunity", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Opportunity",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                (
                    "image_url",
                    models.CharField(help_text="업로드 이미지 공개 경로", max_length=500),
                ),
                (
                    "published_at",
                    models.DateTimeField(
                        blank=True,
                        db_index=True,
                        help_text="공개 시각 (NULL=비공개)",
                        null=True,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "category",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="opportunities",
                        to="opportunity.category",
                    ),
                ),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="opportunities",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "opportunity",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Application",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("full_name", models.CharField(max_length=255)),
                ("email", models.EmailField(max_length=254)),
                ("phone", models.CharField(blank=True, default="", max_length=50)),
                (
                    "current_company",
                    models.CharField(blank=True, default="", max_length=255),
                ),
                (
                    "resume_url",
                    models.CharField(blank=True, default="", max_length=500),
                ),
                (
                    "bio",
                    models.TextField(
                        blank=True, default="", help_text="자기소개/커버레터"
                    ),
                ),
                (
                    "linkedin_url",
                    models.URLField(blank=True, default="", max_length=500),
                ),
                (
                    "twitter_url",
                    models.URLField(blank=True, default="", max_length=500),
                ),
                (
                    "github_url",
                    models.URLField(blank=True, default="", max_length=500),
                ),
                (
                    "portfolio_url",
                    models.URLField(blank=True, default="", max_length=500),
                ),
                (
                    "other_website",
                    models.URLField(blank=True, default="", max_length=500),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "applicant",
                    models.ForeignKey(
                        blank=True,
                        help_text="로그인하지 않은 지원자는 NULL",
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="applications",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "opportunity",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="applications",
                        to="opportunity.opportunity",
                    ),
                ),
            ],
            options={
                "db_table": "opportunity_application",
                "ordering": ["-created_at"],
            },
        ),
    ]
