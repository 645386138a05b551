from django.core.validators import FileExtensionValidator
from opportunity.models import Application, Category
from rest_framework import serializers

IMAGE_EXTENSIONS = ["jpg", "jpeg", "png", "gif", "webp", "bmp"]
RESUME_EXTENSIONS = ["pdf", "doc", "docx", "odt", "rtf", "txt"]


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ["id", "name"]


class OpportunitySerializer(serializers.Serializer):
    """OpportunityDomain 응답 serializer (읽기 전용)"""

    id = serializers.IntegerField(read_only=True)
    owner_id = serializers.IntegerField(read_only=True)
    title = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    image_url = serializers.CharField(read_only=True)
    category_id = serializers.IntegerField(read_only=True)
    category_name = serializers.CharField(read_only=True)
    is_published = serializers.BooleanField(read_only=True)
    published_at = serializers.DateTimeField(read_only=True, allow_null=True)
    created_at = serializers.DateTimeField(read_only=True, allow_null=True)
    updated_at = serializers.DateTimeField(read_only=True, allow_null=True)


class OpportunityWriteSerializer(serializers.Serializer):
    """
    채용 기회 생성/수정 요청 serializer (multipart)

    도메인 규칙(카테고리 존재 여부 등)은 유스케이스에서 다시 검증합니다.
    """

    title = serializers.CharField(max_length=255)
    description = serializers.CharField()
    image = serializers.ImageField(
        validators=[FileExtensionValidator(allowed_extensions=IMAGE_EXTENSIONS)],
        help_text="대표 이미지 파일",
    )
    category = serializers.IntegerField(min_value=1, help_text="카테고리 ID")


class ApplicationSerializer(serializers.ModelSerializer):
    resume = serializers.FileField(
        write_only=True,
        required=False,
        validators=[FileExtensionValidator(allowed_extensions=RESUME_EXTENSIONS)],
        help_text="이력서/CV 파일 (선택)",
    )

    class Meta:
        model = Application
        fields = [
            "id",
            "opportunity",
            "full_name",
            "email",
            "phone",
            "current_company",
            "bio",
            "linkedin_url",
            "twitter_url",
            "github_url",
            "portfolio_url",
            "other_website",
            "resume",
            "resume_url",
            "created_at",
        ]
        read_only_fields = ["id", "opportunity", "resume_url", "created_at"]


class ApplicationResultSerializer(serializers.Serializer):
    """ApplicationDomain 응답 serializer"""

    id = serializers.IntegerField(read_only=True)
    opportunity_id = serializers.IntegerField(read_only=True)
    applicant_id = serializers.IntegerField(read_only=True, allow_null=True)
    full_name = serializers.CharField(read_only=True)
    email = serializers.EmailField(read_only=True)
    resume_url = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True, allow_null=True)
