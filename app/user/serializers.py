from django.contrib.auth import authenticate
from opportunity.models import Category
from rest_framework import serializers
from user.models import User


class UserRegistrationSerializer(serializers.ModelSerializer):
    password = serializers.CharField(
        write_only=True,
        min_length=8,
        style={"input_type": "password"},
        help_text="최소 8자 이상의 비밀번호를 입력하세요.",
    )
    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(),
        required=False,
        allow_null=True,
        help_text="관심 카테고리 ID (신규 채용 기회 알림 기준)",
    )

    class Meta:
        model = User
        fields = ["id", "username", "email", "password", "display_name", "category"]
        read_only_fields = ["id"]
        extra_kwargs = {"email": {"required": True, "allow_blank": False}}

    def validate_password(self, value):
        """
        비밀번호 복잡도 검증
        """
        if value.isdigit():
            raise serializers.ValidationError(
                "비밀번호는 숫자만으로 구성될 수 없습니다."
            )
        if value.isalpha():
            raise serializers.ValidationError(
                "비밀번호는 문자만으로 구성될 수 없습니다."
            )
        return value

    def create(self, validated_data):
        return User.objects.create_user(
            username=validated_data["username"],
            email=validated_data["email"],
            password=validated_data["password"],
            display_name=validated_data.get("display_name", ""),
            category=validated_data.get("category"),
        )


class UserProfileSerializer(serializers.ModelSerializer):
    category = serializers.PrimaryKeyRelatedField(
        queryset=Category.objects.all(), required=False, allow_null=True
    )
    category_name = serializers.CharField(source="category.name", read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "email",
            "display_name",
            "category",
            "category_name",
        ]
        read_only_fields = ["id", "username"]


class UserLoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True)

    def validate(self, data):
        username = data.get("username")
        password = data.get("password")

        if username and password:
            user = authenticate(
                request=self.context.get("request"),
                username=username,
                password=password,
            )
            if not user:
                raise serializers.ValidationError("Invalid credentials")
        else:
            raise serializers.ValidationError("Must include 'username' and 'password'")

        data["user"] = user
        return data
