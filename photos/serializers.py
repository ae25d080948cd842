from rest_framework import serializers

from photos.models import Photo, User
from photos.services.profile import ProfileService


class ProfileSerializer(serializers.ModelSerializer):
    """Public profile with cached follow counters."""
    avatar_url = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = [
            "id",
            "username",
            "display_name",
            "bio",
            "avatar_url",
            "followers_count",
            "following_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_avatar_url(self, obj):
        return obj.avatar_or_gravatar(size=200)


class PhotoSerializer(serializers.ModelSerializer):
    """Photo with cached aggregates and an owner snapshot."""
    owner = serializers.SerializerMethodField()

    class Meta:
        model = Photo
        fields = [
            "id",
            "owner",
            "title",
            "description",
            "image_url",
            "rating",
            "votes_count",
            "likes_count",
            "comments_count",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_owner(self, obj):
        return ProfileService.snapshot(obj.owner)


class PhotoCreateSerializer(serializers.Serializer):
    title = serializers.CharField(allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    image_url = serializers.CharField(allow_blank=True)


class PhotoUpdateSerializer(serializers.Serializer):
    title = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    description = serializers.CharField(required=False, allow_blank=True)


class RatingInputSerializer(serializers.Serializer):
    # Range is enforced by RatingService so every caller gets the same error.
    value = serializers.IntegerField()


class CommentInputSerializer(serializers.Serializer):
    text = serializers.CharField(allow_blank=True, trim_whitespace=False)


class ProfileUpdateSerializer(serializers.Serializer):
    username = serializers.CharField(required=False)
    display_name = serializers.CharField(required=False, allow_blank=True)
    bio = serializers.CharField(required=False, allow_blank=True)
    avatar_url = serializers.CharField(required=False, allow_blank=True)


class GalleryQuerySerializer(serializers.Serializer):
    order = serializers.CharField(required=False, default=Photo.ORDER_LATEST)
    page = serializers.IntegerField(required=False, default=1)
    limit = serializers.IntegerField(required=False)
