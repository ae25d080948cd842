from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from photos.serializers import (
    CommentInputSerializer,
    GalleryQuerySerializer,
    PhotoCreateSerializer,
    PhotoSerializer,
    PhotoUpdateSerializer,
    ProfileSerializer,
    ProfileUpdateSerializer,
    RatingInputSerializer,
)
from photos.services import (
    EngagementService,
    FollowService,
    NotificationService,
    PhotoService,
    ProfileService,
    RatingService,
    SocialFacade,
)


def _validated(serializer_class, data):
    serializer = serializer_class(data=data)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


def _with_my_ratings(rows, user_id):
    """Mark each gallery row with the caller's own rating, or None."""
    mine = {str(photo_id): value for photo_id, value in RatingService().user_ratings(user_id).items()}
    for row in rows:
        row["my_rating"] = mine.get(str(row["id"]))
    return rows


# Photos

@api_view(['GET', 'POST'])
def photo_list(request):
    """GET: one gallery page (?order=latest|popular|top_rated&page=&limit=). POST: add a photo."""
    service = PhotoService()
    if request.method == 'POST':
        data = _validated(PhotoCreateSerializer, request.data)
        photo = service.create_photo(
            request.user.id,
            data["title"],
            data["image_url"],
            description=data.get("description"),
        )
        return Response(PhotoSerializer(photo).data, status=status.HTTP_201_CREATED)

    query = _validated(GalleryQuerySerializer, request.query_params)
    photos = service.list_photos(order=query["order"], page=query["page"], limit=query.get("limit"))
    return Response(_with_my_ratings(PhotoSerializer(photos, many=True).data, request.user.id))


@api_view(['GET', 'PATCH', 'DELETE'])
def photo_detail(request, photo_id):
    """Fetch a photo, or let its owner edit or delete it."""
    service = PhotoService()
    if request.method == 'PATCH':
        data = _validated(PhotoUpdateSerializer, request.data)
        photo = service.update_photo(photo_id, request.user.id, **data)
        return Response(PhotoSerializer(photo).data)
    if request.method == 'DELETE':
        service.delete_photo(photo_id, request.user.id)
        return Response(status=status.HTTP_204_NO_CONTENT)

    photo = service.get_photo(photo_id)
    payload = PhotoSerializer(photo).data
    payload["liked"] = EngagementService().has_liked(request.user.id, photo.id)
    payload["my_rating"] = SocialFacade().user_rating(request.user.id, photo.id)
    return Response(payload)


@api_view(['GET', 'PUT'])
def photo_rating(request, photo_id):
    """GET: the caller's rating as {has_rated, value}. PUT {"value": 1-10}: rate or re-rate."""
    facade = SocialFacade()
    if request.method == 'PUT':
        data = _validated(RatingInputSerializer, request.data)
        return Response(facade.rate(request.user.id, photo_id, data["value"]))
    return Response(facade.user_rating(request.user.id, photo_id))


@api_view(['POST', 'DELETE'])
def photo_like(request, photo_id):
    """POST likes the photo, DELETE removes the like; both are idempotent."""
    facade = SocialFacade()
    if request.method == 'POST':
        return Response(facade.like(request.user.id, photo_id))
    return Response(facade.unlike(request.user.id, photo_id))


@api_view(['GET', 'POST'])
def photo_comments(request, photo_id):
    """GET: comments newest first. POST {"text"}: add a comment."""
    if request.method == 'POST':
        data = _validated(CommentInputSerializer, request.data)
        result = SocialFacade().comment(request.user.id, photo_id, data["text"])
        return Response(result, status=status.HTTP_201_CREATED)
    return Response(EngagementService().list_comments(photo_id))


@api_view(['DELETE'])
def comment_detail(request, comment_id):
    """Delete one of the caller's own comments."""
    return Response(SocialFacade().delete_comment(request.user.id, comment_id))


# Profiles

@api_view(['GET', 'PATCH'])
def my_profile(request):
    """The caller's own profile; PATCH edits username, display name, bio or avatar."""
    if request.method == 'PATCH':
        data = _validated(ProfileUpdateSerializer, request.data)
        user = ProfileService().update_profile(request.user.id, **data)
        return Response(ProfileSerializer(user).data)
    return Response(ProfileSerializer(request.user).data)


@api_view(['GET'])
def profile_detail(request, username):
    """Public profile plus whether the caller follows it."""
    service = ProfileService()
    user = service.get_by_username(username)
    payload = ProfileSerializer(user).data
    payload["is_following"] = FollowService().is_following(request.user.id, user.id)
    return Response(payload)


@api_view(['GET'])
def profile_photos(request, username):
    """Photos uploaded by a user, newest first."""
    user = ProfileService().get_by_username(username)
    query = _validated(GalleryQuerySerializer, request.query_params)
    photos = PhotoService().list_photos(
        order=query["order"], page=query["page"], limit=query.get("limit"), owner_id=user.id
    )
    return Response(_with_my_ratings(PhotoSerializer(photos, many=True).data, request.user.id))


@api_view(['GET'])
def profile_stats(request, username):
    """Upload and rating statistics for a profile page."""
    user = ProfileService().get_by_username(username)
    return Response(RatingService().user_stats(user.id))


@api_view(['POST', 'DELETE'])
def profile_follow(request, username):
    """POST follows the user, DELETE unfollows; both are idempotent."""
    target = ProfileService().get_by_username(username)
    facade = SocialFacade()
    if request.method == 'POST':
        return Response(facade.follow(request.user.id, target.id))
    return Response(facade.unfollow(request.user.id, target.id))


@api_view(['GET'])
def profile_followers(request, username):
    user = ProfileService().get_by_username(username)
    return Response(ProfileSerializer(FollowService().list_followers(user.id), many=True).data)


@api_view(['GET'])
def profile_following(request, username):
    user = ProfileService().get_by_username(username)
    return Response(ProfileSerializer(FollowService().list_following(user.id), many=True).data)


@api_view(['GET'])
def profile_search(request):
    """Search profiles by username or display name (?q=)."""
    profiles = ProfileService().search_profiles(request.query_params.get("q", ""))
    return Response(ProfileSerializer(profiles, many=True).data)


@api_view(['GET'])
def popular_profiles(request):
    return Response(ProfileSerializer(ProfileService().popular_profiles(), many=True).data)


# Notifications

@api_view(['GET'])
def notification_list(request):
    """Newest notifications for the caller, with the unread badge count."""
    service = NotificationService()
    return Response({
        "unread_count": service.unread_count(request.user.id),
        "results": service.list_recent(request.user.id),
    })


@api_view(['POST'])
def notification_read(request, notification_id):
    NotificationService().mark_read(notification_id, recipient_id=request.user.id)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['POST'])
def notifications_read_all(request):
    """Mark all unread notifications for the current user as read."""
    updated = NotificationService().mark_all_read(request.user.id)
    return Response({"updated": updated})
