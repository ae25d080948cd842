import uuid

from photos.models import Photo, User


def make_user(username="johndoe", **kwargs):
    email = kwargs.pop("email", f"{username}_{uuid.uuid4().hex[:6]}@example.org")
    return User.objects.create_user(
        username=username,
        email=email,
        password=kwargs.pop("password", "Password123"),
        display_name=kwargs.pop("display_name", ""),
        **kwargs,
    )


def make_photo(owner=None, title="Sunday fit", image_url="https://img.example.org/a.jpg", **extra):
    if owner is None:
        owner = make_user()
    return Photo.objects.create(owner=owner, title=title, image_url=image_url, **extra)
