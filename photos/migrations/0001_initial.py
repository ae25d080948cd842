import django.contrib.auth.models
import django.core.validators
import django.db.models.deletion
import django.utils.timezone
import photos.utils.ids
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="User",
            fields=[
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(default=False, help_text="Designates that this user has all permissions without explicitly assigning them.", verbose_name="superuser status")),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("email", models.EmailField(blank=True, max_length=254, verbose_name="email address")),
                ("is_staff", models.BooleanField(default=False, help_text="Designates whether the user can log into this admin site.", verbose_name="staff status")),
                ("is_active", models.BooleanField(default=True, help_text="Designates whether this user should be treated as active. Unselect this instead of deleting accounts.", verbose_name="active")),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("id", models.UUIDField(default=photos.utils.ids.new_id, editable=False, primary_key=True, serialize=False)),
                ("username", models.CharField(max_length=30, unique=True, validators=[django.core.validators.RegexValidator(message="Username must consist of at least three alphanumericals", regex="^\\w{3,30}$")])),
                ("auth_uid", models.CharField(blank=True, max_length=128, null=True, unique=True)),
                ("display_name", models.CharField(blank=True, max_length=100)),
                ("bio", models.TextField(blank=True, help_text="short user bio shown on profile", max_length=500, validators=[django.core.validators.MaxLengthValidator(500)])),
                ("avatar_url", models.CharField(blank=True, max_length=500)),
                ("followers_count", models.PositiveIntegerField(default=0)),
                ("following_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("groups", models.ManyToManyField(blank=True, help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.", related_name="user_set", related_query_name="user", to="auth.group", verbose_name="groups")),
                ("user_permissions", models.ManyToManyField(blank=True, help_text="Specific permissions for this user.", related_name="user_set", related_query_name="user", to="auth.permission", verbose_name="user permissions")),
            ],
            options={
                "ordering": ["username"],
            },
            managers=[
                ("objects", django.contrib.auth.models.UserManager()),
            ],
        ),
        migrations.CreateModel(
            name="Photo",
            fields=[
                ("id", models.UUIDField(default=photos.utils.ids.new_id, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True, max_length=4000, null=True)),
                ("image_url", models.CharField(max_length=500)),
                ("rating", models.FloatField(default=0.0)),
                ("votes_count", models.PositiveIntegerField(default=0)),
                ("likes_count", models.PositiveIntegerField(default=0)),
                ("comments_count", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("owner", models.ForeignKey(db_column="owner_id", on_delete=django.db.models.deletion.CASCADE, related_name="photos", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "photos",
                "indexes": [models.Index(fields=["owner", "created_at"], name="photos_owner_created_idx")],
            },
        ),
        migrations.CreateModel(
            name="Comment",
            fields=[
                ("id", models.UUIDField(default=photos.utils.ids.new_id, editable=False, primary_key=True, serialize=False)),
                ("text", models.TextField(max_length=2000)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("photo", models.ForeignKey(db_column="photo_id", on_delete=django.db.models.deletion.CASCADE, related_name="comments", to="photos.photo")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="comments", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "comments",
            },
        ),
        migrations.CreateModel(
            name="Follower",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("followed", models.ForeignKey(db_column="followed_id", on_delete=django.db.models.deletion.CASCADE, related_name="followers", to=settings.AUTH_USER_MODEL)),
                ("follower", models.ForeignKey(db_column="follower_id", on_delete=django.db.models.deletion.CASCADE, related_name="following", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "followers",
                "constraints": [
                    models.UniqueConstraint(fields=("follower", "followed"), name="uniq_followers_follower_followed"),
                    models.CheckConstraint(condition=models.Q(("follower", models.F("followed")), _negated=True), name="chk_followers_not_self"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Like",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("photo", models.ForeignKey(db_column="photo_id", on_delete=django.db.models.deletion.CASCADE, related_name="likes", to="photos.photo")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="likes", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "likes",
                "constraints": [
                    models.UniqueConstraint(fields=("user", "photo"), name="uniq_likes_user_photo"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Notification",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("notification_type", models.CharField(choices=[("like", "Like"), ("comment", "Comment"), ("rating", "Rating"), ("follow", "Follow")], max_length=20)),
                ("content", models.CharField(max_length=255)),
                ("is_read", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("photo", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, to="photos.photo")),
                ("recipient", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="notifications", to=settings.AUTH_USER_MODEL)),
                ("sender", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="sent_notifications", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ["-created_at", "-id"],
                "indexes": [models.Index(fields=["recipient", "is_read"], name="notif_recipient_read_idx")],
            },
        ),
        migrations.CreateModel(
            name="Rating",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("value", models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1), django.core.validators.MaxValueValidator(10)])),
                ("rated_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("photo", models.ForeignKey(db_column="photo_id", on_delete=django.db.models.deletion.CASCADE, related_name="ratings", to="photos.photo")),
                ("user", models.ForeignKey(db_column="user_id", on_delete=django.db.models.deletion.CASCADE, related_name="ratings", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "db_table": "ratings",
                "constraints": [
                    models.UniqueConstraint(fields=("user", "photo"), name="uniq_ratings_user_photo"),
                    models.CheckConstraint(condition=models.Q(("value__gte", 1), ("value__lte", 10)), name="chk_ratings_value_range"),
                ],
            },
        ),
    ]
