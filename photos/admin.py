from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.urls import reverse
from django.utils.html import format_html

from photos.models import Comment, Notification, Photo, User


class CommentInline(admin.TabularInline):
    """Show the newest comments directly on the Photo page in Admin."""
    model = Comment
    extra = 0
    readonly_fields = ['user', 'text', 'created_at']
    ordering = ['-created_at']


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Admin configuration for profiles; follow counters are read-only caches."""
    list_display = ('username', 'display_name', 'email', 'followers_count', 'following_count', 'is_staff')
    search_fields = ('username', 'display_name', 'email')
    readonly_fields = ('followers_count', 'following_count', 'auth_uid')
    fieldsets = BaseUserAdmin.fieldsets + (
        ('Profile', {'fields': ('display_name', 'bio', 'avatar_url', 'auth_uid')}),
        ('Counters', {'fields': ('followers_count', 'following_count')}),
    )


@admin.register(Photo)
class PhotoAdmin(admin.ModelAdmin):
    """Admin configuration for photos with cached aggregates."""
    list_display = ('title', 'owner_link', 'rating', 'votes_count', 'likes_count', 'comments_count', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('title', 'description', 'owner__username')
    readonly_fields = ('rating', 'votes_count', 'likes_count', 'comments_count')
    inlines = [CommentInline]

    def owner_link(self, obj):
        """Return a link to the owner's profile for quick navigation."""
        link = reverse("admin:photos_user_change", args=[obj.owner_id])
        return format_html('<a href="{}">{}</a>', link, obj.owner.username)
    owner_link.short_description = "Owner"


@admin.register(Comment)
class CommentAdmin(admin.ModelAdmin):
    list_display = ('short_text', 'user', 'photo', 'created_at')
    list_filter = ('created_at',)
    search_fields = ('text', 'user__username')

    def short_text(self, obj):
        """Shorten comment text for list display."""
        return obj.text[:50] + "..." if len(obj.text) > 50 else obj.text


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ('recipient', 'sender', 'notification_type', 'is_read', 'created_at')
    list_filter = ('notification_type', 'is_read')
    actions = ['mark_read']

    @admin.action(description='Mark selected notifications as read')
    def mark_read(self, request, queryset):
        queryset.update(is_read=True)
