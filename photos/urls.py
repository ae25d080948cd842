from django.urls import path

from photos import views

urlpatterns = [
    path('photos/', views.photo_list, name='photo_list'),
    path('photos/<uuid:photo_id>/', views.photo_detail, name='photo_detail'),
    path('photos/<uuid:photo_id>/rating/', views.photo_rating, name='photo_rating'),
    path('photos/<uuid:photo_id>/like/', views.photo_like, name='photo_like'),
    path('photos/<uuid:photo_id>/comments/', views.photo_comments, name='photo_comments'),
    path('comments/<uuid:comment_id>/', views.comment_detail, name='comment_detail'),
    path('profile/', views.my_profile, name='my_profile'),
    path('profiles/search/', views.profile_search, name='profile_search'),
    path('profiles/popular/', views.popular_profiles, name='popular_profiles'),
    path('users/<str:username>/', views.profile_detail, name='profile_detail'),
    path('users/<str:username>/photos/', views.profile_photos, name='profile_photos'),
    path('users/<str:username>/stats/', views.profile_stats, name='profile_stats'),
    path('users/<str:username>/follow/', views.profile_follow, name='profile_follow'),
    path('users/<str:username>/followers/', views.profile_followers, name='profile_followers'),
    path('users/<str:username>/following/', views.profile_following, name='profile_following'),
    path('notifications/', views.notification_list, name='notification_list'),
    path('notifications/read-all/', views.notifications_read_all, name='notifications_read_all'),
    path('notifications/<int:notification_id>/read/', views.notification_read, name='notification_read'),
]
