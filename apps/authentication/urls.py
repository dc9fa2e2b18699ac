#authentication/urls.py
from django.urls import re_path
from rest_framework_simplejwt.views import TokenRefreshView
from . import views

urlpatterns = [
    re_path(r'^login/?$', views.login_view, name='login'),
    re_path(r'^logout/?$', views.logout_view, name='logout'),
    re_path(r'^profile/?$', views.profile_view, name='profile'),
    re_path(r'^refresh/?$', TokenRefreshView.as_view(), name='token_refresh'),
]
