#apps/students/urls.py:

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

router = DefaultRouter()
# Accept "/students" as well as "/students/".
router.trailing_slash = '/?'
router.register(r'students', views.StudentViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
