# apps/health_records/urls.py

from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

router = SimpleRouter()
router.trailing_slash = '/?'
router.register(r'health-records', views.HealthRecordViewSet)

urlpatterns = [
    path('', include(router.urls)),
]
