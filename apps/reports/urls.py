from django.urls import path, include
from rest_framework.routers import SimpleRouter
from . import views

router = SimpleRouter()
router.trailing_slash = '/?'
router.register(r'', views.ReportsViewSet, basename='reports')

urlpatterns = [
    path('', include(router.urls)),
]
