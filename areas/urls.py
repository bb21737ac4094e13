"""
Areas — URL Configuration

@file areas/urls.py
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from .views import DistrictViewSet, IslandViewSet, ProvinceViewSet, RegencyViewSet

app_name = 'areas'

router = SimpleRouter()
router.register('provinces', ProvinceViewSet, basename='province')
router.register('regencies', RegencyViewSet, basename='regency')
router.register('districts', DistrictViewSet, basename='district')
router.register('islands', IslandViewSet, basename='island')

urlpatterns = [
    path('', include(router.urls)),
]
