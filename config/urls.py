"""
idn-area — Root URL Configuration

All API endpoints are namespaced under /api/v1/.

@file config/urls.py
"""

from django.urls import include, path
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.reverse import reverse


@api_view(['GET'])
@permission_classes([AllowAny])
def api_root(request, format=None):
    """idn-area API v1 — endpoint directory."""
    return Response({
        'provinces': reverse('api-v1:areas:province-list', request=request, format=format),
        'regencies': reverse('api-v1:areas:regency-list', request=request, format=format),
        'districts': reverse('api-v1:areas:district-list', request=request, format=format),
        'islands': reverse('api-v1:areas:island-list', request=request, format=format),
    })


api_v1_patterns = [
    path('', api_root, name='api-root'),
    path('', include('areas.urls', namespace='areas')),
]

urlpatterns = [
    path('api/v1/', include((api_v1_patterns, 'api-v1'))),
]
