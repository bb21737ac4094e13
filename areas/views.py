"""
Areas — Views

Read-only ViewSets for provinces, regencies, districts and islands.
Every list endpoint accepts ``name``, ``sort_by`` and ``sort_order``;
traversal endpoints return 404 when the parent code does not exist.

@file areas/views.py
"""

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .serializers import (
    AreaCodeSerializer,
    DistrictQuerySerializer,
    DistrictSerializer,
    IslandQuerySerializer,
    IslandSerializer,
    ProvinceQuerySerializer,
    ProvinceSerializer,
    RegencyQuerySerializer,
    RegencySerializer,
)
from .services import DistrictService, IslandService, ProvinceService, RegencyService


class AreaViewSet(viewsets.ViewSet):
    """
    Shared list / retrieve for one area type.

    Subclasses provide the service, the read and query serializers, and
    the fixed length of the area code.
    """

    permission_classes = [AllowAny]
    lookup_field = 'code'
    lookup_value_regex = '[^/.]+'

    service_class = None
    serializer_class = None
    query_serializer_class = None
    code_length = None

    def get_service(self):
        return self.service_class()

    def get_query(self, query_serializer_class=None):
        serializer_class = query_serializer_class or self.query_serializer_class
        ser = serializer_class(data=self.request.query_params)
        ser.is_valid(raise_exception=True)
        return ser

    def get_code(self, code):
        ser = AreaCodeSerializer(data={'code': code}, context={'code_length': self.code_length})
        ser.is_valid(raise_exception=True)
        return ser.validated_data['code']

    def list(self, request):
        query = self.get_query()
        areas = self.get_service().find(query.validated_data.get('name', ''), query.sort)
        return Response(self.serializer_class(areas, many=True).data)

    def retrieve(self, request, code=None):
        area = self.get_service().get(self.get_code(code))
        return Response(self.serializer_class(area).data)


class ProvinceViewSet(AreaViewSet):
    service_class = ProvinceService
    serializer_class = ProvinceSerializer
    query_serializer_class = ProvinceQuerySerializer
    code_length = 2

    @action(detail=True, methods=['get'], url_path='regencies')
    def regencies(self, request, code=None):
        code = self.get_code(code)
        query = self.get_query(RegencyQuerySerializer)
        regencies = self.get_service().find_regencies(
            code, name=query.validated_data.get('name', ''), sort=query.sort,
        )
        return Response(RegencySerializer(regencies, many=True).data)


class RegencyViewSet(AreaViewSet):
    service_class = RegencyService
    serializer_class = RegencySerializer
    query_serializer_class = RegencyQuerySerializer
    code_length = 4

    @action(detail=True, methods=['get'], url_path='districts')
    def districts(self, request, code=None):
        code = self.get_code(code)
        query = self.get_query(DistrictQuerySerializer)
        districts = self.get_service().find_districts(
            code, name=query.validated_data.get('name', ''), sort=query.sort,
        )
        return Response(DistrictSerializer(districts, many=True).data)

    @action(detail=True, methods=['get'], url_path='islands')
    def islands(self, request, code=None):
        code = self.get_code(code)
        query = self.get_query(IslandQuerySerializer)
        islands = self.get_service().find_islands(
            code, name=query.validated_data.get('name', ''), sort=query.sort,
        )
        return Response(IslandSerializer(islands, many=True).data)


class DistrictViewSet(AreaViewSet):
    service_class = DistrictService
    serializer_class = DistrictSerializer
    query_serializer_class = DistrictQuerySerializer
    code_length = 6


class IslandViewSet(AreaViewSet):
    service_class = IslandService
    serializer_class = IslandSerializer
    query_serializer_class = IslandQuerySerializer
    code_length = 9
