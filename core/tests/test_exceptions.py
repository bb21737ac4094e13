"""
Core — Exception Handler Tests

@file core/tests/test_exceptions.py
"""

from django.db import OperationalError
from django.http import Http404
from rest_framework.exceptions import ValidationError

from core.exceptions import AreaNotFoundError, standard_exception_handler


class TestStandardExceptionHandler:
    def test_area_not_found_envelope(self):
        resp = standard_exception_handler(AreaNotFoundError('province', '00'), {})
        assert resp.status_code == 404
        assert resp.data['success'] is False
        assert resp.data['code'] == 'AREA_NOT_FOUND'
        assert "province with code '00'" in str(resp.data['errors']['detail'])

    def test_http404_becomes_resource_not_found(self):
        resp = standard_exception_handler(Http404(), {})
        assert resp.status_code == 404
        assert resp.data['code'] == 'RESOURCE_NOT_FOUND'

    def test_field_named_code_is_kept_as_error(self):
        resp = standard_exception_handler(ValidationError({'code': ['Code must be alphanumeric.']}), {})
        assert resp.status_code == 400
        assert resp.data['code'] == 'VALIDATION_ERROR'
        assert resp.data['errors']['code'] == ['Code must be alphanumeric.']

    def test_database_error_is_a_persistence_failure(self):
        resp = standard_exception_handler(OperationalError('connection refused'), {})
        assert resp.status_code == 503
        assert resp.data['code'] == 'PERSISTENCE_FAILURE'

    def test_unhandled_exception_is_internal_error(self):
        resp = standard_exception_handler(RuntimeError('boom'), {})
        assert resp.status_code == 500
        assert resp.data['code'] == 'INTERNAL_ERROR'

    def test_area_not_found_carries_entity_and_code(self):
        exc = AreaNotFoundError('regency', '0000')
        assert exc.entity == 'regency'
        assert exc.code == '0000'
