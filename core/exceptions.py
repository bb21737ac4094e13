"""
Core — Exception Handling

Domain exceptions and the DRF exception handler that renders every error
in the standard envelope.

@file core/exceptions.py
"""

import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger('idn_area')


# ---------------------------------------------------------------------------
# Domain exceptions
# ---------------------------------------------------------------------------

class ResourceNotFoundError(APIException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Resource not found.'
    default_code = 'RESOURCE_NOT_FOUND'


class AreaNotFoundError(ResourceNotFoundError):
    """No area of the given type has the requested code."""

    default_detail = 'Area not found.'
    default_code = 'AREA_NOT_FOUND'

    def __init__(self, entity: str, code: str):
        self.entity = entity
        self.code = code
        super().__init__(detail=f"There is no {entity} with code '{code}'.")


# ---------------------------------------------------------------------------
# Standard exception handler
# ---------------------------------------------------------------------------

def standard_exception_handler(exc, context):
    """
    Wraps every error response in the standard envelope:
      { "success": false, "errors": {...}, "code": "ERROR_CODE" }
    """
    if isinstance(exc, Http404):
        exc = ResourceNotFoundError()
    elif isinstance(exc, ValidationError):
        data = {
            'success': False,
            'errors': exc.message_dict if hasattr(exc, 'message_dict') else {'detail': exc.messages},
            'code': 'VALIDATION_ERROR',
        }
        return Response(data, status=status.HTTP_400_BAD_REQUEST)
    elif isinstance(exc, DatabaseError):
        logger.exception('Database failure in view: %s', exc)
        return Response(
            {'success': False, 'errors': {'detail': ['Data store unavailable.']}, 'code': 'PERSISTENCE_FAILURE'},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    response = exception_handler(exc, context)

    if response is not None:
        errors = {}
        code = getattr(exc, 'default_code', 'ERROR')

        if isinstance(response.data, dict):
            errors = response.data
            if isinstance(response.data.get('code'), str):
                code = response.data.pop('code')
        elif isinstance(response.data, list):
            errors = {'detail': response.data}
        else:
            errors = {'detail': [str(response.data)]}

        if code == 'invalid':
            code = 'VALIDATION_ERROR'

        response.data = {
            'success': False,
            'errors': errors,
            'code': code,
        }

    if response is None:
        logger.exception('Unhandled exception in view: %s', exc)
        return Response(
            {'success': False, 'errors': {'detail': ['Internal server error.']}, 'code': 'INTERNAL_ERROR'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    return response
