from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_POST
from django.contrib.auth.decorators import login_required
import logging
import json

from .models import UserRole
from .services.credentials import add_students_bulk
from .services.exceptions import BulkProvisioningError, StreamWriteError
from reports.credentials_pdf import build_credentials_pdf_result

logger = logging.getLogger(__name__)


def _error(message, status):
    return JsonResponse({'success': False, 'message': message}, status=status)


def _load_json(request):
    """Parse the request body as a JSON object; returns None when invalid."""
    try:
        payload = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return payload if isinstance(payload, dict) else None


def _pdf_response(result):
    response = HttpResponse(result.pdf_bytes, content_type=result.content_type)
    response['Content-Disposition'] = result.content_disposition
    response['Content-Length'] = str(len(result))
    return response


def _render_credentials_pdf(credentials, organization_name):
    try:
        result = build_credentials_pdf_result(credentials, organization_name)
    except StreamWriteError as e:
        logger.error(f"Credentials PDF generation failed: {e}")
        return _error('Failed to generate credentials PDF', 500)
    return _pdf_response(result)


@login_required
@require_POST
def organization_students_bulk(request):
    """
    Create students in bulk for the logged-in organization.

    Returns the JSON summary, or the credentials PDF of the created students
    when called with ?format=pdf. The PDF lists created students only; the
    X-Bulk-Successful and X-Bulk-Failed headers carry the counts.
    """
    if request.user.role != UserRole.ORGANIZATION:
        return _error('Only organizations can add students', 403)

    payload = _load_json(request)
    if payload is None:
        return _error('Request body must be a JSON object', 400)

    try:
        result = add_students_bulk(request.user, payload.get('students'))
    except BulkProvisioningError as e:
        return _error(str(e), 400)

    if request.GET.get('format') == 'pdf':
        response = _render_credentials_pdf(result.as_credentials(), request.user.name)
        response['X-Bulk-Successful'] = str(len(result.successful))
        response['X-Bulk-Failed'] = str(len(result.failed))
        return response

    return JsonResponse({
        'success': True,
        'message': result.message,
        'data': result.as_dict(),
    }, status=201)


@login_required
@require_POST
def organization_credentials_pdf(request):
    """Download a credentials PDF for the credential list in the request body."""
    if request.user.role != UserRole.ORGANIZATION:
        return _error('Only organizations can download student credentials', 403)

    payload = _load_json(request)
    if payload is None:
        return _error('Request body must be a JSON object', 400)

    credentials = payload.get('credentials', [])
    if not isinstance(credentials, list) or not all(isinstance(c, dict) for c in credentials):
        return _error('credentials must be a list of objects', 400)

    organization_name = payload.get('organization_name') or request.user.name
    return _render_credentials_pdf(credentials, organization_name)
