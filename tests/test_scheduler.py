import os
from io import StringIO

import pytest
from django.contrib.auth.models import AnonymousUser
from django.core.management import CommandError, call_command
from django.http import HttpResponse
from django.test import RequestFactory

from core.middleware import ProtectionCheckMiddleware
from protection.reconciler import ReconcileStatus
from protection.scheduler import ProtectionScheduler
from protection.service import ProtectionService
from protection.state import ProtectionCheckState

from .conftest import ORIGIN


class _Staff:
    is_authenticated = True
    is_staff = True


@pytest.fixture
def service(directory, state):
    return ProtectionService(directory, ORIGIN, state)


def _middleware(service):
    return ProtectionCheckMiddleware(lambda request: HttpResponse("ok"), service=service)


def test_tick_runs_once_per_ttl(reconciler):
    scheduler = ProtectionScheduler(reconciler)

    assert scheduler.tick().status is ReconcileStatus.RECONCILED
    assert scheduler.tick().status is ReconcileStatus.FRESH


def test_admin_request_by_staff_reconciles(service, directory):
    request = RequestFactory().get("/gestion/pages/page/")
    request.user = _Staff()

    response = _middleware(service)(request)

    assert response.status_code == 200
    assert os.path.exists(directory.htaccess_path)
    assert os.path.exists(directory.sentinel_path)


def test_public_or_anonymous_requests_do_not_reconcile(service, directory):
    public = RequestFactory().get("/pages/ressources/")
    public.user = _Staff()
    anonymous = RequestFactory().get("/gestion/")
    anonymous.user = AnonymousUser()

    _middleware(service)(public)
    _middleware(service)(anonymous)

    assert not os.path.exists(directory.path)


def test_admin_pages_trigger_check(admin_client, media_root):
    response = admin_client.get("/gestion/")

    assert response.status_code == 200
    assert (media_root / "protected_uploads" / ".htaccess").exists()
    assert (media_root / "protected_uploads" / "index.html").exists()


def test_command_forces_reconciliation(media_root):
    out = StringIO()
    call_command("check_protection_files", "--force", stdout=out)

    htaccess = media_root / "protected_uploads" / ".htaccess"
    assert "https://example.com/" in htaccess.read_text(encoding="utf-8")
    assert "Dossier protégé conforme" in out.getvalue()

    out = StringIO()
    call_command("check_protection_files", stdout=out)
    assert "Déjà vérifié récemment" in out.getvalue()


def test_command_fails_when_directory_cannot_be_created(settings, tmp_path):
    blocker = tmp_path / "media"
    blocker.write_text("x")
    settings.MEDIA_ROOT = blocker

    with pytest.raises(CommandError):
        call_command("check_protection_files", "--force", stdout=StringIO())

    assert ProtectionCheckState().last_checked() is None
