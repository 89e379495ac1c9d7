import os

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import transaction

from pages.forms_admin import PageFileForm
from pages.models import MediaItem, Page, PageFile

pytestmark = pytest.mark.django_db

PDF = b"%PDF-1.4\n%%EOF\n"


@pytest.fixture
def page():
    return Page.objects.create(title="Guide de lecture")


def _data(**extra):
    data = {"title": "", "desc": "", "image": "", "file": "", "order": "0"}
    data.update(extra)
    return data


def test_upload_is_stored_in_protected_directory(page, media_root, django_capture_on_commit_callbacks):
    form = PageFileForm(
        _data(title="Chapitre 1"),
        {"upload": SimpleUploadedFile("chapitre-1.pdf", PDF, content_type="application/pdf")},
        instance=PageFile(page=page),
    )

    assert form.is_valid(), form.errors
    with django_capture_on_commit_callbacks(execute=True):
        entry = form.save()

    assert entry.file.file.name == "protected_uploads/chapitre-1.pdf"
    assert entry.file.url == "/media/protected_uploads/chapitre-1.pdf"
    assert entry.file.is_protected
    assert os.path.exists(media_root / "protected_uploads" / "chapitre-1.pdf")


def test_rolled_back_save_leaves_no_file(page, media_root, django_capture_on_commit_callbacks):
    form = PageFileForm(
        _data(),
        {"upload": SimpleUploadedFile("annule.pdf", PDF)},
        instance=PageFile(page=page),
    )
    assert form.is_valid(), form.errors

    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        with pytest.raises(RuntimeError):
            with transaction.atomic():
                form.save()
                raise RuntimeError("inline suivant invalide")

    assert callbacks == []
    assert not MediaItem.objects.exists()
    assert not os.path.exists(media_root / "protected_uploads" / "annule.pdf")


def test_upload_replaces_selected_unprotected_media(page, media_root):
    public = MediaItem.objects.create(file="2024/01/old.pdf")
    form = PageFileForm(
        _data(file=str(public.pk)),
        {"upload": SimpleUploadedFile("new.pdf", PDF)},
        instance=PageFile(page=page),
    )

    assert form.is_valid(), form.errors
    assert form.save().file.file.name == "protected_uploads/new.pdf"


def test_selecting_protected_media_is_valid(page, media_root):
    protected = MediaItem.objects.create(file="protected_uploads/doc.pdf")
    form = PageFileForm(_data(file=str(protected.pk)), instance=PageFile(page=page))

    assert form.is_valid(), form.errors
    assert form.save().file == protected


def test_selecting_unprotected_media_is_rejected(page, media_root):
    public = MediaItem.objects.create(file="2024/01/doc.pdf")
    form = PageFileForm(_data(file=str(public.pk)), instance=PageFile(page=page))

    assert not form.is_valid()
    assert "protected_uploads" in form.errors["file"][0]
    assert not PageFile.objects.exists()


def test_file_or_upload_is_required(page, media_root):
    form = PageFileForm(_data(title="Vide"), instance=PageFile(page=page))

    assert not form.is_valid()
    assert "file" in form.errors


def test_upload_extension_is_checked(page, media_root):
    form = PageFileForm(
        _data(),
        {"upload": SimpleUploadedFile("notes.txt", b"hello")},
        instance=PageFile(page=page),
    )

    assert not form.is_valid()
    assert "upload" in form.errors
    assert not MediaItem.objects.exists()
