import re

from protection.service import ProtectionService
from protection.uploads import UploadDir, default_upload_dir, media_upload_to, relocate_upload_dir


class _Upload:
    pass


def test_relocate_upload_dir():
    relocated = relocate_upload_dir(UploadDir(basedir="/up", baseurl="https://site/up"), "protected_x")
    assert relocated == UploadDir(basedir="/up/protected_x", baseurl="https://site/up/protected_x")


def test_relocate_upload_dir_ignores_trailing_slash():
    relocated = relocate_upload_dir(UploadDir(basedir="/up/", baseurl="https://site/up/"), "protected_x")
    assert relocated.basedir == "/up/protected_x"
    assert relocated.baseurl == "https://site/up/protected_x"


def test_default_upload_is_date_sharded(media_root):
    name = media_upload_to(_Upload(), "doc.pdf")
    assert re.fullmatch(r"\d{4}/\d{2}/doc\.pdf", name)
    assert default_upload_dir().basedir.startswith(str(media_root))


def test_relocated_upload_lands_in_protected_directory(media_root, settings):
    settings.PROTECTED_MEDIA_DIRECTORY = "protected_x"
    instance = _Upload()
    instance.upload_dir = ProtectionService.from_settings().upload_directory()

    assert instance.upload_dir.basedir == str(media_root) + "/protected_x"
    assert instance.upload_dir.baseurl == "/media/protected_x"
    assert media_upload_to(instance, "doc.pdf") == "protected_x/doc.pdf"
