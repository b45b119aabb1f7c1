from __future__ import annotations

import pytest

from src.filerelay.relay import relay_policy as policy
from src.filerelay.relay.relay_models import Disposition, FilePayload

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("content_type", "expected"),
    [
        ("image/png", True),
        ("image/jpg", True),
        ("video/webm", True),
        ("audio/wav", True),
        ("text/plain", True),
        ("application/pdf", True),
        ("application/zip", False),
        ("IMAGE/PNG", False),
        ("text/html", False),
        (None, False),
    ],
)
def test_allow_list_is_fixed_and_case_sensitive(content_type, expected) -> None:
    assert policy.is_allowed(content_type) is expected


@pytest.mark.parametrize(
    ("content_type", "expected"),
    [
        ("image/gif", True),
        ("video/mp4", True),
        ("audio/mpeg", True),
        ("text/csv", True),
        ("application/pdf", True),
        ("application/json", False),
        ("application/pdfx", False),
    ],
)
def test_previewable_by_top_level_class(content_type: str, expected: bool) -> None:
    assert policy.is_previewable(content_type) is expected


def test_limits_are_named_constants() -> None:
    assert policy.MAX_PAYLOAD_BYTES == 10 * 1024 * 1024
    assert policy.OBJECT_TTL.total_seconds() == 3 * 60 * 60
    assert policy.download_path("ABC123") == "/api/download/ABC123"
    assert policy.preview_path("ABC123") == "/api/preview/ABC123"


def test_content_disposition_quotes_filename() -> None:
    payload = FilePayload(
        payload=b"",
        content_type="text/plain",
        original_name='a"b.txt',
        disposition=Disposition.INLINE,
    )

    assert payload.content_disposition == "inline; filename=\"a'b.txt\""


def test_content_disposition_encodes_non_ascii_filename() -> None:
    payload = FilePayload(
        payload=b"",
        content_type="text/plain",
        original_name="отчёт.txt",
        disposition=Disposition.ATTACHMENT,
    )

    header = payload.content_disposition

    assert header.startswith('attachment; filename="')
    assert "filename*=UTF-8''%D0%BE" in header
    header.encode("latin-1")
