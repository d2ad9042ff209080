import io
from collections.abc import Callable

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas
from starlette.datastructures import Headers, UploadFile

# 1x1 transparent PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d4944415478da63f8ffff3f0005fe02fea7d6a4"
    "0000000049454e44ae426082"
)


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def png_bytes() -> bytes:
    return PNG_BYTES


@pytest.fixture()
def make_upload() -> Callable[..., UploadFile]:
    """Build a starlette UploadFile the way the multipart parser does."""

    def _make(
        content: bytes,
        filename: str = "upload.bin",
        content_type: str | None = "application/octet-stream",
        size: int | None = None,
    ) -> UploadFile:
        headers = Headers({"content-type": content_type}) if content_type else Headers({})
        return UploadFile(
            file=io.BytesIO(content),
            size=len(content) if size is None else size,
            filename=filename,
            headers=headers,
        )

    return _make
