"""Local previews of uploaded images and PDFs."""

import uuid
from dataclasses import dataclass

from bfhl_form.form.models import FilePreview


@dataclass(frozen=True)
class PreviewEntry:
    content_type: str
    content: bytes


class PreviewRegistry:
    """In-memory store of previewable uploads, addressed by opaque references.

    Stands in for browser object URLs: a reference stays valid until it is
    released.
    """

    def __init__(self) -> None:
        self._entries: dict[str, PreviewEntry] = {}

    def register(self, content_type: str, content: bytes) -> str:
        ref = uuid.uuid4().hex
        self._entries[ref] = PreviewEntry(content_type=content_type, content=content)
        return ref

    def get(self, ref: str) -> PreviewEntry | None:
        return self._entries.get(ref)

    def release(self, ref: str | None) -> None:
        if ref is not None:
            self._entries.pop(ref, None)

    def __len__(self) -> int:
        return len(self._entries)


def build_preview(file_type: str, url: str | None) -> FilePreview | None:
    """Decide how the preview region renders the current upload.

    Images are embedded, PDFs are linked, anything else shows nothing.
    """
    if not url:
        return None
    if file_type.startswith("image"):
        return FilePreview(kind="image", url=url)
    if file_type == "application/pdf":
        return FilePreview(kind="pdf", url=url)
    return None
