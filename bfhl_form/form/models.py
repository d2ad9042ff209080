from dataclasses import dataclass, field
from typing import Any, Literal

ALPHABETS = "Alphabets"
NUMBERS = "Numbers"
HIGHEST_LOWERCASE_ALPHABET = "Highest Lowercase Alphabet"

# Checkbox label -> response field, in display order.
RESPONSE_FIELDS: dict[str, str] = {
    ALPHABETS: "alphabets",
    NUMBERS: "numbers",
    HIGHEST_LOWERCASE_ALPHABET: "highest_lowercase_alphabet",
}


@dataclass(frozen=True)
class UploadedFile:
    """Metadata of a user-selected file, known before its content is read."""

    filename: str
    size_bytes: int
    content_type: str = ""

    @property
    def file_type(self) -> str:
        """MIME type, or the filename extension when the browser sent none."""
        if self.content_type:
            return self.content_type
        return self.filename.rsplit(".", 1)[-1]

    @property
    def previewable(self) -> bool:
        return self.content_type.startswith("image") or self.content_type == "application/pdf"


@dataclass(frozen=True)
class FileContent:
    """Base64 payload of a successfully read upload."""

    file: UploadedFile
    base64: str
    raw: bytes = field(repr=False, default=b"")


@dataclass(frozen=True)
class SubmissionRequested:
    """Emitted by a successful validation with a non-empty payload array."""

    data: list[Any]


@dataclass(frozen=True)
class FilePreview:
    """What the preview region shows for the current upload."""

    kind: Literal["image", "pdf"]
    url: str


@dataclass
class FormState:
    """Per-session state of the form, mutated only by FormController."""

    raw_input: str = ""
    payload_array: list[Any] = field(default_factory=list)
    file_content: str = ""
    file_type: str = ""
    preview_ref: str | None = None
    response: Any = None
    error: str = ""
    selection: set[str] = field(default_factory=set)
    submission_pending: bool = False
    upload_seq: int = 0
