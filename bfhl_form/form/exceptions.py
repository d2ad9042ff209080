class FormError(Exception):
    """Base exception for every failure surfaced in the form's error region.

    The exception message is the text shown to the user.
    """


class InvalidSyntaxError(FormError):
    """Raised when the submitted text is not valid JSON."""

    def __init__(self, message: str = "Invalid JSON input.") -> None:
        super().__init__(message)


class InvalidShapeError(FormError):
    """Raised when valid JSON lacks a "data" array."""

    def __init__(
        self,
        message: str = (
            'Invalid format. JSON should contain a "data" key with an array '
            "of alphabets and numbers."
        ),
    ) -> None:
        super().__init__(message)


class FileMissingError(FormError):
    """Raised when the upload form was posted without a file."""

    def __init__(self, message: str = "No file selected") -> None:
        super().__init__(message)


class FileTooLargeError(FormError):
    """Raised when a file exceeds the upload size ceiling."""

    def __init__(self, message: str = "File size exceeds 5MB limit") -> None:
        super().__init__(message)


class FileReadError(FormError):
    """Raised when an uploaded file cannot be read."""

    def __init__(self, message: str = "Failed to read file") -> None:
        super().__init__(message)


class RemoteError(FormError):
    """Raised when the remote endpoint call fails for any reason.

    Network errors and non-2xx statuses are reported the same way; the
    underlying cause is kept in ``detail`` for the diagnostic log.
    """

    def __init__(self, detail: str = "", message: str = "API error") -> None:
        super().__init__(message)
        self.detail = detail


class SubmissionPendingError(FormError):
    """Raised when a submission is requested while another is in flight."""

    def __init__(self, message: str = "A submission is already in progress.") -> None:
        super().__init__(message)
