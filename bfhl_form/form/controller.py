"""Form Controller: the only code that mutates a FormState."""

from starlette.datastructures import UploadFile

from bfhl_form.config.settings import Settings
from bfhl_form.form.exceptions import FormError, RemoteError, SubmissionPendingError
from bfhl_form.form.file_handler import FileHandler
from bfhl_form.form.models import RESPONSE_FIELDS, FormState, SubmissionRequested
from bfhl_form.form.preview import PreviewRegistry
from bfhl_form.form.response_filter import render_filtered
from bfhl_form.form.submission import SubmissionHandler
from bfhl_form.form.validator import parse_payload
from bfhl_form.logging.logger import Log
from bfhl_form.remote.client_base import BaseRemoteClient
from bfhl_form.remote.factory import RemoteClientFactory


class FormController:
    """Applies user actions to a FormState.

    Every action either fully succeeds or leaves the state as it was, apart
    from the error message it sets.
    """

    def __init__(
        self,
        file_handler: FileHandler,
        submission_handler: SubmissionHandler,
        preview_registry: PreviewRegistry,
    ) -> None:
        self._file_handler = file_handler
        self._submission_handler = submission_handler
        self._preview_registry = preview_registry

    @property
    def preview_registry(self) -> PreviewRegistry:
        return self._preview_registry

    async def submit(self, state: FormState, raw_input: str, session: str | None = None) -> None:
        """Validate the submitted text and, if it holds data, send it."""
        state.raw_input = raw_input
        try:
            if state.submission_pending:
                raise SubmissionPendingError()
            data = parse_payload(raw_input)
        except FormError as exc:
            Log.debug(f"Submission rejected: {exc}", session=session)
            state.error = str(exc)
            return

        # Replaced on every successful validation, identical content included.
        state.payload_array = data
        state.error = ""
        if data:
            await self._dispatch(state, SubmissionRequested(data=data), session)

    async def _dispatch(
        self, state: FormState, event: SubmissionRequested, session: str | None
    ) -> None:
        state.submission_pending = True
        try:
            response = await self._submission_handler.handle(
                event, state.file_content, session=session
            )
        except RemoteError as exc:
            state.error = str(exc)
            return
        finally:
            state.submission_pending = False
        state.response = response
        state.error = ""

    async def upload(
        self, state: FormState, upload: UploadFile | None, session: str | None = None
    ) -> None:
        """Check, read and encode an uploaded file into the state."""
        try:
            described = self._file_handler.inspect(upload)
        except FormError as exc:
            Log.debug(f"Upload rejected: {exc}", session=session)
            state.error = str(exc)
            return

        state.upload_seq += 1
        seq = state.upload_seq
        state.file_type = described.file_type
        try:
            content = await self._file_handler.read(upload, described)
        except FormError as exc:
            if seq == state.upload_seq:
                # the previous file's preview no longer matches file_type
                self._preview_registry.release(state.preview_ref)
                state.preview_ref = None
                state.error = str(exc)
            return
        if seq != state.upload_seq:
            Log.debug(f"Discarding superseded upload {described.filename}", session=session)
            return

        previous_ref = state.preview_ref
        state.file_content = content.base64
        state.preview_ref = (
            self._preview_registry.register(described.content_type, content.raw)
            if described.previewable
            else None
        )
        self._preview_registry.release(previous_ref)
        state.error = ""
        Log.info(
            f"Stored {described.filename} ({described.size_bytes} bytes, {described.file_type})",
            session=session,
        )

    def toggle(self, state: FormState, label: str, checked: bool) -> None:
        """Add or remove one checkbox label from the selection.

        Raises:
            ValueError: if the label is not one of the response field labels.
        """
        if label not in RESPONSE_FIELDS:
            raise ValueError(f"Unknown field label '{label}'. Choose from: {list(RESPONSE_FIELDS)}")
        if checked:
            state.selection.add(label)
        else:
            state.selection.discard(label)

    @staticmethod
    def filtered_view(state: FormState) -> str | None:
        return render_filtered(state.response, state.selection)


def build_controller(
    settings: Settings,
    client: BaseRemoteClient | None = None,
    preview_registry: PreviewRegistry | None = None,
) -> FormController:
    """Build a FormController with all required collaborators."""
    if client is None:
        client = RemoteClientFactory.create(settings)
    if preview_registry is None:
        preview_registry = PreviewRegistry()
    return FormController(
        file_handler=FileHandler(max_bytes=settings.max_upload_bytes),
        submission_handler=SubmissionHandler(client),
        preview_registry=preview_registry,
    )
