from bfhl_form.form.models import FormState


class FormStateStore:
    """Process-wide map of session id to FormState. Nothing is persisted."""

    def __init__(self) -> None:
        self._states: dict[str, FormState] = {}

    def get(self, session_id: str) -> FormState:
        """Return the session's state, creating an empty one on first use."""
        state = self._states.get(session_id)
        if state is None:
            state = FormState()
            self._states[session_id] = state
        return state

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._states

    def __len__(self) -> int:
        return len(self._states)
