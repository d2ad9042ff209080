import uuid
from pathlib import Path

from fastapi import FastAPI, File, Form, HTTPException, Request, UploadFile
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from starlette.middleware.sessions import SessionMiddleware

from bfhl_form.config.settings import Settings
from bfhl_form.form.controller import FormController, build_controller
from bfhl_form.form.models import RESPONSE_FIELDS
from bfhl_form.form.preview import build_preview
from bfhl_form.form.store import FormStateStore

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
SESSION_KEY = "form_id"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _session_id(request: Request) -> str:
    session_id = request.session.get(SESSION_KEY)
    if not session_id:
        session_id = uuid.uuid4().hex
        request.session[SESSION_KEY] = session_id
    return session_id


def _back_to_form(request: Request) -> RedirectResponse:
    return RedirectResponse(request.app.url_path_for("index"), status_code=303)


def create_app(
    settings: Settings | None = None,
    controller: FormController | None = None,
) -> FastAPI:
    """Build the form application.

    State lives in memory for the lifetime of the app; a signed session
    cookie ties each browser to its FormState.
    """
    if settings is None:
        settings = Settings()
    if controller is None:
        controller = build_controller(settings)
    store = FormStateStore()

    app = FastAPI(title="BFHL Input Form")
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret_key,
        session_cookie=settings.session_cookie_name,
        same_site="lax",
    )
    app.state.settings = settings
    app.state.controller = controller
    app.state.store = store

    @app.get("/", response_class=HTMLResponse, name="index")
    async def index(request: Request) -> HTMLResponse:
        state = store.get(_session_id(request))
        preview_url = (
            request.app.url_path_for("preview", ref=state.preview_ref)
            if state.preview_ref
            else None
        )
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "title": "Input Form",
                "state": state,
                "labels": list(RESPONSE_FIELDS),
                "preview": build_preview(state.file_type, preview_url),
                "filtered": controller.filtered_view(state),
            },
        )

    @app.post("/submit", name="submit")
    async def submit(request: Request, json_input: str = Form("")) -> RedirectResponse:
        session_id = _session_id(request)
        await controller.submit(store.get(session_id), json_input, session=session_id)
        return _back_to_form(request)

    @app.post("/upload", name="upload")
    async def upload(
        request: Request, file: UploadFile | None = File(None)
    ) -> RedirectResponse:
        session_id = _session_id(request)
        await controller.upload(store.get(session_id), file, session=session_id)
        return _back_to_form(request)

    @app.post("/selection", name="selection")
    async def selection(
        request: Request,
        label: str = Form(...),
        checked: bool = Form(False),
    ) -> RedirectResponse:
        state = store.get(_session_id(request))
        try:
            controller.toggle(state, label, checked)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _back_to_form(request)

    @app.get("/preview/{ref}", name="preview")
    async def preview(ref: str) -> Response:
        entry = controller.preview_registry.get(ref)
        if entry is None:
            raise HTTPException(status_code=404, detail="Preview not found")
        return Response(content=entry.content, media_type=entry.content_type)

    @app.get("/api/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
