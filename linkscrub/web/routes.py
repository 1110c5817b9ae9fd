## routes.py
from __future__ import annotations

from flask import Blueprint, current_app, render_template, request

from linkscrub.domain.errors import EmptyInputError, NoUrlFoundError, ResolutionError
from linkscrub.domain.models import CleanResult

SUPPORTED_SITES = [
    "Xiaohongshu and its short links",
    "WeChat official account articles",
    "NetEase Cloud Music and its short links",
    "X (rewritten to fixupx.com)",
    "Any other domain: all query parameters are removed",
]

STATUS_FOR_ERROR = {
    EmptyInputError: 400,
    NoUrlFoundError: 400,
    ResolutionError: 502,
}


def _status_for(result: CleanResult) -> int:
    if result.ok:
        return 200
    return STATUS_FOR_ERROR.get(type(result.error), 500)


def create_blueprint(clean_service) -> Blueprint:
    bp = Blueprint("web", __name__)

    def render_index(error: str | None = None, input_text: str = ""):
        return render_template(
            "index.html",
            error=error,
            input_text=input_text,
            supported_sites=SUPPORTED_SITES,
        )

    @bp.get("/")
    def index():
        return render_index()

    @bp.post("/process")
    def process():
        input_text = request.form.get("inputText") or ""

        try:
            result = clean_service.process(input_text)
        except Exception:
            current_app.logger.exception("Unexpected failure while cleaning input")
            return render_index(error=ResolutionError.user_message, input_text=input_text), 500

        code = _status_for(result)
        current_app.logger.info("Process status=%s code=%s url=%s", result.status, code, result.candidate_url)

        if not result.ok:
            return render_index(error=result.message, input_text=input_text), code

        return render_template("result.html", clean_url=result.clean_url), code

    return bp
