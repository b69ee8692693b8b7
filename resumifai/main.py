import logging

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .config import Settings
from .errors import UnexpectedError
from .pipeline import run_summary, run_transcription
from .summarize import init_gemini


def create_app(settings: Settings | None = None, client=None, providers=None) -> Flask:
    """
    Build the Flask app. `client` overrides the Gemini client built from the
    settings and `providers` the transcript provider table (both for tests).
    """
    settings = settings or Settings.from_env()
    if client is None:
        client = init_gemini(settings)

    app = Flask(__name__)
    app.logger.setLevel(settings.log_level)
    # exact-match allow-list; other origins get no Access-Control-Allow-Origin
    CORS(app, origins=list(settings.allowed_origins), supports_credentials=False)

    def respond(outcome):
        return jsonify(outcome.body(details=settings.expose_error_details)), outcome.status

    @app.get("/health")
    def health():
        return jsonify(status="ok")

    @app.get("/diag")
    def diag():
        return jsonify(
            gemini_key_set=bool(settings.gemini_api_key),
            gemini_model=settings.gemini_model,
            transcript_service_set=bool(settings.transcript_service_url),
            allowed_origins=len(settings.allowed_origins),
        )

    @app.post("/")
    @app.post("/summary")
    def summary():
        body = request.get_json(silent=True) or {}
        return respond(run_summary(body, settings, client, providers))

    @app.get("/transcription/<video_id>")
    def transcription(video_id):
        return respond(run_transcription(video_id, settings, url=request.args.get("url"),
                                         providers=providers))

    @app.errorhandler(Exception)
    def unhandled(e):
        if isinstance(e, HTTPException):
            return e
        app.logger.exception(f"Unhandled error on {request.path}")
        body = {"error": UnexpectedError.message}
        if settings.expose_error_details:
            body["details"] = f"{type(e).__name__}: {e}"
        return jsonify(body), 500

    return app


def run():
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app(settings)
    app.run(host="0.0.0.0", port=settings.port, debug=False)


if __name__ == "__main__":
    run()
