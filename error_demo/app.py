"""Flask application emitting INFO, WARNING and ERROR lines on demand."""

import os

from flask import Flask, render_template

from error_demo.records import ErrorRecord, WarningRecord, rfc3339_now
from error_demo.sinks import LineSink, stderr_sink, stdout_sink

_TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "templates")

PANIC_MESSAGE = "✨ intentional panic: simulated crash for demo ✨"

_PLAIN_TEXT = {"Content-Type": "text/plain; charset=utf-8"}


class SimulatedPanic(RuntimeError):
    """Raised by /trigger-panic to crash the in-flight request."""


def create_app(
    info_sink: LineSink | None = None,
    error_sink: LineSink | None = None,
) -> Flask:
    """Flask application factory.

    info_sink receives INFO-classified lines (stdout by default), error_sink
    receives ERROR-classified lines (stderr by default).
    """
    app = Flask(__name__, template_folder=_TEMPLATE_DIR)

    if info_sink is None:
        info_sink = stdout_sink()
    if error_sink is None:
        error_sink = stderr_sink()

    # --- Routes ---

    # Unmatched paths fall through to the home page
    @app.route("/")
    @app.route("/<path:_path>")
    def home(_path=None):
        info_sink.write(f"INFO: home page visited at {rfc3339_now()}")
        return render_template("home.html")

    @app.route("/trigger-error")
    def trigger_error():
        error_sink.write(
            f"ERROR: generic error triggered by /trigger-error at {rfc3339_now()}"
        )
        return "500 Internal Server Error: generic error was triggered.\n", 500, _PLAIN_TEXT

    @app.route("/trigger-panic")
    def trigger_panic():
        error_sink.write(
            f"ERROR: about to panic (triggered by /trigger-panic) at {rfc3339_now()}"
        )
        # Flask's request exception boundary logs the traceback and answers 500;
        # the server thread and other requests carry on.
        raise SimulatedPanic(PANIC_MESSAGE)

    @app.route("/trigger-warning")
    def trigger_warning():
        rec = WarningRecord(message="This is a WARNING log triggered by /trigger-warning")
        # stdout, so only the embedded severity makes it a WARNING
        info_sink.write(rec.to_json())
        return "200 OK: a WARNING log was emitted.\n", 200, _PLAIN_TEXT

    @app.route("/trigger-custom")
    def trigger_custom():
        rec = ErrorRecord(
            errorType="DatabaseConnectionError",
            description="Unable to connect to DB host 'db-primary:5432'",
            retryable=False,
        )
        error_sink.write(rec.to_json())
        return "500 Internal Server Error: database connection error simulated.\n", 500, _PLAIN_TEXT

    return app
