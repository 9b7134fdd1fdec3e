from flask import Flask, jsonify, request
from flask_socketio import SocketIO
import asyncio
import logging
from planner_mock.api_functions import FUNCTION_DEFINITIONS, UnknownOperationError
from planner_mock.business_logic import ApiContext
from planner_mock.log_formatter import configure_logging
from planner_mock.script_run import EXECUTION_ERROR, UNKNOWN_OPERATION, ScriptRunner
from planner_mock.storage import PreviewStore, create_storage


logger = logging.getLogger("planner_mock.server")


def describe_error(error):
    return f"{type(error).__name__}: {error}"


def create_app(store=None, delay=None):
    """Build the local preview server around one store for the whole process."""
    # Configure Flask and SocketIO
    app = Flask(__name__, static_folder="./static", static_url_path="/")
    socketio = SocketIO(app)

    configure_logging(socketio=socketio)
    # Remove any existing handlers from the root logger to avoid duplicate messages
    logging.getLogger().handlers = []

    if store is None:
        store = PreviewStore(create_storage())

    def notify(message):
        logger.warning(f"Alert: {message}")
        socketio.emit("alert", {"message": message})

    runner = ScriptRunner(ApiContext(store, notify=notify), delay=delay)

    # Flask routes
    @app.route("/")
    def index():
        return app.send_static_file("index.html")

    @app.route("/operations")
    def operations():
        return jsonify(FUNCTION_DEFINITIONS)

    @app.route("/storage")
    def storage_snapshot():
        # Raw view of local storage for debugging the UI
        return jsonify(store.snapshot())

    @socketio.on("script_run")
    def handle_script_run(data=None):
        data = data or {}
        sid = request.sid
        call_id = data.get("callId")
        operation = data.get("operation")
        args = data.get("args") or []

        def on_success(result):
            socketio.emit("script_run_success", {"callId": call_id, "result": result}, to=sid)

        def on_failure(error):
            socketio.emit(
                "script_run_failure",
                {
                    "callId": call_id,
                    "error": describe_error(error),
                    "errorKind": UNKNOWN_OPERATION
                    if isinstance(error, UnknownOperationError)
                    else EXECUTION_ERROR,
                },
                to=sid,
            )

        binding = runner.with_success_handler(on_success)
        if data.get("withFailureHandler", True):
            binding = binding.with_failure_handler(on_failure)

        asyncio.run(binding.call(operation, *args))

    logger.info("Local preview mode active")
    return app, socketio


if __name__ == "__main__":
    app, socketio = create_app()

    print("\n" + "=" * 60)
    print("🚀 Planning Tool Local Preview Starting!")
    print("=" * 60)
    print("\n1. Open this link in your browser:")
    print("   http://127.0.0.1:5000")
    print("\n2. Calls made through google.script.run are served from local storage")
    print("\nPress Ctrl+C to stop the server\n")
    print("=" * 60 + "\n")

    socketio.run(app, debug=True)
