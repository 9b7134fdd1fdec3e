import logging
from datetime import datetime
from flask_socketio import SocketIO


class CustomFormatter(
    logging.Formatter,
):
    """Custom formatter to color-code log messages based on their content."""

    def __init__(self, socketio: SocketIO = None):
        super().__init__()
        self.socketio = socketio

    # ANSI escape codes for colors - using accessible palette
    COLORS = {
        "RESET": "\033[0m",
        "WHITE": "\033[38;5;231m",  # Default text color
        "BLUE": "\033[38;5;116m",  # Alerts shown to the user
        "GREEN": "\033[38;5;114m",  # Storage lifecycle
        "VIOLET": "\033[38;5;183m",  # Function calls
        "YELLOW": "\033[38;5;186m",  # Latency info
        "RED": "\033[38;5;210m",  # Errors
    }

    def pick_color(self, record):
        msg = str(record.msg).lower()

        if record.levelno >= logging.ERROR:
            return self.COLORS["RED"]
        if "alert:" in msg:
            return self.COLORS["BLUE"]
        if "latency" in msg:
            return self.COLORS["YELLOW"]
        if any(
            phrase in msg
            for phrase in ["function response", "parameters", "function call"]
        ):
            return self.COLORS["VIOLET"]
        if any(
            phrase in msg
            for phrase in ["storage reset", "data is stored", "local preview mode"]
        ):
            return self.COLORS["GREEN"]
        return self.COLORS["WHITE"]

    def format(self, record):
        format_str = "%(asctime)s.%(msecs)03d %(levelname)s: %(message)s"
        color = self.pick_color(record)

        # Apply the color to the format string
        formatter = logging.Formatter(
            color + format_str + self.COLORS["RESET"], datefmt="%H:%M:%S"
        )
        formatted_message = formatter.format(record)
        # Mirror the log line to the browser with a timestamp
        if self.socketio:
            try:
                self.socketio.emit(
                    "log_message",
                    {
                        "message": formatted_message,
                        "timestamp": datetime.now().isoformat(),
                    },
                )
            except Exception as e:
                print(f"Error emitting log message: {e}")

        return formatted_message


def configure_logging(socketio: SocketIO = None, level=logging.INFO):
    """Route the planner_mock loggers through a colored console handler."""
    logger = logging.getLogger("planner_mock")
    logger.setLevel(level)

    if not any(isinstance(h.formatter, CustomFormatter) for h in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(CustomFormatter(socketio=socketio))
        logger.addHandler(console_handler)

    return logger
