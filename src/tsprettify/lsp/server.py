"""
tsprettify Language Server.

A small LSP server that editors call to prettify TypeScript diagnostics.
It owns no documents: the host forwards diagnostic messages through
``workspace/executeCommand`` and displays what comes back.

Commands:
- tsPrettify.prettify   (message, code?) -> verbose block
- tsPrettify.extract    (message, code?) -> {template, labels, actual, expected} | null
- tsPrettify.format     (typeExpr) -> indented block
- tsPrettify.diff       (typeA, typeB) -> [renderedA, renderedB]
- tsPrettify.summarize  (typeExpr) -> one-line summary
- tsPrettify.virtualText (message, code?) -> compact line

Configuration comes from ``initializationOptions`` and
``workspace/didChangeConfiguration`` (under a ``tsPrettify`` key or flat).

Usage:
    # Start the server in stdio mode (for IDE integration)
    tsprettify-lsp

    # Start in TCP mode (for debugging)
    tsprettify-lsp --tcp --port 2088
"""

import logging
from typing import Any, Callable, Optional

from lsprotocol import types
from pygls.lsp.server import LanguageServer

from tsprettify import __version__
from tsprettify.config import DEFAULT_CONFIG, PrettifierConfig, load_config
from tsprettify.core.diff import diff_types
from tsprettify.extractor import extract
from tsprettify.formatter import format_type
from tsprettify.render import prettify_message, virtual_text
from tsprettify.summary import summarize
from tsprettify.utils.errors import PrettifierError

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("tsprettify-lsp")

SETTINGS_SECTION = "tsPrettify"


def _unpack_arguments(args: tuple) -> list[Any]:
    """Accept command arguments either spread out or as a single list."""
    if len(args) == 1 and isinstance(args[0], list):
        return list(args[0])
    return list(args)


def _text(values: list[Any], index: int) -> str:
    """Argument at ``index`` as a string; missing and null arguments are empty."""
    if index >= len(values) or values[index] is None:
        return ""
    return str(values[index])


def _message_and_code(args: list[Any]) -> tuple[str, Any]:
    if args and isinstance(args[0], dict):
        return str(args[0].get("message") or ""), args[0].get("code")
    code = args[1] if len(args) > 1 else None
    return _text(args, 0), code


class PrettifierSession:
    """
    Command handlers and the current configuration of one server.

    Holds a single configuration value that is swapped as a whole on a
    successful reload; a rejected reload leaves it unchanged.
    """

    def __init__(self, config: PrettifierConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def apply_settings(self, settings: Any) -> Optional[str]:
        """
        Rebuild the configuration from client settings.

        Returns:
            None on success, or the error message when the settings were rejected
        """
        if not settings:
            return None
        if isinstance(settings, dict) and isinstance(settings.get(SETTINGS_SECTION), dict):
            settings = settings[SETTINGS_SECTION]

        try:
            self.config = load_config(settings)
        except PrettifierError as e:
            logger.warning(f"Rejected configuration: {e}")
            return str(e)

        logger.info("Configuration updated")
        return None

    def prettify(self, *args: Any) -> str:
        message, code = _message_and_code(_unpack_arguments(args))
        return prettify_message(message, code, self.config)

    def extract(self, *args: Any) -> dict[str, Any] | None:
        message, code = _message_and_code(_unpack_arguments(args))
        mismatch = extract(message, code, self.config.templates)
        if mismatch is None:
            return None
        return {
            "template": mismatch.template,
            "labels": list(mismatch.labels),
            "actual": mismatch.actual,
            "expected": mismatch.expected,
        }

    def format(self, *args: Any) -> str:
        values = _unpack_arguments(args)
        return format_type(_text(values, 0), self.config)

    def diff(self, *args: Any) -> list[str]:
        values = _unpack_arguments(args)
        return list(diff_types(_text(values, 0), _text(values, 1)))

    def summarize(self, *args: Any) -> str:
        values = _unpack_arguments(args)
        return summarize(_text(values, 0))

    def virtual_text(self, *args: Any) -> str:
        message, code = _message_and_code(_unpack_arguments(args))
        return virtual_text(message, code, self.config)

    def commands(self) -> dict[str, Callable[..., Any]]:
        """Command name -> handler."""
        return {
            "tsPrettify.prettify": self.prettify,
            "tsPrettify.extract": self.extract,
            "tsPrettify.format": self.format,
            "tsPrettify.diff": self.diff,
            "tsPrettify.summarize": self.summarize,
            "tsPrettify.virtualText": self.virtual_text,
        }


def _command_handler(handler: Callable[..., Any]) -> Callable[..., Any]:
    """Wrap a session method as a pygls command taking the server first."""

    def run(ls: LanguageServer, *args: Any) -> Any:  # noqa: ARG001
        return handler(*args)

    return run


class PrettifierLanguageServer(LanguageServer):
    """
    Language Server Protocol front end for the prettifier.

    Registers one ``workspace/executeCommand`` command per operation and
    keeps the configuration current from client settings.
    """

    def __init__(self, session: PrettifierSession | None = None) -> None:
        """Initialize the tsprettify language server."""
        super().__init__(
            name="tsprettify-lsp",
            version=f"v{__version__}",
        )

        self.session = session or PrettifierSession()

        # Register all handlers
        self._register_handlers()

    def _register_handlers(self) -> None:
        """Register command and configuration handlers."""
        for name, handler in self.session.commands().items():
            self.command(name)(_command_handler(handler))

        @self.feature(types.INITIALIZE)
        def on_initialize(params: types.InitializeParams) -> None:
            """Handle initialize request."""
            logger.info("Initializing tsprettify Language Server")
            if params.initialization_options:
                self._apply(params.initialization_options)

        @self.feature(types.INITIALIZED)
        def on_initialized(params: types.InitializedParams) -> None:  # noqa: ARG001
            """Handle initialized notification."""
            logger.info("tsprettify Language Server initialized successfully")

        @self.feature(types.WORKSPACE_DID_CHANGE_CONFIGURATION)
        def on_did_change_configuration(params: types.DidChangeConfigurationParams) -> None:
            """Handle configuration change notification."""
            logger.debug("Configuration changed")
            self._apply(params.settings)

    def _report_error(self, message: str) -> None:
        """Show a configuration error to the user."""
        self.window_show_message(
            types.ShowMessageParams(
                type=types.MessageType.Error,
                message=f"tsprettify: {message}",
            )
        )

    def _apply(self, settings: Any) -> None:
        error = self.session.apply_settings(settings)
        if error is not None:
            self._report_error(error)


# =============================================================================
# Server Creation and Main Entry Point
# =============================================================================


def create_server(config: PrettifierConfig | None = None) -> PrettifierLanguageServer:
    """Create and configure a tsprettify language server instance."""
    return PrettifierLanguageServer(PrettifierSession(config))


def main() -> None:
    """
    Main entry point for the tsprettify language server.

    Starts the server in stdio mode for IDE integration.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="tsprettify Language Server",
        prog="tsprettify-lsp",
    )
    parser.add_argument(
        "--tcp",
        action="store_true",
        help="Start server in TCP mode instead of stdio",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to in TCP mode (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=2088,
        help="Port to listen on in TCP mode (default: 2088)",
    )
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="info",
        help="Logging level (default: info)",
    )

    args = parser.parse_args()

    # Configure logging level
    log_level = getattr(logging, args.log_level.upper())
    logging.getLogger("tsprettify-lsp").setLevel(log_level)
    logging.getLogger("tsprettify").setLevel(log_level)

    server = create_server()

    if args.tcp:
        logger.info(f"Starting tsprettify LSP in TCP mode on {args.host}:{args.port}")
        server.start_tcp(args.host, args.port)
    else:
        logger.info("Starting tsprettify LSP in stdio mode")
        server.start_io()


if __name__ == "__main__":
    main()
