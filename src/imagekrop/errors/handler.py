import logging
from enum import Enum
from typing import Callable, Optional


class ErrorSeverity(Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorHandler:
    """Log recoverable failures and forward user-facing ones to the UI layer."""

    def __init__(self, logger: logging.Logger, *, notify_warnings: bool = True):
        self._logger = logger
        self._notify_warnings = notify_warnings
        self._ui_callback: Optional[Callable[[str, ErrorSeverity], None]] = None

    def register_ui_callback(self, callback: Optional[Callable[[str, ErrorSeverity], None]]):
        self._ui_callback = callback

    def handle(self, error: Exception, severity: ErrorSeverity = ErrorSeverity.ERROR, context: dict = None):
        # Log the error
        log_method = getattr(self._logger, severity.value, self._logger.error)
        log_method(f"{error.__class__.__name__}: {error}", extra=context or {})

        # Notify UI
        if self._ui_callback is None:
            return
        if severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL) or (
            severity is ErrorSeverity.WARNING and self._notify_warnings
        ):
            self._ui_callback(str(error), severity)
