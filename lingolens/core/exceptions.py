"""
Exception hierarchy for the document pipeline.

Only ExtractionError is fatal to a pipeline run. Gateway and suggestion
errors are recoverable and are absorbed by the component that calls the
collaborator.
"""

from typing import Optional, Dict, Any


class LingoLensError(Exception):
    """Base exception for all pipeline errors.

    Attributes:
        message: Human-readable error message
        context: Additional context about the error
        recoverable: Whether the error can potentially be recovered from
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        recoverable: bool = False
    ):
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.recoverable = recoverable

    def __str__(self) -> str:
        base = f"{self.__class__.__name__}: {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base += f" (context: {context_str})"
        return base


# ============================================================================
# Extraction errors
# ============================================================================

class ExtractionError(LingoLensError):
    """Raised when no text can be derived from an uploaded document."""
    pass


class UnsupportedFormatError(ExtractionError):
    """Raised when the declared file type has no extractor.

    Attributes:
        mime_type: The declared MIME type
    """

    def __init__(self, mime_type: str, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx['mime_type'] = mime_type
        super().__init__(f"Unsupported file type: {mime_type or '(none)'}", ctx)
        self.mime_type = mime_type


# ============================================================================
# Input validation
# ============================================================================

class UnsupportedLanguageError(LingoLensError, ValueError):
    """Raised when a language code is outside the supported set."""

    def __init__(self, code: Any):
        super().__init__(f"Unsupported language code: {code!r}", {'code': code})
        self.code = code


# ============================================================================
# Collaborator errors
# ============================================================================

class GatewayError(LingoLensError):
    """Base exception for translation gateway failures (always recoverable)."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context, recoverable=True)


class GatewayConnectionError(GatewayError):
    """Raised on transport failures (connection refused, timeout, ...)."""
    pass


class GatewayResponseError(GatewayError):
    """Raised when the gateway answers with a non-success or malformed response.

    Attributes:
        status_code: HTTP status code, if a response was received
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        ctx = context or {}
        if status_code is not None:
            ctx['status_code'] = status_code
        super().__init__(message, ctx)
        self.status_code = status_code


class SuggestionError(LingoLensError):
    """Raised when the LLM-backed suggestion service fails."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, context, recoverable=True)
