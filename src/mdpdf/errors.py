from __future__ import annotations


class ParameterError(ValueError):
    """Invalid or missing command line arguments."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


class RenderError(RuntimeError):
    """Fatal failure while rendering, composing or printing a document."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code


__all__ = ["ParameterError", "RenderError"]
