"""Exceptions raised while turning a Swagger document into Markdown."""


class SwaggerMarkdownError(Exception):
    """Base class for every fatal generation error."""


class DocumentLoadError(SwaggerMarkdownError):
    """The input file is missing, unreadable or not parseable."""


class DocumentValidationError(SwaggerMarkdownError):
    """The parsed document lacks a required section or has the wrong shape."""


class OperationError(SwaggerMarkdownError):
    """An operation is missing data every documented operation must declare."""

    def __init__(self, message: str, method: str = "", path: str = "", operation_id: str = ""):
        self.method = method
        self.path = path
        self.operation_id = operation_id
        where = " ".join(part for part in (method.upper(), path) if part)
        if operation_id:
            where = f"{where} ({operation_id})" if where else operation_id
        super().__init__(f"{where}: {message}" if where else message)


class UnsupportedLanguageError(SwaggerMarkdownError):
    """No code sample template is registered for the requested language."""
