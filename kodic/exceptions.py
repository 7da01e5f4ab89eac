"""Custom exceptions for kodic"""

from typing import Any


class KodicError(Exception):
    """Base exception class for all application errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class WordValidationError(KodicError):
    """Raised when clipboard text is not a lookup term"""

    def __init__(self, word: str, reason: str):
        super().__init__(
            f"Invalid word '{word}': {reason}", {"word": word, "reason": reason}
        )
        self.word = word
        self.reason = reason


class DictionaryRequestError(KodicError):
    """Raised when the dictionary API cannot be reached or read"""

    def __init__(
        self, term: str, url: str, original_error: Exception | None = None
    ):
        super().__init__(
            f"Dictionary request failed for '{term}'",
            {
                "term": term,
                "url": url,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.term = term
        self.url = url
        self.original_error = original_error


class ParseError(KodicError):
    """Raised when a dictionary response cannot be decoded"""

    def __init__(self, content_type: str, reason: str):
        super().__init__(
            f"Failed to parse {content_type}: {reason}",
            {"content_type": content_type, "reason": reason},
        )
        self.content_type = content_type
        self.reason = reason


class CacheError(KodicError):
    """Raised when definition store operations fail"""

    def __init__(
        self,
        operation: str,
        cache_type: str,
        original_error: Exception | None = None,
    ):
        super().__init__(
            f"Cache operation '{operation}' failed for {cache_type} cache",
            {
                "operation": operation,
                "cache_type": cache_type,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.operation = operation
        self.cache_type = cache_type
        self.original_error = original_error


class ClipboardError(KodicError):
    """Raised when the system clipboard cannot be read"""

    def __init__(self, original_error: Exception | None = None):
        super().__init__(
            "Cannot read clipboard",
            {"original_error": str(original_error) if original_error else None},
        )
        self.original_error = original_error


class NotificationError(KodicError):
    """Raised when a desktop notification cannot be dispatched"""

    def __init__(self, title: str, original_error: Exception | None = None):
        super().__init__(
            f"Failed to send notification '{title}'",
            {
                "title": title,
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.title = title
        self.original_error = original_error


class ConfigurationError(KodicError):
    """Raised when configuration is invalid or missing"""

    def __init__(self, setting: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for '{setting}': {reason}",
            {"setting": setting, "value": value, "reason": reason},
        )
        self.setting = setting
        self.value = value
        self.reason = reason
