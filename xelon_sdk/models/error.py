"""
Models for error bodies returned by the Xelon API.

The API has changed the shape of its error bodies over time. The decoders
below look at the JSON type of each value instead of assuming a fixed schema,
so an unexpected shape fills fewer fields rather than failing.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List


def _as_messages(value: Any) -> List[str]:
    if isinstance(value, list):
        return [item if isinstance(item, str) else json.dumps(item) for item in value]
    if isinstance(value, str):
        return [value]
    return [json.dumps(value)]


def _format_validations(validations: Dict[str, Any]) -> str:
    return ", ".join(f"{name} - {messages}" for name, messages in validations.items())


@dataclass
class ErrorElement:
    """
    Error body of the current API generation.

    Every part is optional and any combination may appear::

        {"error": "Virtual machine is not found",
         "message": "Server Error",
         "errors": {"name": ["The field cannot be modified."]},
         "code": 404}
    """
    error: str = ""
    message: str = ""
    validations: Dict[str, List[str]] = field(default_factory=dict)
    code: int = 0

    @classmethod
    def from_api(cls, data: Any) -> "ErrorElement":
        element = cls()
        if not isinstance(data, dict):
            if data is not None:
                element.error = data if isinstance(data, str) else json.dumps(data)
            return element

        error = data.get("error")
        if isinstance(error, dict):
            element.validations.update(
                {name: _as_messages(messages) for name, messages in error.items()}
            )
        elif isinstance(error, str):
            element.error = error
        elif error is not None:
            element.error = json.dumps(error)

        message = data.get("message")
        if message is not None:
            element.message = message if isinstance(message, str) else json.dumps(message)

        errors = data.get("errors")
        if isinstance(errors, dict):
            element.validations.update(
                {name: _as_messages(messages) for name, messages in errors.items()}
            )
        elif errors is not None:
            element.validations[""] = _as_messages(errors)

        code = data.get("code")
        if isinstance(code, int) and not isinstance(code, bool):
            element.code = code

        return element

    def __str__(self):
        parts = []
        if self.code:
            parts.append(f"code: {self.code}")
        if self.error:
            parts.append(f"error: {self.error}")
        if self.message:
            parts.append(f"message: {self.message}")
        if self.validations:
            parts.append(f"validations: ({_format_validations(self.validations)})")
        return f"({', '.join(parts)})"


@dataclass
class ErrorWrapper:
    """
    The ``error`` value of the older API generation.

    It is either a plain string (``partial`` is True and ``message`` is set) or
    an object of validation messages (``partial`` is False).
    """
    message: str = ""
    validations: Dict[str, Any] = field(default_factory=dict)
    partial: bool = False

    @classmethod
    def from_api(cls, value: Any) -> "ErrorWrapper":
        if isinstance(value, dict):
            return cls(validations=dict(value))
        if isinstance(value, str):
            return cls(message=value, partial=True)
        return cls(message=json.dumps(value), partial=True)


@dataclass
class LegacyErrorElement:
    """Error body of the older API generation: a numeric code plus an :class:`ErrorWrapper`."""
    code: int = 0
    error: ErrorWrapper = field(default_factory=ErrorWrapper)

    @classmethod
    def from_api(cls, data: Any) -> "LegacyErrorElement":
        element = cls()
        if not isinstance(data, dict):
            if data is not None:
                element.error = ErrorWrapper.from_api(data)
            return element

        code = data.get("code")
        if isinstance(code, int) and not isinstance(code, bool):
            element.code = code
        if data.get("error") is not None:
            element.error = ErrorWrapper.from_api(data["error"])
        return element

    def __str__(self):
        if self.error.partial:
            return f"(code: {self.code}, error: {self.error.message})"
        return f"(code: {self.code}, validations: ({_format_validations(self.error.validations)}))"

