"""Evaluation of Go-template style metric name templates against an event.

Only the dotted field subset of Go's ``text/template`` is supported, which is
what Sensu plugin templates use in practice::

    {{.Check.Name}}.status
    {{ .Entity.Name }}.{{ .Check.Labels.service }}

Field names are written the Go way (``Check``, ``Name``) and are matched to
model attributes by converting them to snake case. Mapping values such as
labels are indexed by the raw segment, and a missing key renders as an empty
string. The embedded ``ObjectMeta`` of checks and entities can also be named
explicitly, as in ``{{.Check.ObjectMeta.Name}}``. Trim markers (``{{-`` and
``-}}``) and comments (``{{/* ... */}}``) are honoured.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, List, Sequence

from pydantic import BaseModel

from .exceptions import TemplateError
from .models import Event

_ACTION = re.compile(r"\{\{(-\s)?(.*?)(\s-)?\}\}", re.DOTALL)
_FIELD_CHAIN = re.compile(r"^(?:\.[A-Za-z_][A-Za-z0-9_]*)+$")
_COMMENT = re.compile(r"^/\*.*\*/$", re.DOTALL)
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

# Go prints floats at or above this magnitude in exponent form.
_FLOAT_EXPONENT_THRESHOLD = 1e21

# Go embedded struct type names mapped to the model attribute holding them.
_EMBEDDED_FIELDS = {"ObjectMeta": "metadata"}


def render_template(template: str, event: Event) -> str:
    """Substitute every action in ``template`` with its value on ``event``."""

    parts: List[str] = []
    position = 0
    trim_leading = False
    for match in _ACTION.finditer(template):
        text = template[position : match.start()]
        if trim_leading:
            text = text.lstrip()
        if match.group(1):
            text = text.rstrip()
        parts.append(_literal(text))
        parts.append(_evaluate(match.group(2).strip(), event))
        trim_leading = bool(match.group(3))
        position = match.end()

    tail = template[position:]
    if trim_leading:
        tail = tail.lstrip()
    parts.append(_literal(tail))
    return "".join(parts)


def _literal(text: str) -> str:
    start = text.find("{{")
    if start != -1:
        raise TemplateError(f"unclosed action in template near {text[start:]!r}")
    return text


def _evaluate(expression: str, event: Event) -> str:
    if _COMMENT.match(expression):
        return ""
    if not _FIELD_CHAIN.match(expression):
        raise TemplateError(f"unsupported template action {{{{{expression}}}}}")
    segments = expression[1:].split(".")
    return _format(_resolve(event, segments), expression)


def _resolve(event: Event, segments: Sequence[str]) -> Any:
    value: Any = event
    walked = ""
    for segment in segments:
        if value is None:
            raise TemplateError(f"nil value evaluating {walked or '.'} at <.{segment}>")
        if isinstance(value, Mapping):
            value = value.get(segment)
        elif isinstance(value, BaseModel):
            value = _model_field(value, segment)
        else:
            raise TemplateError(
                f"can't evaluate field {segment} in type {type(value).__name__}"
            )
        walked = f"{walked}.{segment}"
    return value


def _model_field(model: BaseModel, segment: str) -> Any:
    model_type = type(model)
    extra = model.model_extra or {}
    candidates = (_EMBEDDED_FIELDS.get(segment, snake_case(segment)), segment)
    for candidate in candidates:
        if candidate.startswith("_"):
            continue
        if candidate in model_type.model_fields or candidate in extra:
            return getattr(model, candidate)
        if isinstance(getattr(model_type, candidate, None), property):
            return getattr(model, candidate)
    raise TemplateError(f"can't evaluate field {segment} in type {model_type.__name__}")


def _format(value: Any, expression: str) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer() and abs(value) < _FLOAT_EXPONENT_THRESHOLD:
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return value
    raise TemplateError(
        f"{expression} resolves to {type(value).__name__}, not a printable value"
    )


def snake_case(name: str) -> str:
    """Convert a Go style field name (``EntityClass``) to ``entity_class``."""

    return _CAMEL_BOUNDARY.sub("_", name).lower()


__all__ = ["render_template", "snake_case"]
