"""FieldService — sanitization operations behind the ServiceResult contract.

One service instance per SanitizationConfig, mirroring one config per
host widget. Domain functions never fail on malformed text; the only
failures surfaced here are invalid events (negative carets, inverted
selections), reported as ``INVALID_EVENT``.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from numfield.domain.keys import handle_key
from numfield.domain.patterns import build_pattern, matches_pattern
from numfield.domain.sanitizer import (
    finalize_value,
    sanitize_edit,
    sanitize_paste,
    sanitize_value,
)
from numfield.domain.types import (
    EditEvent,
    KeyAction,
    KeyEvent,
    PasteEvent,
    SanitizationConfig,
)
from numfield.services.result import ServiceResult
from numfield.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


def validation_failure(op: str, code: str, exc: ValidationError) -> ServiceResult:
    """Convert a pydantic ValidationError into a failed ServiceResult."""
    messages = []
    for err in exc.errors(include_url=False):
        location = ".".join(str(part) for part in err["loc"])
        messages.append(f"{location}: {err['msg']}" if location else err["msg"])
    message = messages[0] if messages else str(exc)
    return ServiceResult.failure(op, code, message, errors=messages)


class FieldService:
    """Runs the sanitization pipeline for a single field policy.

    Usage::

        svc = FieldService(SanitizationConfig(decimal_separator=","))
        result = svc.edit(previous="1,2", proposed="1,,2", caret_before=2, caret_after=3)
        result.data["value"]  # "1,2"
    """

    def __init__(self, config: SanitizationConfig) -> None:
        self._config = config

    @property
    def config(self) -> SanitizationConfig:
        return self._config

    @traced
    def pattern(self) -> ServiceResult:
        """Return the validation pattern for native constraint checks."""
        cfg = self._config
        return ServiceResult(
            ok=True,
            op="pattern",
            data={
                "pattern": build_pattern(cfg.decimal_separator, cfg.allow_negative),
                "decimal_separator": cfg.decimal_separator,
                "allow_negative": cfg.allow_negative,
            },
        )

    @traced
    def sanitize(self, raw: str) -> ServiceResult:
        """Sanitize a standalone value (programmatic assignment)."""
        with trace_span("sanitize_value") as span:
            value = sanitize_value(raw, self._config)
            if span:
                span.annotate("removed", len(raw) - len(value))
        return ServiceResult(
            ok=True,
            op="sanitize",
            data={"raw": raw, "value": value, "changed": value != raw},
        )

    @traced
    def finalize(self, raw: str) -> ServiceResult:
        """Sanitize and pad a value being committed (blur)."""
        with trace_span("finalize_value"):
            value = finalize_value(raw, self._config)
        return ServiceResult(
            ok=True,
            op="finalize",
            data={"raw": raw, "value": value, "changed": value != raw},
        )

    @traced
    def edit(
        self,
        previous: str,
        proposed: str,
        caret_before: int,
        caret_after: int,
    ) -> ServiceResult:
        """Sanitize an in-place edit and recompute the caret."""
        op = "edit"
        try:
            event = EditEvent(
                previous_value=previous,
                proposed_value=proposed,
                caret_before=caret_before,
                caret_after=caret_after,
            )
        except ValidationError as exc:
            return validation_failure(op, "INVALID_EVENT", exc)

        with trace_span("sanitize_edit") as span:
            result = sanitize_edit(event, self._config)
            if span:
                span.annotate("reverted", result.reverted)

        warnings: list[str] = []
        if result.reverted:
            logger.debug("Edit reverted: %r would hold a second separator", proposed)
            warnings.append("Edit reverted: a second decimal separator was entered")
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "value": result.value,
                "caret_position": result.caret_position,
                "reverted": result.reverted,
                "valid": matches_pattern(result.value, self._config),
            },
            warnings=warnings,
        )

    @traced
    def paste(self, previous: str, text: str, start: int, end: int) -> ServiceResult:
        """Splice pasted text over a selection and sanitize the result."""
        op = "paste"
        try:
            event = PasteEvent(
                previous_value=previous,
                pasted_text=text,
                selection_start=start,
                selection_end=end,
            )
        except ValidationError as exc:
            return validation_failure(op, "INVALID_EVENT", exc)

        with trace_span("sanitize_paste") as span:
            result = sanitize_paste(event, self._config)
            if span:
                span.annotate("pasted_length", len(text))

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "value": result.value,
                "caret_position": result.caret_position,
                "valid": matches_pattern(result.value, self._config),
            },
        )

    @traced
    def key(self, key: str, value: str, start: int, end: int) -> ServiceResult:
        """Gate a separator or sign keystroke before the browser applies it."""
        op = "key"
        try:
            event = KeyEvent(key=key, value=value, selection_start=start, selection_end=end)
        except ValidationError as exc:
            return validation_failure(op, "INVALID_EVENT", exc)

        with trace_span("handle_key"):
            decision = handle_key(event, self._config)

        if decision.action is KeyAction.BLOCK:
            logger.debug("Key %r blocked at %d in %r", key, start, value)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "action": str(decision.action),
                "value": decision.value,
                "caret_position": decision.caret_position,
            },
        )
