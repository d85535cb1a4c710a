"""StampService — build, inspect, validate, and layer stamps from text.

Extends BaseService. Every operation parses its input text with either
the auto-pad constructor (default) or the strict one, selected per call
or by the ``[stamp] strict`` config value.
"""

from __future__ import annotations

import logging

from textstamp.domain.errors import StampError
from textstamp.domain.stamp import ROW_SEPARATOR, Stamp
from textstamp.domain.unicode import display_width
from textstamp.services.base import BaseService
from textstamp.services.result import ServiceResult
from textstamp.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class StampService(BaseService):
    """Text-in/text-out operations over :class:`Stamp`."""

    def _build(self, text: str, *, strict: bool) -> Stamp:
        with trace_span("strict_parse" if strict else "padded_parse") as span:
            stamp = Stamp.from_rectangle(text) if strict else Stamp.from_text(text)
            if span is not None:
                span.annotate("height", stamp.height)
                span.annotate("width", stamp.width)
        logger.debug("Built %dx%d stamp (strict=%s)", stamp.width, stamp.height, strict)
        return stamp

    @traced
    def render(self, text: str, *, strict: bool | None = None) -> ServiceResult:
        """Parse *text* and render it back as a rectangle."""
        op = "render"
        try:
            stamp = self._build(text, strict=self._resolve_strict(strict))
        except StampError as exc:
            return self._failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={"height": stamp.height, "width": stamp.width, "text": stamp.render()},
        )

    @traced
    def info(self, text: str, *, strict: bool | None = None) -> ServiceResult:
        """Report dimensions of the stamp parsed from *text*.

        ``padded`` counts the input lines that the auto-pad step widened;
        it is always 0 in strict mode.
        """
        op = "info"
        resolved = self._resolve_strict(strict)
        try:
            stamp = self._build(text, strict=resolved)
        except StampError as exc:
            return self._failure(op, exc)

        padded = 0
        if not resolved:
            padded = sum(
                1 for line in text.split(ROW_SEPARATOR) if display_width(line) < stamp.width
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "height": stamp.height,
                "width": stamp.width,
                "cells": stamp.height * stamp.width,
                "padded": padded,
                "strict": resolved,
                "rows": stamp.rows(),
            },
        )

    @traced
    def check(self, text: str) -> ServiceResult:
        """Validate *text* as a strict rectangle without padding."""
        op = "check"
        try:
            stamp = self._build(text, strict=True)
        except StampError as exc:
            return self._failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={"valid": True, "height": stamp.height, "width": stamp.width},
        )

    @traced
    def layer(
        self,
        base_text: str,
        overlay_text: str,
        *,
        col: int,
        row: int,
        strict: bool | None = None,
    ) -> ServiceResult:
        """Paint the overlay stamp onto the base stamp at (*col*, *row*).

        Parse failures carry ``detail["source"]`` naming the offending input.
        """
        op = "layer"
        resolved = self._resolve_strict(strict)

        try:
            base = self._build(base_text, strict=resolved)
        except StampError as exc:
            return self._failure(op, exc, source="base")

        try:
            overlay = self._build(overlay_text, strict=resolved)
        except StampError as exc:
            return self._failure(op, exc, source="overlay")

        try:
            with trace_span("composite"):
                result = base.layer(overlay, col, row)
        except StampError as exc:
            return self._failure(op, exc)

        clipped = (col + overlay.width > base.width) or (row + overlay.height > base.height)
        warnings: list[str] = []
        if clipped:
            warnings.append(
                f"Overlay {overlay.width}x{overlay.height} at ({col}, {row}) "
                f"was clipped to the {base.width}x{base.height} base"
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "height": result.height,
                "width": result.width,
                "col": col,
                "row": row,
                "clipped": clipped,
                "text": result.render(),
            },
            warnings=warnings,
        )
