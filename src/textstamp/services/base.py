"""BaseService — shared foundation for textstamp services.

Every service receives the ``[stamp]`` config section at construction
time and converts domain failures into error results through
:meth:`BaseService._failure`.
"""

from __future__ import annotations

import logging
from typing import Any

from textstamp.config.models import StampConfig
from textstamp.domain.errors import StampError
from textstamp.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class StampService(BaseService):
            def render(self, text: str) -> ServiceResult:
                try:
                    stamp = self._build(text, strict=False)
                except StampError as exc:
                    return self._failure("render", exc)
                ...
    """

    def __init__(self, config: StampConfig | None = None) -> None:
        self._config = config or StampConfig()

    def _resolve_strict(self, strict: bool | None) -> bool:
        return self._config.strict if strict is None else strict

    @staticmethod
    def _failure(op: str, exc: StampError, **detail: Any) -> ServiceResult:
        """Build an error result from a domain failure.

        INVARIANT: only StampError is converted; anything else propagates.
        """
        logger.debug("%s failed: %s (%s)", op, exc.message, exc.code)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=str(exc.code),
                message=exc.message,
                detail={**exc.detail, **detail},
            ),
        )
