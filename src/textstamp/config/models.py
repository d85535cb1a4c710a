"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, textstamp.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, NonNegativeInt

# --- textstamp.toml sections ---


class StampConfig(BaseModel):
    """[stamp] section.

    ``strict`` selects the strict rectangle constructor instead of the
    auto-padding one when a command does not say otherwise.
    """

    model_config = {"frozen": True}

    strict: bool = False


class LayerConfig(BaseModel):
    """[layer] section — default overlay anchor."""

    model_config = {"frozen": True}

    col: NonNegativeInt = 0
    row: NonNegativeInt = 0

