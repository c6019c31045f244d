"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, trisum.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from trisum.domain.constants import CONSTANTS

# --- trisum.toml sections ---


class ValidationConfig(BaseModel):
    """[validation] section — defaults for the ``validate`` pre-flight check."""

    model_config = {"frozen": True}

    strict: bool = True
    allow_negative: bool = False


class BenchmarkConfig(BaseModel):
    """[benchmark] section."""

    model_config = {"frozen": True}

    iterations: int = Field(default=CONSTANTS.default_benchmark_iterations, ge=1)


class RecursionConfig(BaseModel):
    """[recursion] section. May tighten the depth limit, never loosen it."""

    model_config = {"frozen": True}

    max_depth: int = Field(
        default=CONSTANTS.max_recursion_depth,
        ge=1,
        le=CONSTANTS.max_recursion_depth,
    )

