from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from core.config import ConfigurationError, ProjectionConfig
from core.schema import MemorandumConfig
from presets import get_memorandum_data

from .validators import validate_constants, validate_scenarios

logger = logging.getLogger(__name__)


def load_memorandum(
    raw: Mapping[str, Any],
    config: Optional[ProjectionConfig] = None,
) -> MemorandumConfig:
    """
    Build and validate the memorandum configuration. Fails fast: any error
    raises ConfigurationError, so no engine call ever sees a zero total cost or
    a zero-length project.
    """
    cfg = config or ProjectionConfig()

    try:
        memo = MemorandumConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid memorandum configuration:\n{exc}") from exc

    result = validate_constants(memo.constants, cfg)
    result.merge(validate_scenarios(memo.scenarios, memo.constants))

    if not result.is_valid:
        raise ConfigurationError(result.summary())

    for w in result.warnings:
        logger.warning("Memorandum configuration: %s", w)

    logger.info(
        "Loaded %d pricing scenarios across projects %s (horizon %d months)",
        len(memo.scenarios),
        memo.constants.projects,
        cfg.projection_months,
    )
    return memo


def load_default_memorandum(config: Optional[ProjectionConfig] = None) -> MemorandumConfig:
    """Load the preset supplier dataset."""
    return load_memorandum(get_memorandum_data(), config)
