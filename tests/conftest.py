from __future__ import annotations

import pytest

from core.config import ProjectionConfig
from core.schema import PricingScenario, ProjectConstants
from data_prep.loader import load_default_memorandum
from presets import get_memorandum_data


@pytest.fixture
def memorandum():
    return load_default_memorandum()


@pytest.fixture
def raw_data():
    return get_memorandum_data()


@pytest.fixture
def constants(memorandum) -> ProjectConstants:
    return memorandum.constants


@pytest.fixture
def inframat(memorandum) -> PricingScenario:
    return memorandum.get_scenario("Inframat")


@pytest.fixture
def config() -> ProjectionConfig:
    return ProjectionConfig()
