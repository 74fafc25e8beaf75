import logging

import pytest

from scicalc.config import Settings
from scicalc.state import AngleUnit, Mode


def test_defaults_validate():
    s = Settings()
    s.validate()
    assert s.start_mode is Mode.NORMAL
    assert s.angle_unit is AngleUnit.DEGREES
    assert s.logging_level == logging.WARNING


def test_string_values_are_coerced():
    s = Settings(start_mode="scientific", angle_unit="rad", log_level="debug")
    s.validate()
    assert s.start_mode is Mode.SCIENTIFIC
    assert s.angle_unit is AngleUnit.RADIANS
    assert s.logging_level == logging.DEBUG


@pytest.mark.parametrize("kwargs", [
    {"angle_unit": "turns"},
    {"start_mode": "graphing"},
    {"export_filename": "  "},
    {"log_level": "chatty"},
])
def test_invalid_settings(kwargs):
    with pytest.raises(ValueError):
        Settings(**kwargs).validate()
