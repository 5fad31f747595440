"""Tests for value types and load type conversion."""

import dataclasses

import pytest

from beamcalc.errors import UnsupportedLoadTypeError
from beamcalc.models import BeamInput, BeamResult, LoadType


class TestLoadTypeConversion:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (LoadType.UNIFORM_LOAD, LoadType.UNIFORM_LOAD),
            ("point_load_center", LoadType.POINT_LOAD_CENTER),
            ("uniform_load", LoadType.UNIFORM_LOAD),
            ("UNIFORM_LOAD", LoadType.UNIFORM_LOAD),
            ("  point_load_center ", LoadType.POINT_LOAD_CENTER),
            (0, LoadType.POINT_LOAD_CENTER),
            (1, LoadType.UNIFORM_LOAD),
        ],
    )
    def test_known_values(self, value, expected):
        assert LoadType.from_value(value) is expected

    @pytest.mark.parametrize("value", [2, 999, -1, "", "cantilever", None, 1.5, True])
    def test_unknown_values_never_default(self, value):
        with pytest.raises(UnsupportedLoadTypeError) as exc_info:
            LoadType.from_value(value)
        assert exc_info.value.load_type == value

    def test_exactly_two_members(self):
        assert len(LoadType) == 2


class TestValueTypes:
    def test_beam_input_is_frozen(self):
        beam = BeamInput(
            length=1.0,
            load_type=LoadType.POINT_LOAD_CENTER,
            load=1.0,
            youngs_modulus=1.0,
            moment_of_inertia=1.0,
        )
        with pytest.raises(dataclasses.FrozenInstanceError):
            beam.length = 2.0

    def test_beam_result_to_dict(self):
        result = BeamResult(max_moment=250.0, max_deflection=0.01)
        assert result.to_dict() == {"max_moment": 250.0, "max_deflection": 0.01}
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.max_moment = 0.0
