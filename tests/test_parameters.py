"""
Tests for the parameter vector
"""

import math

import pytest

from wordmorph.core.parameters import (
    DEFAULT_PARAMS,
    MORPH_SPEEDS,
    NEUTRAL,
    ParameterVector,
    clamp_param,
    get_speed,
)


class TestParameterVector:
    def test_defaults_present(self):
        vec = ParameterVector()
        for key, value in DEFAULT_PARAMS.items():
            assert key in vec
            assert vec[key] == value

    def test_undeclared_key_reads_neutral(self):
        vec = ParameterVector()
        assert vec['no_such_parameter'] == NEUTRAL
        assert vec.get('no_such_parameter') == 0.5
        assert vec.get('no_such_parameter', 0.2) == 0.2

    def test_bounded_fields_clamped(self):
        vec = ParameterVector({'brilliance': 1.7, 'motion': -0.3})
        assert vec['brilliance'] == 1.0
        assert vec['motion'] == 0.0
        vec['space'] = 3.0
        assert vec['space'] == 1.0

    def test_unbounded_fields_not_clamped(self):
        vec = ParameterVector({'root_note': 72, 'octave': 6, 'scale_index': 3})
        assert vec['root_note'] == 72.0
        assert vec['octave'] == 6.0
        assert vec['scale_index'] == 3.0

    def test_update_skips_non_numeric_and_nan(self):
        vec = ParameterVector()
        vec.update({'motion': 'fast', 'space': math.nan, 'warmth': True, 'tempo': 0.8})
        assert vec['motion'] == DEFAULT_PARAMS['motion']
        assert vec['space'] == DEFAULT_PARAMS['space']
        assert vec['warmth'] == DEFAULT_PARAMS['warmth']
        assert vec['tempo'] == 0.8

    def test_frozen_vector_rejects_writes(self):
        vec = ParameterVector().freeze()
        assert vec.frozen
        with pytest.raises(TypeError):
            vec['motion'] = 0.1

    def test_copy_of_frozen_is_mutable(self):
        vec = ParameterVector({'motion': 0.9}).freeze()
        clone = vec.copy()
        clone['motion'] = 0.1
        assert vec['motion'] == 0.9
        assert clone['motion'] == 0.1
        assert not clone.frozen

    def test_equality_with_mapping(self):
        vec = ParameterVector({'motion': 0.7})
        assert vec == vec.to_dict()
        assert vec == vec.copy()

    def test_subset(self):
        vec = ParameterVector()
        assert vec.subset(['motion', 'missing']) == {'motion': 0.5}


class TestHelpers:
    def test_clamp_param(self):
        assert clamp_param('motion', 2.0) == 1.0
        assert clamp_param('root_note', 200.0) == 200.0

    def test_speed_lookup(self):
        assert get_speed('attack_time', MORPH_SPEEDS) == 3.0
        assert get_speed('drift', MORPH_SPEEDS) == 0.25
        assert get_speed('air_gain', MORPH_SPEEDS) == 1.0

    def test_speed_range(self):
        assert all(0.25 <= s <= 3.0 for s in MORPH_SPEEDS.values())
