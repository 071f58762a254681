"""Tests for huewave.core.easing — angular lerp, bias spline, golden sequence."""

import numpy as np
import pytest
from huewave.core.easing import bias_spline, golden_fraction, lerp, lerp_angle

HUES = [0.0, 0.05, 0.2, 0.45, 0.5, 0.75, 0.95, 0.999]


def _circular_gap(a: float, b: float) -> float:
    d = abs(a - b) % 1.0
    return min(d, 1.0 - d)


class TestLerp:
    def test_endpoints(self):
        assert lerp(0.2, 0.8, 0.0) == 0.2
        assert lerp(0.2, 0.8, 1.0) == pytest.approx(0.8)

    def test_midpoint(self):
        assert lerp(0.0, 1.0, 0.5) == 0.5


class TestLerpAngle:
    @pytest.mark.parametrize('a', HUES)
    @pytest.mark.parametrize('b', HUES)
    def test_progress_zero_is_start(self, a: float, b: float) -> None:
        assert lerp_angle(a, b, 0.0) == a

    @pytest.mark.parametrize('a', HUES)
    @pytest.mark.parametrize('b', HUES)
    def test_progress_one_is_end(self, a: float, b: float) -> None:
        assert _circular_gap(lerp_angle(a, b, 1.0), b) < 1e-9

    @pytest.mark.parametrize('a', HUES)
    @pytest.mark.parametrize('b', HUES)
    @pytest.mark.parametrize('t', [0.0, 0.25, 1 / 3, 0.5, 2 / 3, 1.0])
    def test_result_in_unit_range(self, a: float, b: float, t: float) -> None:
        r = lerp_angle(a, b, t)
        assert 0.0 <= r < 1.0

    def test_wraps_forward_through_zero(self):
        r = lerp_angle(0.95, 0.05, 0.5)
        assert _circular_gap(r, 0.0) < 1e-9
        assert abs(r - 0.5) > 0.4

    def test_wraps_backward_through_zero(self):
        r = lerp_angle(0.05, 0.95, 0.5)
        assert _circular_gap(r, 0.0) < 1e-9

    def test_takes_short_arc(self):
        # 0.1 -> 0.3 is the short way; midpoint 0.2, not 0.7
        assert lerp_angle(0.1, 0.3, 0.5) == pytest.approx(0.2)


class TestBiasSpline:
    @pytest.mark.parametrize('shape', [0.0, 0.25, 0.5, 0.75, 1.0, 2.0])
    @pytest.mark.parametrize('turning', [0.0, 0.2, 0.5, 0.8, 0.95, 1.0])
    def test_fixed_endpoints(self, shape: float, turning: float) -> None:
        assert bias_spline(0.0, shape, turning) == 0.0
        assert bias_spline(1.0, shape, turning) == pytest.approx(1.0)

    @pytest.mark.parametrize('turning', [0.0, 0.2, 0.5, 0.95])
    def test_flat_shape_reaches_one(self, turning: float) -> None:
        assert bias_spline(1.0, 0.0, turning) == 1.0
        assert bias_spline(0.0, 0.0, turning) == 0.0

    @pytest.mark.parametrize('shape', [0.25, 0.5, 0.75, 1.5])
    @pytest.mark.parametrize('turning', [0.2, 0.5, 0.8, 0.95])
    def test_monotonic(self, shape: float, turning: float) -> None:
        ys = [bias_spline(float(x), shape, turning) for x in np.linspace(0.0, 1.0, 201)]
        assert all(b >= a - 1e-12 for a, b in zip(ys, ys[1:]))

    @pytest.mark.parametrize('turning', [0.2, 0.5, 0.8])
    def test_passes_through_turning_point(self, turning: float) -> None:
        assert bias_spline(turning, 0.75, turning) == pytest.approx(turning)

    def test_shape_one_is_identity(self):
        for x in np.linspace(0.0, 1.0, 11):
            assert bias_spline(float(x), 1.0, 0.5) == pytest.approx(float(x))

    def test_wave_quartiles_increase(self):
        quarts = [bias_spline(w * 0.25, 0.5, 0.95) for w in (1, 2, 3, 4)]
        assert quarts == sorted(quarts)
        assert quarts[-1] == pytest.approx(1.0)


class TestGoldenFraction:
    def test_zero(self):
        assert golden_fraction(0) == 0.0

    def test_first_terms(self):
        assert golden_fraction(1) == pytest.approx(0.6180339887498949)
        assert golden_fraction(2) == pytest.approx(0.2360679774997898)

    def test_in_unit_range(self):
        for i in range(200):
            assert 0.0 <= golden_fraction(i) < 1.0

    def test_neighbours_differ(self):
        # consecutive terms are never close together
        for i in range(100):
            assert abs(golden_fraction(i + 1) - golden_fraction(i)) > 0.2
