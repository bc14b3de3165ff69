"""
Tests for calorie calculators.

Covers the calorie formulas and the per-type calculator objects.
"""

import math

import pytest

from ftracker.shared.constants import TrainingType
from ftracker.shared.formulas import distance, mean_speed
from ftracker.features.training.calculators import (
    TrainingInput,
    RunningCalculator,
    WalkingCalculator,
    SwimmingCalculator,
    get_calculator,
    running_calories,
    walking_calories,
    swimming_calories,
)


# =============================================================================
# Test Running Calories
# =============================================================================

class TestRunningCalories:
    """Tests for running_calories function."""

    def test_known_value(self):
        """1000 steps in 1 h at 70 kg: (18 * 0.65 + 1.79) * 70 * 60."""
        assert running_calories(1000, 70.0, 1.0) == pytest.approx(56658.0)

    @pytest.mark.parametrize("duration", [0, 0.0, -0.5, -10])
    def test_non_positive_duration(self, duration):
        assert running_calories(1000, 70.0, duration) == 0

    def test_formula_matches_documentation(self):
        for action, weight, duration in [(5000, 60.0, 0.5), (15000, 85.5, 1.25)]:
            speed = mean_speed(action, duration)
            expected = (18 * speed + 1.79) * weight * duration * 60
            assert running_calories(action, weight, duration) == pytest.approx(expected)

    def test_no_steps(self):
        """Standing still still burns the base rate."""
        assert running_calories(0, 70.0, 1.0) == pytest.approx(1.79 * 70 * 60)


# =============================================================================
# Test Walking Calories
# =============================================================================

class TestWalkingCalories:
    """Tests for walking_calories function."""

    @pytest.mark.parametrize("duration", [0, -1.0])
    def test_non_positive_duration(self, duration):
        assert walking_calories(9000, duration, 75.0, 180.0) == 0

    def test_known_value(self):
        """9000 steps, 1.5 h, 75 kg, 180 cm."""
        # speed = 9000 * 0.65 / 5400 = 1.0833 m/s
        assert walking_calories(9000, 1.5, 75.0, 180.0) == pytest.approx(237.526, rel=1e-4)

    def test_formula_matches_documentation(self):
        action, duration, weight, height = 6000, 1.0, 70.0, 170.0
        speed_ms = action * 0.65 / (duration * 3600)
        expected = (0.035 * weight + (speed_ms ** 2 / height) * 0.029 * weight) * duration * 60
        assert walking_calories(action, duration, weight, height) == pytest.approx(expected)

    def test_speed_in_meters_per_second(self):
        """Walking speed is m/s from steps, not mean_speed() in km/h."""
        action, duration, weight, height = 6000, 1.0, 70.0, 170.0
        kmh = mean_speed(action, duration)
        with_kmh = (0.035 * weight + (kmh ** 2 / height) * 0.029 * weight) * duration * 60
        assert walking_calories(action, duration, weight, height) != pytest.approx(with_kmh)

    def test_taller_burns_less(self):
        """Height divides the speed term."""
        short = walking_calories(9000, 1.0, 70.0, 150.0)
        tall = walking_calories(9000, 1.0, 70.0, 200.0)
        assert tall < short

    def test_zero_height_gives_inf(self):
        """Zero height does not raise; the speed term becomes infinite."""
        assert walking_calories(1000, 1.0, 70.0, 0) == math.inf

    def test_zero_height_no_steps_gives_nan(self):
        assert math.isnan(walking_calories(0, 1.0, 70.0, 0))


# =============================================================================
# Test Swimming Calories
# =============================================================================

class TestSwimmingCalories:
    """Tests for swimming_calories function."""

    def test_known_value(self):
        """25 m * 40 laps in 1 h at 70 kg: (1.0 + 1.1) * 2 * 70 * 1."""
        assert swimming_calories(25, 40, 1.0, 70.0) == pytest.approx(294.0)

    @pytest.mark.parametrize("duration", [0, -0.25])
    def test_non_positive_duration(self, duration):
        assert swimming_calories(25, 40, duration, 70.0) == 0

    def test_formula_matches_documentation(self):
        length_pool, count_pool, duration, weight = 50, 30, 0.75, 62.0
        avg_speed = length_pool * count_pool / 1000 / duration
        expected = (avg_speed + 1.1) * 2 * weight * duration
        assert swimming_calories(length_pool, count_pool, duration, weight) == pytest.approx(expected)


# =============================================================================
# Test Calculators
# =============================================================================

@pytest.fixture
def training():
    """Training with every field set."""
    return TrainingInput(
        action=1000,
        duration=1.0,
        weight=70.0,
        height=175.0,
        length_pool=25,
        count_pool=4,
    )


class TestCalculators:
    """Tests for per-type calculator objects."""

    def test_get_calculator_covers_all_types(self):
        for training_type in TrainingType:
            assert get_calculator(training_type).training_type is training_type

    def test_running(self, training):
        calc = RunningCalculator()
        assert calc.distance_km(training) == pytest.approx(0.65)
        assert calc.speed_kmh(training) == pytest.approx(0.65)
        assert calc.calories(training) == pytest.approx(56658.0)

    def test_walking(self, training):
        calc = WalkingCalculator()
        assert calc.distance_km(training) == pytest.approx(0.65)
        assert calc.speed_kmh(training) == pytest.approx(0.65)
        assert calc.calories(training) == pytest.approx(walking_calories(1000, 1.0, 70.0, 175.0))

    def test_swimming(self, training):
        """Distance comes from strokes, speed from the pool."""
        calc = SwimmingCalculator()
        assert calc.distance_km(training) == pytest.approx(distance(1000))
        assert calc.speed_kmh(training) == pytest.approx(0.1)
        assert calc.calories(training) == pytest.approx((0.1 + 1.1) * 2 * 70.0)

    def test_swimming_zero_duration(self, training):
        training.duration = 0
        calc = SwimmingCalculator()
        assert calc.speed_kmh(training) == 0
        assert calc.calories(training) == 0


# =============================================================================
# Test Return Types
# =============================================================================

class TestGuardsReturnFloat:
    """Zero guards return floats like the computed branches."""

    def test_calorie_guards(self):
        assert isinstance(running_calories(1000, 70.0, 0), float)
        assert isinstance(walking_calories(1000, 0, 70.0, 170.0), float)
        assert isinstance(swimming_calories(25, 40, -1.0, 70.0), float)
