"""Tests for the impact calculation engine."""
import math

import pytest
from scipy import constants

from astrodefense.backend.models import AsteroidParameters
from astrodefense.backend.physics_engine import (
    MEGATON_TNT_JOULES,
    calculate_crater_size,
    calculate_impact_energy,
    calculate_seismic_magnitude,
    compute_impact,
    effective_velocity,
    energy_to_tnt,
)


class TestEffectiveVelocity:

    def test_subtracts_delta_v(self):
        assert effective_velocity(20.0, 3.0) == 17.0

    def test_clamped_at_zero(self):
        assert effective_velocity(5.0, 5.5) == 0.0


class TestImpactEnergy:

    def test_converts_km_per_second_to_si(self):
        assert calculate_impact_energy(1e12, 20.0) == 2e20

    def test_monotonic_in_mass(self):
        energies = [calculate_impact_energy(mass, 20.0) for mass in (1e9, 1e10, 5e11, 1e12, 1e14)]
        assert energies == sorted(energies)

    def test_monotonic_in_velocity(self):
        energies = [calculate_impact_energy(1e12, v) for v in (0.0, 1.0, 5.0, 17.0, 20.0, 50.0)]
        assert energies == sorted(energies)

    def test_equal_effective_velocity_gives_equal_energy(self):
        slow = compute_impact(AsteroidParameters(velocity=20.0, delta_v=0.0))
        fast = compute_impact(AsteroidParameters(velocity=25.0, delta_v=5.0))
        assert slow.energy == fast.energy


class TestTntEquivalent:

    def test_constant_matches_scipy_definition(self):
        assert MEGATON_TNT_JOULES == pytest.approx(constants.mega * constants.ton_TNT)

    @pytest.mark.parametrize("energy", [0.0, 1.0, 4.184e15, 2e20, 7.3e23])
    def test_divides_by_megaton(self, energy):
        assert energy_to_tnt(energy) == energy / 4.184e15


class TestCraterSize:

    def test_zero_energy(self):
        assert calculate_crater_size(0.0, 45.0) == 0.0

    def test_non_decreasing_in_energy(self):
        sizes = [calculate_crater_size(e, 60.0) for e in (1e12, 1e15, 1e18, 2e18, 1e21)]
        assert sizes == sorted(sizes)
        assert calculate_crater_size(4e18, 60.0) >= calculate_crater_size(2e18, 60.0)

    def test_vertical_impact_is_largest(self):
        vertical = calculate_crater_size(2e20, 90.0)
        for angle in (15.0, 30.0, 45.0, 60.0, 75.0):
            assert calculate_crater_size(2e20, angle) < vertical

    def test_angle_scaling(self):
        vertical = calculate_crater_size(2e20, 90.0)
        oblique = calculate_crater_size(2e20, 45.0)
        assert oblique == pytest.approx(vertical * math.sin(math.radians(45.0)) ** (1.0 / 3.0))

    def test_degenerate_angle_stays_real(self):
        size = calculate_crater_size(2e20, -10.0)
        assert isinstance(size, float)
        assert size == 0.0


class TestSeismicMagnitude:

    def test_zero_energy_returns_floor(self):
        assert calculate_seismic_magnitude(0.0) == 0.0

    def test_fixed_step_per_decade(self):
        low = calculate_seismic_magnitude(1e18)
        high = calculate_seismic_magnitude(1e19)
        assert high - low == pytest.approx(0.67)

    def test_human_readable_range(self):
        assert calculate_seismic_magnitude(2e20) == pytest.approx(0.67 * math.log10(2e20) - 5.8)
        assert 0.0 < calculate_seismic_magnitude(2e20) < 20.0


class TestComputeImpact:

    def test_undeflected_scenario(self, baseline):
        result = compute_impact(baseline)
        assert result.deflected is False
        assert result.energy == 2e20
        assert result.tnt_equivalent == pytest.approx(47801.147, rel=1e-6)
        assert result.effective_velocity == 20.0

    def test_deflected_scenario(self, baseline):
        undeflected = compute_impact(baseline)
        baseline.delta_v = 3.0
        result = compute_impact(baseline)
        assert result.deflected is True
        assert result.effective_velocity == 17.0
        assert result.energy == pytest.approx(0.5 * 1e12 * 17000.0**2)
        assert result.energy < undeflected.energy

    def test_overwhelming_delta_v_degrades_to_zero(self):
        result = compute_impact(AsteroidParameters(velocity=5.0, delta_v=5.5))
        assert result.energy == 0.0
        assert result.tnt_equivalent == 0.0
        assert result.crater_size == 0.0
        assert result.seismic_magnitude == 0.0
        assert result.deflected is True

    @pytest.mark.parametrize("velocity", [5.0, 20.0, 50.0])
    @pytest.mark.parametrize("angle", [15.0, 45.0, 90.0])
    @pytest.mark.parametrize("delta_v", [0.0, 2.5, 5.0])
    def test_outputs_finite_and_non_negative(self, velocity, angle, delta_v):
        result = compute_impact(
            AsteroidParameters(diameter=10.0, velocity=velocity, angle=angle, mass=1e15, delta_v=delta_v)
        )
        for value in (result.energy, result.tnt_equivalent, result.crater_size, result.seismic_magnitude):
            assert math.isfinite(value)
            assert value >= 0.0

    def test_deflection_method_does_not_change_physics(self, baseline):
        from astrodefense.backend.models import DeflectionMethod

        results = set()
        for method in DeflectionMethod:
            baseline.deflection_method = method
            results.add(compute_impact(baseline))
        assert len(results) == 1
