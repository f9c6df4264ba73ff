"""Tests for energy accounting and hunger classification."""

import pytest

from slimesim.energy import EnergyComponent, HungerState, classify_hunger
from slimesim.exceptions import EntityError


class TestClassifyHunger:
    @pytest.mark.parametrize(
        "ratio,expected",
        [
            (1.0, HungerState.SATISFIED),
            (0.5, HungerState.SATISFIED),
            (0.3001, HungerState.SATISFIED),
            (0.30, HungerState.HUNGRY),
            (0.2, HungerState.HUNGRY),
            (0.1501, HungerState.HUNGRY),
            (0.15, HungerState.STARVING),
            (0.0, HungerState.STARVING),
        ],
    )
    def test_thresholds_are_inclusive(self, ratio, expected):
        assert classify_hunger(ratio) is expected


class TestConsumeEnergy:
    def test_idle_cost(self):
        energy = EnergyComponent()
        cost = energy.consume_energy(1000.0, moving=False, speed_gene=1.0)
        assert energy.energy == pytest.approx(45.0)
        assert cost["existence"] == pytest.approx(5.0)
        assert cost["movement"] == 0.0
        assert cost["total"] == pytest.approx(5.0)

    @pytest.mark.parametrize("speed", [0.1, 0.5, 1.0, 1.5])
    def test_moving_cost_scales_with_speed(self, speed):
        energy = EnergyComponent()
        energy.consume_energy(1000.0, moving=True, speed_gene=speed)
        assert energy.energy == pytest.approx(50.0 - 5.0 * (1 + 0.5 * speed))

    def test_sprint_multiplies_movement_term_only(self):
        energy = EnergyComponent()
        cost = energy.consume_energy(1000.0, moving=True, speed_gene=1.0, sprinting=True)
        assert cost["existence"] == pytest.approx(5.0)
        assert cost["movement"] == pytest.approx(5.0 * 0.5 * 2.5)
        assert energy.energy == pytest.approx(38.75)

    def test_sprint_flag_ignored_when_idle(self):
        energy = EnergyComponent()
        energy.consume_energy(1000.0, moving=False, speed_gene=1.0, sprinting=True)
        assert energy.energy == pytest.approx(45.0)

    def test_floors_at_zero(self):
        energy = EnergyComponent(initial_energy=1.0)
        energy.consume_energy(10000.0, moving=True, speed_gene=1.5)
        assert energy.energy == 0.0
        assert energy.is_depleted()

    def test_not_depleted_above_zero(self):
        energy = EnergyComponent()
        energy.consume_energy(16.0, moving=False, speed_gene=1.0)
        assert not energy.is_depleted()


class TestGainEnergy:
    def test_gain(self):
        energy = EnergyComponent()
        assert energy.gain_energy(10.0) == 10.0
        assert energy.energy == 60.0

    def test_capped_at_max(self):
        energy = EnergyComponent(initial_energy=95.0)
        assert energy.gain_energy(50.0) == 5.0
        assert energy.energy == 100.0


class TestStateQueries:
    def test_initial_state(self):
        energy = EnergyComponent()
        assert energy.get_energy_ratio() == 0.5
        assert energy.hunger_state is HungerState.SATISFIED

    def test_hunger_follows_energy(self):
        assert EnergyComponent(initial_energy=30.0).hunger_state is HungerState.HUNGRY
        assert EnergyComponent(initial_energy=15.0).hunger_state is HungerState.STARVING

    def test_sprint_threshold(self):
        assert EnergyComponent(initial_energy=20.0).can_sprint()
        assert not EnergyComponent(initial_energy=19.99).can_sprint()

    def test_initial_energy_clamped(self):
        assert EnergyComponent(initial_energy=500.0).energy == 100.0
        assert EnergyComponent(initial_energy=-5.0).energy == 0.0

    def test_invalid_parameters(self):
        with pytest.raises(EntityError):
            EnergyComponent(max_energy=0.0)
        with pytest.raises(EntityError):
            EnergyComponent(decrease_rate=-1.0)
