"""Tests for Genome creation, combination and accessors."""

import math

import pytest

from slimesim.color import gene_to_rgb
from slimesim.exceptions import GeneticsError
from slimesim.genetics import GENE_NAMES, GENE_SPECS, Gene, Genome, get_gene_spec
from slimesim.util.rng import MissingRNGError, SeededRandom
from tests.fakes.scripted_rng import ScriptedRandom


def _assert_within_bounds(genome: Genome) -> None:
    for spec in GENE_SPECS:
        gene = genome.get_gene(spec.name)
        assert spec.min_val <= gene.value <= spec.max_val
        assert (gene.min_val, gene.max_val) == (spec.min_val, spec.max_val)


class TestGeneTable:
    def test_gene_order(self):
        assert GENE_NAMES == ["speed", "size", "energy_efficiency", "color", "sense_radius"]

    def test_speed_spec(self):
        spec = get_gene_spec("speed")
        assert (spec.mean, spec.std_dev, spec.min_val, spec.max_val) == (0.5, 0.3, 0.1, 1.5)

    def test_unknown_gene(self):
        with pytest.raises(GeneticsError, match="Unknown gene"):
            get_gene_spec("wings")


class TestGene:
    def test_value_is_clamped(self):
        assert Gene("size", 3.0, 0.5, 2.0).value == 2.0
        assert Gene("size", -1.0, 0.5, 2.0).value == 0.5

    def test_non_finite_value_rejected(self):
        with pytest.raises(GeneticsError, match="not finite"):
            Gene("size", math.nan, 0.5, 2.0)
        with pytest.raises(GeneticsError):
            Gene("size", math.inf, 0.5, 2.0)

    def test_inverted_bounds_rejected(self):
        with pytest.raises(GeneticsError):
            Gene("size", 1.0, 2.0, 0.5)

    def test_frozen(self):
        gene = Gene("size", 1.0, 0.5, 2.0)
        with pytest.raises(AttributeError):
            gene.value = 1.5


class TestRandomGenome:
    def test_values_within_bounds_across_seeds(self):
        for i in range(200):
            _assert_within_bounds(Genome.random(SeededRandom(f"seed-{i}")))

    def test_deterministic_for_seed(self):
        assert Genome.random(SeededRandom("abc")) == Genome.random(SeededRandom("abc"))

    def test_first_gene_uses_first_two_draws(self, rng):
        expected_speed = SeededRandom("test-seed").normal(0.5, 0.3, 0.1, 1.5)
        assert Genome.random(rng).speed.value == expected_speed

    def test_consumes_two_draws_per_gene(self, rng):
        reference = SeededRandom("test-seed")
        Genome.random(rng)
        for _ in range(2 * len(GENE_SPECS)):
            reference.random()
        assert rng.random() == reference.random()

    def test_requires_rng(self):
        with pytest.raises(MissingRNGError):
            Genome.random(None)


class TestFromValues:
    def test_explicit_values(self, plain_genome):
        assert plain_genome.values() == {
            "speed": 1.0,
            "size": 1.0,
            "energy_efficiency": 1.0,
            "color": 0.5,
            "sense_radius": 100.0,
        }

    def test_clamps_supplied_values(self, rng):
        genome = Genome.from_values(rng, speed=5.0, sense_radius=10.0)
        assert genome.speed.value == 1.5
        assert genome.sense_radius.value == 50.0

    def test_missing_genes_drawn_with_rng(self, rng):
        genome = Genome.from_values(rng, speed=1.0)
        assert genome.speed.value == 1.0
        _assert_within_bounds(genome)

    def test_missing_genes_without_rng(self):
        with pytest.raises(GeneticsError, match="not supplied"):
            Genome.from_values(speed=1.0)

    def test_unknown_gene_name(self, rng):
        with pytest.raises(GeneticsError):
            Genome.from_values(rng, wings=1.0)

    def test_mismatched_gene_rejected(self):
        size = Gene("size", 1.0, 0.5, 2.0)
        with pytest.raises(GeneticsError):
            Genome(speed=size, size=size, energy_efficiency=size, color=size, sense_radius=size)


class TestCombine:
    def test_without_mutation_each_gene_from_a_parent(self, rng):
        a = Genome.random(SeededRandom("parent-a"))
        b = Genome.random(SeededRandom("parent-b"))
        for _ in range(50):
            child = Genome.combine(a, b, rng=rng, mutation_rate=0.0)
            for name in GENE_NAMES:
                assert child.get_gene_value(name) in (
                    a.get_gene_value(name),
                    b.get_gene_value(name),
                )

    def test_parents_unchanged(self, rng):
        a = Genome.random(SeededRandom("parent-a"))
        b = Genome.random(SeededRandom("parent-b"))
        a_before, b_before = a.to_dict(), b.to_dict()
        Genome.combine(a, b, rng=rng, mutation_rate=1.0)
        assert a.to_dict() == a_before
        assert b.to_dict() == b_before

    def test_full_mutation_stays_near_a_parent_and_in_bounds(self, rng):
        a = Genome.random(SeededRandom("parent-a"))
        b = Genome.random(SeededRandom("parent-b"))
        for _ in range(50):
            child = Genome.combine(a, b, rng=rng, mutation_rate=1.0)
            _assert_within_bounds(child)
            for spec in GENE_SPECS:
                max_shift = (spec.max_val - spec.min_val) * 0.1 + 1e-12
                value = child.get_gene_value(spec.name)
                assert min(
                    abs(value - a.get_gene_value(spec.name)),
                    abs(value - b.get_gene_value(spec.name)),
                ) <= max_shift

    def test_full_mutation_produces_new_values(self, rng):
        a = Genome.random(SeededRandom("parent-a"))
        b = Genome.random(SeededRandom("parent-b"))
        novel = [
            name
            for _ in range(50)
            for name, value in Genome.combine(a, b, rng=rng, mutation_rate=1.0).values().items()
            if value not in (a.get_gene_value(name), b.get_gene_value(name))
        ]
        assert novel

    def test_mutation_shift_and_clamp(self):
        a = Genome.from_values(
            speed=1.45, size=1.0, energy_efficiency=1.0, color=0.5, sense_radius=100.0
        )
        b = Genome.from_values(
            speed=0.2, size=0.6, energy_efficiency=0.6, color=0.1, sense_radius=60.0
        )
        # Per gene: parent draw, mutation draw, then the shift draw if mutating
        rng = ScriptedRandom(
            [
                0.0, 0.0, 0.75,  # speed: a, shift +0.07 past the 1.5 maximum
                0.0, 0.0, 0.0,  # size: a, shift -0.15
                0.9, 0.0, 0.0,  # energy_efficiency: b, shift -0.1
                0.0, 0.99,  # color: a, no mutation
                0.0, 0.0, 0.25,  # sense_radius: a, shift -7.5
            ]
        )
        child = Genome.combine(a, b, rng=rng, mutation_rate=0.5)
        assert rng.remaining == 0
        assert child.speed.value == 1.5
        assert child.size.value == pytest.approx(0.85)
        assert child.energy_efficiency.value == pytest.approx(0.5)
        assert child.color.value == 0.5
        assert child.sense_radius.value == pytest.approx(92.5)

    def test_draw_order_without_mutation(self, rng):
        """Two draws per gene: parent choice, then the mutation roll."""
        reference = SeededRandom("test-seed")
        a = Genome.from_values(speed=0.2, size=0.6, energy_efficiency=0.6, color=0.1, sense_radius=60)
        b = Genome.from_values(speed=1.4, size=1.9, energy_efficiency=1.4, color=0.9, sense_radius=190)
        child = Genome.combine(a, b, rng=rng, mutation_rate=0.0)
        for name in GENE_NAMES:
            expected_parent = a if reference.random() < 0.5 else b
            reference.random()
            assert child.get_gene_value(name) == expected_parent.get_gene_value(name)
        assert rng.random() == reference.random()

    def test_same_parent_twice_without_mutation_is_clone(self, rng, plain_genome):
        assert Genome.combine(plain_genome, plain_genome, rng=rng, mutation_rate=0.0) == plain_genome

    @pytest.mark.parametrize("rate", [-0.1, 1.5])
    def test_invalid_mutation_rate(self, rng, plain_genome, rate):
        with pytest.raises(GeneticsError, match="mutation_rate"):
            Genome.combine(plain_genome, plain_genome, rng=rng, mutation_rate=rate)

    def test_requires_rng(self, plain_genome):
        with pytest.raises(MissingRNGError):
            Genome.combine(plain_genome, plain_genome, rng=None)


class TestAccessors:
    def test_get_gene_value(self, plain_genome):
        assert plain_genome.get_gene_value("sense_radius") == 100.0

    def test_get_gene_unknown(self, plain_genome):
        with pytest.raises(GeneticsError):
            plain_genome.get_gene("wings")

    def test_genes_iterates_in_table_order(self, plain_genome):
        assert [gene.name for gene in plain_genome.genes()] == GENE_NAMES

    def test_color_rgb_uses_color_gene(self, plain_genome):
        assert plain_genome.color_rgb() == gene_to_rgb(0.5) == (102, 255, 255)

    def test_debug_snapshot(self, plain_genome):
        snapshot = plain_genome.debug_snapshot()
        assert snapshot["speed"] == 1.0
        assert snapshot["rgb"] == (102, 255, 255)
