"""Slime agent: energy, hunger, random movement and death.

A slime is pure simulation state. The host engine draws it and moves it
along ``velocity``; the slime only decides where it wants to go, pays for
it in energy and reports when it has died.
"""

import logging
from typing import Callable, Optional, Tuple

from slimesim.config.settings import WorldBounds
from slimesim.config.slime import (
    BOUNDARY_PADDING,
    DEATH_FADE_DURATION_MS,
    DEFAULT_MUTATION_RATE,
    ENERGY_DECREASE_RATE,
    HUNGRY_DIRECTION_CHANGE_MS,
    HUNGRY_MOVE_PROBABILITY,
    INITIAL_ENERGY,
    MAX_ENERGY,
    SATISFIED_DIRECTION_CHANGE_MS,
    SATISFIED_MOVE_PROBABILITY,
    SLIME_BASE_SPEED,
    SLIME_DEFAULT_POSITION,
    SLIME_RADIUS,
    SPRINT_SPEED_MULTIPLIER,
    STARVING_DIRECTION_CHANGE_MS,
)
from slimesim.energy import EnergyComponent, HungerState
from slimesim.entities.base import Direction, LifeState, MovementMode, SlimeUpdateResult
from slimesim.entities.food import Food
from slimesim.genetics import Genome
from slimesim.math_utils import Vector2
from slimesim.util.rng import SeededRandom, require_rng_param

logger = logging.getLogger(__name__)

DeathCallback = Callable[["Slime"], None]


class Slime:
    """An autonomous agent with a genome and an energy reserve.

    Attributes:
        slime_id: Identifier assigned by the owning manager (0 if unmanaged)
        position: Centre of the slime in world pixels
        velocity: Movement intent in pixels per second
        direction: Current facing
        bounds: World area the slime is kept inside
    """

    def __init__(
        self,
        rng: SeededRandom,
        genome: Optional[Genome] = None,
        position: Optional[Vector2] = None,
        bounds: Optional[WorldBounds] = None,
        slime_id: int = 0,
        initial_energy: float = INITIAL_ENERGY,
    ) -> None:
        """Initialize a slime.

        Args:
            rng: Simulation random source (movement decisions, reproduction)
            genome: Genome to carry; drawn at random if omitted
            position: Starting position (defaults to (150, 150))
            bounds: World area; defaults to 800x600
            slime_id: Identifier, normally assigned by SlimeManager
            initial_energy: Starting energy (half of max by default)
        """
        self._rng = require_rng_param(rng, "Slime.__init__")
        self._genome = genome if genome is not None else Genome.random(self._rng)
        self.slime_id = slime_id
        self.bounds = bounds if bounds is not None else WorldBounds()

        if position is None:
            position = Vector2(*SLIME_DEFAULT_POSITION)
        self.position: Vector2 = position.copy()
        self.velocity: Vector2 = Vector2(0.0, 0.0)
        self.direction: Direction = Direction.DOWN
        self._is_moving = False
        self._movement_mode = MovementMode.NORMAL

        self._energy = EnergyComponent(MAX_ENERGY, initial_energy, ENERGY_DECREASE_RATE)

        # A zero duration makes the first tick pick a movement
        self._movement_change_timer = 0.0
        self._movement_change_duration = 0.0

        self._life_state = LifeState.ALIVE
        self._fade_elapsed = 0.0
        self._on_death: Optional[DeathCallback] = None

    # =========================================================================
    # Tick
    # =========================================================================

    def tick(self, elapsed_ms: float) -> SlimeUpdateResult:
        """Advance the slime by *elapsed_ms* simulated milliseconds.

        Returns:
            What happened to the slime during this tick
        """
        if self._life_state is LifeState.REMOVED:
            return SlimeUpdateResult.REMOVED
        if self._life_state is LifeState.DYING:
            return self._update_fade(elapsed_ms)

        self._update_random_movement(elapsed_ms)
        if self._update_energy(elapsed_ms):
            return SlimeUpdateResult.JUST_DIED
        self._check_boundaries()
        return SlimeUpdateResult.ALIVE

    def _update_random_movement(self, elapsed_ms: float) -> None:
        self._movement_change_timer += elapsed_ms
        if self._movement_change_timer >= self._movement_change_duration:
            self._change_random_movement()

    def _change_random_movement(self) -> None:
        """Pick a new direction, whether to move, and when to decide again."""
        hunger = self.hunger_state
        direction = Direction(self._rng.randint(0, 3))

        if hunger is HungerState.SATISFIED:
            should_move = self._rng.random() < SATISFIED_MOVE_PROBABILITY
            duration_range = SATISFIED_DIRECTION_CHANGE_MS
        elif hunger is HungerState.HUNGRY:
            should_move = self._rng.random() < HUNGRY_MOVE_PROBABILITY
            duration_range = HUNGRY_DIRECTION_CHANGE_MS
        else:
            # Starving slimes always move
            should_move = True
            duration_range = STARVING_DIRECTION_CHANGE_MS

        self.move_in_direction(direction, should_move)
        self._movement_change_duration = self._rng.uniform(*duration_range)
        self._movement_change_timer = 0.0

    def _update_energy(self, elapsed_ms: float) -> bool:
        """Pay this tick's energy cost. Returns True if the slime just died."""
        self._energy.consume_energy(
            elapsed_ms,
            moving=self._is_moving,
            speed_gene=self._genome.speed.value,
            sprinting=self._movement_mode is MovementMode.SPRINT,
        )
        if self._energy.is_depleted():
            return self.die()
        return False

    def _check_boundaries(self) -> None:
        """Keep the slime inside the world, turning it back inward at an edge."""
        effective_radius = self.radius
        min_x = BOUNDARY_PADDING + effective_radius
        max_x = self.bounds.width - BOUNDARY_PADDING - effective_radius
        min_y = BOUNDARY_PADDING + effective_radius
        max_y = self.bounds.height - BOUNDARY_PADDING - effective_radius

        if self.position.x > max_x:
            self.position.x = max_x
            self.move_in_direction(Direction.LEFT, True)
            self._movement_change_timer = 0.0

        if self.position.x < min_x:
            self.position.x = min_x
            self.move_in_direction(Direction.RIGHT, True)
            self._movement_change_timer = 0.0

        if self.position.y > max_y:
            self.position.y = max_y
            self.move_in_direction(Direction.UP, True)
            self._movement_change_timer = 0.0

        if self.position.y < min_y:
            self.position.y = min_y
            self.move_in_direction(Direction.DOWN, True)
            self._movement_change_timer = 0.0

    def _update_fade(self, elapsed_ms: float) -> SlimeUpdateResult:
        self._fade_elapsed += elapsed_ms
        if self._fade_elapsed < DEATH_FADE_DURATION_MS:
            return SlimeUpdateResult.DYING

        self._fade_elapsed = DEATH_FADE_DURATION_MS
        self._life_state = LifeState.REMOVED
        logger.debug("Slime %d removed after fade-out", self.slime_id)
        if self._on_death is not None:
            self._on_death(self)
        return SlimeUpdateResult.REMOVED

    # =========================================================================
    # Movement control
    # =========================================================================

    def move_in_direction(self, direction: Direction, should_move: bool = True) -> None:
        """Face *direction* and, if *should_move*, set velocity towards it."""
        self.direction = Direction(direction)
        self._is_moving = should_move
        if not should_move:
            self.velocity = Vector2(0.0, 0.0)
            return

        speed = self.current_speed
        dx, dy = self.direction.unit_vector
        self.velocity = Vector2(dx * speed, dy * speed)

    def stop_moving(self) -> None:
        self._is_moving = False
        self.velocity = Vector2(0.0, 0.0)

    def set_movement_mode(self, mode: MovementMode) -> None:
        """Switch between normal and sprint movement.

        Sprint requests are ignored while energy is below 20% of max.
        """
        mode = MovementMode(mode)
        if mode is MovementMode.SPRINT and not self._energy.can_sprint():
            return
        self._movement_mode = mode
        if self._is_moving:
            self.move_in_direction(self.direction, True)

    def toggle_sprint(self) -> None:
        if self._movement_mode is MovementMode.NORMAL:
            self.set_movement_mode(MovementMode.SPRINT)
        else:
            self.set_movement_mode(MovementMode.NORMAL)

    def advance_position(self, elapsed_ms: float) -> None:
        """Integrate velocity over *elapsed_ms*.

        Hosts with their own physics move the slime themselves and never
        call this.
        """
        if self._life_state is not LifeState.ALIVE:
            return
        self.position.translate(self.velocity * (elapsed_ms / 1000.0))

    # =========================================================================
    # Interaction
    # =========================================================================

    def on_resource_contact(self, food: Food) -> float:
        """Eat *food* the host reports this slime is touching.

        Returns:
            Energy actually gained (0.0 if the food was already eaten or the
            slime is not alive)
        """
        if self._life_state is not LifeState.ALIVE:
            return 0.0
        nutrition = food.consume()
        if nutrition == 0:
            return 0.0
        gained = self._energy.gain_energy(nutrition * self.energy_efficiency)
        logger.debug(
            "Slime %d ate %s food (+%.2f energy)", self.slime_id, food.food_type.name, gained
        )
        return gained

    def die(self) -> bool:
        """Start the death fade.

        Returns:
            True if this call killed the slime, False if it was already dying
        """
        if self._life_state is not LifeState.ALIVE:
            return False
        self._life_state = LifeState.DYING
        self._fade_elapsed = 0.0
        self.stop_moving()
        logger.debug("Slime %d died", self.slime_id)
        return True

    def set_death_callback(self, callback: Optional[DeathCallback]) -> None:
        """Register a function called once, when the death fade completes."""
        self._on_death = callback

    def reproduce(
        self,
        other: "Slime",
        rng: Optional[SeededRandom] = None,
        mutation_rate: float = DEFAULT_MUTATION_RATE,
    ) -> "Slime":
        """Create an offspring combining this slime's genome with *other*'s.

        The child starts at this slime's position with fresh starting energy.
        """
        rng = rng if rng is not None else self._rng
        child_genome = Genome.combine(
            self._genome, other.genome, rng=rng, mutation_rate=mutation_rate
        )
        return Slime(rng, genome=child_genome, position=self.position, bounds=self.bounds)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def genome(self) -> Genome:
        return self._genome

    @property
    def energy(self) -> float:
        return self._energy.energy

    @property
    def max_energy(self) -> float:
        return self._energy.max_energy

    @property
    def hunger_state(self) -> HungerState:
        return self._energy.hunger_state

    @property
    def is_hungry(self) -> bool:
        """True when hungry or starving."""
        return self.hunger_state is not HungerState.SATISFIED

    @property
    def is_moving(self) -> bool:
        return self._is_moving

    @property
    def movement_mode(self) -> MovementMode:
        return self._movement_mode

    @property
    def current_speed(self) -> float:
        """Speed in pixels per second for the current movement mode."""
        speed = SLIME_BASE_SPEED * self._genome.speed.value
        if self._movement_mode is MovementMode.SPRINT:
            speed *= SPRINT_SPEED_MULTIPLIER
        return speed

    @property
    def life_state(self) -> LifeState:
        return self._life_state

    @property
    def is_alive(self) -> bool:
        return self._life_state is LifeState.ALIVE

    @property
    def is_dying(self) -> bool:
        """True once the slime has died, including after removal."""
        return self._life_state is not LifeState.ALIVE

    @property
    def opacity(self) -> float:
        """Display opacity: 1.0 while alive, fading to 0.0 over the death fade."""
        if self._life_state is LifeState.ALIVE:
            return 1.0
        return max(0.0, 1.0 - self._fade_elapsed / DEATH_FADE_DURATION_MS)

    @property
    def radius(self) -> float:
        """Collision radius scaled by the size gene."""
        return SLIME_RADIUS * self._genome.size.value

    @property
    def color(self) -> Tuple[int, int, int]:
        return self._genome.color_rgb()

    @property
    def energy_efficiency(self) -> float:
        return self._genome.energy_efficiency.value

    @property
    def sense_radius(self) -> float:
        return self._genome.sense_radius.value

    def __repr__(self) -> str:
        return (
            f"Slime(id={self.slime_id}, state={self._life_state.value}, "
            f"energy={self.energy:.1f}, pos=({self.position.x:.1f}, {self.position.y:.1f}))"
        )
