"""Movement, velocity clamping, gravity and orbiting bodies."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .registry import ComponentRegistry
from .vecmath import Vec2, length, normalize, safe_normalize, squared_length


@dataclass(eq=False)
class PhysicsComponent:
    """Position, velocity and gravitational properties of one object."""

    movable: bool = False
    net_force: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    position: Vec2 = field(default_factory=Vec2)
    mass: float = 1.0
    max_speed: float = 300.0
    affected_by_gravity: bool = False
    satellite_body: bool = False
    applies_gravity: bool = False
    gravity_strength: float = 0.0


def orbital_velocity(centre: Vec2, net_strength: float, component: PhysicsComponent) -> Vec2:
    """Velocity that keeps the component circling the centre of gravity."""
    to_satellite = component.position - centre
    orbit_distance = length(to_satellite)
    if orbit_distance == 0:
        return Vec2()
    speed = math.sqrt(net_strength / orbit_distance)
    return safe_normalize(Vec2(to_satellite.y, -to_satellite.x)) * speed


class PhysicsSystem(ComponentRegistry[PhysicsComponent]):
    """Integrates the motion of every registered physics component."""

    def __init__(self) -> None:
        super().__init__()
        self._gravitational: list[PhysicsComponent] = []

    def add_gravitational_object(self, component: PhysicsComponent | None) -> None:
        """Add a body that pulls on others; bodies that do not apply gravity are ignored."""
        if component is None or not component.applies_gravity:
            return
        self._gravitational.append(component)

    def update(self, delta_time: float) -> None:
        for component in self:
            if not component.movable:
                continue
            if component.mass > 0.0:
                if self._move_satellite(component, delta_time):
                    continue
                self._apply_gravity(component)
                component.velocity += (component.net_force / component.mass) * delta_time
            self._clamp_velocity(component)
            component.position += component.velocity * delta_time

    def post_update(self) -> None:
        """Reset the net force on every moving body for the next frame."""
        for component in self:
            if component.movable and component.mass > 0.0:
                component.net_force = Vec2()

    @staticmethod
    def _clamp_velocity(component: PhysicsComponent) -> None:
        if squared_length(component.velocity) > component.max_speed * component.max_speed:
            component.velocity = normalize(component.velocity) * component.max_speed

    def _apply_gravity(self, component: PhysicsComponent) -> None:
        if not component.affected_by_gravity or not self._gravitational:
            return
        net_gravity = Vec2()
        for body in self._gravitational:
            to_body = body.position - component.position
            body_distance = length(to_body)
            if body_distance == 0:
                continue
            force = (body.gravity_strength * body.mass * component.mass) / (
                body_distance * body_distance
            )
            net_gravity += normalize(to_body) * force
        component.net_force += net_gravity

    def _move_satellite(self, component: PhysicsComponent, delta_time: float) -> bool:
        if not component.satellite_body:
            return False
        if self._gravitational:
            centre = Vec2()
            net_strength = 0.0
            for body in self._gravitational:
                centre += body.position
                net_strength += body.gravity_strength * body.mass
            centre /= len(self._gravitational)
            component.velocity = orbital_velocity(centre, net_strength, component)
        component.position += component.velocity * delta_time
        return True