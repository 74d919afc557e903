"""Controller input: reading joysticks into per-player input components."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from .registry import ComponentRegistry

JOYSTICK_COUNT = 8


@dataclass(eq=False)
class InputComponent:
    """Latest input of one controller; controller_id is -1 until assigned."""

    controller_id: int = -1
    input_rotation: float = 0.0
    button_id: int = -1


class PygameJoysticks:
    """Joystick access through pygame, initialised on first use."""

    def __init__(self) -> None:
        self._sticks: dict[int, pygame.joystick.JoystickType] = {}

    def _stick(self, index: int):
        if index < 0:
            return None
        if not pygame.joystick.get_init():
            pygame.joystick.init()
        if index >= pygame.joystick.get_count():
            return None
        stick = self._sticks.get(index)
        if stick is None:
            stick = pygame.joystick.Joystick(index)
            self._sticks[index] = stick
        return stick

    def is_connected(self, index: int) -> bool:
        return self._stick(index) is not None

    def axis_position(self, index: int) -> float:
        """Turn input in [-1, 1]: right trigger minus left trigger where present."""
        stick = self._stick(index)
        if stick is None:
            return 0.0
        axes = stick.get_numaxes()
        if axes >= 6:
            right = (stick.get_axis(5) + 1.0) / 2.0
            left = (stick.get_axis(4) + 1.0) / 2.0
            return right - left
        if axes > 2:
            return float(stick.get_axis(2))
        return 0.0

    def button_count(self, index: int) -> int:
        stick = self._stick(index)
        return stick.get_numbuttons() if stick is not None else 0

    def is_button_pressed(self, index: int, button: int) -> bool:
        stick = self._stick(index)
        return bool(stick.get_button(button)) if stick is not None else False


class InputSystem(ComponentRegistry[InputComponent]):
    """Assigns controllers to input components and refreshes their state."""

    def __init__(self, joysticks) -> None:
        super().__init__()
        self.joysticks = joysticks

    def register(self, component: InputComponent | None) -> None:
        """Register the component and give it the first connected controller not yet taken."""
        super().register(component)
        if component is None:
            return
        first_free = len(self) - 1
        for index in range(first_free, JOYSTICK_COUNT):
            if self.joysticks.is_connected(index):
                component.controller_id = index
                return
        component.controller_id = first_free

    def update(self) -> None:
        for component in self:
            index = component.controller_id
            if not self.joysticks.is_connected(index):
                continue
            component.input_rotation = self.joysticks.axis_position(index)
            component.button_id = next(
                (
                    button
                    for button in range(self.joysticks.button_count(index))
                    if self.joysticks.is_button_pressed(index, button)
                ),
                -1,
            )

    def connected_controllers(self) -> list[int]:
        return [index for index in range(JOYSTICK_COUNT) if self.joysticks.is_connected(index)]