"""Moving ships and bullets and the list that keeps them."""

from __future__ import annotations

import math
from typing import Any, Iterator

from .graphics import ObjectType, Sprite, sprite_for

__all__ = ["GameObject", "ObjectList"]

_START_VELOCITY = {
    ObjectType.SHIP_BASIC: (1.0, 0.0),
    ObjectType.SHIP_ENEMY_1: (0.25, 0.0),
    ObjectType.BULLET_1: (0.0, -1.0),
}

_SHIPS = (ObjectType.SHIP_BASIC, ObjectType.SHIP_ENEMY_1, ObjectType.SHIP_ENEMY_2)


class GameObject:
    """A ship or bullet with a position, a previous position and a velocity."""

    def __init__(self, kind: ObjectType, x: float, y: float) -> None:
        self.kind = ObjectType(kind)
        self.sprite: Sprite = sprite_for(self.kind)
        self.x = float(x)
        self.y = float(y)
        self.prev_x = self.x
        self.prev_y = self.y
        self.velocity_x, self.velocity_y = _START_VELOCITY[self.kind]
        self.strength = 10.0

    def __repr__(self) -> str:
        return f"GameObject({self.kind.name}, x={self.x}, y={self.y})"

    @property
    def height(self) -> int:
        return self.sprite.height

    @property
    def width(self) -> int:
        return self.sprite.width

    @property
    def diagonal(self) -> float:
        return math.hypot(self.height, self.width)

    def move(self, max_x: int, max_y: int) -> bool:
        """Advance one step; return True when the object has left the field."""
        if self.kind in (ObjectType.SHIP_BASIC, ObjectType.SHIP_ENEMY_1):
            self.prev_x = self.x
            self.x += self.velocity_x
        elif self.kind is ObjectType.BULLET_1:
            self.prev_y = self.y
            self.y += self.velocity_y

        if self.kind in _SHIPS:
            half = self.width // 2
            if not (self.x - half > 0 and self.x + half < max_x - 1):
                self.reverse()
            return False
        half = self.height // 2
        return not (self.y - half > 0 and self.y + half < max_y)

    def reverse(self) -> None:
        """Flip the horizontal direction."""
        self.velocity_x *= -1

    def change_direction(self, direction: int) -> None:
        """Steer the player ship left (negative) or right (positive)."""
        if self.kind is ObjectType.SHIP_BASIC and direction * self.velocity_x < 0:
            self.reverse()

    def collides_with(self, other: GameObject) -> bool:
        """True when the centres are no further apart than the mean of the diagonals."""
        distance = math.hypot(other.x - self.x, other.y - self.y)
        return distance <= self.diagonal / 2 + other.diagonal / 2

    def interact(self, other: GameObject) -> bool:
        """Turn ``other`` round if it touches this object; return whether it did."""
        if self.collides_with(other):
            other.reverse()
            return True
        return False

    def draw(self, win: Any) -> None:
        """Erase the object at its previous place and draw it at the current one."""
        self.sprite.erase(win, self.prev_y, self.prev_x)
        self.sprite.draw(win, self.y, self.x)

    def erase(self, win: Any) -> None:
        """Remove every trace of the object from ``win``."""
        self.sprite.erase(win, self.prev_y, self.prev_x)
        self.prev_x, self.prev_y = self.x, self.y
        self.sprite.erase(win, self.prev_y, self.prev_x)


class ObjectList:
    """The objects on a play field of ``max_x`` columns and ``max_y`` rows."""

    def __init__(self, max_x: int, max_y: int, win: Any = None) -> None:
        self.max_x = max_x
        self.max_y = max_y
        self.win = win
        self.player: GameObject | None = None
        self._objects: list[GameObject] = []

    def __iter__(self) -> Iterator[GameObject]:
        return iter(list(self._objects))

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, obj: object) -> bool:
        return any(obj is item for item in self._objects)

    def add(self, kind: ObjectType, x: float, y: float) -> GameObject:
        """Create an object at (x, y) and append it; a basic ship becomes the player."""
        obj = GameObject(kind, x, y)
        self._objects.append(obj)
        if obj.kind is ObjectType.SHIP_BASIC:
            self.player = obj
        return obj

    def remove(self, obj: GameObject) -> None:
        """Erase ``obj`` from the window and drop it from the list."""
        for index, item in enumerate(self._objects):
            if item is obj:
                break
        else:
            raise ValueError(f"{obj!r} is not in the list")
        if self.win is not None:
            obj.erase(self.win)
        del self._objects[index]
        if self.player is obj:
            self.player = None

    def update_positions(self) -> None:
        """Move every object, drop those that left the field and resolve contacts."""
        for obj in list(self._objects):
            if obj.move(self.max_x, self.max_y):
                self.remove(obj)
                continue
            for other in list(self._objects):
                if other is not obj:
                    obj.interact(other)

    def draw(self) -> None:
        """Draw every object into the list's window."""
        if self.win is None:
            return
        for obj in self._objects:
            obj.draw(self.win)

    def clear(self) -> None:
        """Forget every object and the player."""
        self._objects.clear()
        self.player = None

    def shoot(self, ship: GameObject) -> GameObject:
        """Fire a bullet from the ship's position."""
        return self.add(ObjectType.BULLET_1, ship.x, ship.y)