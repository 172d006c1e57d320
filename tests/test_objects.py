import pytest

from termarcade.graphics import ObjectType
from termarcade.objects import GameObject, ObjectList


class FakeWindow:
    def __init__(self):
        self.calls = []

    def addch(self, *args):
        self.calls.append(("addch", args))

    def hline(self, *args):
        self.calls.append(("hline", args))


def test_initial_velocities():
    assert GameObject(ObjectType.SHIP_BASIC, 20, 20).velocity_x == 1
    assert GameObject(ObjectType.SHIP_ENEMY_1, 35, 10).velocity_x == 0.25
    bullet = GameObject(ObjectType.BULLET_1, 5, 5)
    assert (bullet.velocity_x, bullet.velocity_y) == (0, -1)
    assert bullet.strength == 10


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        GameObject(ObjectType.SHIP_ENEMY_2, 1, 1)


def test_ship_moves_horizontally():
    ship = GameObject(ObjectType.SHIP_BASIC, 20, 20)
    assert ship.move(80, 40) is False
    assert ship.prev_x == 20
    assert ship.x == 20 + ship.velocity_x
    assert ship.y == 20


def test_ship_bounces_at_left_edge():
    ship = GameObject(ObjectType.SHIP_BASIC, 3, 20)
    ship.change_direction(-1)
    assert ship.velocity_x < 0
    ship.move(80, 40)
    assert ship.velocity_x > 0


def test_bullet_leaves_top():
    bullet = GameObject(ObjectType.BULLET_1, 5, 2)
    assert bullet.move(80, 40) is False
    assert bullet.move(80, 40) is True
    assert bullet.y <= 0


def test_change_direction_only_player():
    enemy = GameObject(ObjectType.SHIP_ENEMY_1, 30, 10)
    enemy.change_direction(-1)
    assert enemy.velocity_x > 0
    ship = GameObject(ObjectType.SHIP_BASIC, 30, 10)
    ship.change_direction(1)
    assert ship.velocity_x > 0
    ship.change_direction(-1)
    assert ship.velocity_x < 0


def test_reverse_twice_restores():
    ship = GameObject(ObjectType.SHIP_BASIC, 30, 10)
    before = ship.velocity_x
    ship.reverse()
    ship.reverse()
    assert ship.velocity_x == before


def test_collision_is_symmetric():
    a = GameObject(ObjectType.SHIP_BASIC, 10, 10)
    near = GameObject(ObjectType.SHIP_ENEMY_1, 13, 10)
    far = GameObject(ObjectType.SHIP_ENEMY_1, 40, 10)
    assert a.collides_with(near) and near.collides_with(a)
    assert not a.collides_with(far) and not far.collides_with(a)


def test_interact_reverses_only_other():
    a = GameObject(ObjectType.SHIP_BASIC, 10, 10)
    b = GameObject(ObjectType.SHIP_ENEMY_1, 12, 10)
    assert a.interact(b) is True
    assert a.velocity_x > 0
    assert b.velocity_x < 0


def test_erase_syncs_previous_position():
    ship = GameObject(ObjectType.SHIP_BASIC, 20, 20)
    ship.move(80, 40)
    win = FakeWindow()
    ship.erase(win)
    assert (ship.prev_x, ship.prev_y) == (ship.x, ship.y)
    assert all(name == "hline" for name, _ in win.calls)
    assert len(win.calls) == 2 * ship.height


def test_draw_erases_then_draws():
    ship = GameObject(ObjectType.SHIP_BASIC, 20, 20)
    win = FakeWindow()
    ship.draw(win)
    names = [name for name, _ in win.calls]
    assert names == ["hline"] * ship.height + ["addch"] * (ship.height * ship.width)


def test_add_sets_player():
    objects = ObjectList(80, 40)
    ship = objects.add(ObjectType.SHIP_BASIC, 20, 20)
    objects.add(ObjectType.SHIP_ENEMY_1, 35, 10)
    assert objects.player is ship
    assert len(objects) == 2
    assert [o.kind for o in objects] == [ObjectType.SHIP_BASIC, ObjectType.SHIP_ENEMY_1]


def test_shoot_places_bullet_at_ship():
    objects = ObjectList(80, 40)
    ship = objects.add(ObjectType.SHIP_BASIC, 20, 20)
    bullet = objects.shoot(ship)
    assert bullet.kind is ObjectType.BULLET_1
    assert (bullet.x, bullet.y) == (ship.x, ship.y)
    assert bullet in objects


def test_update_removes_bullets_off_field():
    objects = ObjectList(80, 40)
    objects.add(ObjectType.SHIP_BASIC, 20, 20)
    bullet = objects.add(ObjectType.BULLET_1, 60, 1)
    objects.update_positions()
    assert bullet not in objects
    assert len(objects) == 1


def test_update_moves_ships_apart_from_far_objects():
    objects = ObjectList(80, 40)
    ship = objects.add(ObjectType.SHIP_BASIC, 20, 20)
    enemy = objects.add(ObjectType.SHIP_ENEMY_1, 50, 5)
    objects.update_positions()
    assert ship.x == 20 + ship.velocity_x
    assert enemy.x == 50 + enemy.velocity_x


def test_remove_unknown_raises():
    objects = ObjectList(80, 40)
    stray = GameObject(ObjectType.BULLET_1, 1, 1)
    with pytest.raises(ValueError):
        objects.remove(stray)


def test_remove_player_clears_player():
    win = FakeWindow()
    objects = ObjectList(80, 40, win)
    ship = objects.add(ObjectType.SHIP_BASIC, 20, 20)
    objects.remove(ship)
    assert objects.player is None
    assert len(objects) == 0
    assert win.calls


def test_clear_empties_list():
    objects = ObjectList(80, 40)
    objects.add(ObjectType.SHIP_BASIC, 20, 20)
    objects.add(ObjectType.SHIP_ENEMY_1, 14, 10)
    objects.clear()
    assert len(objects) == 0
    assert objects.player is None


def test_draw_uses_window():
    win = FakeWindow()
    objects = ObjectList(80, 40, win)
    objects.add(ObjectType.BULLET_1, 5, 5)
    objects.draw()
    assert ("addch", (5, 5)) == (win.calls[-1][0], win.calls[-1][1][:2])