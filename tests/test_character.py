import pytest

from sprintrun.character import Character, Movement, State


def test_defaults():
    c = Character()
    assert (c.x, c.y) == (50, 350)
    assert c.state is State.GROUND
    assert c.movement is Movement.NONE
    assert (c.score, c.lives, c.level) == (0, 3, 1)
    assert c.frame == 1
    assert c.direction == -1


def test_second_player_uses_twenty_sprites():
    p2 = Character.second_player()
    assert p2.sprite_count == 20
    assert Character().sprite_count == 17
    assert p2.hud_lives == 3
    assert p2.stars == 0


def test_jump_sets_upward_velocity():
    c = Character()
    c.jump(6)
    assert c.vy == -6
    assert c.state is State.AIR


def test_move_right_advances_and_scores():
    c = Character(movement=Movement.RIGHT)
    dx = c.move(2)
    assert dx == c.dx
    assert dx > 0
    assert c.x == pytest.approx(50 + dx)
    assert c.score == 1


def test_move_right_stops_at_limit():
    c = Character(x=400, movement=Movement.RIGHT)
    c.move(10)
    assert c.x == 400
    assert c.score == 0


def test_move_left_stops_at_limit():
    c = Character(x=50, movement=Movement.LEFT)
    c.move(10)
    assert c.x == 50


def test_move_left_goes_back_without_score():
    c = Character(x=200, movement=Movement.LEFT)
    dx = c.move(4)
    assert c.x == pytest.approx(200 - dx)
    assert c.score == 0


def test_move_without_direction_keeps_position():
    c = Character(x=120)
    c.move(5)
    assert c.x == 120


def test_acceleration_lengthens_step():
    plain = Character(movement=Movement.RIGHT)
    fast = Character(movement=Movement.RIGHT, acceleration=0.1)
    assert fast.move(3) > plain.move(3)


def test_animate_running_right_cycles():
    c = Character(direction=0, frame=1)
    frames = [c.animate() for _ in range(5)]
    assert frames == [2, 3, 4, 5, 1]


def test_animate_running_left_cycles():
    c = Character(direction=1, frame=1)
    frames = [c.animate() for _ in range(6)]
    assert frames == [6, 7, 8, 9, 10, 6]


def test_animate_attack_cycles():
    c = Character(direction=2, frame=0)
    frames = [c.animate() for _ in range(4)]
    assert frames == [11, 12, 13, 11]


@pytest.mark.parametrize("direction, expected", [(3, 16), (4, 17)])
def test_animate_fixed_poses(direction, expected):
    c = Character(direction=direction, frame=2)
    assert c.animate() == expected
    assert c.frame == expected


def test_animate_idle_alternates():
    c = Character(direction=-1, frame=1)
    frames = [c.animate() for _ in range(4)]
    assert frames == [14, 15, 14, 15]


def test_update_applies_gravity_and_position():
    c = Character()
    c.update(False)
    assert c.vy > 0
    assert c.y > 350
    assert c.position == (int(c.x), int(c.y))


def test_holding_jump_reduces_gravity_in_air():
    held = Character()
    free = Character()
    held.jump(6)
    free.jump(6)
    held.update(True)
    free.update(False)
    assert held.vy < free.vy
    assert held.state is State.AIR


def test_holding_jump_on_ground_does_not_change_gravity():
    held = Character()
    free = Character()
    held.update(True)
    free.update(False)
    assert held.vy == free.vy


def test_landing_clamps_to_ground():
    c = Character(y=390, vy=2, state=State.AIR)
    c.update(False)
    assert c.y == 380
    assert c.vy == 0
    assert c.state is State.GROUND


def test_landing_keeps_upward_velocity():
    c = Character(y=390, state=State.AIR)
    c.jump(6)
    c.update(False)
    assert c.vy < 0
    assert c.y < 380
    assert c.state is State.GROUND


def test_status_lines():
    c = Character(score=12, lives=2, level=4)
    lines = c.status_lines()
    assert [text for text, _ in lines] == ["SCORE:12", "VIE:2", "LEVEL:4"]
    assert [pos for _, pos in lines] == [(5, 5), (5, 25), (5, 50)]