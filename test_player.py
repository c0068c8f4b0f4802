"""test_player.py - 玩家移动、边界、按键冲突、行走动画；输入快照的边沿语义。

Run:  python -m pytest test_player.py
"""
import sys

import pygame
import pytest

from farm.api import Direction, SCREEN_WIDTH, SCREEN_HEIGHT, TILE_SIZE
from farm.controls import Key
from farm.input import InputSnapshot
from farm.player import Player, BASE_SPEED, SPRITE_SWITCH_TICKS


def _held(*keys) -> InputSnapshot:
    snap = InputSnapshot()
    for k in keys:
        snap.key_down(k)
    return snap


def test_start_idle_facing_down():
    p = Player()
    p.update(InputSnapshot())
    assert p.position == (384, 288)
    assert p.facing is Direction.DOWN
    assert not p.moving
    assert p.state_label == "idle_down"
    assert p.sprite_key() == "player/boy_down_1"


def test_moves_at_base_speed():
    p = Player()
    p.update(_held(Key.RIGHT))
    assert p.position == (384 + BASE_SPEED, 288)
    assert p.facing is Direction.RIGHT
    assert p.state_label == "right"


def test_diagonal_with_two_keys():
    p = Player()
    p.update(_held(Key.UP, Key.LEFT))
    assert p.position == (384 - BASE_SPEED, 288 - BASE_SPEED)
    # 后处理的方向决定朝向
    assert p.facing is Direction.LEFT


def test_clamped_at_left_edge():
    p = Player(x=0, y=200)
    p.update(_held(Key.LEFT))
    assert p.x == 0
    assert p.facing is Direction.LEFT


def test_clamped_at_right_and_bottom_edge():
    max_x, max_y = SCREEN_WIDTH - TILE_SIZE, SCREEN_HEIGHT - TILE_SIZE
    p = Player(x=max_x, y=max_y)
    keys = _held(Key.RIGHT, Key.DOWN)
    for _ in range(5):
        p.update(keys)
    assert p.position == (720, 528)


def test_three_keys_freeze_movement():
    p = Player()
    p.update(_held(Key.UP, Key.LEFT, Key.RIGHT))
    assert p.speed == 0
    assert p.position == (384, 288)
    assert not p.moving


def test_speed_restored_after_conflict():
    p = Player()
    keys = _held(Key.UP, Key.LEFT, Key.RIGHT)
    p.update(keys)
    keys.key_up(Key.LEFT)
    keys.key_up(Key.RIGHT)
    p.update(keys)
    assert p.speed == BASE_SPEED
    assert p.y == 288 - BASE_SPEED


def test_walk_animation_switches_frame():
    p = Player()
    keys = _held(Key.DOWN)
    for _ in range(SPRITE_SWITCH_TICKS):
        p.update(keys)
    assert p.frame == 1
    p.update(keys)
    assert p.frame == 2
    assert p.sprite_key() == "player/boy_down_2"


# ── InputSnapshot ────────────────────────────────────────────────────

def test_edge_keys_fire_once_per_press():
    snap = InputSnapshot()
    snap.key_down(Key.INTERACT)
    snap.key_down(Key.INTERACT)  # 按住产生的重复 KEYDOWN
    assert snap.consume(Key.INTERACT)
    assert not snap.consume(Key.INTERACT)
    snap.key_up(Key.INTERACT)
    snap.key_down(Key.INTERACT)
    assert snap.pressed(Key.INTERACT)


def test_end_tick_drops_unconsumed_edges():
    snap = InputSnapshot()
    snap.key_down(Key.PAUSE)
    snap.mouse_down((10, 10))
    snap.end_tick()
    assert not snap.pressed(Key.PAUSE)
    assert not snap.consume_click()
    assert snap.is_held(Key.PAUSE)


def test_movement_keys_are_level_triggered():
    snap = _held(Key.UP, Key.DOWN)
    snap.end_tick()
    assert snap.is_held(Key.UP) and snap.is_held(Key.DOWN)
    assert snap.movement_keys_held == 2
    assert not snap.pressed(Key.UP)


def test_pygame_events_mapped():
    snap = InputSnapshot()
    assert snap.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    assert snap.is_held(Key.LEFT)
    assert snap.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_a))
    assert not snap.is_held(Key.LEFT)
    assert snap.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(5, 6)))
    assert snap.consume_click() and snap.mouse_pos == (5, 6)
    assert not snap.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_z))


def _ev(kind, k):
    return pygame.event.Event(kind, key=k)


def test_releasing_one_alias_keeps_key_held():
    snap = InputSnapshot()
    snap.handle_event(_ev(pygame.KEYDOWN, pygame.K_w))
    snap.handle_event(_ev(pygame.KEYDOWN, pygame.K_UP))
    snap.handle_event(_ev(pygame.KEYUP, pygame.K_UP))
    assert snap.is_held(Key.UP)
    p = Player(100, 100)
    p.update(snap)
    assert p.y == 100 - BASE_SPEED
    snap.handle_event(_ev(pygame.KEYUP, pygame.K_w))
    assert not snap.is_held(Key.UP)


def test_aliases_count_as_separate_movement_keys():
    snap = InputSnapshot()
    for k in (pygame.K_w, pygame.K_UP, pygame.K_a):
        snap.handle_event(_ev(pygame.KEYDOWN, k))
    assert snap.movement_keys_held == 3
    p = Player(100, 100)
    p.update(snap)
    assert p.position == (100, 100)
    snap.handle_event(_ev(pygame.KEYUP, pygame.K_UP))
    assert snap.movement_keys_held == 2


def test_repeated_keydown_does_not_refire_action():
    snap = InputSnapshot()
    snap.handle_event(_ev(pygame.KEYDOWN, pygame.K_RETURN))
    snap.end_tick()
    snap.handle_event(_ev(pygame.KEYDOWN, pygame.K_RETURN))  # 系统重复按键
    assert not snap.pressed(Key.ENTER)


def test_track_held_records_without_edges():
    snap = InputSnapshot()
    snap.track_held(_ev(pygame.KEYDOWN, pygame.K_d))
    snap.track_held(_ev(pygame.KEYDOWN, pygame.K_RETURN))
    assert snap.is_held(Key.RIGHT)
    assert not snap.pressed(Key.ENTER)
    p = Player(100, 100)
    p.update(snap)
    assert p.x == 100 + BASE_SPEED
    snap.track_held(_ev(pygame.KEYUP, pygame.K_d))
    assert not snap.is_held(Key.RIGHT)
    snap.track_held(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(1, 1)))
    assert not snap.clicked


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
