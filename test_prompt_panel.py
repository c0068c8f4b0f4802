"""test_prompt_panel.py - 弹窗面板把按键/点击转换为回答（不打开窗口）。

Run:  python -m pytest test_prompt_panel.py
"""
import sys

import pygame
import pytest

from farm.prompt_panel import PromptPanel
from farm.prompts import PromptPurpose, confirm, choice, notice


def key(k):
    return pygame.event.Event(pygame.KEYDOWN, key=k)


def click_at(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=pos)


def _panel(prompt) -> PromptPanel:
    panel = PromptPanel()
    panel.open(prompt)
    return panel


def _harvest():
    return confirm(PromptPurpose.HARVEST, "Crop Plot", "Would you like to harvest the crop?")


def _plant():
    return choice(PromptPurpose.PLANT, "Crop Plot", "Would you like to plant a crop?",
                  ["Wheat", "Carrot", "Potato"])


@pytest.mark.parametrize("k,expected", [
    (pygame.K_y, True),
    (pygame.K_n, False),
    (pygame.K_RETURN, True),
    (pygame.K_ESCAPE, False),
])
def test_confirm_keys(k, expected):
    panel = _panel(_harvest())
    assert panel.handle_event(key(k))
    assert panel.answer is expected


def test_confirm_move_to_no():
    panel = _panel(_harvest())
    assert not panel.handle_event(key(pygame.K_RIGHT))
    assert panel.handle_event(key(pygame.K_SPACE))
    assert panel.answer is False


def test_choice_navigation():
    panel = _panel(_plant())
    panel.handle_event(key(pygame.K_DOWN))
    panel.handle_event(key(pygame.K_DOWN))
    assert panel.handle_event(key(pygame.K_RETURN))
    assert panel.answer == "Potato"


def test_choice_wraps_upward():
    panel = _panel(_plant())
    panel.handle_event(key(pygame.K_UP))
    assert panel.selected == 2


def test_choice_escape_is_none():
    panel = _panel(_plant())
    assert panel.handle_event(key(pygame.K_ESCAPE))
    assert panel.answer is None


def test_choice_mouse_select_then_ok():
    panel = _panel(_plant())
    carrot = panel.option_rects()[1]
    assert not panel.handle_event(click_at(carrot.center))
    assert panel.selected == 1
    ok, cancel = panel.button_rects()
    assert panel.handle_event(click_at(ok.center))
    assert panel.answer == "Carrot"
    assert panel.button_labels() == ["OK", "Cancel"]


def test_choice_mouse_cancel():
    panel = _panel(_plant())
    assert panel.handle_event(click_at(panel.button_rects()[1].center))
    assert panel.answer is None


def test_notice_single_button():
    panel = _panel(notice("Transaction canceled."))
    assert len(panel.button_rects()) == 1
    assert not panel.option_rects()
    assert panel.handle_event(key(pygame.K_ESCAPE))
    assert panel.answer is True


def test_reopen_same_prompt_keeps_selection():
    prompt = _plant()
    panel = _panel(prompt)
    panel.handle_event(key(pygame.K_DOWN))
    panel.open(prompt)
    assert panel.selected == 1
    panel.open(_plant())
    assert panel.selected == 0


def test_closed_panel_ignores_events():
    panel = PromptPanel()
    assert not panel.handle_event(key(pygame.K_RETURN))
    assert panel.button_rects() == []


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
