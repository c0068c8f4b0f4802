"""
弹窗面板 - 在游戏画面上绘制挂起的弹窗请求，并把按键/点击转换为回答
"""

from typing import Any, List, Optional

import pygame

from .api import SCREEN_WIDTH, SCREEN_HEIGHT
from .prompts import Prompt, PromptKind


class PromptPanel:
    """居中的模态面板，一次只显示一个请求"""

    W = 520
    PAD = 20
    OPTION_H = 32
    BUTTON_W, BUTTON_H = 120, 36
    HEADER_H = 84

    def __init__(self):
        self.prompt: Optional[Prompt] = None
        self.selected = 0
        self.answer: Any = None

    def open(self, prompt: Prompt) -> None:
        if prompt is self.prompt:
            return
        self.prompt = prompt
        self.selected = 0
        self.answer = None

    def close(self) -> None:
        self.prompt = None

    # -- 布局 --

    def _height(self) -> int:
        h = self.HEADER_H + self.BUTTON_H + self.PAD * 2
        if self.prompt and self.prompt.kind is PromptKind.CHOICE:
            h += len(self.prompt.options) * self.OPTION_H + self.PAD
        return h

    def rect(self) -> pygame.Rect:
        h = self._height()
        return pygame.Rect((SCREEN_WIDTH - self.W) // 2, (SCREEN_HEIGHT - h) // 2, self.W, h)

    def option_rects(self) -> List[pygame.Rect]:
        """CHOICE 的选项行"""
        if not self.prompt or self.prompt.kind is not PromptKind.CHOICE:
            return []
        r = self.rect()
        top = r.y + self.HEADER_H
        return [
            pygame.Rect(r.x + self.PAD, top + i * self.OPTION_H, r.w - self.PAD * 2, self.OPTION_H - 4)
            for i in range(len(self.prompt.options))
        ]

    def button_rects(self) -> List[pygame.Rect]:
        """底部按钮：CONFIRM 两个，CHOICE 为 确定/取消，NOTICE 一个"""
        if not self.prompt:
            return []
        r = self.rect()
        y = r.bottom - self.PAD - self.BUTTON_H
        count = 1 if self.prompt.kind is PromptKind.NOTICE else 2
        total = count * self.BUTTON_W + (count - 1) * self.PAD
        x = r.x + (r.w - total) // 2
        return [pygame.Rect(x + i * (self.BUTTON_W + self.PAD), y, self.BUTTON_W, self.BUTTON_H)
                for i in range(count)]

    def button_labels(self) -> List[str]:
        if not self.prompt:
            return []
        if self.prompt.kind is PromptKind.CHOICE:
            return ["OK", "Cancel"]
        return self.prompt.options[:2]

    # -- 输入 --

    def _finish(self, answer: Any) -> bool:
        self.answer = answer
        return True

    def _confirm_selected(self) -> bool:
        kind = self.prompt.kind
        if kind is PromptKind.CONFIRM:
            return self._finish(self.selected == 0)
        if kind is PromptKind.CHOICE:
            return self._finish(self.prompt.options[self.selected])
        return self._finish(True)

    def _cancel(self) -> bool:
        kind = self.prompt.kind
        if kind is PromptKind.CONFIRM:
            return self._finish(False)
        if kind is PromptKind.CHOICE:
            return self._finish(None)
        return self._finish(True)

    def _move(self, step: int) -> None:
        if self.prompt.kind is PromptKind.CHOICE:
            n = len(self.prompt.options)
        elif self.prompt.kind is PromptKind.CONFIRM:
            n = 2
        else:
            return
        self.selected = (self.selected + step) % n

    def handle_event(self, event: pygame.event.Event) -> bool:
        """处理事件，返回 True 表示已得到回答（见 self.answer）"""
        if not self.prompt:
            return False
        kind = self.prompt.kind
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_SPACE):
                return self._confirm_selected()
            if event.key == pygame.K_ESCAPE:
                return self._cancel()
            if kind is PromptKind.CONFIRM and event.key == pygame.K_y:
                return self._finish(True)
            if kind is PromptKind.CONFIRM and event.key == pygame.K_n:
                return self._finish(False)
            if event.key in (pygame.K_UP, pygame.K_w, pygame.K_LEFT, pygame.K_a):
                self._move(-1)
            elif event.key in (pygame.K_DOWN, pygame.K_s, pygame.K_RIGHT, pygame.K_d):
                self._move(1)
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for i, r in enumerate(self.option_rects()):
                if r.collidepoint(event.pos):
                    self.selected = i
                    return False
            for i, r in enumerate(self.button_rects()):
                if r.collidepoint(event.pos):
                    return self._confirm_selected() if i == 0 else self._cancel()
        return False

    # -- 绘制 --

    def render(self, surface: pygame.Surface, font: pygame.font.Font, font_small: pygame.font.Font) -> None:
        if not self.prompt:
            return
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 120))
        surface.blit(overlay, (0, 0))

        r = self.rect()
        pygame.draw.rect(surface, (20, 20, 24), r, border_radius=14)
        border = (220, 90, 90) if self.prompt.error else (255, 255, 255)
        pygame.draw.rect(surface, border, r.inflate(-10, -10), 3, border_radius=10)

        title = font.render(self.prompt.title, True, (255, 230, 140))
        surface.blit(title, (r.x + self.PAD, r.y + self.PAD - 4))
        msg = font_small.render(self.prompt.message, True, (230, 230, 230))
        if msg.get_width() > r.w - self.PAD * 2:
            msg = pygame.transform.smoothscale(
                msg, (r.w - self.PAD * 2, max(1, msg.get_height() * (r.w - self.PAD * 2) // msg.get_width())))
        surface.blit(msg, (r.x + self.PAD, r.y + self.PAD + 30))

        for i, (opt_rect, label) in enumerate(zip(self.option_rects(), self.prompt.options)):
            active = i == self.selected
            pygame.draw.rect(surface, (60, 70, 90) if active else (38, 40, 48), opt_rect, border_radius=6)
            t = font_small.render(label, True, (255, 255, 255) if active else (180, 185, 195))
            surface.blit(t, (opt_rect.x + 10, opt_rect.y + (opt_rect.h - t.get_height()) // 2))

        for i, (btn, label) in enumerate(zip(self.button_rects(), self.button_labels())):
            highlight = self.prompt.kind is PromptKind.CONFIRM and i == self.selected
            pygame.draw.rect(surface, (70, 120, 80) if highlight or i == 0 else (90, 60, 60), btn, border_radius=8)
            if highlight:
                pygame.draw.rect(surface, (255, 255, 255), btn, 2, border_radius=8)
            t = font_small.render(label, True, (255, 255, 255))
            surface.blit(t, (btn.x + (btn.w - t.get_width()) // 2, btn.y + (btn.h - t.get_height()) // 2))
