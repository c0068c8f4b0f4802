"""
游戏引擎 - 窗口、主循环、渲染、定时存档
逻辑全部在 logic.update()，这里只负责事件转发、计时与绘制
"""

import logging
from typing import Any, Dict, Optional

import pygame

from .api import GameState, Item, TILE_SIZE, SCREEN_WIDTH, SCREEN_HEIGHT
from .assets import get_sprite, load_background, load_font
from .context import GameContext
from .controls import HELP_LINES
from .crops import CropPlot
from .logic import update, answer_prompt
from .loop import FixedStepLoop
from .npc import Npc
from .player import Player
from .prompt_panel import PromptPanel
from .prompts import notice
from .save_manager import inventory_path, read_inventory, write_inventory, update_config

logger = logging.getLogger(__name__)


TITLE = "FARM FRENZY"

# 颜色
COLORS = {
    "grass": (76, 153, 0),
    "grass_alt": (70, 144, 0),
    "soil": (110, 76, 46),
    "soil_row": (92, 62, 36),
    "player": (255, 200, 50),
    "player_outline": (255, 255, 255),
    "merchant": (150, 90, 200),
    "farmer": (60, 120, 220),
    "wheat": (230, 200, 90),
    "carrot": (240, 130, 40),
    "potato": (170, 130, 80),
    "sprout": (120, 220, 90),
    "ui_text": (255, 255, 255),
    "ui_dim": (190, 190, 190),
    "notice": (255, 150, 120),
}


class GameEngine:
    """游戏引擎"""

    def __init__(self, config: Dict[str, Any]):
        pygame.init()
        self.config = config
        self.fullscreen = bool(config.get("fullscreen", False))
        self._apply_display_mode()

        self.font_large = load_font(config.get("font"), 40)
        self.font = load_font(config.get("font"), 30)
        self.font_small = load_font(config.get("font"), 22)

        # 配置了背景图就必须加载成功（AssetLoadError 交给 main 处理）
        self.background: Optional[pygame.Surface] = None
        if config.get("background"):
            self.background = load_background(config["background"], (SCREEN_WIDTH, SCREEN_HEIGHT))

        self.save_path = inventory_path(config)
        inventory, error = read_inventory(self.save_path)
        self.ctx = GameContext(inventory)
        if error:
            self.ctx.pending = notice(error, "Error", error=True)

        self.loop = FixedStepLoop(fps=int(config.get("fps", 60)))
        self.prompt_panel = PromptPanel()

    def _apply_display_mode(self) -> None:
        """固定逻辑分辨率；全屏时由 SDL 缩放"""
        flags = pygame.SCALED | pygame.FULLSCREEN if self.fullscreen else 0
        self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), flags)
        pygame.display.set_caption(TITLE)

    def save(self) -> bool:
        """写入背包存档；失败只提示，不中断游戏"""
        if write_inventory(self.ctx.inventory, self.save_path):
            return True
        self.ctx.notices.post("Error writing save file", self.loop.now_ms())
        return False

    # -- 事件 --

    def _handle_event(self, event: pygame.event.Event) -> None:
        ctx = self.ctx
        if ctx.pending is not None:
            # 按住/松开照常记录，弹窗关闭后仍按着的方向键继续生效
            ctx.input.track_held(event)
            if event.type == pygame.KEYUP:
                return
            self.prompt_panel.open(ctx.pending)
            if self.prompt_panel.handle_event(event):
                answer_prompt(ctx, self.prompt_panel.answer, self.loop.now_ms())
                self.prompt_panel.close()
            return
        if event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
            self.fullscreen = not self.fullscreen
            self._apply_display_mode()
            self.config = update_config({"fullscreen": self.fullscreen})
            return
        ctx.input.handle_event(event)

    # -- 主循环 --

    def run(self) -> None:
        """固定步长主循环，直到关闭窗口"""
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                    break
                self._handle_event(event)
            if not running:
                break

            step = self.loop.poll()
            if step.tick:
                now = self.loop.now_ms()
                update(self.ctx, now)
                self._render(now)
                pygame.display.flip()

            if step.report is not None:
                self.save()
                logger.debug("game saved, FPS: %d", step.report)

            if not step.tick:
                pygame.time.wait(1)

        # 退出前存档
        self.save()
        pygame.quit()

    # -- 渲染 --

    def _render(self, now_ms: int) -> None:
        ctx = self.ctx
        self._render_background()
        for entity in ctx.entities():
            self._render_entity(entity)

        if ctx.state in (GameState.DIALOGUE, GameState.PAUSE):
            self._render_dialogue_screen()
        if ctx.state is GameState.INVENTORY:
            self._render_inventory()
        if ctx.won:
            self._render_trophy()
        self._render_notices(now_ms)
        if ctx.show_help:
            self._render_help()

        if ctx.pending is not None:
            self.prompt_panel.open(ctx.pending)
            self.prompt_panel.render(self.screen, self.font, self.font_small)

    def _render_background(self) -> None:
        if self.background is not None:
            self.screen.blit(self.background, (0, 0))
            return
        ts = TILE_SIZE
        for row in range(SCREEN_HEIGHT // ts):
            for col in range(SCREEN_WIDTH // ts):
                color = COLORS["grass"] if (row + col) % 2 == 0 else COLORS["grass_alt"]
                pygame.draw.rect(self.screen, color, (col * ts, row * ts, ts, ts))

    def _render_entity(self, entity) -> None:
        """有贴图用贴图，没有则程序绘制"""
        sprite = get_sprite(entity.sprite_key(), entity.size)
        if sprite is not None:
            self.screen.blit(sprite, (entity.x, entity.y))
        elif isinstance(entity, CropPlot):
            self._draw_crop_plot(entity)
        elif isinstance(entity, Npc):
            self._draw_npc(entity)
        elif isinstance(entity, Player):
            self._draw_player(entity)

    def _draw_player(self, player: Player) -> None:
        ts = TILE_SIZE
        cx, cy = player.x + ts // 2, player.y + ts // 2
        # 行走时上下轻微起伏
        bob = -2 if player.frame == 2 else 0
        pygame.draw.circle(self.screen, COLORS["player_outline"], (cx, cy + bob), ts // 2 - 2)
        pygame.draw.circle(self.screen, COLORS["player"], (cx, cy + bob), ts // 2 - 5)
        dx, dy = {"up": (0, -1), "down": (0, 1), "left": (-1, 0), "right": (1, 0)}[player.facing.value]
        pygame.draw.circle(self.screen, (40, 40, 40), (cx + dx * 10, cy + bob + dy * 10), 4)

    def _draw_npc(self, npc: Npc) -> None:
        ts = TILE_SIZE
        inset = 4 if npc.frame == 1 else 6
        rect = pygame.Rect(npc.x + inset, npc.y + inset, ts - inset * 2, ts - inset * 2)
        pygame.draw.rect(self.screen, COLORS[npc.name], rect, border_radius=8)
        if npc.near:
            pygame.draw.rect(self.screen, COLORS["player_outline"], rect, 2, border_radius=8)

    def _draw_crop_plot(self, plot: CropPlot) -> None:
        rect = pygame.Rect(plot.x, plot.y, plot.size, plot.size)
        pygame.draw.rect(self.screen, COLORS["soil"], rect, border_radius=6)
        rows = 5
        row_h = plot.size // rows
        for i in range(rows):
            y = plot.y + i * row_h + row_h // 2
            pygame.draw.line(self.screen, COLORS["soil_row"], (plot.x + 8, y), (plot.x + plot.size - 8, y), 3)
        if not plot.planted:
            return
        radius = {"baby": 4, "growing": 8, "grown": 12}[plot.stage.value]
        color = COLORS["sprout"] if radius == 4 else COLORS[plot.kind.value]
        for i in range(rows):
            y = plot.y + i * row_h + row_h // 2
            for j in range(5):
                x = plot.x + (j + 1) * plot.size // 6
                pygame.draw.circle(self.screen, color, (x, y), radius)

    def _draw_sub_window(self, x: int, y: int, w: int, h: int) -> None:
        """半透明圆角窗口 + 白色描边"""
        surf = pygame.Surface((w, h), pygame.SRCALPHA)
        pygame.draw.rect(surf, (0, 0, 0, 220), (0, 0, w, h), border_radius=18)
        self.screen.blit(surf, (x, y))
        pygame.draw.rect(self.screen, (255, 255, 255), (x + 5, y + 5, w - 10, h - 10), 3, border_radius=12)

    def _render_dialogue_screen(self) -> None:
        ts = TILE_SIZE
        x, y = ts * 2, SCREEN_HEIGHT - ts * 6
        w, h = SCREEN_WIDTH - ts * 4, ts * 5
        self._draw_sub_window(x, y, w, h)
        x += ts
        y += ts
        if self.ctx.state is GameState.PAUSE:
            lines = ["Game paused", "Press P to resume"]
            hint = ""
        else:
            lines = [self.ctx.dialogue]
            hint = "Click to continue  |  Esc to leave"
        for i, line in enumerate(lines):
            surf = self.font.render(line, True, COLORS["ui_text"])
            self.screen.blit(surf, (x, y + i * 36))
        if hint:
            surf = self.font_small.render(hint, True, COLORS["ui_dim"])
            self.screen.blit(surf, (x, y + h - ts * 2 - 10))

    def _render_inventory(self) -> None:
        ts = TILE_SIZE
        x, y = ts * 10, ts
        self._draw_sub_window(x, y, ts * 6, ts * 10)
        x += ts
        y += ts
        self.screen.blit(self.font.render("INVENTORY", True, COLORS["ui_text"]), (x, y - 10))
        for item, count in self.ctx.inventory.items():
            y += ts
            self.screen.blit(self.font_small.render(f"{item.display_name}: {count}", True, COLORS["ui_text"]), (x, y))

    def _render_trophy(self) -> None:
        surf = self.font_small.render("SILVER TROPHY", True, (220, 220, 235))
        self.screen.blit(surf, (SCREEN_WIDTH - surf.get_width() - 12, SCREEN_HEIGHT - surf.get_height() - 8))

    def _render_notices(self, now_ms: int) -> None:
        gold = self.font_small.render(f"{Item.GOLD.display_name}: {self.ctx.inventory[Item.GOLD]}   [T] help",
                                      True, COLORS["ui_text"])
        self.screen.blit(gold, (12, SCREEN_HEIGHT - gold.get_height() - 8))
        for i, text in enumerate(self.ctx.notices.visible(now_ms)):
            surf = self.font_small.render(text, True, COLORS["notice"])
            self.screen.blit(surf, (12, 8 + i * 24))

    def _render_help(self) -> None:
        ts = TILE_SIZE
        x, y, w, h = ts * 4, ts * 2, ts * 8, ts * 8
        self._draw_sub_window(x, y, w, h)
        for i, line in enumerate(HELP_LINES):
            color = (255, 230, 150) if line.startswith("[") else COLORS["ui_text"]
            surf = self.font_small.render(line, True, color)
            self.screen.blit(surf, (x + 24, y + 22 + i * 24))
