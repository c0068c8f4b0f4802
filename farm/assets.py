"""
游戏素材加载 - 从 assets/ 目录加载图片与字体，缺失时使用程序绘制
    assets/player/boy_down_1.png      玩家
    assets/merchant/merchant_down_1.png, merchant_near_1.png
    assets/farmer/farmer_left_1.png
    assets/object/empty.png, plant_baby.png, wheat_growing.png ...
背景图为可选配置；一旦配置则必须能加载，否则无法启动
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

import pygame

logger = logging.getLogger(__name__)

# 项目根目录下的 assets
_ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"
_CACHE: Dict[str, pygame.Surface] = {}
_MISSING: set = set()


class AssetLoadError(Exception):
    """必需素材加载失败"""


def _path(*parts: str) -> Path:
    return _ASSETS_DIR.joinpath(*parts)


def _load(p: Path, scale: Optional[Tuple[int, int]]) -> pygame.Surface:
    surf = pygame.image.load(str(p))
    if surf.get_alpha() is None:
        surf = surf.convert()
    else:
        surf = surf.convert_alpha()
    if scale:
        surf = pygame.transform.scale(surf, scale)
    return surf


def load_image(*path_parts: str, scale: Optional[Tuple[int, int]] = None) -> Optional[pygame.Surface]:
    """加载图片，可选缩放。失败返回 None，同一路径只警告一次"""
    key = "/".join(path_parts) + (f"@{scale}" if scale else "")
    if key in _CACHE:
        return _CACHE[key]
    if key in _MISSING:
        return None
    p = _path(*path_parts)
    try:
        surf = _load(p, scale)
    except (pygame.error, OSError) as e:
        logger.warning("image %s not loaded: %s", p, e)
        _MISSING.add(key)
        return None
    _CACHE[key] = surf
    return surf


def get_sprite(sprite_key: str, size: int) -> Optional[pygame.Surface]:
    """sprite_key 形如 'player/boy_down_1'，无素材返回 None"""
    folder, _, name = sprite_key.partition("/")
    return load_image(folder, f"{name}.png", scale=(size, size))


def load_background(path: Union[str, Path], size: Tuple[int, int]) -> pygame.Surface:
    """加载配置的背景图，失败抛 AssetLoadError"""
    p = Path(path)
    if not p.is_absolute():
        p = _ASSETS_DIR / p
    try:
        return _load(p, size)
    except (pygame.error, OSError) as e:
        raise AssetLoadError(f"Error loading background image {p}: {e}") from e


def load_font(path: Optional[Union[str, Path]], size: int) -> pygame.font.Font:
    """加载自定义字体，失败时回退到 pygame 默认字体"""
    if path:
        p = Path(path)
        if not p.is_absolute():
            p = _ASSETS_DIR / p
        try:
            return pygame.font.Font(str(p), size)
        except (pygame.error, OSError) as e:
            logger.warning("error loading font %s: %s", p, e)
    return pygame.font.Font(None, size)
