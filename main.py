#!/usr/bin/env python3
"""
Farm Frenzy - 主入口

WASD 移动，E 与商人/农夫对话或种植收获，I 打开背包，P 暂停，T 帮助。
"""

import logging
import sys

import pygame

from farm.assets import AssetLoadError
from farm.engine import GameEngine
from farm.save_manager import load_config

logger = logging.getLogger("farm")


def main() -> int:
    # 先配置日志，读取配置时的警告也走统一格式
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    config = load_config()
    logging.getLogger().setLevel(
        getattr(logging, str(config.get("log_level", "INFO")).upper(), logging.INFO))
    try:
        engine = GameEngine(config)
    except AssetLoadError as e:
        # 背景图是唯一致命的素材
        logger.critical("%s", e)
        pygame.quit()
        return 1
    engine.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
