"""
存档管理 - 游戏配置 config.json 与背包存档 inventory.txt
背包存档为单行文本，格式见 inventory.Inventory.to_line()
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from .inventory import Inventory

logger = logging.getLogger(__name__)

ROOT_DIR = Path(__file__).resolve().parent.parent
CONFIG_FILE = ROOT_DIR / "config.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    "fullscreen": False,
    "fps": 60,
    "inventory_file": "inventory.txt",
    "background": None,
    "font": None,
    "log_level": "INFO",
}


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """加载游戏配置，缺失或损坏时使用默认值"""
    path = path or CONFIG_FILE
    default = dict(DEFAULT_CONFIG)
    if not path.exists():
        return default
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("config root must be an object")
        for key, value in DEFAULT_CONFIG.items():
            data.setdefault(key, value)
        return data
    except (json.JSONDecodeError, ValueError, IOError) as e:
        logger.warning("config %s unreadable, using defaults: %s", path, e)
        return default


def save_config(config: Dict[str, Any], path: Optional[Path] = None) -> bool:
    """保存游戏配置"""
    path = path or CONFIG_FILE
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=2)
        return True
    except IOError as e:
        logger.error("failed to write config %s: %s", path, e)
        return False


def update_config(changes: Dict[str, Any], path: Optional[Path] = None) -> Dict[str, Any]:
    """合并修改并写回（如全屏开关），返回合并后的配置"""
    config = load_config(path) | changes
    save_config(config, path)
    return config


def inventory_path(config: Dict[str, Any]) -> Path:
    """相对路径以项目根目录为基准"""
    p = Path(config.get("inventory_file") or DEFAULT_CONFIG["inventory_file"])
    return p if p.is_absolute() else ROOT_DIR / p


def read_inventory(path: Union[str, Path]) -> Tuple[Inventory, Optional[str]]:
    """
    读取背包存档。
    返回 (背包, 错误信息)；文件缺失或损坏时返回默认背包与错误信息。
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            line = f.readline()
        inventory = Inventory.from_line(line)
        logger.info("loaded inventory from %s", path)
        return inventory, None
    except (IOError, ValueError) as e:
        logger.error("error reading save file %s: %s", path, e)
        return Inventory(), f"Error reading save file: {e}"


def write_inventory(inventory: Inventory, path: Union[str, Path]) -> bool:
    """写入背包存档，失败只记录不重试"""
    path = Path(path)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(inventory.to_line())
        logger.debug("game saved to %s", path)
        return True
    except IOError as e:
        logger.error("error writing save file %s: %s", path, e)
        return False
