"""
Utility Modules

Configuration loading.
"""

from followback.utils.config import load_config, Config

__all__ = ["load_config", "Config"]
