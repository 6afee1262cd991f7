"""
Configuration for the render engine.

Settings live in a nested dictionary addressed with dotted keys such as
``viewport.width``. A JSON file, when given, is merged over the defaults.
"""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "viewport": {
        "width": 960,
        "height": 540
    },
    "css": {
        # Append <style> element rules after author stylesheets
        "use_document_styles": True
    },
    "logging": {
        "console_level": "INFO",
        "file_level": "DEBUG",
        "file": None
    }
}


class Config:
    """Render engine settings backed by an optional JSON file."""
    
    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration.
        
        Args:
            config_path: Path to a JSON config file. Without one only the
                defaults are used and nothing is written to disk.
        """
        self.config_path = config_path
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()
        
        self.load()
        
        logger.debug(f"Configuration initialized (config_path: {config_path})")
    
    def load(self) -> None:
        """Reset to the defaults, then merge the config file over them if there is one."""
        self._set_defaults()
        
        if not self.config_path:
            return
        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return
        
        try:
            with open(self.config_path, 'r') as f:
                overrides = json.load(f)
            if not isinstance(overrides, dict):
                raise ValueError("top-level JSON value must be an object")
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            return
        
        with self._lock:
            _merge(self.config, overrides)
        logger.debug(f"Configuration loaded from {self.config_path}")
    
    def save(self) -> None:
        """Write the current settings to the config file, if one is set."""
        if not self.config_path:
            logger.debug("No configuration path set, not saving")
            return
        
        snapshot = self.get_all()
        try:
            config_dir = os.path.dirname(self.config_path)
            if config_dir:
                os.makedirs(config_dir, exist_ok=True)
            with open(self.config_path, 'w') as f:
                json.dump(snapshot, f, indent=4)
        except OSError as e:
            logger.error(f"Error saving configuration: {e}")
            return
        
        logger.debug(f"Configuration saved to {self.config_path}")
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.
        
        Args:
            key: Dotted key, e.g. 'viewport.width'
            default: Value returned when the key doesn't exist
        
        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            parent, name = self._parent(key, create=False)
            if parent is None:
                return default
            return parent.get(name, default)
    
    def set(self, key: str, value: Any) -> None:
        """Set a value, creating intermediate sections as needed."""
        with self._lock:
            parent, name = self._parent(key, create=True)
            parent[name] = value
    
    def remove(self, key: str) -> bool:
        """
        Remove a configuration value.
        
        Returns:
            bool: True if key was removed
        """
        with self._lock:
            parent, name = self._parent(key, create=False)
            if parent is None or name not in parent:
                return False
            del parent[name]
            return True
    
    def get_all(self) -> Dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self.config)
    
    def viewport_size(self) -> Tuple[float, float]:
        """Width and height of the default initial containing block."""
        return (self.get('viewport.width', DEFAULT_CONFIG['viewport']['width']),
                self.get('viewport.height', DEFAULT_CONFIG['viewport']['height']))
    
    def _parent(self, key: str, create: bool) -> Tuple[Optional[Dict[str, Any]], str]:
        # Caller holds the lock
        *sections, name = key.split('.')
        node = self.config
        for section in sections:
            if not isinstance(node.get(section), dict):
                if not create:
                    return None, name
                node[section] = {}
            node = node[section]
        return node, name
    
    def _set_defaults(self) -> None:
        with self._lock:
            self.config = copy.deepcopy(DEFAULT_CONFIG)


def _merge(target: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    """Recursively merge overrides into target."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value
