import os
import yaml
from typing import Dict, Any, Optional

class Settings:
    """Configuration management for the ndevtop dashboard."""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file or os.getenv('NDEVTOP_CONFIG_FILE', 'config/config.yaml')
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file and environment variables."""
        config = {}

        # Load from YAML file if exists
        if os.path.exists(self.config_file):
            with open(self.config_file, 'r') as f:
                config = yaml.safe_load(f) or {}

        viewer = config.get('viewer', {})
        stats = config.get('stats', {})

        # Override with environment variables
        config.update({
            'logging': {
                'level': os.getenv('LOG_LEVEL', config.get('logging', {}).get('level', 'INFO')),
                'file': os.getenv('LOG_FILE', config.get('logging', {}).get('file', 'logs/ndevtop.log')),
                'max_bytes': int(os.getenv('LOG_MAX_BYTES', config.get('logging', {}).get('max_bytes', 10485760))),
                'backup_count': int(os.getenv('LOG_BACKUP_COUNT', config.get('logging', {}).get('backup_count', 5))),
            },
            'viewer': {
                'interval': int(os.getenv('NDEVTOP_INTERVAL', viewer.get('interval', 3))),
                'filter_max_length': int(os.getenv('NDEVTOP_FILTER_MAX_LENGTH', viewer.get('filter_max_length', 15))),
            },
            'stats': {
                'path_pattern': os.getenv('NDEVTOP_STATS_PATH', stats.get('path_pattern', '/sys/class/net/*/statistics')),
            }
        })

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation."""
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

# Global settings instance
settings = Settings()
