from .models import TrackerConfig
from .loaders import load_tracker_config

__all__ = ["TrackerConfig", "load_tracker_config"]
