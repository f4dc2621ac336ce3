"""
Configuration management for lazy sequence evaluation.
"""

import logging
from dataclasses import dataclass, fields
from typing import ClassVar, Optional

logger = logging.getLogger(__name__)


@dataclass
class SeqConfig:
    """Global configuration for sequence operations."""
    
    # Tracing
    trace_iterators: bool = False  # Debug-log every iterator a Seq creates
    
    # Distinct seen-set monitoring
    distinct_check_interval: int = 10_000  # New entries between memory samples
    memory_threshold: float = 0.8  # Warn at 80% system memory usage
    
    _instance: ClassVar[Optional["SeqConfig"]] = None
    
    def __post_init__(self):
        """Validate settings."""
        if self.distinct_check_interval <= 0:
            raise ValueError("distinct_check_interval must be positive")
        if not 0.0 < self.memory_threshold <= 1.0:
            raise ValueError("memory_threshold must be in (0, 1]")
    
    @classmethod
    def get_instance(cls) -> 'SeqConfig':
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance
    
    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """Set default configuration values."""
        instance = cls.get_instance()
        current = {f.name: getattr(instance, f.name) for f in fields(instance)}
        updates = {}
        for key, value in kwargs.items():
            if key in current:
                updates[key] = value
            else:
                logger.warning(f"Ignoring unknown configuration key: {key}")
        
        # Validate the merged settings before touching the live instance
        cls(**{**current, **updates})
        for key, value in updates.items():
            setattr(instance, key, value)
    
    @classmethod
    def reset(cls) -> None:
        """Restore every setting to its default value."""
        defaults = cls()
        instance = cls.get_instance()
        for f in fields(defaults):
            setattr(instance, f.name, getattr(defaults, f.name))
    
    @property
    def memory_threshold_percent(self) -> float:
        """Threshold expressed the way psutil reports usage."""
        return self.memory_threshold * 100


# Global configuration instance
config = SeqConfig.get_instance()
