"""Application configuration module.

- **settings.py**: Environment-based settings (Pydantic BaseSettings)
  - Log level, standards file location, default 1RM formula
  - Loaded from .env file via pydantic-settings

- **standards.yaml**: Percentile standards tables
  - Per-sex, per-age-bracket ladders for cardio, muscle and power metrics
  - DOTS polynomial coefficients and per-exercise anchor DOTS
  - Loaded and validated by powerscore.scoring.standards
"""
from powerscore.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
