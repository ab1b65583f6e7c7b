from __future__ import annotations

from pathlib import Path
from typing import Optional
import yaml
from pydantic import BaseModel, Field

from .models import FormatOptions

# ---- Root config ----
class RutkitConfig(BaseModel):
    format: FormatOptions = Field(default_factory=FormatOptions)
    partial: bool = False  # render with format_rut_partial (no checksum gate)

# ---- Loader ----
def load_config(path: Optional[Path]) -> RutkitConfig:
    if not path:
        return RutkitConfig()
    data = yaml.safe_load(Path(path).read_text()) or {}
    return RutkitConfig(**data)
