from __future__ import annotations

import time
from typing import List

from pydantic import BaseModel, Field


class BrewReport(BaseModel):
    variant: str
    duration_ms: float = Field(ge=0)
    pumped: bool
    events: List[str] = Field(default_factory=list)
    received_at: float = Field(default_factory=time.time)
