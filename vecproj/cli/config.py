from __future__ import annotations
from typing import List, Literal, Optional

import os

import yaml
from pydantic import BaseModel, ValidationInfo, field_validator

Dimension = Literal[2, 3, 4]


class RangeCfg(BaseModel):
    low: float = -10.0
    high: float = 10.0

    @field_validator("high")
    @classmethod
    def _check_order(cls, v: float, info: ValidationInfo) -> float:
        low = info.data.get("low")
        if low is not None and v <= low:
            raise ValueError("high must be greater than low")
        return v


class ForceCfg(RangeCfg):
    low: float = -5.0
    high: float = 5.0
    # direction of the track the cart moves along; defaults to the x axis
    track: Optional[List[float]] = None

    @field_validator("track")
    @classmethod
    def _check_track(cls, v: Optional[List[float]]) -> Optional[List[float]]:
        if v is not None and not any(v):
            raise ValueError("force.track must not be the zero vector")
        return v


class RejectionCfg(RangeCfg):
    low: float = 0.0
    high: float = 1.0


class PathsCfg(BaseModel):
    output_dir: Optional[str] = None


class Config(BaseModel):
    dimension: Dimension = 3
    seed: Optional[int] = None
    tolerance: float = 1e-5
    projection: RangeCfg = RangeCfg()
    force: ForceCfg = ForceCfg()
    rejection: RejectionCfg = RejectionCfg()
    paths: PathsCfg = PathsCfg()

    @field_validator("tolerance")
    @classmethod
    def _check_tolerance(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("tolerance must be positive")
        return v

    @field_validator("force")
    @classmethod
    def _check_force(cls, v: ForceCfg, info: ValidationInfo) -> ForceCfg:
        dim = info.data.get("dimension")
        if v.track is not None and dim is not None and len(v.track) != dim:
            raise ValueError(f"force.track needs {dim} components, got {len(v.track)}")
        return v

    def track_direction(self) -> List[float]:
        if self.force.track is not None:
            return list(self.force.track)
        return [1.0] + [0.0] * (self.dimension - 1)


def load_config(path: str) -> Config:
    with open(path, "r", encoding="utf-8") as f:
        y = yaml.safe_load(f)
    cfg = Config(**(y or {}))
    if cfg.paths.output_dir:
        os.makedirs(cfg.paths.output_dir, exist_ok=True)
    return cfg
