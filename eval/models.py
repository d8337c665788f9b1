"""Pydantic models for experiment configuration (YAML validation)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class SimSettings(BaseModel):
    max_servers: int = Field(default=10, ge=1)
    arrival_rate: float = Field(default=2.0, gt=0.0)  # customers per second
    service_rate: float = Field(default=1.0, gt=0.0)  # customers per second per server
    horizon: float = Field(default=1000.0, ge=0.0)  # seconds
    seed: int | None = 0


class SelectionSettings(BaseModel):
    min_utilization: float = Field(default=0.60, ge=0.0, le=1.0)
    max_utilization: float = Field(default=0.90, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def check_band(self) -> "SelectionSettings":
        if self.min_utilization > self.max_utilization:
            raise ValueError("min_utilization must be <= max_utilization")
        return self


class ReportSettings(BaseModel):
    results_dir: str = "results"
    replications: int = Field(default=1, ge=1)
    plots: bool = True


class ExperimentConfig(BaseModel):
    """
    Full sweep configuration. Use model_validate(yaml_dict) to parse config/default.yaml;
    unknown top-level sections are ignored.
    """

    sim: SimSettings = Field(default_factory=SimSettings)
    selection: SelectionSettings = Field(default_factory=SelectionSettings)
    report: ReportSettings = Field(default_factory=ReportSettings)

    @property
    def expected_customers(self) -> int:
        return int(self.sim.arrival_rate * self.sim.horizon)

    def with_overrides(self, section: str, **values: Any) -> "ExperimentConfig":
        """Return a re-validated copy with non-None values replaced in one section."""
        data = self.model_dump()
        data[section].update({k: v for k, v in values.items() if v is not None})
        return ExperimentConfig.model_validate(data)
