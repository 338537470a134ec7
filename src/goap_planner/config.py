# config.py
# Planner settings. Defaults match the engine's documented behaviour;
# GOAP_RECENCY_PENALTY in the environment (or a .env file) overrides.

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from goap_planner.selector import RECENCY_PENALTY


class PlannerConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    recency_penalty: float = Field(
        default=RECENCY_PENALTY,
        ge=0,
        description="Priority subtracted from the most recently chosen goal.",
    )

    @classmethod
    def from_env(cls) -> "PlannerConfig":
        load_dotenv()
        values = {}
        penalty = os.getenv("GOAP_RECENCY_PENALTY")
        if penalty is not None:
            values["recency_penalty"] = penalty
        return cls.model_validate(values)
