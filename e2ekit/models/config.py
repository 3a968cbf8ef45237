"""Persisted toolkit configuration (config.json)."""
from pydantic import BaseModel, ConfigDict


class ToolkitConfig(BaseModel):
    """Key-value settings persisted between test runs.

    Unknown keys are kept so projects can store their own values.
    """
    model_config = ConfigDict(extra="allow")

    jwt: str = ""  # last known session token
