"""API credentials model."""

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """Exchange API credentials supplied per call.

    Secret material is excluded from ``repr`` so credentials can appear in
    log records and tracebacks without leaking.
    """

    api_key: str = Field(..., min_length=1)
    secret: str = Field(..., min_length=1, repr=False)
    password: str | None = Field(default=None, repr=False)
    sandbox: bool = False

    model_config = ConfigDict(frozen=True)
