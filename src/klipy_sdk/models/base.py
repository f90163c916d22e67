from pydantic import BaseModel, ConfigDict


class KlipyModel(BaseModel):
    """Immutable value record shared by all SDK models."""

    model_config = ConfigDict(frozen=True, extra="ignore")
