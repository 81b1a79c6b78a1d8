"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from darkmode.constants.defaults import DARK_MODE_DEFAULT
from darkmode.constants.values import DARK_MODE_KEY


class PreferenceSettings(BaseModel):
    """The persisted "settings" namespace with validation."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # UI preferences
    dark_mode: bool = Field(default=DARK_MODE_DEFAULT, alias=DARK_MODE_KEY)


class StorageError(Exception):
    """Base exception for preference storage errors."""


class StorageReadError(StorageError):
    """Raised when settings fail to load."""


class StorageWriteError(StorageError):
    """Raised when settings fail to save."""
