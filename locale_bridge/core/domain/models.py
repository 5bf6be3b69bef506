# locale_bridge/core/domain/models.py
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

# --- Enums ---

class Store(str, Enum):
    """Storefronts whose locale code spaces are bridged to the unified catalog."""
    APP_STORE = "appStore"       # App Store Connect
    GOOGLE_PLAY = "googlePlay"   # Google Play Console

    @property
    def label(self) -> str:
        return "App Store" if self is Store.APP_STORE else "Google Play"

# --- Value Objects ---

class LocaleMapping(BaseModel):
    """
    One row of the locale table: a unified locale and its code in each store.
    A missing store code means the store has no listing locale for the language.
    """
    model_config = ConfigDict(frozen=True)

    unified: str = Field(..., description="Unified locale code (e.g., 'zh-Hans', 'es-419')")
    name: str = Field(..., description="English display name")
    app_store: Optional[str] = Field(None, description="App Store Connect code, if any")
    google_play: Optional[str] = Field(None, description="Google Play Console code, if any")

    def code_for(self, store: Store) -> Optional[str]:
        """Returns the row's code for the given store."""
        if store is Store.APP_STORE:
            return self.app_store
        return self.google_play

class PlatformCodes(BaseModel):
    """
    Both store codes for a single unified locale.
    """
    model_config = ConfigDict(frozen=True)

    app_store: Optional[str] = None
    google_play: Optional[str] = None
