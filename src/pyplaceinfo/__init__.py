"""pyplaceinfo - Async click-to-place enrichment for world map viewers."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyplaceinfo")
except PackageNotFoundError:
    __version__ = "0+local"
from pyplaceinfo.client import PlaceInfoClient
from pyplaceinfo.config import PlaceInfoConfig
from pyplaceinfo.exceptions import (
    EnrichmentError,
    LocalizationLoadError,
    PlaceInfoConfigError,
    PlaceInfoError,
    PlaceInfoTransportError,
    ProviderError,
    ResolutionError,
    TimeError,
    WeatherError,
)
from pyplaceinfo.localization import (
    LocalizationTable,
    LocalizationTables,
    async_load_localization_tables,
    load_localization_tables,
)
from pyplaceinfo.models import (
    Coordinate,
    CountryInfo,
    DisplayField,
    DisplayRecord,
    FieldState,
    FieldValue,
    LocalTime,
    LocationDetails,
    WeatherReport,
)
from pyplaceinfo.normalize import normalize_lng
from pyplaceinfo.orchestrator import EnrichmentOrchestrator
from pyplaceinfo.presentation import MapWidget, Marker, Presenter, RecordingPresenter

__all__ = [
    "__version__",
    "Coordinate",
    "CountryInfo",
    "DisplayField",
    "DisplayRecord",
    "EnrichmentError",
    "EnrichmentOrchestrator",
    "FieldState",
    "FieldValue",
    "LocalTime",
    "LocalizationLoadError",
    "LocalizationTable",
    "LocalizationTables",
    "LocationDetails",
    "MapWidget",
    "Marker",
    "PlaceInfoClient",
    "PlaceInfoConfig",
    "PlaceInfoConfigError",
    "PlaceInfoError",
    "PlaceInfoTransportError",
    "Presenter",
    "ProviderError",
    "RecordingPresenter",
    "ResolutionError",
    "TimeError",
    "WeatherError",
    "WeatherReport",
    "async_load_localization_tables",
    "load_localization_tables",
    "normalize_lng",
]
