"""
Preset Management

Named telescope, camera, and full-rig configurations stored as JSON in the
user's configuration directory. A preset carries a subset of the
``CalculatorInput`` fields and can be applied on top of any input.
"""

from __future__ import annotations

import json
import logging
import os
import uuid
from dataclasses import dataclass, field, fields
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, ClassVar

from .core.enums import PresetType
from .core.exceptions import PresetNotFoundError, PresetStoreError
from .models import CalculatorInput


logger = logging.getLogger(__name__)


__all__ = [
    "CONFIG_DIR_ENV_VAR",
    "CameraPreset",
    "FullRigPreset",
    "Preset",
    "PresetCollection",
    "PresetStore",
    "TelescopePreset",
    "get_config_dir",
    "get_preset_store",
    "get_presets_path",
    "new_preset",
]


CONFIG_DIR_ENV_VAR = "SAMPLING_CALCULATOR_CONFIG_DIR"
PRESETS_FILENAME = "presets.json"


def get_config_dir() -> Path:
    """Configuration directory, overridable with SAMPLING_CALCULATOR_CONFIG_DIR."""
    override = os.environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "sampling-calculator"


def get_presets_path() -> Path:
    """Get path to the presets file."""
    return get_config_dir() / PRESETS_FILENAME


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass
class PresetBase:
    """Fields shared by every preset kind."""

    preset_type: ClassVar[PresetType]
    input_fields: ClassVar[tuple[str, ...]] = ()

    name: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def apply_to(self, sampling_input: CalculatorInput) -> CalculatorInput:
        """Return a copy of ``sampling_input`` with this preset's fields applied."""
        return sampling_input.replace(**{name: getattr(self, name) for name in self.input_fields})

    @classmethod
    def from_input(cls, sampling_input: CalculatorInput, name: str) -> Any:
        """Capture the relevant fields of an input as a new preset."""
        return cls(name=name, **{key: getattr(sampling_input, key) for key in cls.input_fields})

    def to_dict(self) -> dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["created_at"] = self.created_at.isoformat()
        data["updated_at"] = self.updated_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Any:
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        for stamp in ("created_at", "updated_at"):
            if isinstance(values.get(stamp), str):
                values[stamp] = datetime.fromisoformat(values[stamp])
        return cls(**values)


@dataclass
class TelescopePreset(PresetBase):
    """Optical train: focal length, aperture, reducer and Barlow."""

    preset_type: ClassVar[PresetType] = PresetType.TELESCOPE
    input_fields: ClassVar[tuple[str, ...]] = (
        "base_focal_length",
        "aperture_diameter",
        "reducer_factor",
        "barlow_factor",
    )

    base_focal_length: float = 0.0
    aperture_diameter: float | None = None
    reducer_factor: float = 1.0
    barlow_factor: float = 1.0


@dataclass
class CameraPreset(PresetBase):
    """Sensor: pixel size, resolution and binning."""

    preset_type: ClassVar[PresetType] = PresetType.CAMERA
    input_fields: ClassVar[tuple[str, ...]] = (
        "pixel_size",
        "sensor_width_px",
        "sensor_height_px",
        "binning",
    )

    pixel_size: float = 0.0
    sensor_width_px: int = 0
    sensor_height_px: int = 0
    binning: int = 1


@dataclass
class FullRigPreset(PresetBase):
    """Telescope, camera and seeing together."""

    preset_type: ClassVar[PresetType] = PresetType.FULL_RIG
    input_fields: ClassVar[tuple[str, ...]] = (
        TelescopePreset.input_fields + CameraPreset.input_fields + ("seeing",)
    )

    base_focal_length: float = 0.0
    aperture_diameter: float | None = None
    reducer_factor: float = 1.0
    barlow_factor: float = 1.0
    pixel_size: float = 0.0
    sensor_width_px: int = 0
    sensor_height_px: int = 0
    binning: int = 1
    seeing: float = 2.0


Preset = TelescopePreset | CameraPreset | FullRigPreset

_PRESET_CLASSES: dict[PresetType, type[PresetBase]] = {
    PresetType.TELESCOPE: TelescopePreset,
    PresetType.CAMERA: CameraPreset,
    PresetType.FULL_RIG: FullRigPreset,
}


@dataclass
class PresetCollection:
    """Everything stored in the presets file."""

    version: int = 1
    telescopes: list[TelescopePreset] = field(default_factory=list)
    cameras: list[CameraPreset] = field(default_factory=list)
    full_rigs: list[FullRigPreset] = field(default_factory=list)

    def presets_of(self, preset_type: PresetType) -> list[Any]:
        """The mutable list holding presets of one kind."""
        match preset_type:
            case PresetType.TELESCOPE:
                return self.telescopes
            case PresetType.CAMERA:
                return self.cameras
            case _:
                return self.full_rigs

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "telescopes": [preset.to_dict() for preset in self.telescopes],
            "cameras": [preset.to_dict() for preset in self.cameras],
            "full_rigs": [preset.to_dict() for preset in self.full_rigs],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PresetCollection:
        return cls(
            version=int(data.get("version", 1)),
            telescopes=[TelescopePreset.from_dict(item) for item in data.get("telescopes", [])],
            cameras=[CameraPreset.from_dict(item) for item in data.get("cameras", [])],
            full_rigs=[FullRigPreset.from_dict(item) for item in data.get("full_rigs", [])],
        )


class PresetStore:
    """
    JSON-file backed preset storage with an in-memory cache.

    The file is read once on first access; every change rewrites it. A change
    whose write fails is discarded from the cache.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._cache: PresetCollection | None = None

    @property
    def path(self) -> Path:
        return self._path if self._path is not None else get_presets_path()

    def get_all(self) -> PresetCollection:
        """
        Load all presets.

        Returns:
            Cached collection; empty if the file is missing. A corrupted file
            is replaced by an empty collection.
        """
        if self._cache is not None:
            return self._cache

        path = self.path
        if not path.exists():
            self._cache = PresetCollection()
            return self._cache

        try:
            with path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            self._cache = PresetCollection.from_dict(data)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            logger.warning(f"Preset file {path} is corrupted ({e}); starting with an empty collection")
            self._cache = PresetCollection()
            self._write()

        return self._cache

    def list_presets(self, preset_type: PresetType) -> list[Any]:
        """All presets of one kind, in insertion order."""
        return list(self.get_all().presets_of(preset_type))

    def save(self, preset: Preset) -> None:
        """
        Insert a preset, or replace the stored one with the same id.

        Args:
            preset: Preset to store
        """
        presets = self.get_all().presets_of(preset.preset_type)
        for index, existing in enumerate(presets):
            if existing.id == preset.id:
                preset.updated_at = _utcnow()
                presets[index] = preset
                logger.info(f"Updated {preset.preset_type.value} preset '{preset.name}'")
                break
        else:
            presets.append(preset)
            logger.info(f"Saved {preset.preset_type.value} preset '{preset.name}'")
        self._write()

    def delete(self, preset_type: PresetType, preset_id: str) -> bool:
        """
        Delete a preset by id.

        Returns:
            True if a preset was removed
        """
        presets = self.get_all().presets_of(preset_type)
        remaining = [preset for preset in presets if preset.id != preset_id]
        if len(remaining) == len(presets):
            return False
        presets[:] = remaining
        logger.info(f"Deleted {preset_type.value} preset {preset_id}")
        self._write()
        return True

    def find(self, preset_type: PresetType, name_or_id: str) -> Any:
        """
        Look up a preset by id, or by case-insensitive name.

        Raises:
            PresetNotFoundError: If nothing matches
        """
        for preset in self.get_all().presets_of(preset_type):
            if preset.id == name_or_id:
                return preset
        preset = self.find_by_name(preset_type, name_or_id)
        if preset is not None:
            return preset
        raise PresetNotFoundError(f"No {preset_type.value} preset named '{name_or_id}'")

    def find_by_name(self, preset_type: PresetType, name: str) -> Any | None:
        """First preset whose name matches case-insensitively, or None."""
        wanted = name.casefold()
        for preset in self.get_all().presets_of(preset_type):
            if preset.name.casefold() == wanted:
                return preset
        return None

    def clear_cache(self) -> None:
        """Forget the cached collection (reloads from file on next access)."""
        self._cache = None

    def clear_all(self) -> None:
        """Remove every preset."""
        self._cache = PresetCollection()
        self._write()
        logger.info("Cleared all presets")

    def _write(self) -> None:
        if self._cache is None:
            return
        path = self.path
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                json.dump(self._cache.to_dict(), f, indent=2)
        except OSError as e:
            # Drop the unsaved change; the next read reloads what is on disk
            self._cache = None
            raise PresetStoreError(f"Could not write presets to {path}: {e}") from e
        logger.debug(f"Presets saved to {path}")


def new_preset(preset_type: PresetType, sampling_input: CalculatorInput, name: str) -> Preset:
    """Create a preset of the given kind from an input."""
    preset: Preset = _PRESET_CLASSES[preset_type].from_input(sampling_input, name)
    return preset


# Global store
_store: PresetStore | None = None


def get_preset_store() -> PresetStore:
    """Get the shared preset store for the configured presets file."""
    global _store

    if _store is None:
        _store = PresetStore()

    return _store
