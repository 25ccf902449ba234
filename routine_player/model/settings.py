import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict


SETTINGS_FILENAME = "settings.json"


@dataclass
class GeneralSettings:
    log_level: str = "Info"
    window_width: int = 480
    window_height: int = 820


@dataclass
class PlaybackSettings:
    initial_routine: str = "lower-back"


@dataclass
class DataSettings:
    routines_file: str = ""


@dataclass
class AppSettings:
    general: GeneralSettings = field(default_factory=GeneralSettings)
    playback: PlaybackSettings = field(default_factory=PlaybackSettings)
    data: DataSettings = field(default_factory=DataSettings)


class SettingsManager:
    def __init__(self, path: Path) -> None:
        self.path = path
        self.settings = AppSettings()
        self.load()

    def load(self) -> None:
        if not self.path.exists():
            return
        try:
            data = json.loads(self.path.read_text())
        except (json.JSONDecodeError, OSError):
            return
        self.settings = self._from_dict(data)

    def save(self) -> None:
        self.path.write_text(json.dumps(self._to_dict(), indent=2))

    def reset(self) -> None:
        self.settings = AppSettings()
        self.save()

    def _to_dict(self) -> Dict:
        return asdict(self.settings)

    def _from_dict(self, data: Dict) -> AppSettings:
        def merge(default_cls, section):
            instance = default_cls()
            if not isinstance(section, dict):
                return instance
            for key, value in section.items():
                if not hasattr(instance, key):
                    continue
                # Keep the default when the stored value has the wrong type.
                default = getattr(instance, key)
                if isinstance(value, bool) != isinstance(default, bool):
                    continue
                if isinstance(value, type(default)):
                    setattr(instance, key, value)
            return instance

        settings = AppSettings()
        if not isinstance(data, dict):
            return settings
        if "general" in data:
            settings.general = merge(GeneralSettings, data["general"])
        if "playback" in data:
            settings.playback = merge(PlaybackSettings, data["playback"])
        if "data" in data:
            settings.data = merge(DataSettings, data["data"])
        return settings


def get_settings_path(root: Path) -> Path:
    return root / SETTINGS_FILENAME


def resolve_log_level(name: str) -> str:
    """Map a settings log level such as ``"Info"`` to a logging level name."""
    cleaned = (name or "").strip().upper()
    if cleaned in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return cleaned
    return "INFO"
