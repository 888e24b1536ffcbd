from ..asset import ROOT_ASSET_DIRECTORY

from PySide6.QtCore import QObject, Signal

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import logging
import json

logger = logging.getLogger(__name__)
JsonDict = dict[str, Any]

MIN_SECONDS_PATH = "timer.minSeconds"
MAX_SECONDS_PATH = "timer.maxSeconds"
SOUND_INTENSITY_PATH = "effects.soundIntensity"
COLOR_INTENSITY_PATH = "effects.colorIntensity"
ARROW_ENABLED_PATH = "effects.arrowEnabled"
SHOW_COUNTDOWN_PATH = "display.showCountdown"

def readJSONFile(path: Path) -> JsonDict:
    if not path.exists():
        return {}

    with open(path, "r", encoding="utf-8") as file:
        return json.load(file)

def deepMerge(
    base: JsonDict,
    overlay: JsonDict
) -> JsonDict:
    out = dict(base)

    for (key, value) in overlay.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = deepMerge(out[key], value)
        else:
            out[key] = value

    return out

def getByPath(
    data: JsonDict,
    path: str
) -> Any:
    current = data

    for part in path.split("."):
        if (not isinstance(current, dict)) or (part not in current):
            raise KeyError(f"Path '{path}' (at part {part}) not found in data")

        current = current[part]

    return current

def setByPath(
    data: JsonDict,
    path: str,
    value: Any
) -> None:
    parts = path.split(".")
    current = data

    for part in parts[:-1]:
        if part not in current or not isinstance(current[part], dict):
            current[part] = {}

        current = current[part]

    current[parts[-1]] = value

@dataclass(frozen=True)
class TimerSettings:
    """
    immutable snapshot of the configuration, taken at a cycle boundary.
    values are kept raw (a user may have typed "abc" into a field).
    """

    minSeconds: Any = "10"
    maxSeconds: Any = "20"
    soundIntensity: Any = "0"
    colorIntensity: Any = "0"
    arrowEnabled: bool = False
    showCountdown: bool = True

class ConfigController(QObject):
    """
    single authoritative store for timer and effect settings.

    setters only store the value; cross-field checks (min <= max) happen
    in the scheduler when a cycle begins.
    """

    valueChanged = Signal(str, object)
    reloaded = Signal()

    def __init__(
        self,
        overridesFile: Optional[Path] = None,
        defaultsFile: Optional[Path] = None,
        parent: Optional[QObject] = None
    ):
        super().__init__(parent)

        self.defaultsFile = defaultsFile or (ROOT_ASSET_DIRECTORY / "baseConfig.json")
        self.defaults = readJSONFile(self.defaultsFile)
        self.currentOverrides = {}
        self.config = {}

        self.loadConfig(overridesFile)

    def loadConfig(
        self,
        configurationFile: Optional[Path] = None
    ) -> JsonDict:
        if configurationFile is not None:
            # a broken overrides file is a user error, let it surface
            self.currentOverrides = readJSONFile(Path(configurationFile))
        else:
            self.currentOverrides = {}

        self.config = deepMerge(
            self.defaults,
            self.currentOverrides
        )

        logger.debug("Loaded config: %s", self.config)
        self.reloaded.emit()
        return self.config

    def getValue(self, path: str) -> Any:
        return getByPath(self.config, path)

    def setValue(self, path: str, value: Any) -> None:
        setByPath(self.config, path, value)
        self.valueChanged.emit(path, value)

    def snapshot(self) -> TimerSettings:
        return TimerSettings(
            minSeconds=self.getValue(MIN_SECONDS_PATH),
            maxSeconds=self.getValue(MAX_SECONDS_PATH),
            soundIntensity=self.getValue(SOUND_INTENSITY_PATH),
            colorIntensity=self.getValue(COLOR_INTENSITY_PATH),
            arrowEnabled=bool(self.getValue(ARROW_ENABLED_PATH)),
            showCountdown=bool(self.getValue(SHOW_COUNTDOWN_PATH))
        )

    # field accessors
    def getMinSeconds(self) -> Any:
        return self.getValue(MIN_SECONDS_PATH)

    def setMinSeconds(self, value: Any) -> None:
        self.setValue(MIN_SECONDS_PATH, value)

    def getMaxSeconds(self) -> Any:
        return self.getValue(MAX_SECONDS_PATH)

    def setMaxSeconds(self, value: Any) -> None:
        self.setValue(MAX_SECONDS_PATH, value)

    def getSoundIntensity(self) -> Any:
        return self.getValue(SOUND_INTENSITY_PATH)

    def setSoundIntensity(self, value: Any) -> None:
        self.setValue(SOUND_INTENSITY_PATH, value)

    def getColorIntensity(self) -> Any:
        return self.getValue(COLOR_INTENSITY_PATH)

    def setColorIntensity(self, value: Any) -> None:
        self.setValue(COLOR_INTENSITY_PATH, value)

    def getArrowEnabled(self) -> bool:
        return bool(self.getValue(ARROW_ENABLED_PATH))

    def setArrowEnabled(self, value: bool) -> None:
        self.setValue(ARROW_ENABLED_PATH, bool(value))

    def getShowCountdown(self) -> bool:
        return bool(self.getValue(SHOW_COUNTDOWN_PATH))

    def setShowCountdown(self, value: bool) -> None:
        self.setValue(SHOW_COUNTDOWN_PATH, bool(value))
