from __future__ import annotations

import json
import logging
import os
import pathlib
from dataclasses import dataclass, field
from importlib.resources import files

import yaml

from .core.classes import structure, unstructure
from .core.normalize import DEFAULT_TARGET_SIZE
from .core.skippolicy import SkipPolicy

logger = logging.getLogger(__name__)


DEFAULT_CONFIG_RESOURCE = "material-design-icons.yaml"


class ConfigError(Exception):
    pass


@dataclass(kw_only=True)
class GeneratorConfig:
    targetSize: float = DEFAULT_TARGET_SIZE
    nativeSizes: list[int] = field(default_factory=lambda: [12, 18, 24, 36, 48])
    fileNamePrefix: str = "ic_"
    skipPolicy: SkipPolicy = field(default_factory=SkipPolicy)
    acronyms: dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if self.targetSize <= 0:
            raise ConfigError(f"targetSize must be positive, got {self.targetSize}")
        if not self.nativeSizes or any(size <= 0 for size in self.nativeSizes):
            raise ConfigError(f"invalid nativeSizes: {self.nativeSizes}")


def loadConfigData(path: os.PathLike) -> dict:
    path = pathlib.Path(path)
    if not path.is_file():
        raise ConfigError(f"config file not found: {path}")
    contents = path.read_text(encoding="utf-8")
    try:
        if path.suffix == ".json":
            data = json.loads(contents)
        else:
            data = yaml.safe_load(contents)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"can't read config file {path}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"config file {path} must contain a mapping")
    return data


def defaultConfigData() -> dict:
    resource = files("ivgicons") / "data" / DEFAULT_CONFIG_RESOURCE
    return yaml.safe_load(resource.read_text(encoding="utf-8"))


def makeConfig(*configDatas: dict, useDefaults: bool = True) -> GeneratorConfig:
    """Build a GeneratorConfig from one or more config mappings. Later
    mappings override top-level keys of earlier ones; the packaged defaults
    come first unless useDefaults is False.
    """
    merged = defaultConfigData() if useDefaults else {}
    for configData in configDatas:
        merged.update(configData)
    try:
        return structure(merged, GeneratorConfig)
    except ConfigError:
        raise
    except Exception as e:
        raise ConfigError(f"invalid configuration: {e}") from e


def loadConfig(*paths: os.PathLike, useDefaults: bool = True) -> GeneratorConfig:
    config = makeConfig(
        *(loadConfigData(path) for path in paths), useDefaults=useDefaults
    )
    logger.debug(f"configuration: {unstructure(config)}")
    return config
