import yaml
import logging
import os
from typing import Dict, Any, Optional, Mapping
from pydantic import BaseModel, ValidationError, field_validator, ConfigDict

from . import constants
from .io import FileSystem, create_fs
from .exceptions import (
    ConfigParsingError,
    ConfigFileMissingError,
    ConfigValidationError,
    ConfigurationError,
    BMIOError,
    BMPathNotFoundError,
)


logger = logging.getLogger(__name__)


class ConfigModel(BaseModel):
    """
        Class Config-Validation Model for a discovery run
    """
    root: str = constants.DEFAULT_ROOT
    strict: bool = True
    output: Optional[str] = None
    report_missing_dockerfile: bool = False
    model_config = ConfigDict(extra="forbid")

    @field_validator("root")
    @classmethod
    def check_root_not_empty(cls, value: str) -> str:
        """An empty root would silently scan the working directory"""
        if not value.strip():
            raise ValueError("root must not be empty")
        return value

    @field_validator("output", mode="before")
    @classmethod
    def empty_output_is_stdout(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class Config:
    """
    Merges defaults, an optional YAML file, the environment and CLI overrides
    (in increasing precedence) and validates the result with Pydantic.
    """
    def __init__(
        self,
        config_path: Optional[str] = None,
        fs: Optional[FileSystem] = None,
        environ: Optional[Mapping[str, str]] = None,
        overrides: Optional[Dict[str, Any]] = None,
    ):
        self.path = config_path
        self.fs = fs or create_fs()
        environ = os.environ if environ is None else environ

        data: Dict[str, Any] = {}
        if self.path:
            logger.info(f"Loading configuration from '{self.path}'...")
            data.update(self._load_raw_config())
        data.update(self._from_environ(environ))
        data.update({k: v for k, v in (overrides or {}).items() if v is not None})

        try:
            self.model = ConfigModel.model_validate(data)
        except ValidationError as e:
            raise ConfigValidationError(f"Configuration validation failed:\n{e}") from e
        logger.debug(f"Configuration resolved: {self.model.model_dump_json()}")

    def _load_raw_config(self) -> Dict[str, Any]:
        try:
            content = self.fs.read_text(self.path)
        except BMPathNotFoundError:
            raise ConfigFileMissingError(f"Configuration file not found at: {self.path}")
        except BMIOError as e:
            raise ConfigurationError(f"Cannot read configuration file '{self.path}': {e}")
        try:
            config_data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigParsingError(f"Error parsing YAML file: {e}")
        if config_data is None:
            return {}
        if not isinstance(config_data, dict):
            raise ConfigParsingError("Configuration file must be a YAML document containing a dictionary.")
        logger.debug(f"Successfully parsed YAML from '{self.path}'.")
        return config_data

    @staticmethod
    def _from_environ(environ: Mapping[str, str]) -> Dict[str, Any]:
        """Pick up recognized environment variables; empty values count as unset."""
        data = {}
        for key, var in constants.ENV_VARS.items():
            value = environ.get(var)
            if value is not None and value.strip():
                data[key] = value.strip()
        return data

    @property
    def root(self) -> str:
        return self.model.root

    @property
    def strict(self) -> bool:
        return self.model.strict

    @property
    def output(self) -> Optional[str]:
        return self.model.output

    @property
    def report_missing_dockerfile(self) -> bool:
        return self.model.report_missing_dockerfile
