import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Literal
from pydantic import BaseModel, Field, ValidationError, model_validator, ConfigDict

from . import constants
from .exceptions import (
    ConfigParsingError,
    ConfigFileMissingError,
    ConfigValidationError,
)


logger = logging.getLogger(__name__)


class ExamplesModel(BaseModel):
    """
        Class Config-Validation Model describe `examples`, the repository example services are built from
    """
    uri: str = constants.DEFAULT_EXAMPLES_REPOSITORY_URI
    ref: str = ""
    model_config = ConfigDict(extra="forbid")

    @model_validator(mode='after')
    def check_uri_present(self) -> 'ExamplesModel':
        if not self.uri.strip():
            raise ValueError("'examples.uri' cannot be empty.")
        return self


class MavenModel(BaseModel):
    """
        Class Config-Validation Model describe `maven`
    """
    mirror_url: Optional[str] = None
    custom_repo_url: Optional[str] = None
    ignore_self_signed_certificate: bool = False
    model_config = ConfigDict(extra="forbid")


class ImagesModel(BaseModel):
    """
        Class Config-Validation Model describe `images`, where image streams import from
    """
    registry: str = "quay.io"
    namespace: str = "kiegroup"
    version: str = "latest"
    builder_image: Optional[str] = None
    runtime_image: Optional[str] = None
    insecure: bool = False
    model_config = ConfigDict(extra="forbid")


class OperatorModel(BaseModel):
    """
        Class Config-Validation Model describe `operator`
    """
    installer: Literal["yaml", "olm"] = "yaml"
    manifests: str = constants.DEFAULT_OPERATOR_MANIFESTS
    package: str = "rhpam-kogito-operator"
    channel: str = "7.x"
    catalog_source: str = "redhat-operators"
    catalog_namespace: str = "openshift-marketplace"
    model_config = ConfigDict(extra="forbid")


class ClusterModel(BaseModel):
    """
        Class Config-Validation Model describe `cluster` connection
    """
    kubeconfig: Optional[str] = None
    context: Optional[str] = None
    model_config = ConfigDict(extra="forbid")


class ConfigModel(BaseModel):
    """
        Class Config-Validation Model desribe top-level of config
    """
    examples: ExamplesModel = Field(default_factory=ExamplesModel)
    maven: MavenModel = Field(default_factory=MavenModel)
    images: ImagesModel = Field(default_factory=ImagesModel)
    operator: OperatorModel = Field(default_factory=OperatorModel)
    cluster: ClusterModel = Field(default_factory=ClusterModel)
    model_config = ConfigDict(extra="forbid")


class Config:
    """
    Loads and validates the harness config file using Pydantic models.
    Without a path every section takes its defaults.
    """
    def __init__(self, config_path: Optional[str] = None):
        self.path = config_path
        raw_data: Dict[str, Any] = {}
        if self.path is not None:
            logger.info(f"Loading configuration from '{self.path}'...")
            raw_data = self._load_raw_config()
        else:
            logger.debug("No configuration file given, using defaults.")

        try:
            self.model = ConfigModel.model_validate(raw_data)
            logger.debug(f"Configuration model validated successfully: \n{self.model.model_dump_json(indent=2)}")
        except ValidationError as e:
            raise ConfigValidationError(f"Configuration validation failed:\n{e}")

    def _load_raw_config(self) -> Dict[str, Any]:
        try:
            content = Path(self.path).read_text(encoding='utf-8')
            config_data = yaml.safe_load(content)
        except FileNotFoundError:
            raise ConfigFileMissingError(f"Configuration file not found at: {self.path}")
        except yaml.YAMLError as e:
            raise ConfigParsingError(f"Error parsing YAML file: {e}")

        if config_data is None:
            return {}
        if not isinstance(config_data, dict):
            raise ConfigParsingError("Configuration file must be a YAML document containing a dictionary.")
        logger.debug(f"Successfully parsed YAML from '{self.path}'.")
        return config_data

    @property
    def examples(self) -> ExamplesModel:
        return self.model.examples

    @property
    def maven(self) -> MavenModel:
        return self.model.maven

    @property
    def images(self) -> ImagesModel:
        return self.model.images

    @property
    def operator(self) -> OperatorModel:
        return self.model.operator

    @property
    def cluster(self) -> ClusterModel:
        return self.model.cluster
