"""
Kogito Steps

Behaviour-driven build and deploy steps for the Kogito operator: scenario
tables become KogitoBuild resources, image streams are provisioned, and the
build is submitted together with its KogitoRuntime placeholder.

Main modules:
- builder: Table mapping, build resolution and image stream provisioning
- cluster: Cluster client, build dispatch and operator installers
- datacls: Typed KogitoBuild / KogitoRuntime resources
- registry: Scenario phrase to handler registry
- steps: Scenario step handlers
- config: Configuration loading and validation
- utils: Logging setup

Quick start example:
```python
from kogitosteps import Config, ScenarioData, StepRegistry, register_steps

config = Config("kogito-steps.yml")
registry = register_steps(StepRegistry(), ScenarioData.from_config("my-namespace", config))
registry.run('Build binary quarkus service "my-service" with configuration:', table=[["native", "enabled", "true"]])
```
"""

from .config import Config, ConfigModel
from .builder import TableMapper, BuildResolver, ImageStreamProvisioner
from .cluster import ClusterClient, DeploymentDispatcher, Installer, get_installer
from .datacls import BuildHolder, KogitoBuild, KogitoRuntime
from .registry import StepRegistry
from .steps import ScenarioData, register_steps
from .exceptions import (
    KogitoStepsError,
    ConfigurationError,
    DefinitionError,
    TableMappingError,
    UnrecognizedCategoryError,
    UnrecognizedOptionError,
    ResolutionError,
    DispatchError,
    InstallError,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    '__version__',
    # Config
    'Config',
    'ConfigModel',
    # Builder
    'TableMapper',
    'BuildResolver',
    'ImageStreamProvisioner',
    # Cluster
    'ClusterClient',
    'DeploymentDispatcher',
    'Installer',
    'get_installer',
    # Data classes
    'BuildHolder',
    'KogitoBuild',
    'KogitoRuntime',
    # Steps
    'StepRegistry',
    'ScenarioData',
    'register_steps',
    # Exceptions
    'KogitoStepsError',
    'ConfigurationError',
    'DefinitionError',
    'TableMappingError',
    'UnrecognizedCategoryError',
    'UnrecognizedOptionError',
    'ResolutionError',
    'DispatchError',
    'InstallError',
]
