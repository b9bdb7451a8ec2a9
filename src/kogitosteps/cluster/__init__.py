"""
Kogito Steps Cluster Module

- ClusterClient: Kubernetes custom objects access
- DeploymentDispatcher: KogitoBuild/KogitoRuntime submission
- Installer, get_installer: Operator installation (YAML manifests or OLM)
"""

from .client import ClusterClient
from .deploy import DeploymentDispatcher
from .installers import Installer, YamlInstaller, OlmInstaller, get_installer

__all__ = [
    'ClusterClient',
    'DeploymentDispatcher',
    'Installer',
    'YamlInstaller',
    'OlmInstaller',
    'get_installer',
]
