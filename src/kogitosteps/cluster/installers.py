"""
Operator installers.

An installer puts the Kogito operator into a namespace before any build is
submitted. Two flavours are supported: applying plain YAML manifests, and
subscribing through the Operator Lifecycle Manager (OLM).
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterator, List, Type
import logging

import yaml
from kubernetes import utils
from kubernetes.client.rest import ApiException

from .. import constants
from ..config import OperatorModel
from ..exceptions import InstallError
from .client import ClusterClient, is_conflict

logger = logging.getLogger(__name__)


class Installer(ABC):
    """
    Abstract class installing the operator into a namespace.
    """
    def __init__(self, cluster: ClusterClient, operator: OperatorModel):
        self.cluster = cluster
        self.operator = operator

    @abstractmethod
    def install(self, namespace: str):
        """Installs the operator, raising InstallError on failure."""
        pass


class YamlInstaller(Installer):
    """
    Applies the operator manifests (a file, or a directory of YAML files) to the namespace.
    Objects that already exist are skipped.
    """
    def install(self, namespace: str):
        logger.info(f"[Installer] Installing operator from manifests '{self.operator.manifests}' into '{namespace}'...")
        created = 0
        for document in self._documents():
            kind = document.get('kind')
            name = (document.get('metadata') or {}).get('name')
            try:
                utils.create_from_dict(self.cluster.api_client, document, namespace=namespace)
                created += 1
            except utils.FailToCreateError as e:
                failures = [err for err in e.api_exceptions if not is_conflict(err)]
                if failures:
                    raise InstallError(f"Error creating {kind} '{name}': {failures[0].reason}") from e
                logger.debug(f"[Installer] {kind} already exists, skipping.")
            except (AttributeError, KeyError, ValueError) as e:
                # no generated client API for the kind, or apiVersion/kind missing
                raise InstallError(f"Error creating {kind} '{name}': unsupported manifest ({e!r})") from e
        logger.info(f"[Installer] Operator manifests applied ({created} objects created).")

    def _documents(self) -> Iterator[Dict[str, Any]]:
        path = Path(self.operator.manifests)
        if path.is_dir():
            files: List[Path] = sorted(p for p in path.iterdir() if p.suffix in (".yaml", ".yml"))
        elif path.is_file():
            files = [path]
        else:
            raise InstallError(f"Operator manifests not found at: {path}")

        for file in files:
            try:
                documents = list(yaml.safe_load_all(file.read_text(encoding="utf-8")))
            except yaml.YAMLError as e:
                raise InstallError(f"Error parsing operator manifest '{file}': {e}") from e
            for document in documents:
                if document:
                    yield document


class OlmInstaller(Installer):
    """
    Subscribes the namespace to the operator package from an OLM catalog.
    """
    def install(self, namespace: str):
        logger.info(
            f"[Installer] Subscribing '{namespace}' to '{self.operator.package}' "
            f"(channel {self.operator.channel}, source {self.operator.catalog_source})..."
        )
        self._create(namespace, constants.OPERATOR_GROUP_VERSION, constants.OPERATOR_GROUP_PLURAL,
                     self._operator_group(namespace))
        self._create(namespace, constants.SUBSCRIPTION_VERSION, constants.SUBSCRIPTION_PLURAL,
                     self._subscription(namespace))
        logger.info(f"[Installer] Subscription to '{self.operator.package}' created.")

    def _create(self, namespace: str, version: str, plural: str, body: Dict[str, Any]):
        try:
            self.cluster.create(constants.OLM_GROUP, version, namespace, plural, body)
        except ApiException as e:
            if is_conflict(e):
                logger.debug(f"[Installer] {body['kind']} '{body['metadata']['name']}' already exists.")
                return
            raise InstallError(f"Error creating {body['kind']} '{body['metadata']['name']}': {e.reason}") from e

    def _operator_group(self, namespace: str) -> Dict[str, Any]:
        return {
            "apiVersion": f"{constants.OLM_GROUP}/{constants.OPERATOR_GROUP_VERSION}",
            "kind": "OperatorGroup",
            "metadata": {"name": f"{namespace}-operator-group", "namespace": namespace},
            "spec": {"targetNamespaces": [namespace]},
        }

    def _subscription(self, namespace: str) -> Dict[str, Any]:
        return {
            "apiVersion": f"{constants.OLM_GROUP}/{constants.SUBSCRIPTION_VERSION}",
            "kind": "Subscription",
            "metadata": {"name": self.operator.package, "namespace": namespace},
            "spec": {
                "channel": self.operator.channel,
                "name": self.operator.package,
                "source": self.operator.catalog_source,
                "sourceNamespace": self.operator.catalog_namespace,
                "installPlanApproval": "Automatic",
            },
        }


INSTALLERS: Dict[str, Type[Installer]] = {
    "yaml": YamlInstaller,
    "olm": OlmInstaller,
}


def get_installer(operator: OperatorModel, cluster: ClusterClient) -> Installer:
    installer_class = INSTALLERS.get(operator.installer)
    if installer_class is None:
        raise InstallError(f"Unknown operator installer '{operator.installer}', must be one of {sorted(INSTALLERS)}.")
    logger.debug(f"[Installer] Using {installer_class.__name__}.")
    return installer_class(cluster, operator)
