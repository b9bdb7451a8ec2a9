import logging
from typing import Any, Dict, Optional

from kubernetes import client, config
from kubernetes.client.rest import ApiException
from kubernetes.config.config_exception import ConfigException

from ..config import ClusterModel
from ..exceptions import ClusterError

logger = logging.getLogger(__name__)


class ClusterClient:
    """
    Thin wrapper over the Kubernetes custom objects API used by the scenario steps.

    Client errors are raised as `ApiException`; callers translate them into
    their own error types.
    """
    def __init__(self, api_client: client.ApiClient):
        self.api_client = api_client
        self.custom = client.CustomObjectsApi(api_client)

    @classmethod
    def from_config(cls, cluster: Optional[ClusterModel] = None) -> "ClusterClient":
        """Loads kubeconfig (or the in-cluster service account) and builds a client."""
        cluster = cluster or ClusterModel()
        configuration = client.Configuration()
        try:
            config.load_kube_config(
                config_file=cluster.kubeconfig,
                context=cluster.context,
                client_configuration=configuration,
            )
            logger.debug(f"Loaded kubeconfig (context: {cluster.context or 'current'}).")
        except (ConfigException, FileNotFoundError) as e:
            logger.debug(f"Kubeconfig not usable ({e}), trying in-cluster configuration...")
            try:
                config.load_incluster_config(client_configuration=configuration)
            except ConfigException as incluster_e:
                raise ClusterError(f"Cannot load cluster configuration: {incluster_e}") from incluster_e
        return cls(client.ApiClient(configuration=configuration))

    def get(self, group: str, version: str, namespace: str, plural: str, name: str) -> Optional[Dict[str, Any]]:
        """Returns the named object, or None if it does not exist."""
        try:
            return self.custom.get_namespaced_custom_object(group, version, namespace, plural, name)
        except ApiException as e:
            if e.status == 404:
                return None
            raise

    def create(self, group: str, version: str, namespace: str, plural: str, body: Dict[str, Any]) -> Dict[str, Any]:
        name = body.get("metadata", {}).get("name")
        logger.debug(f"Creating {body.get('kind', plural)} '{name}' in namespace '{namespace}'...")
        return self.custom.create_namespaced_custom_object(group, version, namespace, plural, body)


def is_conflict(error: ApiException) -> bool:
    """True when the API rejected a create because the object already exists."""
    return error.status == 409
