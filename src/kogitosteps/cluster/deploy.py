import logging

from kubernetes.client.rest import ApiException

from .. import constants
from ..datacls import BuildHolder
from ..exceptions import BuildDefinitionError, DispatchError

logger = logging.getLogger(__name__)


class DeploymentDispatcher:
    """
    Submits a resolved build and its runtime placeholder to the cluster.

    Each resource is created once per call; retries are up to the caller.
    """
    def __init__(self, cluster):
        self.cluster = cluster

    def dispatch(self, namespace: str, holder: BuildHolder):
        holder.build.spec.check_source()
        if holder.namespace != namespace or holder.runtime.namespace != namespace:
            raise BuildDefinitionError(
                f"Build '{holder.name}' is bound to namespace '{holder.namespace}', not '{namespace}'."
            )
        logger.info(f"[Deploy] Deploying Kogito build '{holder.build.name}' in namespace '{namespace}'...")

        try:
            self.cluster.create(
                constants.KOGITO_GROUP, constants.KOGITO_VERSION, namespace,
                constants.KOGITO_BUILD_PLURAL, holder.build.to_manifest(),
            )
        except ApiException as e:
            raise DispatchError(f"Error creating build {holder.build.name}: {e.reason}") from e

        try:
            self.cluster.create(
                constants.KOGITO_GROUP, constants.KOGITO_VERSION, namespace,
                constants.KOGITO_RUNTIME_PLURAL, holder.runtime.to_manifest(),
            )
        except ApiException as e:
            raise DispatchError(f"Error creating service {holder.runtime.name}: {e.reason}") from e

        logger.info(f"[Deploy] Kogito build '{holder.build.name}' and its runtime submitted.")
