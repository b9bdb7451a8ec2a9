"""
Kogito build and operator scenario steps.

DataTable for KogitoBuild steps:
    | config        | <property> | value            |
    | config        | native     | enabled/disabled |
    | native        | enabled/disabled | ignored    |
    | build-request | cpu/memory | value            |
    | build-limit   | cpu/memory | value            |
"""

from typing import Any, Callable, Optional
import logging

from .builder import BuildResolver, ImageStreamProvisioner
from .cluster import ClusterClient, DeploymentDispatcher, Installer, get_installer
from .config import Config
from .datacls import BuildHolder
from .registry import StepRegistry

logger = logging.getLogger(__name__)

BUILD_EXAMPLE_SERVICE_STEP = r'^Build (quarkus|springboot) example service "([^"]*)" with configuration:$'
BUILD_BINARY_SERVICE_STEP = r'^Build binary (quarkus|springboot) service "([^"]*)" with configuration:$'
OPERATOR_DEPLOYED_STEP = r'^Kogito Operator is deployed$'

STEP_PATTERNS = (
    BUILD_EXAMPLE_SERVICE_STEP,
    BUILD_BINARY_SERVICE_STEP,
    OPERATOR_DEPLOYED_STEP,
)


class ScenarioData:
    """
    Per-scenario state shared by the step handlers.

    The namespace and configuration are read-only for the lifetime of a scenario.
    """
    def __init__(
        self,
        namespace: str,
        resolver: BuildResolver,
        provisioner: ImageStreamProvisioner,
        dispatcher: DeploymentDispatcher,
        installer_factory: Callable[[], Installer],
    ):
        self.namespace = namespace
        self.resolver = resolver
        self.provisioner = provisioner
        self.dispatcher = dispatcher
        self.installer_factory = installer_factory

    @classmethod
    def from_config(cls, namespace: str, config: Config, cluster: Optional[ClusterClient] = None) -> "ScenarioData":
        cluster = cluster or ClusterClient.from_config(config.cluster)
        return cls(
            namespace=namespace,
            resolver=BuildResolver(config.examples, config.maven),
            provisioner=ImageStreamProvisioner(cluster, config.images),
            dispatcher=DeploymentDispatcher(cluster),
            installer_factory=lambda: get_installer(config.operator, cluster),
        )

    # Build service steps

    def build_example_service_with_configuration(self, runtime_type: str, context_dir: str, table: Any = None) -> BuildHolder:
        holder = self.resolver.resolve_example_build(runtime_type, context_dir, self.namespace, table)
        return self._deploy(holder)

    def build_binary_service_with_configuration(self, runtime_type: str, service_name: str, table: Any = None) -> BuildHolder:
        holder = self.resolver.resolve_binary_build(runtime_type, service_name, self.namespace, table)
        return self._deploy(holder)

    def _deploy(self, holder: BuildHolder) -> BuildHolder:
        self.provisioner.ensure(holder.build)
        self.dispatcher.dispatch(self.namespace, holder)
        return holder

    # Operator steps

    def kogito_operator_is_deployed(self):
        installer = self.installer_factory()
        installer.install(self.namespace)


def register_kogito_build_steps(registry: StepRegistry, data: ScenarioData):
    registry.register(BUILD_EXAMPLE_SERVICE_STEP, data.build_example_service_with_configuration)
    registry.register(BUILD_BINARY_SERVICE_STEP, data.build_binary_service_with_configuration)


def register_operator_steps(registry: StepRegistry, data: ScenarioData):
    registry.register(OPERATOR_DEPLOYED_STEP, data.kogito_operator_is_deployed)


def register_steps(registry: StepRegistry, data: ScenarioData) -> StepRegistry:
    register_kogito_build_steps(registry, data)
    register_operator_steps(registry, data)
    logger.debug(f"Registered {len(registry.patterns)} steps for namespace '{data.namespace}'.")
    return registry
