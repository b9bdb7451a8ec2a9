import logging
import posixpath
from typing import Any, Optional

from .. import constants
from ..config import ExamplesModel, MavenModel
from ..constants import BuildType, RuntimeType
from ..datacls import (
    BuildHolder,
    GitSource,
    KogitoBuild,
    KogitoBuildSpec,
    KogitoRuntime,
    KogitoRuntimeSpec,
)
from ..exceptions import BuildDefinitionError, ResolutionError, TableMappingError
from .mapper import TableMapper

logger = logging.getLogger(__name__)


def service_name_from_context_dir(context_dir: str) -> str:
    """Return the trailing path segment of an example context directory."""
    return posixpath.basename(context_dir.rstrip("/"))


class BuildResolver:
    """
    Resolves scenario input into a BuildHolder ready for image stream setup and dispatch.

    Repository and Maven settings are given explicitly; nothing is read from
    process-wide state.
    """
    def __init__(self, examples: ExamplesModel, maven: Optional[MavenModel] = None, mapper: Optional[TableMapper] = None):
        self.examples = examples
        self.maven = maven or MavenModel()
        self.mapper = mapper or TableMapper()

    def resolve(self, runtime: str, service_name: str, namespace: str, table: Any = None) -> BuildHolder:
        """
        Creates the build stub and runtime placeholder, then maps the table onto the build spec.

        Raises ResolutionError if the table cannot be mapped; the partially
        built holder is attached to the error and must be discarded.
        """
        runtime_type = self._runtime_type(runtime)
        if not service_name:
            raise BuildDefinitionError("Service name cannot be empty.")

        logger.debug(f"[Resolver] Creating stubs for {runtime_type.value} service '{service_name}' in '{namespace}'...")
        holder = BuildHolder(
            build=self._build_stub(namespace, runtime_type, service_name),
            runtime=self._runtime_stub(namespace, runtime_type, service_name),
        )

        if table is not None:
            try:
                self.mapper.map(table, holder.build.spec)
            except TableMappingError as e:
                raise ResolutionError(f"Cannot configure build '{service_name}': {e}", holder=holder) from e

        return holder

    def resolve_example_build(self, runtime: str, context_dir: str, namespace: str, table: Any = None) -> BuildHolder:
        """Resolves a RemoteSource build of an example service from the examples repository."""
        service_name = service_name_from_context_dir(context_dir)
        holder = self.resolve(runtime, service_name, namespace, table)

        spec = holder.build.spec
        spec.type = BuildType.REMOTE_SOURCE
        spec.git_source = GitSource(uri=self.examples.uri, context_dir=context_dir)
        if self.examples.ref:
            spec.git_source.reference = self.examples.ref

        logger.info(f"[Resolver] Resolved example build '{service_name}' from '{self.examples.uri}' ({context_dir}).")
        return holder

    def resolve_binary_build(self, runtime: str, service_name: str, namespace: str, table: Any = None) -> BuildHolder:
        """Resolves a Binary build; binary builds never carry a git source."""
        holder = self.resolve(runtime, service_name, namespace, table)

        spec = holder.build.spec
        spec.type = BuildType.BINARY
        spec.git_source = None

        logger.info(f"[Resolver] Resolved binary build '{service_name}'.")
        return holder

    @staticmethod
    def _runtime_type(runtime: str) -> RuntimeType:
        try:
            return RuntimeType(runtime)
        except ValueError:
            supported = [r.value for r in RuntimeType]
            raise BuildDefinitionError(f"Unsupported runtime '{runtime}', must be one of {supported}.")

    def _build_stub(self, namespace: str, runtime: RuntimeType, name: str) -> KogitoBuild:
        spec = KogitoBuildSpec(runtime=runtime, maven_mirror_url=self.maven.mirror_url or None)
        if self.maven.custom_repo_url:
            spec.env[constants.MAVEN_REPO_URL_ENV] = self.maven.custom_repo_url
        if self.maven.ignore_self_signed_certificate:
            spec.env[constants.MAVEN_IGNORE_SELF_SIGNED_CERTIFICATE_ENV] = "true"
        return KogitoBuild(name=name, namespace=namespace, spec=spec)

    @staticmethod
    def _runtime_stub(namespace: str, runtime: RuntimeType, name: str) -> KogitoRuntime:
        return KogitoRuntime(
            name=name,
            namespace=namespace,
            spec=KogitoRuntimeSpec(runtime=runtime),
        )
