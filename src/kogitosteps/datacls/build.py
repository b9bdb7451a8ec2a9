"""
Kogito Build Data Classes

Typed form of the `KogitoBuild` custom resource submitted by the scenario steps.
"""

from typing import Dict, Optional, Any, List
from pydantic import BaseModel, ConfigDict, Field

from .. import constants
from ..constants import BuildType, RuntimeType
from ..exceptions import BuildDefinitionError


class GitSource(BaseModel):
    """
        Class describes where a RemoteSource build fetches its sources from.
    """
    model_config = ConfigDict(populate_by_name=True)

    uri: str
    context_dir: Optional[str] = Field(None, alias="contextDir")
    reference: Optional[str] = None


class ResourceRequirements(BaseModel):
    """
        Class holds cpu/memory requests and limits as opaque strings; units are
        interpreted by the cluster, never here.
    """
    requests: Dict[str, str] = Field(default_factory=dict)
    limits: Dict[str, str] = Field(default_factory=dict)


class KogitoBuildSpec(BaseModel):
    """
        Class describes how a Kogito service artifact is produced.
    """
    model_config = ConfigDict(populate_by_name=True)

    runtime: RuntimeType
    type: Optional[BuildType] = None
    git_source: Optional[GitSource] = Field(None, alias="gitSource")
    native: bool = False
    resources: ResourceRequirements = Field(default_factory=ResourceRequirements)
    properties: Dict[str, str] = Field(default_factory=dict)
    env: Dict[str, str] = Field(default_factory=dict)
    maven_mirror_url: Optional[str] = Field(None, alias="mavenMirrorURL")
    build_image: Optional[str] = Field(None, alias="buildImage")
    runtime_image: Optional[str] = Field(None, alias="runtimeImage")

    def add_resource_request(self, name: str, value: str):
        self.resources.requests[name] = value

    def add_resource_limit(self, name: str, value: str):
        self.resources.limits[name] = value

    def check_source(self):
        """Ensure the git source is set if and only if the build is a RemoteSource build."""
        if self.type is None:
            raise BuildDefinitionError("Build type is not set.")
        if self.type == BuildType.REMOTE_SOURCE and self.git_source is None:
            raise BuildDefinitionError("A 'RemoteSource' build requires a git source.")
        if self.type == BuildType.BINARY and self.git_source is not None:
            raise BuildDefinitionError("A 'Binary' build cannot have a git source.")


class KogitoBuild(BaseModel):
    """
        Class represents a `KogitoBuild` resource bound to a namespace.
    """
    name: str
    namespace: str
    spec: KogitoBuildSpec

    def to_manifest(self) -> Dict[str, Any]:
        spec = self.spec.model_dump(
            by_alias=True, exclude_none=True, mode="json",
            exclude={"properties", "env", "resources"},
        )
        # free-form properties travel to the build as environment variables, overriding stub defaults
        env: List[Dict[str, str]] = [
            {"name": name, "value": value}
            for name, value in {**self.spec.env, **self.spec.properties}.items()
        ]
        if env:
            spec["env"] = env
        resources = self.spec.resources.model_dump(exclude_defaults=True)
        if resources:
            spec["resources"] = resources
        return {
            "apiVersion": f"{constants.KOGITO_GROUP}/{constants.KOGITO_VERSION}",
            "kind": constants.KOGITO_BUILD_KIND,
            "metadata": {"name": self.name, "namespace": self.namespace},
            "spec": spec,
        }
