"""
Kogito Runtime Data Classes

The runtime placeholder that receives the image produced by a build, and the
probe settings embedded in it.
"""

from typing import Dict, Any
from pydantic import BaseModel, ConfigDict, Field

from .. import constants
from ..constants import RuntimeType


class KogitoProbe(BaseModel):
    """
        Class configures liveness and readiness probes for the Kogito container.
        Probe bodies follow the Kubernetes `Probe` schema and are passed through as-is.
    """
    model_config = ConfigDict(populate_by_name=True)

    liveness_probe: Dict[str, Any] = Field(default_factory=dict, alias="livenessProbe")
    readiness_probe: Dict[str, Any] = Field(default_factory=dict, alias="readinessProbe")


class KogitoRuntimeSpec(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    runtime: RuntimeType
    replicas: int = 1
    image: str = ""
    probes: KogitoProbe = Field(default_factory=KogitoProbe)


class KogitoRuntime(BaseModel):
    """
        Class represents a `KogitoRuntime` resource bound to a namespace.
    """
    name: str
    namespace: str
    spec: KogitoRuntimeSpec

    def to_manifest(self) -> Dict[str, Any]:
        spec: Dict[str, Any] = {
            "runtime": self.spec.runtime.value,
            "replicas": self.spec.replicas,
        }
        if self.spec.image:
            spec["image"] = self.spec.image
        probes = self.spec.probes.model_dump(by_alias=True, exclude_defaults=True)
        if probes:
            spec["probes"] = probes
        return {
            "apiVersion": f"{constants.KOGITO_GROUP}/{constants.KOGITO_VERSION}",
            "kind": constants.KOGITO_RUNTIME_KIND,
            "metadata": {"name": self.name, "namespace": self.namespace},
            "spec": spec,
        }

