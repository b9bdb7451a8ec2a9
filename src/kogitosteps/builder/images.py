import logging
from typing import Any, Dict, List, NamedTuple

from kubernetes.client.rest import ApiException

from .. import constants
from ..config import ImagesModel
from ..constants import RuntimeType
from ..datacls import KogitoBuild
from ..exceptions import ImageStreamError
from ..cluster.client import is_conflict

logger = logging.getLogger(__name__)


class ImageStreamRequirement(NamedTuple):
    name: str
    tag: str
    image: str

    @property
    def reference(self) -> str:
        return f"{self.name}:{self.tag}"


class ImageStreamProvisioner:
    """
    Ensures the builder and runtime image streams a build needs exist in its namespace.

    Provisioning is idempotent: streams already present are left untouched.
    """
    def __init__(self, cluster, images: ImagesModel):
        self.cluster = cluster
        self.images = images

    def required_streams(self, build: KogitoBuild) -> List[ImageStreamRequirement]:
        spec = build.spec
        runtime_stream = constants.RUNTIME_JVM_IMAGE_STREAM
        if spec.native:
            if spec.runtime == RuntimeType.QUARKUS:
                runtime_stream = constants.RUNTIME_NATIVE_IMAGE_STREAM
            else:
                logger.warning(f"[Images] Native builds are only supported for Quarkus, '{build.name}' uses the JVM runtime image.")

        return [
            self._requirement(constants.BUILDER_IMAGE_STREAM, self.images.builder_image),
            self._requirement(runtime_stream, self.images.runtime_image),
        ]

    def ensure(self, build: KogitoBuild):
        """Points the build at its image stream tags and creates any stream that is missing."""
        builder, runtime = self.required_streams(build)
        build.spec.build_image = builder.reference
        build.spec.runtime_image = runtime.reference
        if build.spec.native and build.spec.runtime != RuntimeType.QUARKUS:
            # the JVM runtime image cannot run a native artifact
            build.spec.native = False

        for stream in (builder, runtime):
            self._ensure_stream(build.namespace, stream)

    def _requirement(self, name: str, override: str | None) -> ImageStreamRequirement:
        image = override or f"{self.images.registry}/{self.images.namespace}/{name}:{self.images.version}"
        return ImageStreamRequirement(name=name, tag=self.images.version, image=image)

    def _ensure_stream(self, namespace: str, stream: ImageStreamRequirement):
        try:
            existing = self.cluster.get(
                constants.IMAGE_STREAM_GROUP, constants.IMAGE_STREAM_VERSION,
                namespace, constants.IMAGE_STREAM_PLURAL, stream.name,
            )
            if existing is not None:
                logger.debug(f"[Images] Image stream '{stream.name}' already exists in '{namespace}'.")
                return
            self.cluster.create(
                constants.IMAGE_STREAM_GROUP, constants.IMAGE_STREAM_VERSION,
                namespace, constants.IMAGE_STREAM_PLURAL, self._manifest(namespace, stream),
            )
            logger.info(f"[Images] Created image stream '{stream.reference}' from '{stream.image}' in '{namespace}'.")
        except ApiException as e:
            if is_conflict(e):
                logger.debug(f"[Images] Image stream '{stream.name}' was created concurrently in '{namespace}'.")
                return
            raise ImageStreamError(f"Error setting up image stream '{stream.name}' in '{namespace}': {e.reason}") from e

    def _manifest(self, namespace: str, stream: ImageStreamRequirement) -> Dict[str, Any]:
        return {
            "apiVersion": f"{constants.IMAGE_STREAM_GROUP}/{constants.IMAGE_STREAM_VERSION}",
            "kind": constants.IMAGE_STREAM_KIND,
            "metadata": {"name": stream.name, "namespace": namespace},
            "spec": {
                "lookupPolicy": {"local": True},
                "tags": [
                    {
                        "name": stream.tag,
                        "from": {"kind": "DockerImage", "name": stream.image},
                        "importPolicy": {"insecure": self.images.insecure},
                        "referencePolicy": {"type": "Local"},
                    }
                ],
            },
        }
