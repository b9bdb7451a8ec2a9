import pytest

from kogitosteps.builder import BuildResolver, ImageStreamProvisioner
from kogitosteps.config import ImagesModel
from kogitosteps.exceptions import ImageStreamError


@pytest.fixture
def resolver(examples):
    return BuildResolver(examples)


@pytest.fixture
def provisioner(cluster, images):
    return ImageStreamProvisioner(cluster, images)


class TestRequiredStreams:

    def test_quarkus_jvm(self, provisioner, resolver):
        build = resolver.resolve_binary_build("quarkus", "svc", "ns").build
        names = [stream.name for stream in provisioner.required_streams(build)]
        assert names == ["kogito-builder", "kogito-runtime-jvm"]

    def test_quarkus_native(self, provisioner, resolver):
        build = resolver.resolve_binary_build("quarkus", "svc", "ns", [["native", "enabled", ""]]).build
        names = [stream.name for stream in provisioner.required_streams(build)]
        assert names == ["kogito-builder", "kogito-runtime-native"]

    def test_springboot_native_falls_back_to_jvm(self, provisioner, resolver, caplog):
        build = resolver.resolve_binary_build("springboot", "svc", "ns", [["native", "enabled", ""]]).build
        names = [stream.name for stream in provisioner.required_streams(build)]
        assert names == ["kogito-builder", "kogito-runtime-jvm"]
        assert "only supported for Quarkus" in caplog.text

    def test_springboot_native_is_submitted_as_jvm(self, provisioner, resolver):
        build = resolver.resolve_binary_build("springboot", "svc", "ns", [["native", "enabled", ""]]).build
        provisioner.ensure(build)
        assert build.spec.native is False
        assert build.to_manifest()["spec"]["native"] is False
        assert build.spec.runtime_image == "kogito-runtime-jvm:1.5"

    def test_quarkus_native_is_kept(self, provisioner, resolver):
        build = resolver.resolve_binary_build("quarkus", "svc", "ns", [["native", "enabled", ""]]).build
        provisioner.ensure(build)
        assert build.spec.native is True
        assert build.spec.runtime_image == "kogito-runtime-native:1.5"

    def test_images_come_from_registry(self, provisioner, resolver):
        build = resolver.resolve_binary_build("quarkus", "svc", "ns").build
        builder, runtime = provisioner.required_streams(build)
        assert builder.image == "quay.io/kiegroup/kogito-builder:1.5"
        assert runtime.image == "quay.io/kiegroup/kogito-runtime-jvm:1.5"
        assert builder.reference == "kogito-builder:1.5"

    def test_override_images(self, cluster, resolver):
        images = ImagesModel(version="7.11", builder_image="registry.local/builder:dev", runtime_image="registry.local/runtime:dev")
        build = resolver.resolve_binary_build("quarkus", "svc", "ns").build
        builder, runtime = ImageStreamProvisioner(cluster, images).required_streams(build)
        assert builder.image == "registry.local/builder:dev"
        assert runtime.image == "registry.local/runtime:dev"
        assert runtime.tag == "7.11"


class TestEnsure:

    def test_creates_missing_streams_and_sets_images(self, provisioner, resolver, cluster):
        build = resolver.resolve_binary_build("quarkus", "svc", "ns").build
        provisioner.ensure(build)

        assert [call[3] for call in cluster.created("imagestreams")] == ["kogito-builder", "kogito-runtime-jvm"]
        assert build.spec.build_image == "kogito-builder:1.5"
        assert build.spec.runtime_image == "kogito-runtime-jvm:1.5"

        body = cluster.objects[("imagestreams", "ns", "kogito-builder")]
        assert body["kind"] == "ImageStream"
        assert body["spec"]["tags"][0]["name"] == "1.5"
        assert body["spec"]["tags"][0]["from"] == {"kind": "DockerImage", "name": "quay.io/kiegroup/kogito-builder:1.5"}

    def test_is_idempotent(self, provisioner, resolver, cluster):
        build = resolver.resolve_binary_build("quarkus", "svc", "ns").build
        provisioner.ensure(build)
        provisioner.ensure(build)
        assert len(cluster.created("imagestreams")) == 2

    def test_conflict_on_create_is_not_an_error(self, provisioner, resolver, cluster):
        build = resolver.resolve_binary_build("quarkus", "svc", "ns").build
        # stream appears between lookup and create
        cluster.get = lambda *args: None
        cluster.objects[("imagestreams", "ns", "kogito-builder")] = {}
        provisioner.ensure(build)
        assert ("imagestreams", "ns", "kogito-runtime-jvm") in cluster.objects

    def test_cluster_failure_raises(self, provisioner, resolver, cluster):
        cluster.fail("imagestreams", 403, "Forbidden")
        build = resolver.resolve_binary_build("quarkus", "svc", "ns").build
        with pytest.raises(ImageStreamError, match="Forbidden"):
            provisioner.ensure(build)
