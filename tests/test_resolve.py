import pytest

from kogitosteps.builder import BuildResolver, service_name_from_context_dir
from kogitosteps.config import ExamplesModel, MavenModel
from kogitosteps.constants import BuildType, RuntimeType
from kogitosteps.exceptions import (
    BuildDefinitionError,
    ResolutionError,
    UnrecognizedCategoryError,
)


@pytest.fixture
def resolver(examples, maven):
    return BuildResolver(examples, maven)


@pytest.mark.parametrize("context_dir, expected", [
    ("examples/my-service", "my-service"),
    ("examples/my-service/", "my-service"),
    ("my-service", "my-service"),
    ("a/b/c/process-quarkus-example", "process-quarkus-example"),
])
def test_service_name_from_context_dir(context_dir, expected):
    assert service_name_from_context_dir(context_dir) == expected


class TestResolve:

    def test_stub_binds_name_and_namespace(self, resolver):
        holder = resolver.resolve("quarkus", "svc", "ns-1")
        assert holder.build.name == "svc"
        assert holder.build.namespace == "ns-1"
        assert holder.runtime.name == "svc"
        assert holder.runtime.namespace == "ns-1"
        assert holder.build.spec.runtime == RuntimeType.QUARKUS
        assert holder.runtime.spec.runtime == RuntimeType.QUARKUS
        assert holder.runtime.spec.replicas == 1
        assert holder.runtime.spec.image == ""

    def test_default_spec_is_empty(self, resolver):
        spec = resolver.resolve("springboot", "svc", "ns").build.spec
        assert spec.type is None
        assert spec.git_source is None
        assert spec.native is False
        assert spec.resources.requests == {}
        assert spec.resources.limits == {}
        assert spec.env == {}
        assert spec.maven_mirror_url is None

    def test_table_is_applied(self, resolver):
        holder = resolver.resolve("quarkus", "svc", "ns", [["build-request", "cpu", "1"]])
        assert holder.build.spec.resources.requests == {"cpu": "1"}

    def test_mapping_failure_keeps_partial_holder(self, resolver):
        with pytest.raises(ResolutionError) as exc_info:
            resolver.resolve("quarkus", "svc", "ns", [["native", "enabled", ""], ["oops", "a", "b"]])
        error = exc_info.value
        assert isinstance(error.__cause__, UnrecognizedCategoryError)
        assert error.holder is not None
        assert error.holder.build.spec.native is True

    def test_unknown_runtime_raises(self, resolver):
        with pytest.raises(BuildDefinitionError, match="Unsupported runtime 'micronaut'"):
            resolver.resolve("micronaut", "svc", "ns")

    def test_empty_service_name_raises(self, resolver):
        with pytest.raises(BuildDefinitionError, match="Service name cannot be empty"):
            resolver.resolve("quarkus", "", "ns")

    def test_maven_settings_reach_build_stub(self, examples):
        maven = MavenModel(
            mirror_url="http://nexus/mirror",
            custom_repo_url="http://nexus/repo",
            ignore_self_signed_certificate=True,
        )
        spec = BuildResolver(examples, maven).resolve("quarkus", "svc", "ns").build.spec
        assert spec.maven_mirror_url == "http://nexus/mirror"
        assert spec.env == {
            "MAVEN_REPO_URL": "http://nexus/repo",
            "MAVEN_IGNORE_SELF_SIGNED_CERTIFICATE": "true",
        }

    def test_table_config_overrides_maven_stub_env(self, examples):
        maven = MavenModel(custom_repo_url="http://nexus/repo")
        holder = BuildResolver(examples, maven).resolve_binary_build(
            "quarkus", "svc", "ns", [["config", "MAVEN_REPO_URL", "http://from-table"]]
        )
        manifest = holder.build.to_manifest()
        assert manifest["spec"]["env"] == [{"name": "MAVEN_REPO_URL", "value": "http://from-table"}]


class TestExampleBuild:

    def test_remote_source_from_context_dir(self, resolver, examples):
        holder = resolver.resolve_example_build("quarkus", "examples/my-service", "ns")
        spec = holder.build.spec
        assert holder.build.name == "my-service"
        assert spec.type == BuildType.REMOTE_SOURCE
        assert spec.git_source.uri == examples.uri
        assert spec.git_source.context_dir == "examples/my-service"
        assert spec.git_source.reference is None

    def test_reference_set_when_configured(self):
        resolver = BuildResolver(ExamplesModel(uri="https://example.com/repo.git", ref="main"))
        spec = resolver.resolve_example_build("springboot", "examples/my-service", "ns").build.spec
        assert spec.git_source.uri == "https://example.com/repo.git"
        assert spec.git_source.reference == "main"

    def test_native_table_on_example_build(self, resolver, examples):
        spec = resolver.resolve_example_build(
            "quarkus", "process-quarkus-example", "ns", [["native", "enabled", "true"]]
        ).build.spec
        assert spec.type == BuildType.REMOTE_SOURCE
        assert spec.native is True
        assert spec.git_source.uri == examples.uri
        assert spec.git_source.context_dir == "process-quarkus-example"

    def test_mapping_failure_raises_before_source_is_set(self, resolver):
        with pytest.raises(ResolutionError) as exc_info:
            resolver.resolve_example_build("quarkus", "examples/svc", "ns", [["bad", "x", "y"]])
        assert exc_info.value.holder.build.spec.git_source is None


class TestBinaryBuild:

    @pytest.mark.parametrize("table", [
        None,
        [],
        [["config", "gitSource", "https://example.com"]],
        [["native", "enabled", "true"], ["build-limit", "memory", "2Gi"]],
    ])
    def test_never_has_git_source(self, resolver, table):
        holder = resolver.resolve_binary_build("quarkus", "svc", "ns", table)
        assert holder.build.spec.type == BuildType.BINARY
        assert holder.build.spec.git_source is None
        assert holder.build.name == "svc"
