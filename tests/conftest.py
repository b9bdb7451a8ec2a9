import pytest
from kubernetes.client.rest import ApiException

from kogitosteps.config import ExamplesModel, ImagesModel, MavenModel, OperatorModel


class FakeCluster:
    """In-memory stand-in for ClusterClient recording every call."""

    def __init__(self):
        self.api_client = object()
        self.objects = {}
        self.calls = []
        self.failures = {}

    def fail(self, plural: str, status: int, reason: str = "Boom"):
        self.failures[plural] = (status, reason)

    def _check_failure(self, plural: str):
        if plural in self.failures:
            status, reason = self.failures[plural]
            raise ApiException(status=status, reason=reason)

    def get(self, group, version, namespace, plural, name):
        self.calls.append(("get", plural, namespace, name))
        self._check_failure(plural)
        return self.objects.get((plural, namespace, name))

    def create(self, group, version, namespace, plural, body):
        name = body["metadata"]["name"]
        self.calls.append(("create", plural, namespace, name))
        self._check_failure(plural)
        key = (plural, namespace, name)
        if key in self.objects:
            raise ApiException(status=409, reason="AlreadyExists")
        self.objects[key] = body
        return body

    def created(self, plural: str):
        return [call for call in self.calls if call[0] == "create" and call[1] == plural]


@pytest.fixture
def cluster():
    return FakeCluster()


@pytest.fixture
def examples():
    return ExamplesModel(uri="https://github.com/kiegroup/kogito-examples", ref="")


@pytest.fixture
def maven():
    return MavenModel()


@pytest.fixture
def images():
    return ImagesModel(registry="quay.io", namespace="kiegroup", version="1.5")


@pytest.fixture
def operator(tmp_path):
    return OperatorModel(installer="yaml", manifests=str(tmp_path / "operator.yaml"))
