from enum import Enum

# --- Log and Debug ---
# Short aliases for module names to keep CLI/env concise
LOG_ALIAS_MAP = {
    "map": "kogitosteps.builder.mapper",
    "mapper": "kogitosteps.builder.mapper",
    "resolve": "kogitosteps.builder.resolve",
    "res": "kogitosteps.builder.resolve",
    "img": "kogitosteps.builder.images",
    "images": "kogitosteps.builder.images",
    "deploy": "kogitosteps.cluster.deploy",
    "dpl": "kogitosteps.cluster.deploy",
    "install": "kogitosteps.cluster.installers",
    "inst": "kogitosteps.cluster.installers",
    "kube": "kogitosteps.cluster.client",
    "conf": "kogitosteps.config",
    "steps": "kogitosteps.steps",
    "rty": "kogitosteps.registry",
}

# Top-level modules within kogitosteps for auto-prefixing
KNOWN_TOP_MODULES = {
    "builder",
    "cluster",
    "datacls",
    "utils",
    "exceptions",
    "config",
    "registry",
    "steps",
}

LOG_LEVELS_ENV = "KOGITO_STEPS_LOG_LEVELS"
CONFIG_PATH_ENV = "KOGITO_STEPS_CONFIG"


class RuntimeType(str, Enum):
    QUARKUS = "quarkus"
    SPRINGBOOT = "springboot"


class BuildType(str, Enum):
    REMOTE_SOURCE = "RemoteSource"
    BINARY = "Binary"


# --- Scenario table keys ---
# DataTable for KogitoBuild:
# | config        | <property> | value            |
# | config        | native     | enabled/disabled |
# | native        | enabled/disabled | ignored    |
# | build-request | cpu/memory | value            |
# | build-limit   | cpu/memory | value            |
TABLE_CONFIG = "config"
TABLE_NATIVE = "native"
TABLE_BUILD_REQUEST = "build-request"
TABLE_BUILD_LIMIT = "build-limit"

NATIVE_ENABLED = "enabled"
NATIVE_DISABLED = "disabled"
CONFIG_NATIVE_KEY = "native"

RESOURCE_CPU = "cpu"
RESOURCE_MEMORY = "memory"
RESOURCE_KEYS = (RESOURCE_CPU, RESOURCE_MEMORY)

# --- Custom resources ---
KOGITO_GROUP = "rhpam.kiegroup.org"
KOGITO_VERSION = "v1"
KOGITO_BUILD_KIND = "KogitoBuild"
KOGITO_BUILD_PLURAL = "kogitobuilds"
KOGITO_RUNTIME_KIND = "KogitoRuntime"
KOGITO_RUNTIME_PLURAL = "kogitoruntimes"

IMAGE_STREAM_GROUP = "image.openshift.io"
IMAGE_STREAM_VERSION = "v1"
IMAGE_STREAM_KIND = "ImageStream"
IMAGE_STREAM_PLURAL = "imagestreams"

OLM_GROUP = "operators.coreos.com"
OPERATOR_GROUP_VERSION = "v1"
OPERATOR_GROUP_PLURAL = "operatorgroups"
SUBSCRIPTION_VERSION = "v1alpha1"
SUBSCRIPTION_PLURAL = "subscriptions"

# --- Image streams ---
BUILDER_IMAGE_STREAM = "kogito-builder"
RUNTIME_JVM_IMAGE_STREAM = "kogito-runtime-jvm"
RUNTIME_NATIVE_IMAGE_STREAM = "kogito-runtime-native"

# --- Build environment ---
MAVEN_REPO_URL_ENV = "MAVEN_REPO_URL"
MAVEN_IGNORE_SELF_SIGNED_CERTIFICATE_ENV = "MAVEN_IGNORE_SELF_SIGNED_CERTIFICATE"

DEFAULT_EXAMPLES_REPOSITORY_URI = "https://github.com/kiegroup/kogito-examples"
DEFAULT_OPERATOR_MANIFESTS = "deploy/operator.yaml"
