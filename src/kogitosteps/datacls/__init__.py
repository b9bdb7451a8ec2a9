"""
Kogito Steps Data Classes

- build: KogitoBuild resource and its spec
- runtime: KogitoRuntime placeholder and probe settings
- holders: BuildHolder pairing a build with its runtime
"""

from .build import GitSource, ResourceRequirements, KogitoBuildSpec, KogitoBuild
from .runtime import KogitoProbe, KogitoRuntimeSpec, KogitoRuntime
from .holders import BuildHolder

__all__ = [
    'GitSource',
    'ResourceRequirements',
    'KogitoBuildSpec',
    'KogitoBuild',
    'KogitoProbe',
    'KogitoRuntimeSpec',
    'KogitoRuntime',
    'BuildHolder',
]
