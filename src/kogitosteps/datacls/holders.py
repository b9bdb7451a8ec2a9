from pydantic import BaseModel

from .build import KogitoBuild
from .runtime import KogitoRuntime


class BuildHolder(BaseModel):
    """
        Class pairs a build with the runtime placeholder that will run its artifact.
        Owned by the scenario step that created it.
    """
    build: KogitoBuild
    runtime: KogitoRuntime

    @property
    def name(self) -> str:
        return self.build.name

    @property
    def namespace(self) -> str:
        return self.build.namespace
