"""
Kogito Steps Builder Module

- TableMapper: Scenario table to build spec mapping
- BuildResolver: Build stub resolution for example and binary builds
- ImageStreamProvisioner: Image stream setup before dispatch

Usage:
    from kogitosteps.builder import BuildResolver, ImageStreamProvisioner

    resolver = BuildResolver(config.examples, config.maven)
    holder = resolver.resolve_binary_build("quarkus", "my-service", "my-namespace", table)
"""

from .mapper import TableMapper, rows_from_table
from .resolve import BuildResolver, service_name_from_context_dir
from .images import ImageStreamProvisioner

__all__ = [
    'TableMapper',
    'rows_from_table',
    'BuildResolver',
    'service_name_from_context_dir',
    'ImageStreamProvisioner',
]
