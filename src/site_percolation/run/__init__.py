"""YAML-defined runs over a directory of site files."""

from .manifest import RunConfig, RunManifest

__all__ = ['RunConfig', 'RunManifest']
