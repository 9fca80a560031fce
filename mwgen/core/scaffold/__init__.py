"""CRUD scaffold — service, repository and model skeletons for one entity."""

from .generator import ScaffoldSpec, build_spec, render_scaffold, write_scaffold

__all__ = ["ScaffoldSpec", "build_spec", "render_scaffold", "write_scaffold"]
