"""Workflow level bookkeeping for one work unit.

This package holds:
- the resolved form of each argument
- the output/companion propagator with its explicit publish step
- the work unit handler that drives a single pass over a tool's arguments
- rendering of the default inputs manifest

A handler and its propagator are single use; process each work unit with fresh
instances.
"""

__all__: list[str] = []
