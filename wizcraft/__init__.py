"""Wizcraft -- interactive project scaffolder.

Prompts for project parameters, runs an external project generator, builds
the result, writes a Dockerfile and builds a container image from it.
"""

__version__ = "0.1.0"
