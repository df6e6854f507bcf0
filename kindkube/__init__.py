"""Kubeconfig merging and removal, HAProxy config rendering and tar unpacking for local clusters."""

__version__ = "0.1.0"

__all__ = ["encode", "files", "loadbalancer", "logs", "merge", "paths", "remove", "types"]