"""Merging a kind kubeconfig into an existing kubeconfig."""

from __future__ import annotations

import os
from typing import Protocol, TypeVar

from .files import locked, read_config, write_config
from .paths import path_for_merge
from .types import Config, check_kubeadm_expectations


class _Named(Protocol):
    name: str


_N = TypeVar("_N", bound=_Named)


def _upsert(entries: list[_N], entry: _N) -> list[_N]:
    """Replace entries named like entry, or append entry if there are none."""
    if any(existing.name == entry.name for existing in entries):
        return [entry if existing.name == entry.name else existing for existing in entries]
    return [*entries, entry]


def merge(existing: Config, kind: Config) -> None:
    """Merge the kind config into existing, in place, and select its context."""
    check_kubeadm_expectations(kind)
    existing.clusters = _upsert(existing.clusters, kind.clusters[0])
    existing.users = _upsert(existing.users, kind.users[0])
    existing.contexts = _upsert(existing.contexts, kind.contexts[0])
    existing.current_context = kind.current_context


def write_merged(kind_config: Config, explicit_config_path: str = "") -> None:
    """Write kind_config into the kubeconfig kubectl would merge into."""
    config_path = path_for_merge(
        explicit_config_path, lambda key: os.environ.get(key, "")
    )
    with locked(config_path):
        existing = read_config(config_path)
        merge(existing, kind_config)
        write_config(existing, config_path)