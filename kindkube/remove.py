"""Removing kind cluster entries from kubeconfig files."""

from __future__ import annotations

import os

from .files import locked, read_config, write_config
from .paths import paths
from .types import Config, kind_cluster_key


def remove(cfg: Config, kind_cluster_name: str) -> bool:
    """Drop the kind cluster's entries from cfg; return whether cfg changed."""
    key = kind_cluster_key(kind_cluster_name)
    mutated = False

    clusters = [c for c in cfg.clusters if c.name != key]
    users = [u for u in cfg.users if u.name != key]
    contexts = [c for c in cfg.contexts if c.name != key]
    if (len(clusters), len(users), len(contexts)) != (
        len(cfg.clusters),
        len(cfg.users),
        len(cfg.contexts),
    ):
        mutated = True
    cfg.clusters, cfg.users, cfg.contexts = clusters, users, contexts

    if cfg.current_context == key:
        cfg.current_context = ""
        mutated = True

    return mutated


def remove_kind(kind_cluster_name: str, explicit_path: str = "") -> None:
    """Remove the kind cluster from every kubeconfig file kubectl would use."""
    for config_path in paths(explicit_path, lambda key: os.environ.get(key, "")):
        with locked(config_path):
            existing = read_config(config_path)
            if remove(existing, kind_cluster_name):
                write_config(existing, config_path)