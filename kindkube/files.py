"""Reading, writing and locking kubeconfig files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager

import yaml

from .encode import encode
from .types import Config, KubeconfigError, check_kubeadm_expectations, kind_cluster_key


def _parse(raw: str | bytes) -> Config:
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise KubeconfigError(f"failed to parse kubeconfig: {exc}") from exc
    return Config.from_dict(data)


def kind_from_raw_kubeadm(
    raw_kubeadm_kubeconfig: str, cluster_name: str, server: str = ""
) -> Config:
    """Derive a kind kubeconfig from a kubeadm one; server is applied if set."""
    cfg = _parse(raw_kubeadm_kubeconfig)
    check_kubeadm_expectations(cfg)

    key = kind_cluster_key(cluster_name)
    cfg.clusters[0].name = key
    cfg.users[0].name = key
    cfg.contexts[0].name = key
    cfg.contexts[0].context.user = key
    cfg.contexts[0].context.cluster = key
    cfg.current_context = key

    if server:
        cfg.clusters[0].cluster.server = server
    return cfg


def read_config(config_path: str | os.PathLike) -> Config:
    """Load a kubeconfig file, or an empty config if it does not exist."""
    try:
        with open(config_path, "rb") as handle:
            raw = handle.read()
    except FileNotFoundError:
        return Config()
    except OSError as exc:
        raise KubeconfigError(f"failed to read {config_path}: {exc}") from exc
    return _parse(raw)


def _ensure_parent(path: str | os.PathLike) -> None:
    parent = os.path.dirname(os.fspath(path)) or "."
    if not os.path.exists(parent):
        os.makedirs(parent, mode=0o755, exist_ok=True)


def write_config(cfg: Config, config_path: str | os.PathLike) -> None:
    """Encode cfg and write it to config_path, creating directories as needed."""
    encoded = encode(cfg)
    try:
        _ensure_parent(config_path)
    except OSError as exc:
        raise KubeconfigError(f"failed to create directory for KUBECONFIG: {exc}") from exc
    try:
        fd = os.open(config_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(encoded)
    except OSError as exc:
        raise KubeconfigError(f"failed to write KUBECONFIG: {exc}") from exc


def lock_name(filename: str | os.PathLike) -> str:
    """Return the name of the lock file for filename."""
    return os.fspath(filename) + ".lock"


def lock_file(filename: str | os.PathLike) -> None:
    """Create the lock file for filename; fails if it already exists."""
    _ensure_parent(filename)
    fd = os.open(lock_name(filename), os.O_CREAT | os.O_EXCL | os.O_WRONLY, 0)
    os.close(fd)


def unlock_file(filename: str | os.PathLike) -> None:
    """Remove the lock file for filename."""
    os.remove(lock_name(filename))


@contextmanager
def locked(filename: str | os.PathLike) -> Iterator[None]:
    """Hold the lock on filename for the duration of the block."""
    try:
        lock_file(filename)
    except OSError as exc:
        raise KubeconfigError(f"failed to lock config file: {exc}") from exc
    try:
        yield
    finally:
        try:
            unlock_file(filename)
        except OSError:
            pass