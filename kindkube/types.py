"""Kubeconfig data model with the fields kind inspects or modifies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class KubeconfigError(Exception):
    """Raised when a kubeconfig cannot be read, checked, encoded or written."""


def _mapping(data: Any, what: str) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise KubeconfigError(f"{what} must be a mapping, got {type(data).__name__}")
    return data


def _sequence(data: Any, what: str) -> list:
    if data is None:
        return []
    if not isinstance(data, list):
        raise KubeconfigError(f"{what} must be a list, got {type(data).__name__}")
    return data


def _string(data: Any, what: str) -> str:
    if data is None:
        return ""
    if not isinstance(data, str):
        raise KubeconfigError(f"{what} must be a string, got {type(data).__name__}")
    return data


def _others(data: dict, known: tuple[str, ...]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if key not in known}


@dataclass
class Cluster:
    """How to communicate with a kubernetes cluster."""

    server: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Cluster:
        data = _mapping(data, "cluster")
        return cls(
            server=_string(data.get("server"), "cluster.server"),
            other_fields=_others(data, ("server",)),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = dict(self.other_fields)
        if self.server:
            result["server"] = self.server
        return result


@dataclass
class NamedCluster:
    """A cluster entry under a nickname."""

    name: str = ""
    cluster: Cluster = field(default_factory=Cluster)

    @classmethod
    def from_dict(cls, data: Any) -> NamedCluster:
        data = _mapping(data, "clusters entry")
        return cls(
            name=_string(data.get("name"), "clusters entry name"),
            cluster=Cluster.from_dict(data.get("cluster")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "cluster": self.cluster.to_dict()}


@dataclass
class NamedUser:
    """A user entry under a nickname; the user data is kept as is."""

    name: str = ""
    user: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> NamedUser:
        data = _mapping(data, "users entry")
        return cls(
            name=_string(data.get("name"), "users entry name"),
            user=dict(_mapping(data.get("user"), "user")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "user": dict(self.user)}


@dataclass
class Context:
    """References to a cluster and a user, plus any other context data."""

    cluster: str = ""
    user: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Context:
        data = _mapping(data, "context")
        return cls(
            cluster=_string(data.get("cluster"), "context.cluster"),
            user=_string(data.get("user"), "context.user"),
            other_fields=_others(data, ("cluster", "user")),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = dict(self.other_fields)
        result["cluster"] = self.cluster
        result["user"] = self.user
        return result


@dataclass
class NamedContext:
    """A context entry under a nickname."""

    name: str = ""
    context: Context = field(default_factory=Context)

    @classmethod
    def from_dict(cls, data: Any) -> NamedContext:
        data = _mapping(data, "contexts entry")
        return cls(
            name=_string(data.get("name"), "contexts entry name"),
            context=Context.from_dict(data.get("context")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "context": self.context.to_dict()}


@dataclass
class Config:
    """A KUBECONFIG; fields not inspected are kept for writing back."""

    clusters: list[NamedCluster] = field(default_factory=list)
    users: list[NamedUser] = field(default_factory=list)
    contexts: list[NamedContext] = field(default_factory=list)
    current_context: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    _KNOWN = ("clusters", "users", "contexts", "current-context")

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        data = _mapping(data, "kubeconfig")
        return cls(
            clusters=[
                NamedCluster.from_dict(item)
                for item in _sequence(data.get("clusters"), "clusters")
            ],
            users=[
                NamedUser.from_dict(item)
                for item in _sequence(data.get("users"), "users")
            ],
            contexts=[
                NamedContext.from_dict(item)
                for item in _sequence(data.get("contexts"), "contexts")
            ],
            current_context=_string(data.get("current-context"), "current-context"),
            other_fields=_others(data, cls._KNOWN),
        )

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = dict(self.other_fields)
        if self.clusters:
            result["clusters"] = [c.to_dict() for c in self.clusters]
        if self.users:
            result["users"] = [u.to_dict() for u in self.users]
        if self.contexts:
            result["contexts"] = [c.to_dict() for c in self.contexts]
        if self.current_context:
            result["current-context"] = self.current_context
        return result


def kind_cluster_key(cluster_name: str) -> str:
    """Return the key identifying a kind cluster in kubeconfig files."""
    return "kind-" + cluster_name


def check_kubeadm_expectations(cfg: Config) -> None:
    """Check that a kubeadm kubeconfig has exactly one of each entry."""
    if len(cfg.clusters) != 1:
        raise KubeconfigError(
            f"kubeadm KUBECONFIG should have one cluster, but read {len(cfg.clusters)}"
        )
    if len(cfg.users) != 1:
        raise KubeconfigError(
            f"kubeadm KUBECONFIG should have one user, but read {len(cfg.users)}"
        )
    if len(cfg.contexts) != 1:
        raise KubeconfigError(
            f"kubeadm KUBECONFIG should have one context, but read {len(cfg.contexts)}"
        )