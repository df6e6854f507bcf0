"""Encoding of kubeconfigs to normalized YAML."""

from __future__ import annotations

import yaml

from .types import Config, KubeconfigError


def encode(cfg: Config) -> str:
    """Encode cfg as YAML with sorted keys; an empty config encodes to ""."""
    data = cfg.to_dict()
    if not data:
        return ""
    try:
        return yaml.safe_dump(
            data,
            default_flow_style=False,
            sort_keys=True,
            allow_unicode=True,
            width=2**31 - 1,
        )
    except yaml.YAMLError as exc:
        raise KubeconfigError(f"failed to encode KUBECONFIG: {exc}") from exc