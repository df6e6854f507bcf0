"""Discovery of the kubeconfig files to read and write, following kubectl."""

from __future__ import annotations

import os
import posixpath
import stat
import sys
from collections.abc import Callable, Iterable

KUBECONFIG_ENV = "KUBECONFIG"

GetEnv = Callable[[str], str]


def _current_goos() -> str:
    return "windows" if os.name == "nt" else sys.platform


def paths(explicit_path: str, get_env: GetEnv) -> list[str]:
    """Return the kubeconfig paths to consider.

    An explicit path wins outright; otherwise $KUBECONFIG is split on the
    platform path separator; otherwise $HOME/.kube/config is used.
    """
    if explicit_path:
        return [explicit_path]

    env_paths = discard_empty_and_duplicates(
        (get_env(KUBECONFIG_ENV) or "").split(os.pathsep)
    )
    if env_paths:
        return env_paths

    return [posixpath.join(home_dir(_current_goos(), get_env), ".kube", "config")]


def path_for_merge(explicit_path: str, get_env: GetEnv) -> str:
    """Return the file kubectl would merge into."""
    candidates = paths(explicit_path, get_env)
    if len(candidates) == 1:
        return candidates[0]
    return next(
        (filename for filename in candidates if file_exists(filename)),
        candidates[-1],
    )


def file_exists(filename: str) -> bool:
    """Return True if filename exists and is not a directory."""
    try:
        info = os.stat(filename)
    except OSError:
        return False
    return not stat.S_ISDIR(info.st_mode)


def discard_empty_and_duplicates(paths: Iterable[str]) -> list[str]:
    """Drop empty entries and repeats, keeping the first occurrence's order."""
    return list(dict.fromkeys(p for p in paths if p))


def _stat_or_none(path: str) -> os.stat_result | None:
    try:
        return os.stat(path)
    except OSError:
        return None


def home_dir(goos: str, get_env: GetEnv) -> str:
    """Return the home directory for the current user.

    On Windows the first of HOME, HOMEDRIVE+HOMEPATH, USERPROFILE holding a
    .kube/config file is preferred; then the first of HOME, USERPROFILE,
    HOMEDRIVE+HOMEPATH that is a writeable directory, then the first that
    exists, then the first that is set.
    """
    if goos != "windows":
        return get_env("HOME") or ""

    home = get_env("HOME") or ""
    home_drive, home_path = get_env("HOMEDRIVE") or "", get_env("HOMEPATH") or ""
    home_drive_home_path = home_drive + home_path if home_drive and home_path else ""
    user_profile = get_env("USERPROFILE") or ""

    for candidate in (home, home_drive_home_path, user_profile):
        if candidate and _stat_or_none(os.path.join(candidate, ".kube", "config")):
            return candidate

    first_set = ""
    first_existing = ""
    for candidate in (home, user_profile, home_drive_home_path):
        if not candidate:
            continue
        if not first_set:
            first_set = candidate
        info = _stat_or_none(candidate)
        if info is None:
            continue
        if not first_existing:
            first_existing = candidate
        if stat.S_ISDIR(info.st_mode) and info.st_mode & stat.S_IWUSR:
            return candidate

    return first_existing or first_set