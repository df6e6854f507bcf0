# kindkube

A library for managing the kubeconfig entries and supporting files of local
Kubernetes clusters that are named `kind-<name>` in kubeconfig files.

## Modules

- **`kindkube.types`**: the kubeconfig model. It has `Config`,
  `NamedCluster`, `NamedUser`, `NamedContext`, `Cluster` and `Context`, and
  each has `from_dict` and `to_dict`. The package keeps fields it does not use
  in `other_fields`, or in `NamedUser.user`, and writes them back unchanged.
  `kind_cluster_key(name)` returns `"kind-" + name`.
  `check_kubeadm_expectations(cfg)` raises `KubeconfigError` unless the
  config has exactly one cluster, one user and one context.
- **`kindkube.encode`**: `encode(cfg)` returns YAML text with sorted keys.
  An empty config encodes to `""`.
- **`kindkube.files`**:
  - `kind_from_raw_kubeadm(raw, cluster_name, server)` parses a kubeadm
    `admin.conf`. It renames the cluster, user and context, and the current
    context, to `kind-<cluster_name>`. When `server` is set it replaces the
    server address.
  - `read_config(path)` loads a file. A missing file gives an empty `Config`.
  - `write_config(cfg, path)` writes the file with mode 0600 and creates any
    missing parent directories.
  - `lock_file`, `unlock_file` and `lock_name` manage a `<file>.lock` lock
    file, which is created exclusively. `locked(path)` is a context manager
    that holds the lock for the duration of a block.
- **`kindkube.paths`**: works out which kubeconfig files to use.
  - `paths(explicit_path, get_env)` returns the explicit path if one is
    given. Otherwise it returns the `$KUBECONFIG` entries, split on the
    platform path separator, with empty entries and duplicates dropped.
    Otherwise it returns `$HOME/.kube/config`.
  - `path_for_merge` returns the first of those files that exists, or else
    the last one.
  - `home_dir(goos, get_env)` applies the Windows rules for `HOME`,
    `HOMEDRIVE`/`HOMEPATH` and `USERPROFILE`, and returns `$HOME` on every
    other system.
- **`kindkube.merge`**:
  - `merge(existing, kind)` replaces the entries in `existing` that have the
    same names as those in `kind`, or appends them if there are none. It then
    sets the current context.
  - `write_merged(kind_config, explicit_path)` takes the lock, reads the
    target file, merges into it and writes it back.
- **`kindkube.remove`**:
  - `remove(cfg, name)` drops every `kind-<name>` entry and clears the current
    context if it pointed at that cluster. It returns whether anything
    changed.
  - `remove_kind(name, explicit_path)` does this for every kubeconfig file
    that applies. It writes back only the files that changed.
- **`kindkube.loadbalancer`**: `render_config(ConfigData(control_plane_port,
  backend_servers, ipv6))` returns an HAProxy configuration.
  - Backend servers are listed in order of their names.
  - When `ipv6` is true, an extra IPv6 bind line is added.
  - `IMAGE` holds the load balancer image and `CONFIG_PATH` holds the path of
    the configuration file inside it.
- **`kindkube.logs`**: `untar(reader, directory)` reads a tar stream and
  writes its regular files and directories into `directory`.
  - Parent directories of files are not created.
  - Other entry types are logged as warnings and skipped.
  - Read and write failures raise `OSError`.

## Example

```python
from kindkube.files import kind_from_raw_kubeadm
from kindkube.merge import write_merged
from kindkube.remove import remove_kind

with open("admin.conf") as f:
    cfg = kind_from_raw_kubeadm(f.read(), "dev", "https://127.0.0.1:6443")

write_merged(cfg, "")   # merge into $KUBECONFIG or ~/.kube/config
remove_kind("dev", "")  # and remove it again later
```

## What it does not do

This is a library only, with no command-line tool. It does not cover:

- creating or deleting clusters;
- running containers;
- talking to Docker or to the nodes;
- fetching `admin.conf` from a node;
- installing the load balancer configuration;
- collecting logs.

Callers supply the kubeconfig text and the tar streams themselves.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```