from kindkube.files import read_config, write_config
from kindkube.remove import remove, remove_kind
from kindkube.types import (
    Cluster,
    Config,
    Context,
    NamedCluster,
    NamedContext,
    NamedUser,
)

DOC_FIELDS = {"apiVersion": "v1", "kind": "Config", "preferences": {}}


def _entries(name):
    cluster = NamedCluster(
        name=name,
        cluster=Cluster(
            server="https://10.20.30.40:6443",
            other_fields={"certificate-authority-data": "example-ca"},
        ),
    )
    user = NamedUser(
        name=name,
        user={"client-certificate-data": "example-cert", "client-key-data": "example-key"},
    )
    context = NamedContext(name=name, context=Context(cluster=name, user=name))
    return cluster, user, context


def _config(names, current):
    clusters, users, contexts = [], [], []
    for name in names:
        cluster, user, context = _entries(name)
        clusters.append(cluster)
        users.append(user)
        contexts.append(context)
    return Config(
        clusters=clusters,
        users=users,
        contexts=contexts,
        current_context=current,
        other_fields=dict(DOC_FIELDS),
    )


def test_remove_empty_config():
    cfg = Config()
    assert remove(cfg, "foo") is False
    assert cfg == Config()


def test_remove_kind_from_only_kind():
    cfg = Config(
        clusters=[NamedCluster(name="kind-kind")],
        users=[NamedUser(name="kind-kind")],
        contexts=[NamedContext(name="kind-kind")],
    )
    assert remove(cfg, "kind") is True
    assert cfg == Config(clusters=[], users=[], contexts=[])


def test_remove_kind_leave_other():
    cfg = Config(
        clusters=[
            NamedCluster(name="other-one", cluster=Cluster(server="foo")),
            NamedCluster(name="kind-kind"),
        ],
        users=[NamedUser(name="other-one"), NamedUser(name="kind-kind")],
        contexts=[NamedContext(name="other-one"), NamedContext(name="kind-kind")],
        current_context="kind-kind",
    )
    assert remove(cfg, "kind") is True
    assert cfg == Config(
        clusters=[NamedCluster(name="other-one", cluster=Cluster(server="foo"))],
        users=[NamedUser(name="other-one")],
        contexts=[NamedContext(name="other-one")],
        current_context="",
    )


def test_remove_only_current_context_counts_as_change():
    cfg = Config(current_context="kind-kind")
    assert remove(cfg, "kind") is True
    assert cfg.current_context == ""


def test_remove_kind_only_kind(tmp_path):
    path = tmp_path / "existing-kubeconfig"
    write_config(_config(["kind-foo"], "kind-foo"), path)
    remove_kind("foo", str(path))
    assert path.read_text() == "apiVersion: v1\nkind: Config\npreferences: {}\n"
    assert not (tmp_path / "existing-kubeconfig.lock").exists()


def test_remove_kind_leave_another_cluster(tmp_path):
    path = tmp_path / "existing-kubeconfig"
    write_config(_config(["kind-foo", "other-foo"], "other-foo"), path)
    remove_kind("foo", str(path))
    assert read_config(path) == _config(["other-foo"], "other-foo")
    text = path.read_text()
    assert text.startswith("apiVersion: v1\nclusters:\n")
    assert "kind-foo" not in text
    assert "current-context: other-foo\n" in text


def test_remove_kind_unmodified_file_left_untouched(tmp_path):
    path = tmp_path / "existing-kubeconfig"
    original = (
        "kind: Config\n"
        "apiVersion: v1\n"
        "current-context: other-foo\n"
        "clusters:\n"
        "- name: other-foo\n"
        "  cluster:\n"
        "    server: https://10.20.30.40:6443\n"
    )
    path.write_text(original)
    remove_kind("absent", str(path))
    assert path.read_text() == original