from kindkube.loadbalancer import ConfigData, render_config


def _server_lines(text):
    return [line for line in text.splitlines() if line.startswith("  server ")]


def test_starts_with_generated_marker():
    out = render_config(ConfigData(control_plane_port=6443))
    assert out.splitlines()[0] == "# generated by kind"
    assert out.endswith("\n")


def test_ipv4_has_single_bind():
    out = render_config(ConfigData(control_plane_port=7443))
    lines = out.splitlines()
    assert "  bind *:7443" in lines
    assert ":::" not in out
    index = lines.index("  bind *:7443")
    assert lines[index + 1].strip() == ""
    assert lines[index + 2] == "  default_backend kube-apiservers"


def test_ipv6_adds_second_bind():
    out = render_config(ConfigData(control_plane_port=7443, ipv6=True))
    lines = out.splitlines()
    index = lines.index("  bind *:7443")
    assert lines[index + 1] == "  bind :::7443;"
    assert lines[index + 2] == "  default_backend kube-apiservers"


def test_server_lines_format():
    servers = {"kind-control-plane": "10.0.0.2:6443"}
    out = render_config(ConfigData(control_plane_port=6443, backend_servers=servers))
    assert _server_lines(out) == [
        "  server kind-control-plane 10.0.0.2:6443 check check-ssl verify none"
    ]


def test_servers_sorted_by_name():
    servers = {
        "node-c": "10.0.0.4:6443",
        "node-a": "10.0.0.2:6443",
        "node-b": "10.0.0.3:6443",
    }
    out = render_config(ConfigData(control_plane_port=6443, backend_servers=servers))
    names = [line.split()[1] for line in _server_lines(out)]
    assert names == sorted(servers)
    addresses = [line.split()[2] for line in _server_lines(out)]
    assert addresses == [servers[name] for name in sorted(servers)]


def test_no_servers_and_backend_section_last():
    out = render_config(ConfigData(control_plane_port=6443))
    assert _server_lines(out) == []
    lines = out.splitlines()
    assert lines.index("backend kube-apiservers") > lines.index("frontend control-plane")
    assert "  option httpchk GET /healthz" in lines


def test_same_input_same_output():
    servers = {"b": "[fd00::2]:6443", "a": "[fd00::1]:6443"}
    first = render_config(ConfigData(6443, dict(servers), True))
    second = render_config(ConfigData(6443, dict(reversed(list(servers.items()))), True))
    assert first == second