from pathlib import Path

import pytest

from auditor.cli import load_registries
from auditor.probes import Probe, ProbeRegistry, RegistryError
from auditor.severity import Severity


def make_probe(**overrides):
    fields = {
        "id": "demo.console",
        "label": "console.log",
        "pattern": r"console\.log\(",
        "severity": Severity.WARN,
        "description": "console.log left in code",
        "remediation": "use a logger",
    }
    fields.update(overrides)
    return Probe(**fields)


def test_invalid_pattern_is_rejected():
    with pytest.raises(RegistryError):
        make_probe(pattern="(unclosed")


def test_empty_pattern_is_rejected():
    with pytest.raises(RegistryError):
        make_probe(pattern="")


def test_exclude_pattern_suppresses_match():
    probe = make_probe(pattern=r"#[0-9a-f]{3}\b", exclude=r"^\s*//")

    assert probe.matches("color: #fff;")
    assert not probe.matches("  // color: #fff;")


def test_extension_narrowing():
    probe = make_probe(extensions=(".js",))

    assert probe.accepts(Path("a.js"))
    assert not probe.accepts(Path("a.mjs"))
    assert make_probe().accepts(Path("anything.txt"))


def test_hint_and_pass_message():
    probe = make_probe()

    assert probe.hint == "console.log left in code -> use a logger"
    assert probe.ok_message == "No console.log found"
    assert make_probe(remediation="").hint == "console.log left in code"
    assert make_probe(pass_message="All clear").ok_message == "All clear"


def test_registry_rejects_duplicate_probe_ids():
    with pytest.raises(RegistryError):
        ProbeRegistry(id="demo", title="Demo", probes=(make_probe(), make_probe()))


def test_registry_requires_probes():
    with pytest.raises(RegistryError):
        ProbeRegistry(id="demo", title="Demo", probes=())


def test_builtin_registries_are_well_formed():
    registries = load_registries()
    registry_ids = [registry.id for registry in registries]
    probe_ids = [probe.id for registry in registries for probe in registry.probes]

    assert len(registry_ids) == len(set(registry_ids))
    assert len(probe_ids) == len(set(probe_ids))
    assert "node-deprecated-apis" in registry_ids
    for registry in registries:
        for probe in registry.probes:
            assert probe.severity is not Severity.OK
            assert probe.regex.pattern == probe.pattern


def test_builtin_patterns_match_known_samples():
    samples = {
        "node.url-parse": "const u = url.parse(req.url);",
        "node.domain-module": "const d = require('domain');",
        "node.util-type-checks": "if (util.isArray(x)) {}",
        "react.find-dom-node": "const node = ReactDOM.findDOMNode(this);",
        "react.string-refs": '<input ref="name" />',
        "react.index-key": "items.map((item, index) => <li key={index} />)",
        "bundle.lodash-full": "import _ from 'lodash';",
        "class.extends-component": "class App extends React.Component {",
        "liftkit.color-keyword": "<div style={{ color: 'red' }} />",
        "liftkit.css-px": "  max-width: 960px;",
        "arktype.scope": "const types = scope({",
    }
    probes = {probe.id: probe for registry in load_registries() for probe in registry.probes}

    for probe_id, line in samples.items():
        assert probes[probe_id].matches(line), probe_id


def test_esm_missing_extension_ignores_explicit_extensions():
    probes = {probe.id: probe for registry in load_registries() for probe in registry.probes}
    probe = probes["esm.missing-extension"]

    assert probe.matches("import { helper } from './helper'")
    assert not probe.matches("import { helper } from './helper.js'")
    assert not probe.matches("import data from '../data.json'")
    assert not probe.matches("import express from 'express'")


def test_grid_probe_skips_autoresponsive():
    probes = {probe.id: probe for registry in load_registries() for probe in registry.probes}
    probe = probes["liftkit.grid-autoresponsive"]

    assert probe.matches("<Grid columns={3}>")
    assert not probe.matches("<Grid columns={3} autoResponsive>")
