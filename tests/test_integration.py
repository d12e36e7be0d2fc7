"""End-to-end integration tests."""

from pathlib import Path

import pytest

from necl_core import (
    Kind,
    NECLRepl,
    ParseOptions,
    UnknownAttributeReference,
    evaluate_text,
    load,
)
from necl_core.repl import _fmt_inline

DATA = Path(__file__).parent / "data"


# ---------------------------------------------------------------------------
# Example files
# ---------------------------------------------------------------------------

@pytest.fixture
def simple():
    return load(DATA / "simple.necl")


def test_simple_top_level(simple):
    assert simple.value("name") == "example"
    assert simple.value("pi") == 3.1414999961853027
    assert simple.value("no") is False
    assert simple.value("multiline") == "this is a multiline string"


def test_simple_arrays(simple):
    letters = [chr(c) for c in range(ord("a"), ord("z") + 1)]
    assert simple.value("test_array") == ["test", 1]
    assert simple.value("long_array") == letters + list(range(10)) + [True, False]


def test_simple_block(simple):
    block = simple.blocks["block"]
    assert block.attributes["foo"].value == "bar"
    assert block.attributes["block_array"].array == ["test", "block", "array", 1234, False]
    assert block.attributes["block_multiline"].value == "this is a blocked multiline string"
    assert set(simple.attributes) == {
        "name", "pi", "no", "multiline", "test_array", "long_array",
    }


def test_deployment():
    doc = load(DATA / "deployment.necl")
    assert doc.value("apiVersion") == "apps/v1"
    assert doc.value("kind") == "Deployment"
    assert doc.value("metadata.name") == "nginx-deployment"
    assert doc.value("metadata.labels.app") == "nginx"
    assert doc.value("spec.replicas") == 3
    assert doc.value("spec.selector.matchLabels.app") == "nginx"
    assert doc.value("spec.template.metadata.labels.app") == "nginx"
    nginx = "spec.template.spec.containers.nginx"
    assert doc.value(f"{nginx}.image") == "nginx:1.14.2"
    assert doc.value(f"{nginx}.ports.containerPort") == 80


# ---------------------------------------------------------------------------
# Expressions end to end
# ---------------------------------------------------------------------------

SERVICE = """\
name = "api"
replicas = 3
ports = [8080, 8443]
debug = false

service {
    label = upper("api")
}

big = replicas >= 3
mode = if debug ? "dev" : "prod"
public = for ports : value + 1000
tagged = concat(name, "v1")
rounded = floor(7, 2)
either = or(debug, true)
"""


def test_service_document():
    doc = evaluate_text(SERVICE, ParseOptions(hygienic_projection=True))
    assert doc.value("big") is True
    assert doc.value("mode") == "prod"
    assert doc.value("public") == [9080, 9443]
    assert doc.value("tagged") == "api v1"
    assert doc.value("rounded") == 3
    assert doc.value("either") is True
    assert doc.get("public").type is Kind.ARRAY
    assert "value" not in doc.attributes


def test_block_cannot_reference_top_level():
    source = SERVICE + "extra {\n    scaled = replicas * 2\n}\n"
    with pytest.raises(UnknownAttributeReference) as info:
        evaluate_text(source)
    assert info.value.line == 17


def test_repl_literals_read_back():
    repl = NECLRepl()
    repl.eval('s = "x"\nn = 4\nb = true\nxs = ["a", 1, false]')
    again = NECLRepl()
    for name in ("s", "n", "b", "xs"):
        again.eval(f"{name} = {_fmt_inline(repl.query(name))}")
    assert again.doc.to_dict() == repl.doc.to_dict()
