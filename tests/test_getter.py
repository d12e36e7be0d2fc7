"""Tests for dotted-path resolution on Document."""

import pytest

from necl_core import Attribute, Block, evaluate_text


SOURCE = """\
name = "svc"
spec {
    replicas = 3
    template {
        image = "nginx"
        ports = [80, 443]
    }
}
"""


@pytest.fixture
def doc():
    return evaluate_text(SOURCE)


def test_top_level_attribute(doc):
    assert doc.get("name").value == "svc"


def test_nested_attribute(doc):
    attr = doc.get("spec.template.image")
    assert isinstance(attr, Attribute)
    assert attr.value == "nginx"


def test_block_path(doc):
    block = doc.get("spec.template")
    assert isinstance(block, Block)
    assert block.name == "template"


def test_value_returns_data(doc):
    assert doc.value("spec.replicas") == 3
    assert doc.value("spec.template.ports") == [80, 443]


def test_value_default(doc):
    assert doc.value("spec.missing", 7) == 7
    assert doc.value("spec.template", "no") == "no"


@pytest.mark.parametrize("path", [
    "missing",
    "spec.nope.image",
    "name.inner",
    "",
    "spec..replicas",
])
def test_missing_paths(doc, path):
    assert doc.get(path) is None


def test_to_dict(doc):
    assert doc.to_dict() == {
        "name": "svc",
        "spec": {
            "replicas": 3,
            "template": {"image": "nginx", "ports": [80, 443]},
        },
    }
