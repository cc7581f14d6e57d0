"""Tests for metric name template evaluation."""

from __future__ import annotations

import pytest

from InfluxMetricMutator.mutator.exceptions import TemplateError
from InfluxMetricMutator.mutator.templates import render_template, snake_case


def test_default_template_uses_check_name(make_event) -> None:
    assert render_template("{{.Check.Name}}.status", make_event(name="disk")) == "disk.status"


def test_template_allows_spaces_and_multiple_actions(make_event) -> None:
    event = make_event(name="cpu")
    rendered = render_template("{{ .Entity.Name }}.{{ .Check.Name }}", event)
    assert rendered == "web-01.cpu"


def test_template_resolves_label_keys(make_event) -> None:
    event = make_event(labels={"service": "billing"})
    assert render_template("{{.Check.Labels.service}}.up", event) == "billing.up"


def test_missing_label_renders_empty(make_event) -> None:
    assert render_template("x{{.Check.Labels.absent}}y", make_event()) == "xy"


def test_extra_fields_are_addressable(make_event) -> None:
    event = make_event()
    assert render_template("{{.Entity.EntityClass}}", event) == "agent"
    assert render_template("{{.Entity.System.Os}}", event) == "linux"


def test_scalars_render_like_go(make_event) -> None:
    event = make_event(status=2, duration=1.5, interval=60)
    assert render_template("{{.Check.Status}}", event) == "2"
    assert render_template("{{.Check.Duration}}", event) == "1.5"
    assert render_template("{{.Timestamp}}", event) == "1700000000"


def test_trim_markers_strip_whitespace(make_event) -> None:
    assert render_template("a  {{- .Check.Name -}}  b", make_event(name="n")) == "anb"


def test_comment_renders_nothing(make_event) -> None:
    assert render_template("{{/* metric */}}{{.Check.Name}}", make_event(name="n")) == "n"


def test_literal_text_passes_through(make_event) -> None:
    assert render_template("static.name }}", make_event()) == "static.name }}"


@pytest.mark.parametrize(
    "template",
    [
        "{{.Check.Nope}}",
        "{{.Check.Name.More}}",
        "{{.Check}}",
        "{{.Check.Labels}}",
        "{{.Check.Name",
        "{{ printf \"%s\" .Check.Name }}",
        "{{ . }}",
    ],
)
def test_invalid_templates_raise(make_event, template: str) -> None:
    with pytest.raises(TemplateError):
        render_template(template, make_event())


def test_nil_intermediate_raises(make_event) -> None:
    event = make_event()
    event.check = None
    with pytest.raises(TemplateError, match="nil value"):
        render_template("{{.Check.Name}}", event)


def test_private_attributes_are_not_exposed(make_event) -> None:
    with pytest.raises(TemplateError):
        render_template("{{.__class__}}", make_event())


@pytest.mark.parametrize(
    ("name", "expected"),
    [("Name", "name"), ("EntityClass", "entity_class"), ("ID", "id"), ("HTTPStatus", "http_status")],
)
def test_snake_case(name: str, expected: str) -> None:
    assert snake_case(name) == expected


def test_embedded_object_meta_is_addressable(make_event) -> None:
    event = make_event(name="disk", labels={"service": "billing"})
    assert render_template("{{.Check.ObjectMeta.Name}}", event) == "disk"
    assert render_template("{{.Entity.ObjectMeta.Name}}", event) == "web-01"
    assert render_template("{{.Check.ObjectMeta.Labels.service}}", event) == "billing"
