from __future__ import annotations

from pathlib import Path

import pytest

from proto2tmpl import model
from proto2tmpl.codegen import TemplateRenderer
from proto2tmpl.errors import TemplateLoadError, TemplateRenderError

TEMPLATE = """
// {{ name }} ({{ package }})
{% for message in messages %}
export interface {{ message.name }} {
{% for field in message.fields %}
  {{ field.name }}: {{ field.type }};
{% endfor %}
}
{% endfor %}
{% for service in services %}
export interface {{ service.name }} {
{% for method in service.methods %}
  {{ method.name }}(req: {{ method.input }}): {{ method.output }};
{% endfor %}
}
{% endfor %}
"""


def _sample_model() -> model.SchemaModel:
    return model.SchemaModel(
        name="demo/greeter.proto",
        package="demo",
        messages=[
            model.Message(
                name="HelloRequest",
                fields=[
                    model.Field(name="name", type="string", number=1),
                    model.Field(name="tags", type="string[]", number=2, repeated=True),
                ],
            )
        ],
        services=[
            model.Service(
                name="Greeter",
                methods=[model.Method(name="SayHello", input=".demo.HelloRequest", output=".demo.HelloReply")],
            )
        ],
    )


def _write_template(tmp_path: Path, source: str, name: str = "types.ts.j2") -> Path:
    path = tmp_path / name
    path.write_text(source, encoding="utf-8")
    return path


def test_renderer_exposes_model_fields(tmp_path: Path) -> None:
    renderer = TemplateRenderer.from_path(_write_template(tmp_path, TEMPLATE))

    output = renderer.render(_sample_model())

    assert output == (
        "\n"
        "// demo/greeter.proto (demo)\n"
        "export interface HelloRequest {\n"
        "  name: string;\n"
        "  tags: string[];\n"
        "}\n"
        "export interface Greeter {\n"
        "  SayHello(req: .demo.HelloRequest): .demo.HelloReply;\n"
        "}\n"
    )


def test_renderer_output_is_deterministic(tmp_path: Path) -> None:
    renderer = TemplateRenderer.from_path(_write_template(tmp_path, TEMPLATE))
    assert renderer.render(_sample_model()) == renderer.render(_sample_model())


def test_renderer_supports_template_includes(tmp_path: Path) -> None:
    _write_template(tmp_path, "{{ message.name }}", name="_message.j2")
    path = _write_template(
        tmp_path,
        "{% for message in messages %}{% include '_message.j2' %};{% endfor %}",
    )

    assert TemplateRenderer.from_path(path).render(_sample_model()) == "HelloRequest;"


def test_missing_template_raises_load_error(tmp_path: Path) -> None:
    with pytest.raises(TemplateLoadError):
        TemplateRenderer.from_path(tmp_path / "missing.j2")


def test_invalid_template_raises_load_error(tmp_path: Path) -> None:
    path = _write_template(tmp_path, "{% for message in messages %}\n{{ message.name }\n")

    with pytest.raises(TemplateLoadError) as excinfo:
        TemplateRenderer.from_path(path)

    assert "unable to parse template" in str(excinfo.value)


def test_unknown_variable_raises_render_error() -> None:
    renderer = TemplateRenderer.from_string("{{ Package }}")

    with pytest.raises(TemplateRenderError) as excinfo:
        renderer.render(_sample_model())

    assert "demo/greeter.proto" in str(excinfo.value)


def test_python_errors_raise_render_error() -> None:
    renderer = TemplateRenderer.from_string("{{ messages[0].name.upper(1) }}")

    with pytest.raises(TemplateRenderError) as excinfo:
        renderer.render(_sample_model())

    assert isinstance(excinfo.value.__cause__, TypeError)


def test_raw_descriptor_names_are_not_exposed() -> None:
    renderer = TemplateRenderer.from_string("{{ message_type }}")

    with pytest.raises(TemplateRenderError):
        renderer.render(_sample_model())
