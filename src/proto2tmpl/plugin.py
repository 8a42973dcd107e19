"""Protocol Buffers compiler plugin entry point for proto2tmpl."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import BinaryIO, Callable, List, Sequence

from google.protobuf.compiler import plugin_pb2

from .codegen import GeneratedFile, ITemplateRenderer, TemplateRenderer
from .config import GeneratorConfig
from .errors import GeneratorError
from .protocol import error_response, files_response, output_file_name, read_request, write_response
from .selector import select_file
from .walker import walk_file

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "PROTO2TMPL_LOG_LEVEL"

RendererFactory = Callable[[str], ITemplateRenderer]


def render_files(
    request: plugin_pb2.CodeGeneratorRequest,
    config: GeneratorConfig,
    renderer: ITemplateRenderer,
) -> List[GeneratedFile]:
    """Render every requested file, in request order."""

    generated: List[GeneratedFile] = []
    for name in request.file_to_generate:
        file_proto = select_file(request, name)
        schema = walk_file(file_proto)
        content = renderer.render(schema)
        output_name = output_file_name(file_proto.name, config.file_ext)
        logger.info("Generated %s from %s", output_name, name)
        generated.append(GeneratedFile(name=output_name, content=content))
    return generated


def generate_code(
    request: plugin_pb2.CodeGeneratorRequest,
    *,
    config: GeneratorConfig | None = None,
    renderer_factory: RendererFactory = TemplateRenderer.from_path,
) -> plugin_pb2.CodeGeneratorResponse:
    """Run the proto2tmpl pipeline and return a populated response message.

    ``config`` holds the command-line defaults; the request parameter is
    applied on top of it. Any :class:`GeneratorError` propagates.
    """

    config = GeneratorConfig.from_parameter_string(request.parameter, defaults=config)
    config.validate()
    renderer = renderer_factory(config.template_path)

    logger.info("FileToGenerate %s", list(request.file_to_generate))
    return files_response(render_files(request, config, renderer))


def run(
    stdin: BinaryIO,
    stdout: BinaryIO,
    *,
    config: GeneratorConfig | None = None,
    renderer_factory: RendererFactory = TemplateRenderer.from_path,
) -> plugin_pb2.CodeGeneratorResponse:
    """Read a request from ``stdin`` and write exactly one response to ``stdout``.

    Generator failures are reported through the response ``error`` field.
    """

    try:
        request = read_request(stdin)
        response = generate_code(request, config=config, renderer_factory=renderer_factory)
    except GeneratorError as exc:
        logger.error("%s", exc)
        response = error_response(str(exc))

    write_response(stdout, response)
    return response


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="protoc-gen-tmpl",
        description=(
            "protoc plugin rendering a template against the messages and services of each "
            "requested proto file. Options given through --tmpl_opt override these flags."
        ),
    )
    parser.add_argument("--template_path", default="", help="path to template file")
    parser.add_argument("--file_ext", default="", help="file extension for new files")
    return parser


def configure_logging() -> None:
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Execute the protoc plugin workflow."""

    configure_logging()
    args = _build_argument_parser().parse_args(argv)
    defaults = GeneratorConfig(template_path=args.template_path, file_ext=args.file_ext)

    run(sys.stdin.buffer, sys.stdout.buffer, config=defaults)
    return 0


if __name__ == "__main__":  # pragma: no cover - convenience execution entry.
    raise SystemExit(main())
