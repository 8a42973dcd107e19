from __future__ import annotations

"""Command-line helpers for rendering templates from a descriptor set."""

import argparse
import logging
from pathlib import Path
from typing import List, Sequence

from google.protobuf import descriptor_pb2
from google.protobuf import message as protobuf_message
from google.protobuf.compiler import plugin_pb2

from proto2tmpl.codegen import TemplateRenderer
from proto2tmpl.config import GeneratorConfig
from proto2tmpl.errors import DecodeError, GeneratorError, OutputPathError
from proto2tmpl.plugin import configure_logging, render_files
from proto2tmpl.protocol import trim_leading_blank_lines

logger = logging.getLogger(__name__)


def _build_request(
    descriptor_set: descriptor_pb2.FileDescriptorSet, targets: Sequence[str] | None
) -> plugin_pb2.CodeGeneratorRequest:
    request = plugin_pb2.CodeGeneratorRequest()
    request.proto_file.extend(descriptor_set.file)

    if targets:
        request.file_to_generate.extend(targets)
    else:
        request.file_to_generate.extend(file_proto.name for file_proto in descriptor_set.file)

    return request


def _load_descriptor_set(path: Path) -> descriptor_pb2.FileDescriptorSet:
    descriptor_set = descriptor_pb2.FileDescriptorSet()
    try:
        descriptor_set.ParseFromString(path.read_bytes())
    except protobuf_message.DecodeError as exc:
        raise DecodeError(f"unable to parse descriptor set {path}: {exc}") from exc
    return descriptor_set


def _output_path(output_dir: Path, name: str) -> Path:
    path = output_dir / name
    if not path.resolve().is_relative_to(output_dir.resolve()):
        raise OutputPathError(f"refusing to write {name!r} outside {output_dir}")
    return path


def render_descriptor_set(
    descriptor_set_path: Path | str,
    targets: Sequence[str] | None,
    output_dir: Path | str,
    config: GeneratorConfig,
) -> List[Path]:
    """Render the template for the given targets and write the results.

    Parameters
    ----------
    descriptor_set_path:
        Path to a serialized :class:`~google.protobuf.descriptor_pb2.FileDescriptorSet`.
    targets:
        Proto filenames (as understood by ``protoc``) to render. ``None`` means "all".
    output_dir:
        Directory that receives the generated files, laid out like the protos.
    config:
        Template path and output extension.
    """

    descriptor_set_path = Path(descriptor_set_path)
    output_dir = Path(output_dir)
    config.validate()

    request = _build_request(_load_descriptor_set(descriptor_set_path), targets)
    renderer = TemplateRenderer.from_path(config.template_path)

    outputs = [
        (_output_path(output_dir, generated.name), generated)
        for generated in render_files(request, config, renderer)
    ]

    generated_paths: List[Path] = []
    for path, generated in outputs:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(trim_leading_blank_lines(generated.content), encoding="utf-8")
        generated_paths.append(path)

    return generated_paths


def _build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a template against a descriptor set produced by protoc."
    )
    parser.add_argument(
        "descriptor_set",
        type=Path,
        help="Path to a serialized FileDescriptorSet (output of protoc --descriptor_set_out)",
    )
    parser.add_argument(
        "--proto",
        dest="protos",
        action="append",
        help=(
            "Proto file to render (relative to the descriptor). Repeat for multiple files. "
            "Defaults to all entries in the descriptor set."
        ),
    )
    parser.add_argument("--template_path", required=True, help="path to template file")
    parser.add_argument("--file_ext", required=True, help="file extension for new files")
    parser.add_argument(
        "--out",
        dest="output",
        required=True,
        type=Path,
        help="Directory to write the generated files to",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point used by ``python -m proto2tmpl.tools.render``."""

    configure_logging()
    parser = _build_argument_parser()
    args = parser.parse_args(argv)
    config = GeneratorConfig(template_path=args.template_path, file_ext=args.file_ext)

    try:
        generated_paths = render_descriptor_set(args.descriptor_set, args.protos, args.output, config)
    except (GeneratorError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    for path in generated_paths:
        print(path)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
