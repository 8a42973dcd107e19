"""Standalone command-line tools built on the proto2tmpl pipeline."""
