"""Serializer — Module processing helpers for bundle serializers."""

from jsmodwrap.serializer.process import process_modules

__all__ = ["process_modules"]
