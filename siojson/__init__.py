"""JSON values and objects that carry binary payloads, with typed field access."""

__version__ = "0.1.0"

__all__ = ["convert", "value", "typed_arrays", "json_object"]