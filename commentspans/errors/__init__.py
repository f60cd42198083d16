from .span import InvalidSpanError, SpanError

__all__ = ["SpanError", "InvalidSpanError"]
