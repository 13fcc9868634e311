from __future__ import annotations


class NullType:
    """The empty list and list terminator. Use the `Null` singleton."""

    __slots__ = ()
    _instance: NullType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Null"
    def __str__(self): return "()"
    def __bool__(self): return False

    # Equal only to itself
    def __eq__(self, other):
        return other is self

    def __hash__(self):
        return hash(NullType)

    def __reduce__(self):
        return NullType, ()


class EndType:
    """End-of-stream sentinel returned by the reader. Never part of a list."""

    __slots__ = ()
    _instance: EndType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "End"
    def __str__(self): return "End"

    def __eq__(self, other):
        return other is self

    def __hash__(self):
        return hash(EndType)

    def __reduce__(self):
        return EndType, ()


Null = NullType()
End = EndType()
