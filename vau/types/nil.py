from __future__ import annotations


class NilType:
    """The empty list. There is exactly one instance, `Nil`."""

    __slots__ = ()
    _instance: NilType | None = None

    def __new__(cls) -> NilType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "()"
    def __bool__(self): return False

    def __iter__(self):
        return iter(())

    def __reduce__(self):
        return NilType, ()


Nil = NilType()
