from .base import Dispatch, DispatchLike, FunctionDispatch, as_dispatch
from .by_attr import ByAttr
from .monofile import MonoFile
from .with_default import WithDefault, with_default

__all__ = [
    "Dispatch",
    "DispatchLike",
    "FunctionDispatch",
    "as_dispatch",
    "ByAttr",
    "MonoFile",
    "WithDefault",
    "with_default",
]
