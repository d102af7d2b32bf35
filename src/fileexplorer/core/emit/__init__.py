from __future__ import annotations

from typing import Dict, Type

from .base import INDENT, EmitterStrategy
from .csharp import CSharpEmitter
from .python import PythonEmitter, python_identifier

EMITTERS: Dict[str, Type[EmitterStrategy]] = {
    PythonEmitter.name: PythonEmitter,
    CSharpEmitter.name: CSharpEmitter,
}


def get_emitter(target: str) -> EmitterStrategy:
    """Instantiate the emitter registered for a target identifier."""
    try:
        return EMITTERS[target]()
    except KeyError:
        raise ValueError(f"Unknown emission target '{target}'. Supported: {sorted(EMITTERS)}") from None


__all__ = [
    "EmitterStrategy",
    "INDENT",
    "EMITTERS",
    "PythonEmitter",
    "CSharpEmitter",
    "get_emitter",
    "python_identifier",
]
