from __future__ import annotations
import base64
from dataclasses import dataclass
from typing import Any, Iterator, Tuple, Union


@dataclass(frozen=True)
class Scalar:
    value: Any = None


@dataclass(frozen=True)
class Sequence:
    items: Tuple["KeyValueNode", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["KeyValueNode"]:
        return iter(self.items)


@dataclass(frozen=True)
class Mapping:
    """
    Lista ordenada de pares (clave, valor). Respeta el orden del documento
    y admite claves repetidas.
    """
    pairs: Tuple[Tuple["KeyValueNode", "KeyValueNode"], ...] = ()

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[Tuple["KeyValueNode", "KeyValueNode"]]:
        return iter(self.pairs)

    def keys(self) -> list["KeyValueNode"]:
        return [k for k, _ in self.pairs]

    def values(self) -> list["KeyValueNode"]:
        return [v for _, v in self.pairs]


KeyValueNode = Union[Scalar, Sequence, Mapping]


def wrap(value: Any) -> KeyValueNode:
    if isinstance(value, (Scalar, Sequence, Mapping)):
        return value
    return Scalar(value)


_JSON_SCALARS = (str, int, float, bool, type(None))


def plain_scalar(value: Any) -> Any:
    if isinstance(value, _JSON_SCALARS):
        return value
    # !!binary llega como bytes arbitrarios
    if isinstance(value, bytes):
        return base64.b64encode(value).decode("ascii")
    # fechas y demás tipos YAML: su texto natural
    return str(value)


def to_plain(node: KeyValueNode) -> Any:
    """
    Convierte el árbol a tipos serializables a JSON.
    Si las claves son escalares únicas devuelve dict; si no, lista de pares.
    """
    if isinstance(node, Scalar):
        return plain_scalar(node.value)
    if isinstance(node, Sequence):
        return [to_plain(item) for item in node]
    keys = node.keys()
    if all(isinstance(k, Scalar) for k in keys):
        names = [str(plain_scalar(k.value)) for k in keys]
        if len(set(names)) == len(names):
            return {name: to_plain(v) for name, v in zip(names, node.values())}
    return [[to_plain(k), to_plain(v)] for k, v in node]
