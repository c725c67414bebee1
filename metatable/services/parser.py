from __future__ import annotations
import logging
from typing import Any, List, Optional, Tuple

import yaml

from .nodes import KeyValueNode, Mapping, Sequence, wrap

logger = logging.getLogger(__name__)


class OrderedLoader(yaml.SafeLoader):
    """
    SafeLoader que construye Mapping/Sequence en lugar de dict/list:
    conserva el orden y las claves repetidas (y admite claves no hashables).
    """


def _construct_mapping(loader: OrderedLoader, node: yaml.MappingNode) -> Mapping:
    loader.flatten_mapping(node)
    pairs: List[Tuple[KeyValueNode, KeyValueNode]] = []
    for key_node, value_node in node.value:
        key = loader.construct_object(key_node, deep=True)
        value = loader.construct_object(value_node, deep=True)
        pairs.append((wrap(key), wrap(value)))
    return Mapping(tuple(pairs))


def _construct_sequence(loader: OrderedLoader, node: yaml.SequenceNode) -> Sequence:
    return Sequence(tuple(wrap(loader.construct_object(child, deep=True)) for child in node.value))


def _construct_pairs(loader: OrderedLoader, node: yaml.Node) -> Mapping:
    # !!omap y !!pairs: secuencia de mappings de un solo par
    if not isinstance(node, yaml.SequenceNode):
        raise yaml.constructor.ConstructorError(None, None, "expected a sequence for ordered pairs", node.start_mark)
    pairs: List[Tuple[KeyValueNode, KeyValueNode]] = []
    for sub in node.value:
        if not isinstance(sub, yaml.MappingNode) or len(sub.value) != 1:
            raise yaml.constructor.ConstructorError(
                "while constructing ordered pairs", node.start_mark,
                "expected a single-pair mapping", sub.start_mark,
            )
        key_node, value_node = sub.value[0]
        key = loader.construct_object(key_node, deep=True)
        value = loader.construct_object(value_node, deep=True)
        pairs.append((wrap(key), wrap(value)))
    return Mapping(tuple(pairs))


def _construct_set(loader: OrderedLoader, node: yaml.Node) -> Sequence:
    # !!set: mapping con valores nulos; sólo cuentan las claves
    if not isinstance(node, yaml.MappingNode):
        raise yaml.constructor.ConstructorError(None, None, "expected a mapping for a set", node.start_mark)
    return Sequence(tuple(wrap(loader.construct_object(k, deep=True)) for k, _ in node.value))


OrderedLoader.add_constructor(yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_mapping)
OrderedLoader.add_constructor(yaml.resolver.BaseResolver.DEFAULT_SEQUENCE_TAG, _construct_sequence)
OrderedLoader.add_constructor("tag:yaml.org,2002:omap", _construct_pairs)
OrderedLoader.add_constructor("tag:yaml.org,2002:pairs", _construct_pairs)
OrderedLoader.add_constructor("tag:yaml.org,2002:set", _construct_set)


def _load(text: str) -> Any:
    return yaml.load(text, Loader=OrderedLoader)


def _as_single_pair(root: Any) -> Optional[Mapping]:
    # sólo "- clave: valor" repetido; un escalar suelto es prosa tras un <hr>, no metadatos
    if isinstance(root, Sequence) and len(root) > 0:
        pairs: List[Tuple[KeyValueNode, KeyValueNode]] = []
        for item in root:
            if not isinstance(item, Mapping) or len(item) != 1:
                return None
            pairs.extend(item.pairs)
        return Mapping(tuple(pairs))
    return None


def parse_front_matter(text: str) -> Optional[Mapping]:
    """
    Parsea la cabecera YAML como mapping ordenado.
    1) raíz mapping (o documento vacío) -> Mapping
    2) raíz "- clave: valor" (pares sueltos) -> Mapping con esos pares
    Devuelve None si no hay forma de interpretarla; nunca lanza.
    """
    try:
        root = _load(text)
    except yaml.YAMLError as e:
        logger.debug("YAML inválido en front matter: %s", e)
        return None

    if root is None:
        return Mapping()
    if isinstance(root, Mapping):
        return root

    fallback = _as_single_pair(root)
    if fallback is None:
        logger.debug("front matter sin forma de mapping: %r", type(root).__name__)
    return fallback
