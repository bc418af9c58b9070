"""
Socket Type Registry

Maps every NodeKind to its NodeTypeInfo. Built once at import and never
mutated afterwards; lookups on the closed NodeKind set always succeed.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping

from ..errors import RegistryMissError
from ..ir.kinds import NodeKind
from ..sockets import BuiltinDefault, LiteralDefault, NodeTypeInfo
from .. import categories as cat

from .scalar import SCALAR_NODES, ARITHMETIC_NODES
from .vector import VECTOR_NODES
from .geometry import GEOMETRY_NODES, LIGHTING_NODES
from .textures import TEXTURE_NODES
from .output import OUTPUT_NODES


def _build_registry(*tables: List[NodeTypeInfo]) -> Dict[NodeKind, NodeTypeInfo]:
    registry: Dict[NodeKind, NodeTypeInfo] = {}
    for table in tables:
        for info in table:
            if info.kind in registry:
                raise RegistryMissError(f"Duplicate registry entry for {info.kind}", kind=info.kind)
            registry[info.kind] = info
    return registry


def _validate(registry: Mapping[NodeKind, NodeTypeInfo]):
    """Totality check: one entry per kind, a default for every input."""
    missing = [k for k in NodeKind if k not in registry]
    if missing:
        raise RegistryMissError(f"No registry entry for {', '.join(str(k) for k in missing)}", kind=missing[0])

    for kind, info in registry.items():
        for spec in info.inputs:
            if not isinstance(spec.default, (LiteralDefault, BuiltinDefault)):
                raise RegistryMissError(f"{info.label}.{spec.name} has no default resolution", kind=kind)
        names = info.input_names() + info.output_names()
        if len(set(info.input_names())) != len(info.inputs) or len(set(info.output_names())) != len(info.outputs):
            raise RegistryMissError(f"{info.label} has duplicate socket names: {names}", kind=kind)


_REGISTRY = _build_registry(
    SCALAR_NODES,
    VECTOR_NODES,
    ARITHMETIC_NODES,
    GEOMETRY_NODES,
    LIGHTING_NODES,
    TEXTURE_NODES,
    OUTPUT_NODES,
)
_validate(_REGISTRY)

NODE_TYPE_INFOS: Mapping[NodeKind, NodeTypeInfo] = MappingProxyType(_REGISTRY)


def lookup(kind: NodeKind) -> NodeTypeInfo:
    """Get the registry entry for a kind. A miss is a programmer error."""
    info = NODE_TYPE_INFOS.get(kind)
    if info is None:
        raise RegistryMissError(f"Unknown node kind: {kind!r}", kind=kind)
    return info


def all_kinds() -> List[NodeKind]:
    """Every instantiable kind, in enumeration order."""
    return list(NodeKind)


def categories() -> List[str]:
    """Categories in menu order, followed by any not listed there."""
    seen = list(cat.CATEGORY_ORDER)
    for info in NODE_TYPE_INFOS.values():
        for c in info.categories:
            if c not in seen:
                seen.append(c)
    return seen


def kinds_in_category(category: str) -> List[NodeKind]:
    return [k for k in NodeKind if category in NODE_TYPE_INFOS[k].categories]


__all__ = ['NODE_TYPE_INFOS', 'lookup', 'all_kinds', 'categories', 'kinds_in_category']
