"""Relation styles using Crow's Foot notation.

Registry order is legend order.
"""

from types import MappingProxyType

from .models import EdgeStyle, RelationKind

RELATION_STYLES = MappingProxyType({
    RelationKind.ONE_TO_ONE: EdgeStyle(
        label="hasOne", dir="both", color="magenta",
        arrowhead="tee", arrowtail="none", fontname="Helvetica", fontsize=10,
    ),
    RelationKind.ONE_TO_MANY: EdgeStyle(
        label="hasMany", dir="both", color="blue",
        arrowhead="crow", arrowtail="none", fontname="Helvetica", fontsize=10,
    ),
    RelationKind.MANY_TO_ONE: EdgeStyle(
        label="belongsTo", dir="both", color="blue",
        arrowhead="none", arrowtail="crow", fontname="Helvetica", fontsize=10,
    ),
    RelationKind.MANY_TO_MANY: EdgeStyle(
        label="belongsToMany", dir="both", color="red",
        arrowhead="crow", arrowtail="crow", fontname="Helvetica", fontsize=10,
    ),
})


def style_for(kind: RelationKind) -> EdgeStyle:
    """Get the style record of a relation kind.

    Raises:
        KeyError: If ``kind`` is not a RelationKind
    """
    return RELATION_STYLES[kind]


def registered_kinds() -> list[RelationKind]:
    return list(RELATION_STYLES)
