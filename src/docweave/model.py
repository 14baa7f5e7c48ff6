#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docweave/model.py
"""Declaration model consumed by the signature renderer.

A :class:`DocumentationNode` describes one documented program element: a
package, class, function, property, type reference and so on. Structural
facts about the declaration are stored as *details* (themselves
DocumentationNodes): a function's parameters, return type, type parameters
and modifiers are details of kinds ``Parameter``, ``Type``,
``TypeParameter`` and ``Modifier``. Declarations nested inside it are
*members*, and declarations it refers to are *links*.

``owner`` and ``links`` point into a graph owned by whoever built the model;
the node never copies or manages those targets.

"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional

from docweave.constants import DetailRole
from docweave.content.nodes import Content
from docweave.exceptions import DetailLookupError, ValidationError


class NodeKind(Enum):
    """Kinds of documentation nodes."""

    Module = "Module"
    Package = "Package"

    Class = "Class"
    Interface = "Interface"
    Enum = "Enum"
    EnumItem = "EnumItem"
    Object = "Object"
    ExternalClass = "ExternalClass"

    Constructor = "Constructor"
    Function = "Function"
    ClassObjectFunction = "ClassObjectFunction"
    Property = "Property"
    ClassObjectProperty = "ClassObjectProperty"
    PropertyAccessor = "PropertyAccessor"

    Parameter = "Parameter"
    Receiver = "Receiver"
    TypeParameter = "TypeParameter"
    Type = "Type"
    Supertype = "Supertype"
    UpperBound = "UpperBound"
    Modifier = "Modifier"
    Annotation = "Annotation"
    Value = "Value"

    def __str__(self) -> str:
        return self.value


CLASS_LIKE_KINDS = frozenset(
    {NodeKind.Class, NodeKind.Interface, NodeKind.Enum, NodeKind.EnumItem, NodeKind.Object}
)
FUNCTION_LIKE_KINDS = frozenset({NodeKind.Constructor, NodeKind.Function, NodeKind.ClassObjectFunction})
PROPERTY_LIKE_KINDS = frozenset({NodeKind.Property, NodeKind.ClassObjectProperty})
TYPE_LIKE_KINDS = frozenset({NodeKind.Type, NodeKind.UpperBound})


class DocumentationNode:
    """A node of the declaration model.

    Parameters
    ----------
    name : str
        Declared name (``"String"``, ``"toString"``, ``"T"``)
    kind : NodeKind
        What the node describes
    content : Content or None, default = None
        Documentation prose built from the declaration's comment
    owner : DocumentationNode or None, default = None
        Enclosing declaration. Set automatically when the node is appended
        as a detail or member of another node.

    Examples
    --------
        >>> fn = DocumentationNode("length", NodeKind.Function)
        >>> fn.append(DocumentationNode("Int", NodeKind.Type), "detail")
        >>> fn.detail(NodeKind.Type).name
        'Int'

    """

    def __init__(
        self,
        name: str,
        kind: NodeKind,
        content: Optional[Content] = None,
        owner: Optional[DocumentationNode] = None,
    ):
        """Initialize an empty node with no details, members or links."""
        self.name = name
        self.kind = kind
        self.content = content if content is not None else Content()
        self.owner = owner
        self.details: list[DocumentationNode] = []
        self.members: list[DocumentationNode] = []
        self.links: list[DocumentationNode] = []

    def __repr__(self) -> str:
        return f"DocumentationNode({self.kind.value}:{self.name})"

    def append(self, child: DocumentationNode, role: DetailRole) -> DocumentationNode:
        """Attach a related node.

        Parameters
        ----------
        child : DocumentationNode
            Node to attach
        role : {"detail", "member", "link"}
            Relationship of ``child`` to this node. Details and members take
            this node as their owner if they have none yet; links never do.

        Returns
        -------
        DocumentationNode
            This node, for chaining

        Raises
        ------
        ValidationError
            If role is not one of the accepted values

        """
        if role == "detail":
            self.details.append(child)
        elif role == "member":
            self.members.append(child)
        elif role == "link":
            self.links.append(child)
            return self
        else:
            raise ValidationError(f"Unknown relationship role: {role}", parameter_name="role", parameter_value=role)

        if child.owner is None:
            child.owner = self
        return self

    def add_details(self, children: Iterable[DocumentationNode]) -> DocumentationNode:
        """Attach several details in order."""
        for child in children:
            self.append(child, "detail")
        return self

    def details_of(self, kind: NodeKind) -> list[DocumentationNode]:
        """Return the details of the given kind, in order."""
        return [detail for detail in self.details if detail.kind is kind]

    def detail(self, kind: NodeKind) -> DocumentationNode:
        """Return the single detail of the given kind.

        Raises
        ------
        DetailLookupError
            If there is no such detail or more than one

        """
        matches = self.details_of(kind)
        if len(matches) != 1:
            raise DetailLookupError(self.kind, self.name, kind, len(matches))
        return matches[0]

    def members_of(self, kind: NodeKind) -> list[DocumentationNode]:
        """Return the members of the given kind, in order."""
        return [member for member in self.members if member.kind is kind]

    @property
    def link(self) -> Optional[DocumentationNode]:
        """The first link target, or None when the node links nowhere."""
        return self.links[0] if self.links else None
