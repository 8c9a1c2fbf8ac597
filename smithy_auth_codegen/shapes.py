#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
from enum import Enum

from .exceptions import InvalidShapeIDError


class ShapeID:
    """An identifier for a Smithy shape."""

    _id: str
    _namespace: str
    _name: str
    _member: str | None = None

    def __init__(self, id: str) -> None:
        """Initialize a ShapeID.

        :param id: The string representation of the ID.
        """
        self._id = id
        if "#" not in id:
            raise InvalidShapeIDError(f"Invalid shape id: {id}")
        self._namespace, self._name = id.split("#", 1)
        if not self._namespace or not self._name:
            raise InvalidShapeIDError(f"Invalid shape id: {id}")

        if len(split_name := self._name.split("$", 1)) > 1:
            self._name, self._member = split_name
            if not self._name or not self._member:
                raise InvalidShapeIDError(f"Invalid shape id: {id}")

    @property
    def namespace(self) -> str:
        """The namespace of the shape."""
        return self._namespace

    @property
    def name(self) -> str:
        """The name of the shape, or the name of the containing shape if the shape is a
        member."""
        return self._name

    @property
    def member(self) -> str | None:
        """The member name of the shape.

        This is only set for member shapes.
        """
        return self._member

    def __str__(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"ShapeID({self._id!r})"

    def __eq__(self, other: object) -> bool:
        return self._id == str(other)

    def __hash__(self) -> int:
        return hash(self._id)


class ShapeType(Enum):
    """The type of a shape in the JSON AST.

    Only the aggregate and service shapes are distinguished, since those are the ones
    the auth index walks.
    """

    SERVICE = "service"
    RESOURCE = "resource"
    OPERATION = "operation"
    STRUCTURE = "structure"
    UNION = "union"
    LIST = "list"
    MAP = "map"
    SIMPLE = "simple"

    @classmethod
    def from_ast(cls, value: str) -> "ShapeType":
        try:
            return cls(value)
        except ValueError:
            return cls.SIMPLE
