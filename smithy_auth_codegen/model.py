#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final

from .exceptions import InvalidShapeIDError, ModelError
from .shapes import ShapeID, ShapeType
from .traits import PRELUDE_AUTH_TRAITS, AuthDefinitionTrait, DynamicTrait, Trait

logger: Final = logging.getLogger(__name__)

_RESOURCE_LIFECYCLE_OPERATIONS = ("create", "put", "read", "update", "delete", "list")


@dataclass(kw_only=True, frozen=True)
class Shape:
    """A shape loaded from the Smithy JSON AST."""

    id: ShapeID
    """The absolute ID of the shape."""

    type: ShapeType
    """The type of the shape."""

    traits: Mapping[ShapeID, Trait | DynamicTrait] = field(default_factory=dict)
    """Traits applied to the shape, in declaration order."""

    body: Mapping[str, Any] = field(default_factory=dict, repr=False)
    """The remaining AST properties of the shape, such as bound operations."""

    def get_trait[T: Trait](self, trait: type[T]) -> T | None:
        """Get a typed trait applied to the shape, if present."""
        if (value := self.traits.get(trait.id)) is None:
            return None
        assert isinstance(value, trait)  # noqa: S101
        return value

    def has_trait(self, trait_id: ShapeID) -> bool:
        return trait_id in self.traits


class Model:
    """An immutable snapshot of a Smithy model."""

    def __init__(self, shapes: Mapping[ShapeID, Shape]) -> None:
        self._shapes = dict(shapes)

    @classmethod
    def from_json(cls, *documents: Mapping[str, Any]) -> "Model":
        """Assemble a model from parsed Smithy JSON AST documents.

        Shapes of type ``apply`` have their traits merged into the shape they're
        keyed by, which may be defined in any of the documents.

        :param documents: The parsed JSON AST documents.
        :raises ModelError: If a document is not a valid JSON AST, or a shape is
            defined more than once.
        """
        shapes: dict[ShapeID, Shape] = {}
        applied: list[tuple[ShapeID, Mapping[str, Any]]] = []
        for document in documents:
            ast_shapes = document.get("shapes", {})
            if not isinstance(ast_shapes, Mapping):
                raise ModelError(
                    "Expected the model's 'shapes' property to be an object."
                )
            for raw_id, ast_shape in ast_shapes.items():
                shape_id = _parse_id(raw_id)
                if not isinstance(ast_shape, Mapping) or "type" not in ast_shape:
                    raise ModelError(f"Shape {raw_id} is missing its 'type' property.")
                body = dict(ast_shape)
                shape_type = body.pop("type")
                ast_traits = body.pop("traits", {})
                if shape_type == "apply":
                    applied.append((shape_id, ast_traits))
                    continue
                if shape_id in shapes:
                    raise ModelError(f"Shape {shape_id} is defined more than once.")
                shapes[shape_id] = Shape(
                    id=shape_id,
                    type=ShapeType.from_ast(shape_type),
                    traits=_load_traits(ast_traits),
                    body=body,
                )

        for target, ast_traits in applied:
            if target.member is not None:
                # Member traits never affect auth resolution.
                logger.debug("Skipping traits applied to member %s.", target)
                continue
            if (shape := shapes.get(target)) is None:
                raise ModelError(f"Cannot apply traits to unknown shape {target}.")
            traits = dict(shape.traits)
            traits.update(_load_traits(ast_traits))
            shapes[target] = Shape(
                id=shape.id, type=shape.type, traits=traits, body=shape.body
            )

        logger.debug("Loaded model with %s shapes.", len(shapes))
        return cls(shapes)

    @classmethod
    def from_files(cls, *paths: str | Path) -> "Model":
        """Assemble a model from Smithy JSON AST files."""
        documents: list[Mapping[str, Any]] = []
        for path in paths:
            with open(path, encoding="utf-8") as f:
                try:
                    documents.append(json.load(f))
                except json.JSONDecodeError as e:
                    raise ModelError(f"Unable to parse model file {path}: {e}") from e
        return cls.from_json(*documents)

    def __contains__(self, shape_id: object) -> bool:
        return shape_id in self._shapes

    def get_shape(self, shape_id: ShapeID) -> Shape | None:
        return self._shapes.get(shape_id)

    def expect_shape(self, shape_id: ShapeID, type: ShapeType | None = None) -> Shape:
        """Get a shape from the model, failing if it is absent.

        :param shape_id: The ID of the shape to get.
        :param type: The shape type to require, if any.
        :raises ModelError: If the shape is absent or has the wrong type.
        """
        if (shape := self._shapes.get(shape_id)) is None:
            raise ModelError(f"Shape {shape_id} not found in the model.")
        if type is not None and shape.type is not type:
            raise ModelError(
                f"Expected {shape_id} to be a {type.value}, but found "
                f"{shape.type.value}."
            )
        return shape

    def all_operations(self, service: ShapeID) -> list[ShapeID]:
        """Get every operation bound to a service, directly or through resources.

        :returns: The operation IDs, sorted by their string value.
        """
        shape = self.expect_shape(service, ShapeType.SERVICE)
        operations = set(self._bound_operations(shape, set()))
        return sorted(operations, key=str)

    def _bound_operations(
        self, shape: Shape, seen_resources: set[ShapeID]
    ) -> Iterator[ShapeID]:
        for key in _RESOURCE_LIFECYCLE_OPERATIONS:
            if (reference := shape.body.get(key)) is not None:
                yield self._expect_target(reference, ShapeType.OPERATION)
        for key in ("operations", "collectionOperations"):
            for reference in shape.body.get(key, ()):
                yield self._expect_target(reference, ShapeType.OPERATION)
        for reference in shape.body.get("resources", ()):
            resource_id = self._expect_target(reference, ShapeType.RESOURCE)
            if resource_id in seen_resources:
                continue
            seen_resources.add(resource_id)
            yield from self._bound_operations(
                self._shapes[resource_id], seen_resources
            )

    def _expect_target(self, reference: Any, type: ShapeType) -> ShapeID:
        if not isinstance(reference, Mapping) or "target" not in reference:
            raise ModelError(f"Invalid shape reference: {reference!r}")
        target = _parse_id(reference["target"])
        self.expect_shape(target, type)
        return target

    def is_auth_definition(self, trait_id: ShapeID) -> bool:
        """Whether a trait defines an auth scheme.

        Prelude auth traits are always auth definitions. Other traits are auth
        definitions when their shape in the model is marked with
        ``smithy.api#authDefinition``.
        """
        if trait_id in PRELUDE_AUTH_TRAITS:
            return True
        if (shape := self._shapes.get(trait_id)) is None:
            return False
        return shape.has_trait(AuthDefinitionTrait.id)


def _parse_id(value: Any) -> ShapeID:
    if not isinstance(value, str):
        raise ModelError(f"Expected a shape id string, but found {value!r}.")
    try:
        return ShapeID(value)
    except InvalidShapeIDError as e:
        raise ModelError(str(e)) from e


def _load_traits(ast_traits: Any) -> dict[ShapeID, Trait | DynamicTrait]:
    if not isinstance(ast_traits, Mapping):
        raise ModelError(f"Expected traits to be an object, but found {ast_traits!r}.")
    traits: dict[ShapeID, Trait | DynamicTrait] = {}
    for key, value in ast_traits.items():
        trait_id = _parse_id(key)
        traits[trait_id] = Trait.new(trait_id, value)
    return traits
