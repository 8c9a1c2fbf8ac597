#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
from enum import Enum
from typing import Final

from .model import Model
from .shapes import ShapeID, ShapeType
from .traits import (
    NO_AUTH_SCHEME_ID,
    AuthTrait,
    DynamicTrait,
    OptionalAuthTrait,
    Trait,
)

logger: Final = logging.getLogger(__name__)


class AuthSchemeMode(Enum):
    """How effective auth schemes are resolved."""

    STANDARD = "standard"
    """Only modeled auth schemes are returned."""

    NO_AUTH_AWARE = "no_auth_aware"
    """``smithy.api#noAuth`` participates as a candidate.

    It is appended when a shape resolves to no auth schemes, or when the operation is
    marked with ``smithy.api#optionalAuth``.
    """


class ServiceIndex:
    """Answers auth questions about the services in a model."""

    def __init__(self, model: Model) -> None:
        self._model = model

    def auth_schemes(self, service: ShapeID) -> dict[ShapeID, Trait | DynamicTrait]:
        """Get the auth definition traits applied to a service.

        :returns: The applied auth traits keyed by trait id, sorted by id.
        """
        shape = self._model.expect_shape(service, ShapeType.SERVICE)
        schemes = {
            trait_id: trait
            for trait_id, trait in shape.traits.items()
            if self._model.is_auth_definition(trait_id)
        }
        return {key: schemes[key] for key in sorted(schemes, key=str)}

    def effective_auth_schemes(
        self,
        service: ShapeID,
        operation: ShapeID | None = None,
        mode: AuthSchemeMode = AuthSchemeMode.STANDARD,
    ) -> tuple[ShapeID, ...]:
        """Resolve the ordered auth schemes that apply to a service or operation.

        An ``smithy.api#auth`` trait on the operation replaces the service's
        resolution entirely. Without one, the operation inherits the service's
        resolution.

        :param service: The service to resolve against.
        :param operation: The operation to resolve, or None to resolve the service.
        :param mode: The resolution mode.
        :returns: The scheme ids in priority order.
        """
        supported = self.auth_schemes(service)
        target = self._model.expect_shape(service)
        if operation is not None:
            operation_shape = self._model.expect_shape(operation, ShapeType.OPERATION)
            if operation_shape.has_trait(AuthTrait.id):
                target = operation_shape

        if (auth_trait := target.get_trait(AuthTrait)) is not None:
            # Listed schemes not applied to the service are ignored.
            schemes = [scheme for scheme in auth_trait.values if scheme in supported]
        else:
            schemes = list(supported)

        if mode is AuthSchemeMode.NO_AUTH_AWARE:
            optional = operation is not None and self._model.expect_shape(
                operation
            ).has_trait(OptionalAuthTrait.id)
            if (not schemes or optional) and NO_AUTH_SCHEME_ID not in schemes:
                schemes.append(NO_AUTH_SCHEME_ID)

        logger.debug(
            "Resolved auth schemes for %s: %s",
            operation or service,
            ", ".join(str(s) for s in schemes) or "<none>",
        )
        return tuple(schemes)

    def trait_instance(
        self, shape: ShapeID, trait_id: ShapeID
    ) -> Trait | DynamicTrait | None:
        """Get the trait with the given id applied to a shape, if any."""
        return self._model.expect_shape(shape).traits.get(trait_id)
