#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
from functools import cached_property
from typing import Final

from ..knowledge import AuthSchemeMode, ServiceIndex
from ..model import Model
from ..shapes import ShapeID

logger: Final = logging.getLogger(__name__)

type EffectiveSchemeSet = tuple[ShapeID, ...]
"""Scheme ids in the priority order a client should try them."""


class EffectiveSchemeResolver:
    """Resolves the auth schemes for a service and each of its operations."""

    def __init__(
        self,
        model: Model,
        service: ShapeID,
        *,
        mode: AuthSchemeMode = AuthSchemeMode.NO_AUTH_AWARE,
    ) -> None:
        """Initialize an EffectiveSchemeResolver.

        :param model: The model containing the service.
        :param service: The service to resolve auth schemes for.
        :param mode: The resolution mode. By default, ``smithy.api#noAuth`` is
            resolved as a candidate rather than being filtered out.
        """
        self._model = model
        self._index = ServiceIndex(model)
        self._service = service
        self._mode = mode

    @property
    def service(self) -> ShapeID:
        return self._service

    @cached_property
    def operations(self) -> list[ShapeID]:
        """Every operation of the service, sorted by id."""
        return self._model.all_operations(self._service)

    def resolve(self, operation: ShapeID | None = None) -> EffectiveSchemeSet:
        """Resolve the auth schemes for the service, or for one of its operations.

        A shape without any auth resolves to an empty set in standard mode.
        """
        return self._index.effective_auth_schemes(
            self._service, operation, self._mode
        )

    def divergent_operations(self) -> list[tuple[ShapeID, EffectiveSchemeSet]]:
        """Get the operations whose auth schemes differ from the service's.

        Schemes are compared as sequences, so an operation that only reorders the
        service's schemes is divergent.
        """
        default = self.resolve()
        divergent: list[tuple[ShapeID, EffectiveSchemeSet]] = []
        for operation in self.operations:
            resolved = self.resolve(operation)
            if resolved == default:
                continue
            logger.debug("Operation %s overrides the service auth schemes.", operation)
            divergent.append((operation, resolved))
        return divergent

    def all_scheme_ids(self) -> list[ShapeID]:
        """Get every scheme id used by the service or any operation.

        Ids keep the order they're first seen in, starting with the service's.
        """
        scheme_ids = dict.fromkeys(self.resolve())
        for operation in self.operations:
            scheme_ids.update(dict.fromkeys(self.resolve(operation)))
        return list(scheme_ids)
