#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0
import logging
from collections.abc import Sequence
from typing import Final

from ..knowledge import ServiceIndex
from ..model import Model
from ..settings import CodegenSettings
from ..shapes import ShapeID
from ..writer import PythonWriter, to_snake_case
from .options import OptionSynthesizer, ResolvedOption, normalize_auth_scheme_name
from .parameters import collect_auth_scheme_parameters
from .registry import SupportedAuthSchemes
from .resolver import EffectiveSchemeResolver

logger: Final = logging.getLogger(__name__)

HEADER = "# Code generated by smithy-auth-codegen. DO NOT EDIT."
RUNTIME_MODULE = "smithy_auth_codegen.runtime"


class AuthSchemeProviderGenerator:
    """Generates the auth scheme provider module for a service.

    Code generated includes:

    - ``{Service}AuthSchemeParameters``
    - ``{Service}AuthSchemeParametersProvider`` and
      ``default_{service}_auth_scheme_parameters_provider``
    - ``_create_{AuthSchemeId}_auth_option`` for each scheme used by the service
    - ``{Service}AuthSchemeProvider`` and ``default_{service}_auth_scheme_provider``
    """

    def __init__(
        self,
        model: Model,
        settings: CodegenSettings,
        supported: SupportedAuthSchemes,
    ) -> None:
        self._settings = settings
        self._resolver = EffectiveSchemeResolver(
            model, settings.service, mode=settings.auth_scheme_mode
        )
        self._synthesizer = OptionSynthesizer(
            ServiceIndex(model), settings.service, supported
        )
        self._service_name = settings.effective_service_name
        self._snake_service_name = to_snake_case(self._service_name)
        self._parameters = collect_auth_scheme_parameters(supported)

    @property
    def _parameters_class(self) -> str:
        return f"{self._service_name}AuthSchemeParameters"

    def run(self) -> str:
        """Generate the module and return its source."""
        logger.info("Generating auth scheme provider for %s.", self._settings.service)
        writer = PythonWriter(header=HEADER)
        self._generate_parameters_class(writer)
        self._generate_parameters_provider(writer)
        self._generate_auth_option_functions(writer)
        self._generate_provider(writer)
        return str(writer)

    def _generate_parameters_class(self, writer: PythonWriter) -> None:
        writer.add_import("dataclasses", "dataclass")
        writer.add_import(RUNTIME_MODULE, "AuthSchemeParameters")
        writer.write("@dataclass(kw_only=True)")
        with writer.open_block(
            f"class {self._parameters_class}(AuthSchemeParameters):"
        ):
            writer.write_docstring(
                f"Parameters for resolving the auth schemes of {self._service_name}."
            )
            if self._parameters:
                writer.write()
            for parameter in self._parameters.values():
                writer.write(f"{parameter.name}: {parameter.type_hint} | None = None")
        writer.write()
        writer.write()

    def _generate_parameters_provider(self, writer: PythonWriter) -> None:
        writer.add_import("collections.abc", "Callable")
        writer.add_import("collections.abc", "Mapping")
        writer.add_import("typing", "Any")
        writer.write(
            f"type {self._service_name}AuthSchemeParametersProvider = Callable["
            f"[Any, Mapping[str, Any], Any], {self._parameters_class}]"
        )
        writer.write()
        writer.write()
        with writer.open_block(
            f"def default_{self._snake_service_name}_auth_scheme_parameters_provider("
        ):
            writer.write("config: Any, context: Mapping[str, Any], input: Any")
        with writer.open_block(f") -> {self._parameters_class}:"):
            with writer.open_block(f"return {self._parameters_class}(", ")"):
                writer.write('operation=context["operation"],')
                for parameter in self._parameters.values():
                    writer.write(f"{parameter.name}={parameter.source},")
        writer.write()
        writer.write()

    def _generate_auth_option_functions(self, writer: PythonWriter) -> None:
        names: dict[str, ShapeID] = {}
        for scheme_id in self._resolver.all_scheme_ids():
            name = normalize_auth_scheme_name(scheme_id)
            if (existing := names.get(name)) is not None:
                logger.warning(
                    "Auth schemes %s and %s both normalize to %s, so their option "
                    "functions collide.",
                    existing,
                    scheme_id,
                    name,
                )
            names[name] = scheme_id
            self._generate_auth_option_function(
                writer, self._synthesizer.synthesize(scheme_id)
            )

    def _generate_auth_option_function(
        self, writer: PythonWriter, option: ResolvedOption
    ) -> None:
        writer.add_import(RUNTIME_MODULE, "AuthOption")
        writer.add_import("smithy_auth_codegen.shapes", "ShapeID")
        with writer.open_block(f"def {_option_function(option.scheme_id)}("):
            writer.write(f"auth_parameters: {self._parameters_class},")
        with writer.open_block(") -> AuthOption:"):
            with writer.open_block("return AuthOption(", ")"):
                writer.write(f"scheme_id=ShapeID({str(option.scheme_id)!r}),")
                for argument, properties in (
                    ("identity_properties", option.identity_properties),
                    ("signer_properties", option.signing_properties),
                ):
                    if not properties:
                        continue
                    with writer.open_block(f"{argument}={{", "},"):
                        for name, expression in properties.items():
                            writer.write(f"{name!r}: {expression},")
        writer.write()
        writer.write()

    def _generate_provider(self, writer: PythonWriter) -> None:
        writer.add_import(RUNTIME_MODULE, "AuthOption")
        writer.write(
            f"type {self._service_name}AuthSchemeProvider = Callable["
            f"[{self._parameters_class}], list[AuthOption]]"
        )
        writer.write()
        writer.write()
        with writer.open_block(
            f"def default_{self._snake_service_name}_auth_scheme_provider("
        ):
            writer.write(f"auth_parameters: {self._parameters_class},")
        with writer.open_block(") -> list[AuthOption]:"):
            writer.write("options: list[AuthOption] = []")
            with writer.open_block("match auth_parameters.operation:"):
                for operation, scheme_ids in self._resolver.divergent_operations():
                    with writer.open_block(f"case {operation.name!r}:"):
                        self._write_option_calls(writer, scheme_ids)
                with writer.open_block("case _:"):
                    self._write_option_calls(writer, self._resolver.resolve())
            writer.write("return options")

    def _write_option_calls(
        self, writer: PythonWriter, scheme_ids: Sequence[ShapeID]
    ) -> None:
        for scheme_id in scheme_ids:
            writer.write(
                f"options.append({_option_function(scheme_id)}(auth_parameters))"
            )


def _option_function(scheme_id: ShapeID) -> str:
    return f"_create_{normalize_auth_scheme_name(scheme_id)}_auth_option"
