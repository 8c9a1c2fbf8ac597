#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0


class SmithyError(Exception):
    """Base exception type for all exceptions raised by smithy-auth-codegen."""


class InvalidShapeIDError(SmithyError):
    """Exception indicating a string could not be parsed as a shape id."""


class ConfigurationError(SmithyError):
    """Exception indicating an auth scheme descriptor or the codegen settings were
    constructed without required state."""


class ModelError(SmithyError):
    """Exception indicating the model is malformed or is missing a referenced
    shape."""
