# OSGi Runtime Composer — declarative OSGi runtime image assembly
# Copyright (c) 2025
# OSGi Runtime Composer contributors
#
# Licensed under the Business Source License 1.1 (BSL 1.1).
# You may use, modify, and redistribute this file under the terms of the BSL.
# On the Change Date (2029-01-01), this file will be licensed under
# the Apache License, Version 2.0.

"""
OSGi runtime composer package.

Composes the bundle list of an OSGi runtime image from a container
backend, enabled features and application bundles.
"""
from .bundle import DEFAULT_RUN_LEVEL as DEFAULT_RUN_LEVEL  # noqa: F401 (re-export)
from .bundle import Bundle as Bundle  # noqa: F401 (re-export)
from .container import Felix as Felix  # noqa: F401 (re-export)
from .feature import Feature as Feature  # noqa: F401 (re-export)
from .runtime import Runtime as Runtime  # noqa: F401 (re-export)
