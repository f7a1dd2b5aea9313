# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
propcycle - Property Lifecycle Stage Engine

Pure, configuration-driven rules for where a property is in its lifecycle:
which workflow it is on, which stages and documents apply, how far along its
pipeline is, what it has cost and which list filters it matches.

Key Entry Points:
- propcycle.engine.LifecycleEngine - Façade with injected configuration
- propcycle.workflow.classify() - Workflow type of a property
- propcycle.progress.resolve_pipeline() - Current stage, percentage and label
- propcycle.financials.* - Cost domains and financial summaries
- propcycle.filtering.* - Property list filters and search

Example Usage:
    ```python
    from propcycle.engine import LifecycleEngine

    engine = LifecycleEngine()
    prop = {"id": "p1", "property_source": "PURCHASE_PIPELINE"}

    config = engine.stage_config(prop)
    print(config.workflow_type, config.stage_range)  # purchase_pipeline 1-10
    ```
"""

logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "catalog",
    "core",
    "engine",
    "filtering",
    "financials",
    "progress",
    "reporting",
    "workflow",
]


_LAZY_MODULES = {
    "catalog": "propcycle.catalog",
    "core": "propcycle.core",
    "engine": "propcycle.engine",
    "filtering": "propcycle.filtering",
    "financials": "propcycle.financials",
    "progress": "propcycle.progress",
    "reporting": "propcycle.reporting",
    "workflow": "propcycle.workflow",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'propcycle' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
