"""
Ingestion layer — JSON file loaders for rules, products, profiles and events.

Submodules:
  loaders — validate-all-then-return JSON parsers for the seed/export files
            produced by the rule authoring CRUD layer.

Default seed files live in ``config/seed/`` (see ``[data]`` in
``config/default.toml``).
"""
