"""Shared utilities: optional-dependency loaders and cross-cutting helpers.

Rules
-----
* No interpreter logic.
* No I/O.
* Importable by any layer.
"""
