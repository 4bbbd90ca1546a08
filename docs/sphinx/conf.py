# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for dfalex documentation."""

project = "dfalex"
author = "dfalex Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
