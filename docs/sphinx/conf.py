# Copyright 2026 Dodo Payments SDK Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for the Dodo Payments Python SDK documentation."""

project = "Dodo Payments Python SDK"
author = "Dodo Payments SDK Contributors"
release = "1.0.0"

extensions: list[str] = ["sphinx.ext.autodoc", "sphinx.ext.napoleon"]
autodoc_member_order = "bysource"

html_theme = "alabaster"
