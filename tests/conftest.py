"""Shared test configuration and fixtures for discover-actions tests."""

from pathlib import Path
from typing import Dict

import pytest


@pytest.fixture
def composite_manifest():
    """Composite action manifest with uses- and run-steps."""
    return """
name: "My Action!"
author: Octo Cat <octo@example.com>
description: Builds & tests the project
runs:
  using: composite
  steps:
    - name: Checkout
      uses: actions/checkout@v4
    - name: Install
      run: npm ci
      shell: bash
    - uses: actions/setup-node@v4
      with:
        node-version: '20'
    - run: npm test
      shell: bash
"""


@pytest.fixture
def docker_label_content():
    """Dockerfile describing an action through labels."""
    return """FROM alpine:3.19

LABEL com.github.actions.name="Foo"
LABEL com.github.actions.description="Bar & baz!"
LABEL com.github.actions.icon="package"
LABEL com.github.actions.color="blue"

ENTRYPOINT ["/entrypoint.sh"]
"""


@pytest.fixture
def make_tree(tmp_path):
    """Create files below a temporary root from a ``{relative path: content}`` mapping."""

    def _make_tree(files: Dict[str, str]) -> Path:
        for relative, content in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    return _make_tree
