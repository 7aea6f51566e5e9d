"""Declarative tree loading from YAML documents.

Document shape::

    root: /tmp/fixture          # optional, defaults to a fresh temp dir
    override_existing: false    # also overrideExisting / override_file
    auto_delete: true           # also autoDelete / drop
    strict: false
    entries:
      - path: config/app.conf
        type: text_file
        content: "host = localhost"
      - path: logs/app.log
        type: empty_file
        settings:
          readonly: true
      - path: data/raw
        type: directory
      - path: blob.bin
        type: binary_file
        content: !!binary aGVsbG8=
      - path: copy.txt
        type: copied_file
        source: /etc/hostname

Every entry must carry a ``type``. Entries that rely on the presence of
``content`` to pick a kind are rejected.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from tree_fs.errors import DecodeError
from tree_fs.materializer import Materializer
from tree_fs.models import TreeConfig
from tree_fs.protocols import TreeMaterializer
from tree_fs.tree import Tree


def load_config_str(content: str) -> TreeConfig:
    """Decode a YAML document into a TreeConfig.

    Args:
        content: YAML text.

    Returns:
        The decoded configuration. Nothing is created on disk.

    Raises:
        DecodeError: If the text is not valid YAML, is not a mapping, or does
            not match the tree schema.
    """
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise DecodeError(f"Invalid YAML: {e}") from e

    if not isinstance(data, dict):
        raise DecodeError(
            f"Tree document must be a mapping, got {type(data).__name__}"
        )

    try:
        return TreeConfig.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Invalid tree document: {e}") from e


def load_config_file(path: Path) -> TreeConfig:
    """Decode a YAML file into a TreeConfig.

    Args:
        path: Path to the YAML file.

    Returns:
        The decoded configuration.

    Raises:
        FileNotFoundError: If file doesn't exist.
        DecodeError: If the content cannot be decoded.
    """
    return load_config_str(Path(path).read_text(encoding="utf-8"))


def from_yaml_str(content: str, materializer: TreeMaterializer | None = None) -> Tree:
    """Create a tree from a YAML string.

    Args:
        content: YAML text.
        materializer: Optional materializer (default: real filesystem).

    Returns:
        Tree handle for the created root.
    """
    config = load_config_str(content)
    return (materializer or Materializer.create()).materialize(config)


def from_yaml_file(path: Path, materializer: TreeMaterializer | None = None) -> Tree:
    """Create a tree from a YAML file.

    Args:
        path: Path to the YAML file.
        materializer: Optional materializer (default: real filesystem).

    Returns:
        Tree handle for the created root.
    """
    config = load_config_file(path)
    return (materializer or Materializer.create()).materialize(config)
