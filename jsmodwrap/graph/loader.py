"""
Graph Loader — Load module records from YAML or JSON graph dumps.

Expected document shape:

    modules:
      - path: /root/src/foo.js
        output:
          - type: js/module
            data: {code: "__d(function() {})", lineCount: 1}
        dependencies:
          - name: ./bar
            absolutePath: /root/src/bar.js

JSON is valid YAML, so both formats go through the same parser.
"""

from pathlib import Path
from typing import Union

import yaml

from jsmodwrap.core.logging import LogChannel, get_logger
from jsmodwrap.ir.schema import Module

log = get_logger(LogChannel.GRAPH)


def parse_graph(data: dict) -> list[Module]:
    """
    Validate a decoded graph document into Module records.

    Raises:
        ValueError: If the document has no `modules` list
    """
    if not isinstance(data, dict) or not isinstance(data.get("modules"), list):
        raise ValueError("Graph document must contain a 'modules' list")

    return [Module.model_validate(entry) for entry in data["modules"]]


def load_graph(path: Union[str, Path]) -> list[Module]:
    """
    Load a module graph file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file does not parse or the document is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Graph file not found: {path}")

    with open(path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Graph file is not valid YAML/JSON: {path}") from e

    modules = parse_graph(data)
    log.verbose("graph_loaded", path=str(path), modules=len(modules))
    return modules
