"""Graph — Default collaborators: id allocation and graph file loading."""

from jsmodwrap.graph.allocator import ModuleIdFactory, create_module_id_factory
from jsmodwrap.graph.loader import load_graph, parse_graph

__all__ = ["ModuleIdFactory", "create_module_id_factory", "load_graph", "parse_graph"]
