import pytest

from jsmodwrap.core.logging import configure_logging
from jsmodwrap.graph.allocator import ModuleIdFactory
from jsmodwrap.ir.schema import Dependency, Module, Output, OutputData


def _make_output(type_tag: str = "js/module", code: str = "__d(function() {})", line_count=1) -> Output:
    return Output(type=type_tag, data=OutputData(code=code, line_count=line_count))


def _make_module(path: str = "/root/src/foo.js", outputs=None, dependencies=None) -> Module:
    deps = {
        name: Dependency(absolute_path=abs_path, name=name)
        for name, abs_path in (dependencies or [])
    }
    return Module(
        path=path,
        output=outputs if outputs is not None else [_make_output()],
        dependencies=deps,
    )


@pytest.fixture(autouse=True)
def quiet_logging():
    """Rebind logging to the current capture stream and keep it quiet."""
    configure_logging(level="silent", force=True)


@pytest.fixture
def make_output():
    """Factory for a single output record."""
    return _make_output


@pytest.fixture
def make_module():
    """Factory for a module record; dependencies given as (name, absolute path) pairs."""
    return _make_module


@pytest.fixture
def id_factory():
    """Sequential id allocator, fresh per test."""
    return ModuleIdFactory()


@pytest.fixture
def foo_module():
    """/root/src/foo.js depending on /root/src/bar.js."""
    return _make_module(dependencies=[("./bar", "/root/src/bar.js")])


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "graph.yaml"
    path.write_text(
        """
modules:
  - path: /root/src/prelude.js
    output:
      - type: js/script/virtual
        data: {code: "var __DEV__=true;", lineCount: 1}
  - path: /root/src/foo.js
    output:
      - type: js/module
        data: {code: "__d(function(g,r,i,a,m,e,d){r(d[0])})", lineCount: 1}
    dependencies:
      - name: ./bar
        absolutePath: /root/src/bar.js
  - path: /root/src/bar.js
    output:
      - type: js/module
        data: {code: "__d(function(g,r,i,a,m,e,d){})", lineCount: 1}
  - path: /root/assets/logo.png
    output:
      - type: asset/png
        data: {code: ""}
"""
    )
    return path
