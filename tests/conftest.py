from pathlib import Path

import pytest

from order_includes.imports import GoImportClassifier
from tests.infrastructure import go_source, write


@pytest.fixture
def classifier() -> GoImportClassifier:
    """Classifier with the built-in prefix sets."""
    return GoImportClassifier()


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path: Path):
    # no stray .order-includes.yaml or $ORDER_INCLUDES_CONFIG from the developer's machine
    monkeypatch.delenv("ORDER_INCLUDES_CONFIG", raising=False)
    monkeypatch.delenv("ORDER_INCLUDES_DEBUG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def goproj(tmp_path: Path) -> Path:
    """
    Small Go tree:
      proj/main.go        unsorted three-group block
      proj/pkg/util.go    no import block
      proj/pkg/empty.go   empty file
      proj/README.md      not a Go file
    """
    root = tmp_path / "proj"
    write(root / "main.go", go_source(
        '\t"github.com/x/y"',
        '\t"fmt"',
        '\t"platform/z"',
    ))
    write(root / "pkg" / "util.go", 'package pkg\n\nimport "fmt"\n\nfunc F() { fmt.Println() }\n')
    write(root / "pkg" / "empty.go", "")
    write(root / "README.md", "# proj\n")
    return root
