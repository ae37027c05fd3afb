from order_includes.imports.locator import delimiter_text, find_import_block
from order_includes.types import ImportBlock


def test_basic_block():
    texts = ["package main", "", "import (", '\t"fmt"', '\t"os"', ")", "", "func main() {}"]
    block = find_import_block(texts)
    assert block == ImportBlock(3, 5)
    assert len(block) == 2
    assert 3 in block and 4 in block
    assert 2 not in block and 5 not in block


def test_delimiters_ignore_whitespace_and_trailing_comments():
    assert delimiter_text("  import  (  // deps") == "import("
    assert delimiter_text("\t)\t// end of imports") == ")"

    texts = ["import( // deps", '"fmt"', "  ) // done"]
    assert find_import_block(texts) == ImportBlock(1, 2)


def test_no_opening_delimiter():
    texts = ["package main", 'import "fmt"', "func main() {}"]
    block = find_import_block(texts)
    assert block == ImportBlock(3, 3)
    assert block.is_empty


def test_unclosed_block_is_no_block():
    texts = ["package main", "import (", '\t"fmt"', '\t"os"']
    block = find_import_block(texts)
    assert block == ImportBlock(4, 4)
    assert block.is_empty


def test_empty_block_between_adjacent_delimiters():
    texts = ["import (", ")"]
    block = find_import_block(texts)
    assert block == ImportBlock(1, 1)
    assert block.is_empty


def test_only_first_block_is_used():
    texts = ["import (", '"b"', ")", "import (", '"a"', ")"]
    assert find_import_block(texts) == ImportBlock(1, 2)


def test_lone_paren_always_closes_the_block():
    # line based search: a lone ")" ends the block even if it was meant as content
    texts = ["import (", '"fmt"', "  )", '"os"', ")"]
    assert find_import_block(texts) == ImportBlock(1, 2)


def test_empty_sequence():
    assert find_import_block([]) == ImportBlock(0, 0)
