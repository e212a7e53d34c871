import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path so `import doc2deck` works
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from doc2deck.blocks import BlockConverter  # noqa: E402
from doc2deck.context import Context, ConversionState  # noqa: E402
from doc2deck.inline import InlineConverter  # noqa: E402
from doc2deck.segmenter import SlideSegmenter  # noqa: E402


@pytest.fixture
def state():
    return ConversionState()


@pytest.fixture
def ctx():
    return Context(slide_level=2)


@pytest.fixture
def inline_converter(state):
    return InlineConverter(state)


@pytest.fixture
def block_converter(state):
    return BlockConverter(state)


@pytest.fixture
def segmenter(state):
    return SlideSegmenter(state)
