"""Pytest configuration for CSS Optimizer tests."""

import logging
import pytest
from pathlib import Path
from ..core import CssOptimizer
from ..utils.error import IoError

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

TESTS_DIR = Path(__file__).parent
CSS_TEST_FILES = TESTS_DIR / 'css_test_files'
GENERATED_PREFIX = 'generated-relative-url:'

class PrefixUrlGenerator:
    """URL generator double that prefixes every path it is given."""

    def __init__(self, prefix: str = GENERATED_PREFIX):
        self.prefix = prefix
        self.calls = []

    def generate(self, local_uri: str) -> str:
        self.calls.append(local_uri)
        return self.prefix + local_uri

class MemoryFileSystem:
    """File system double serving files from a dict."""

    def __init__(self, files):
        self.files = files
        self.reads = []

    def read(self, path: str) -> bytes:
        self.reads.append(path)
        if path not in self.files:
            raise IoError(f"Failed to read file {path}: not found")
        data = self.files[path]
        return data.encode('utf-8') if isinstance(data, str) else data

    def realpath(self, path: str) -> str:
        return path

@pytest.fixture
def url_generator():
    """Return a prefixing URL generator."""
    return PrefixUrlGenerator()

@pytest.fixture
def optimizer(url_generator):
    """Create optimizer instance."""
    return CssOptimizer(url_generator)

@pytest.fixture
def memory_fs():
    """Return a factory for in-memory file systems."""
    return MemoryFileSystem

@pytest.fixture
def in_tests_dir(monkeypatch):
    """Run with the tests directory as working directory.

    Stylesheet paths are then relative, e.g. ``css_test_files/quotes.css``.
    """
    monkeypatch.chdir(TESTS_DIR)
    return TESTS_DIR

@pytest.fixture
def file_asset():
    """Return a factory for file asset definitions."""
    def make(path, **overrides):
        asset = {
            'group': -100,
            'type': 'file',
            'weight': 0.012,
            'media': 'all',
            'preprocess': True,
            'data': path,
            'browsers': {'IE': True, '!IE': True},
            'basename': path.rsplit('/', 1)[-1],
        }
        asset.update(overrides)
        return asset
    return make

@pytest.fixture
def expected_output():
    """Return a reader for optimized fixture files."""
    def read(name):
        return (CSS_TEST_FILES / name).read_text(encoding='utf-8')
    return read

@pytest.fixture
def sample_css():
    """Return sample CSS content for testing."""
    return """
    body {
        color: #333;
        font-family: Arial, sans-serif;
        margin: 0;
        padding: 20px;
    }

    .container > .header + .nav ~ .footer {
        max-width: 1200px;
        margin: 0 auto;
    }

    a:hover, .menu :focus {
        background: url(images/bg.png) no-repeat;
    }

    @media (max-width: 768px) and (orientation: landscape) {
        .content {
            flex-direction: column;
        }
    }
    """
