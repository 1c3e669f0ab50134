"""Shared pytest fixtures for FixSet tests."""
import logging
import tempfile
from pathlib import Path
from typing import Any, Dict, Generator

import pytest
import yaml

from fixset.infrastructure.logger import set_global_logger


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def prefix_config() -> Dict[str, Any]:
    """Include/exclude configuration built on overlapping prefixes."""
    return {
        "include": {
            "prefixes": "a",
            "except_prefixes": "aaaa",
            "replace_prefix": True,
            "replace_suffix": True,
        },
        "exclude": {
            "prefixes": "aa",
            "except_prefixes": "aaa",
            "replace_prefix": True,
            "replace_suffix": True,
        },
    }


@pytest.fixture
def config_file(temp_dir: Path, prefix_config: Dict[str, Any]) -> Path:
    """Write the prefix configuration to a YAML file."""
    config_path = temp_dir / "fixset.yaml"
    with open(config_path, "w") as f:
        yaml.safe_dump({"fixset": prefix_config}, f)
    return config_path


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the global logger and the stdlib fixset logger between tests."""
    yield
    set_global_logger(None)
    for name in ("fixset", "fixset.test"):
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.handlers.clear()
        stdlib_logger.setLevel(logging.NOTSET)
        stdlib_logger.propagate = True
