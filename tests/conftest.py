#!/usr/bin/env python3
"""
PyTest Configuration and Fixtures
Shared fixtures for the creational patterns test suite
"""

import pytest
import logging
import sys
from pathlib import Path
from typing import Callable, List, Tuple

import yaml

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from creational.config.app_config import ENV_VAR, LOG_FILE_VAR, LOG_LEVEL_VAR

# Disable logging during tests
logging.disable(logging.CRITICAL)

# Expected output of a full default run, in order
DEFAULT_DEMO_OUTPUT = [
    "Email notification sent",
    "Notification registered",
    "SMS notification sent",
    "Notification registered",
    "Push notification sent",
    "Notification registered",
    "Sales PDF report generated",
    "Sales Excel report generated",
    "Sales HTML report generated",
    "HR PDF report generated",
    "HR Excel report generated",
    "HR HTML report generated",
]

# =====================================================
# Output fixtures
# =====================================================

@pytest.fixture
def default_demo_output() -> List[str]:
    """Lines printed by a full default run"""
    return list(DEFAULT_DEMO_OUTPUT)

@pytest.fixture
def output_sink() -> Tuple[List[str], Callable[[str], None]]:
    """Collecting sink: (lines, sink) where sink appends to lines"""
    lines: List[str] = []
    return lines, lines.append

# =====================================================
# Configuration fixtures
# =====================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Remove configuration environment variables for the test"""
    for var in (ENV_VAR, LOG_LEVEL_VAR, LOG_FILE_VAR):
        monkeypatch.delenv(var, raising=False)
    return monkeypatch

@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Temporary config directory with base and environment files"""
    config_path = tmp_path / "environments"
    config_path.mkdir()

    base_config = {
        "logging": {"level": "WARNING", "structured": False, "performance": True},
        "demo": {"channels": ["email", "sms", "push"], "departments": ["sales", "hr"]},
    }
    dev_config = {"debug_mode": True, "logging": {"level": "INFO"}}
    prod_config = {"logging": {"structured": True}, "demo": {"departments": ["hr"]}}

    for name, content in (("base", base_config), ("development", dev_config), ("production", prod_config)):
        with open(config_path / f"{name}.yaml", "w", encoding="utf-8") as f:
            yaml.dump(content, f)

    return config_path

# =====================================================
# Logging fixtures
# =====================================================

@pytest.fixture
def enable_logging():
    """Re-enable logging for tests that inspect emitted records"""
    logging.disable(logging.NOTSET)
    yield
    logging.disable(logging.CRITICAL)

@pytest.fixture
def clean_package_logger():
    """Restore the package logger after a test configures it"""
    package_logger = logging.getLogger("creational")
    original_handlers = package_logger.handlers[:]
    original_level = package_logger.level
    original_propagate = package_logger.propagate

    yield package_logger

    for handler in package_logger.handlers:
        if handler not in original_handlers:
            handler.close()
    package_logger.handlers = original_handlers
    package_logger.setLevel(original_level)
    package_logger.propagate = original_propagate

# =====================================================
# Test environment setup
# =====================================================

def pytest_unconfigure(config):
    """Clean up after all tests"""
    logging.disable(logging.NOTSET)

def pytest_collection_modifyitems(config, items):
    """Add markers based on test location"""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
