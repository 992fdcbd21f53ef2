"""
Behave environment configuration for domains-cli integration tests.
"""

import logging
import shutil
import tempfile
from pathlib import Path

import yaml

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.base_dir = Path(__file__).parent.parent
    context.test_domain = "example.com"

    context.test_config = {
        "default_provider": "mock",
        "scope": "test-team",
        "dns_providers": {
            "mock": {
                "domains": {
                    context.test_domain: [
                        {"name": "", "type": "A", "value": "198.51.100.1"},
                        {"name": "www", "type": "CNAME", "value": "example.com"},
                    ],
                    "example.net": [],
                }
            }
        },
        "logging": {"level": "WARNING"},
    }

    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Give each scenario its own config directory."""
    context.test_data_dir = Path(tempfile.mkdtemp(prefix="domains-"))
    context.global_config_dir = context.test_data_dir / "global"
    context.global_config_dir.mkdir()

    with open(context.global_config_dir / "config.yaml", "w") as f:
        yaml.dump(context.test_config, f)

    context.client = None
    context.exit_status = None
    context.stdout = ""
    context.stderr = ""

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    shutil.rmtree(context.test_data_dir, ignore_errors=True)
    logger.info(f"Completed scenario: {scenario.name}")
