"""Root test configuration."""

import logging

import pytest
import structlog

from rulerkit.rules.models import Rule, RuleGroup


def pytest_configure(config):
    """Configure structlog for tests to suppress debug/info output."""
    logging.basicConfig(level=logging.WARNING, force=True)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def sample_group() -> RuleGroup:
    return RuleGroup(
        name="g1",
        interval="1m",
        rules=[
            Rule(
                alert="HighErrorRate",
                expr='sum(rate(http_requests_total{code=~"5.."}[5m])) > 0.1',
                for_="5m",
                labels={"severity": "critical"},
                annotations={"summary": "Error rate above 10%"},
            ),
            Rule(
                record="job:http_requests:rate5m",
                expr="sum by (job) (rate(http_requests_total[5m]))",
            ),
        ],
    )
