"""Go test discovery and execution."""

from gotestexplorer.testing.adapter import GoTestAdapter
from gotestexplorer.testing.models import (
    RunRecord,
    TestEvent,
    TestInfo,
    TestLoadFinishedEvent,
    TestLoadStartedEvent,
    TestRunConfig,
    TestRunFinishedEvent,
    TestRunStartedEvent,
    TestSuiteEvent,
    TestSuiteInfo,
)

__all__ = [
    "GoTestAdapter",
    "RunRecord",
    "TestInfo",
    "TestSuiteInfo",
    "TestRunConfig",
    "TestLoadStartedEvent",
    "TestLoadFinishedEvent",
    "TestRunStartedEvent",
    "TestRunFinishedEvent",
    "TestSuiteEvent",
    "TestEvent",
]
