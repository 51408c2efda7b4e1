"""Tests for the node identity registry."""

from gotestexplorer.testing.models import RunRecord, TestInfo, TestSuiteInfo
from gotestexplorer.testing.registry import NodeRegistry


def _records() -> list[RunRecord]:
    test = TestInfo(id="root_a_test.go_TestA", label="TestA", file="/w/a_test.go", line=3)
    suite = TestSuiteInfo(id="root", label="Root", children=(test,))
    return [RunRecord(node=suite), RunRecord(node=test, function_name="TestA")]


class TestNodeRegistry:
    """Tests for NodeRegistry."""

    def test_given_empty_registry_when_get_then_none(self) -> None:
        assert NodeRegistry().get("root") is None

    def test_given_replaced_records_when_get_then_returns_record(self) -> None:
        registry = NodeRegistry()
        registry.replace(_records())

        record = registry.get("root_a_test.go_TestA")

        assert record is not None
        assert record.function_name == "TestA"
        assert len(registry) == 2
        assert "root" in registry
        assert sorted(registry) == ["root", "root_a_test.go_TestA"]

    def test_given_populated_registry_when_clear_then_empty(self) -> None:
        registry = NodeRegistry()
        registry.replace(_records())

        registry.clear()

        assert len(registry) == 0
        assert registry.get("root") is None

    def test_given_second_replace_when_get_then_old_ids_gone(self) -> None:
        registry = NodeRegistry()
        registry.replace(_records())

        registry.replace([RunRecord(node=TestSuiteInfo(id="root", label="Root"))])

        assert registry.get("root_a_test.go_TestA") is None
        assert registry.get("root") is not None
