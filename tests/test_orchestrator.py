"""
Tests for the sequential batch orchestrator.
"""

import pytest

from models.enums import FieldStatus
from models.schema import FieldDefinition, default_fields
from search.orchestrator import (
    BatchOrchestrator,
    COMPLETED_MESSAGE,
    EMPTY_VALUE,
    ERROR_VALUE,
    STARTING_MESSAGE,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

def _field(name, query="", enabled=True):
    return FieldDefinition(name=name, search_query=query, enabled=enabled)


class RecordingResolver:
    """Echoes queries back and remembers the call order."""

    def __init__(self, fail_on=(), empty_on=()):
        self.calls = []
        self._fail_on = set(fail_on)
        self._empty_on = set(empty_on)

    def __call__(self, query):
        self.calls.append(query)
        if query in self._fail_on:
            raise RuntimeError(f"boom on {query}")
        if query in self._empty_on:
            return ""
        return f"value for {query}"


def _orchestrator(resolver, delay=0.5):
    sleeps = []
    orch = BatchOrchestrator(resolve=resolver, delay_seconds=delay, sleep=sleeps.append)
    return orch, sleeps


# ---------------------------------------------------------------------------
# Filtering and ordering
# ---------------------------------------------------------------------------

class TestBatchFiltering:
    def test_single_row_returned(self):
        orch, _ = _orchestrator(RecordingResolver())
        rows = orch.run([_field("Email"), _field("Phone")])
        assert len(rows) == 1

    def test_keys_follow_field_order(self):
        orch, _ = _orchestrator(RecordingResolver())
        [row] = orch.run([_field("Zeta"), _field("Alpha"), _field("Mid")])
        assert list(row) == ["Zeta", "Alpha", "Mid"]

    def test_disabled_and_unnamed_skipped(self):
        resolver = RecordingResolver()
        orch, _ = _orchestrator(resolver)
        fields = [
            _field("Company Name"),
            _field("Website", enabled=False),
            _field(""),
            _field("Email"),
        ]
        [row] = orch.run(fields)
        assert list(row) == ["Company Name", "Email"]
        assert resolver.calls == ["Company Name", "Email"]

    def test_whitespace_name_kept(self):
        resolver = RecordingResolver()
        orch, _ = _orchestrator(resolver)
        [row] = orch.run([_field("A"), _field(" "), _field("B")])
        assert list(row) == ["A", " ", "B"]
        assert resolver.calls == ["A", " ", "B"]

    def test_empty_field_list(self):
        orch, sleeps = _orchestrator(RecordingResolver())
        assert orch.run([]) == [{}]
        assert sleeps == []

    def test_custom_query_used(self):
        resolver = RecordingResolver()
        orch, _ = _orchestrator(resolver)
        [row] = orch.run([_field("CEO", query="Acme Corp chief executive")])
        assert resolver.calls == ["Acme Corp chief executive"]
        assert row == {"CEO": "value for Acme Corp chief executive"}

    def test_fields_not_mutated(self):
        fields = [_field("Email"), _field("Phone", enabled=False)]
        orch, _ = _orchestrator(RecordingResolver())
        orch.run(fields)
        assert [f.name for f in fields] == ["Email", "Phone"]
        assert fields[1].enabled is False

    def test_default_fields_all_runnable(self):
        resolver = RecordingResolver()
        orch, _ = _orchestrator(resolver, delay=0)
        [row] = orch.run(default_fields())
        assert len(row) == 38
        assert list(row)[0] == "Company Name"
        assert list(row)[-1] == "News"


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------

class TestBatchFailures:
    def test_error_is_contained_to_one_field(self):
        resolver = RecordingResolver(fail_on={"Two"})
        orch, _ = _orchestrator(resolver)
        messages = []

        [row] = orch.run([_field("One"), _field("Two"), _field("Three")], on_status=messages.append)

        assert row == {
            "One": "value for One",
            "Two": ERROR_VALUE,
            "Three": "value for Three",
        }
        assert resolver.calls == ["One", "Two", "Three"]
        assert messages[-1] == COMPLETED_MESSAGE

    def test_no_retry_after_error(self):
        resolver = RecordingResolver(fail_on={"One"})
        orch, _ = _orchestrator(resolver)
        orch.run([_field("One")])
        assert resolver.calls == ["One"]

    def test_empty_value_marked(self):
        resolver = RecordingResolver(empty_on={"Blank"})
        orch, _ = _orchestrator(resolver)
        [row] = orch.run([_field("Blank")])
        assert row == {"Blank": EMPTY_VALUE}

    def test_report(self):
        resolver = RecordingResolver(fail_on={"B"}, empty_on={"C"})
        orch, _ = _orchestrator(resolver)
        orch.run([_field("A"), _field("B"), _field("C")])

        report = orch.last_report
        assert [o.status for o in report.outcomes] == [
            FieldStatus.OK,
            FieldStatus.ERROR,
            FieldStatus.EMPTY,
        ]
        assert report.error_count == 1
        assert report.empty_count == 1
        assert "boom on B" in report.outcomes[1].error


# ---------------------------------------------------------------------------
# Progress and pacing
# ---------------------------------------------------------------------------

class TestBatchProgress:
    def test_progress_messages(self):
        orch, _ = _orchestrator(RecordingResolver())
        messages = []
        orch.run(
            [_field("Email"), _field("Skipped", enabled=False), _field("Phone")],
            on_status=messages.append,
        )
        assert messages == [
            STARTING_MESSAGE,
            "Searching 1/2: Email",
            "Searching 2/2: Phone",
            COMPLETED_MESSAGE,
        ]

    def test_progress_precedes_resolution(self):
        events = []

        def resolve(query):
            events.append(("resolve", query))
            return "ok"

        orch = BatchOrchestrator(resolve=resolve, sleep=lambda s: events.append(("sleep", s)))
        orch.run([_field("A"), _field("B")], on_status=lambda m: events.append(("status", m)))

        assert events == [
            ("status", STARTING_MESSAGE),
            ("status", "Searching 1/2: A"),
            ("resolve", "A"),
            ("sleep", 0.5),
            ("status", "Searching 2/2: B"),
            ("resolve", "B"),
            ("sleep", 0.5),
            ("status", COMPLETED_MESSAGE),
        ]

    def test_delay_after_each_field(self):
        orch, sleeps = _orchestrator(RecordingResolver(fail_on={"B"}), delay=0.5)
        orch.run([_field("A"), _field("B"), _field("C")])
        assert sleeps == [0.5, 0.5, 0.5]

    @pytest.mark.parametrize("delay", [0, 0.25, 2])
    def test_configurable_delay(self, delay):
        orch, sleeps = _orchestrator(RecordingResolver(), delay=delay)
        orch.run([_field("A")])
        assert sleeps == [delay]

    def test_no_callback(self):
        orch, _ = _orchestrator(RecordingResolver())
        [row] = orch.run([_field("A")])
        assert row == {"A": "value for A"}
