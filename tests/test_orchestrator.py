"""Tests for core.orchestrator.SeederOrchestrator (batch mode)."""

from unittest.mock import MagicMock

import pytest

from core.context import SeederContext
from core.errors import MissingPrerequisite, RequestFailed
from core.orchestrator import (
    FAILED,
    NOT_STARTED,
    SUCCEEDED,
    SeederOrchestrator,
    Step,
)


def _step_a(client, context):
    context.set("x", 1)


def _step_b(client, context):
    context.require("x", "x must be set by step A")


@pytest.fixture
def context():
    return SeederContext()


def _statuses(results):
    return [(s["name"], s["status"]) for s in results["steps"]]


# ---------------------------------------------------------------------------
# Ordering and fail-fast
# ---------------------------------------------------------------------------

def test_a_then_b_succeeds(context):
    orchestrator = SeederOrchestrator([Step("A", _step_a), Step("B", _step_b)], MagicMock(), context)
    results = orchestrator.run()
    assert results["success"] is True
    assert context.get("x") == 1
    assert _statuses(results) == [("A", SUCCEEDED), ("B", SUCCEEDED)]
    assert "error" not in results


def test_b_then_a_fails_and_a_never_runs(context):
    step_a = MagicMock(side_effect=_step_a)
    orchestrator = SeederOrchestrator([Step("B", _step_b), Step("A", step_a)], MagicMock(), context)
    results = orchestrator.run()
    assert results["success"] is False
    assert results["failed_step"] == "B"
    assert "x must be set by step A" in results["error"]
    assert _statuses(results) == [("B", FAILED), ("A", NOT_STARTED)]
    step_a.assert_not_called()
    assert context.has("x") is False


def test_steps_receive_same_client_and_context(context):
    client = MagicMock()
    seen = []
    steps = [Step(name, lambda c, ctx: seen.append((c, ctx))) for name in ("one", "two")]
    SeederOrchestrator(steps, client, context).run()
    assert seen == [(client, context), (client, context)]


def test_steps_run_in_list_order(context):
    order = []
    steps = [Step(str(i), lambda c, ctx, i=i: order.append(i)) for i in range(5)]
    SeederOrchestrator(steps, MagicMock(), context).run()
    assert order == [0, 1, 2, 3, 4]


def test_empty_pipeline_succeeds(context):
    results = SeederOrchestrator([], MagicMock(), context).run()
    assert results["success"] is True
    assert results["steps"] == []


def test_results_timestamps(context):
    results = SeederOrchestrator([Step("A", _step_a)], MagicMock(), context).run()
    assert results["started_at"] <= results["completed_at"]


# ---------------------------------------------------------------------------
# Verbose diagnostics
# ---------------------------------------------------------------------------

def test_verbose_success_dumps_context(context, capsys):
    SeederOrchestrator([Step("A", _step_a)], MagicMock(), context, verbose=True).run()
    out = capsys.readouterr().out
    assert "Context Summary:" in out
    assert "  x: 1" in out


def test_quiet_success_does_not_dump_context(context, capsys):
    SeederOrchestrator([Step("A", _step_a)], MagicMock(), context).run()
    assert "Context Summary:" not in capsys.readouterr().out


def test_verbose_failure_keeps_backend_body(context):
    def failing(client, ctx):
        raise RequestFailed("POST", "/authenticate", 401, {"message": "denied"})

    results = SeederOrchestrator([Step("Auth", failing)], MagicMock(), context, verbose=True).run()
    assert results["error_body"] == {"message": "denied"}


def test_quiet_failure_omits_backend_body(context):
    def failing(client, ctx):
        raise RequestFailed("POST", "/authenticate", 401, {"message": "denied"})

    results = SeederOrchestrator([Step("Auth", failing)], MagicMock(), context).run()
    assert "error_body" not in results


def test_print_summary(context, capsys):
    orchestrator = SeederOrchestrator([Step("B", _step_b)], MagicMock(), context)
    results = orchestrator.run()
    orchestrator.print_summary(results)
    out = capsys.readouterr().out
    assert "Database Seeding Failed" in out
    assert "B: failed" in out
    assert "Error Details:" in out


def test_step_run_delegates_to_fn(context):
    fn = MagicMock()
    client = MagicMock()
    Step("X", fn).run(client, context)
    fn.assert_called_once_with(client, context)
