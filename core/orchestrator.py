"""
Seeder Orchestrator — Batch pipeline coordination.

Runs an ordered list of steps against one SeederHttpClient and one
SeederContext:

  - Steps run strictly in list order, one at a time.
  - Each step is announced with a banner before it runs.
  - The first failing step stops the run; later steps never start.
  - On success in verbose mode, the whole context is printed.

Each step moves through not_started -> running -> succeeded | failed.
There are no retries and no rollback: a step that created remote records
before failing is still reported as failed.

Typical usage:
    orchestrator = SeederOrchestrator(steps, client, context, verbose=config.verbose)
    results = orchestrator.run()
    orchestrator.print_summary(results)
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Sequence

from .context import SeederContext, describe_value
from .errors import RequestFailed

NOT_STARTED = "not_started"
RUNNING = "running"
SUCCEEDED = "succeeded"
FAILED = "failed"


@dataclass(frozen=True)
class Step:
    """A named unit of work: fn(client, context) -> None.

    Steps hold no state; everything they produce goes into the context.
    """

    name: str
    fn: Callable[[Any, SeederContext], None]

    def run(self, client, context: SeederContext) -> None:
        self.fn(client, context)


class SeederOrchestrator:
    """Runs steps in order, stopping at the first failure.

    Attributes:
        steps: The steps to run, in order.
        client: SeederHttpClient shared by all steps.
        context: SeederContext shared by all steps.
        verbose: Dump the context after a successful run and keep the
            backend body of a failed request in the results.
    """

    def __init__(self, steps: Sequence[Step], client, context: SeederContext,
                 verbose: bool = False):
        self.steps = list(steps)
        self.client = client
        self.context = context
        self.verbose = verbose

    def run(self) -> Dict[str, Any]:
        """Execute every step in order.

        Returns:
            A dict containing:
                - started_at/completed_at: ISO timestamps
                - success: True if every step succeeded
                - steps: list of {"name", "status"} in run order
                - failed_step: name of the step that failed (if any)
                - error: error message (if success=False)
                - error_body: backend response of a failed request (verbose only)
        """
        statuses: List[Dict[str, str]] = [
            {"name": step.name, "status": NOT_STARTED} for step in self.steps
        ]
        results: Dict[str, Any] = {
            "started_at": datetime.now(timezone.utc).isoformat(),
            "success": False,
            "steps": statuses,
        }

        for step, status in zip(self.steps, statuses):
            print(f"\n{'='*60}")
            print(f"Running: {step.name} Step")
            print("="*60)

            status["status"] = RUNNING
            try:
                step.run(self.client, self.context)
            except Exception as e:
                status["status"] = FAILED
                results["failed_step"] = step.name
                results["error"] = str(e)
                if self.verbose and isinstance(e, RequestFailed) and e.body is not None:
                    results["error_body"] = e.body
                print(f"\n[Error] {step.name} Step failed: {e}")
                break
            status["status"] = SUCCEEDED
        else:
            results["success"] = True

        results["completed_at"] = datetime.now(timezone.utc).isoformat()

        if results["success"] and self.verbose:
            self.print_context()

        return results

    def print_context(self):
        print("\nContext Summary:")
        for key, value in self.context.get_all().items():
            print(f"  {key}: {describe_value(value)}")

    def print_summary(self, results: Dict):
        """Print a human-readable execution summary.

        Args:
            results: The dict returned by run().
        """
        print(f"\n{'='*60}")
        if results.get("success"):
            print("✓ Database Seeding Completed Successfully")
        else:
            print("✗ Database Seeding Failed")
        print("="*60)

        for step in results.get("steps", []):
            print(f"  {step['name']}: {step['status']}")

        if results.get("error"):
            print(f"\nError Details: {results['error']}")
        if "error_body" in results:
            print(f"\nAPI Response: {results['error_body']}")
