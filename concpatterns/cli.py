"""Command line entry point that runs one of the concurrency pattern examples."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from .event_loop import run_event_loop
from .fan import run_fan
from .mapreduce import run_mapreduce
from .pipeline import run_pipeline
from .pools import run_pools
from .producer_consumer import run_producer_consumer
from .pubsub import run_pubsub
from .rate_limiting import run_rate_limiting
from .resource_pooling import run_resource_pooling
from .singleflight import run_singleflight
from .supervisor import run_supervisor
from .timeout_cancellation import run_timeout_cancellation

PROGRAM = "cmp-pattern"


@dataclass(frozen=True)
class _Example:
    flag: str
    description: str
    banner: str
    run: Callable[[], Any]

    @property
    def dest(self) -> str:
        return self.flag.replace("-", "_")


_EXAMPLES = (
    _Example("pipeline", "pipeline pattern example", "Pipeline Pattern", run_pipeline),
    _Example("fan", "fan-out/fan-in pattern example", "Fan-out/Fan-in Pattern", run_fan),
    _Example("pools", "worker pools pattern example", "Worker Pools Pattern", run_pools),
    _Example(
        "producer-consumer",
        "producer-consumer pattern example",
        "Producer-Consumer Pattern",
        run_producer_consumer,
    ),
    _Example(
        "supervisor",
        "supervisor/restart pattern example",
        "Supervisor/Restart Pattern",
        run_supervisor,
    ),
    _Example(
        "pubsub",
        "publish-subscribe (pub/sub) pattern example",
        "Publish-Subscribe (Pub/Sub) Pattern",
        run_pubsub,
    ),
    _Example(
        "timeout-cancellation",
        "timeouts and cancellation pattern example",
        "Timeouts and Cancellation Pattern",
        run_timeout_cancellation,
    ),
    _Example(
        "rate-limiting", "rate limiting pattern example", "Rate Limiting Pattern", run_rate_limiting
    ),
    _Example("mapreduce", "MapReduce pattern example", "MapReduce Pattern", run_mapreduce),
    _Example(
        "singleflight",
        "singleflight (spaceflight) pattern example",
        "Singleflight (Spaceflight) Pattern",
        run_singleflight,
    ),
    _Example("event-loop", "event loop pattern example", "Event Loop Pattern", run_event_loop),
    _Example(
        "resource-pooling",
        "resource pooling pattern example",
        "Resource Pooling Pattern",
        run_resource_pooling,
    ),
)


def usage() -> str:
    """Return the text shown when no example is selected."""
    title = "Concurrency Model Patterns Examples"
    lines = [title, "=" * len(title), "Usage:"]
    lines.extend(
        f"  {PROGRAM} {'--' + example.flag:<20} - Run {example.description}"
        for example in _EXAMPLES
    )
    lines.append("")
    lines.append("Examples:")
    lines.extend(f"  ./{PROGRAM} --{example.flag}" for example in _EXAMPLES)
    return "\n".join(lines)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROGRAM)
    for example in _EXAMPLES:
        parser.add_argument(
            f"--{example.flag}",
            dest=example.dest,
            action="store_true",
            help=f"Run {example.description}",
        )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the first selected example; print usage and return 1 if none is selected."""
    options = _parser().parse_args(argv)
    selected = next(
        (example for example in _EXAMPLES if getattr(options, example.dest)), None
    )
    if selected is None:
        print(usage())
        return 1
    print(f"Running {selected.banner} Example...")
    selected.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())