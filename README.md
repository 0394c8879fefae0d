# concpatterns

Small, self-contained demonstrations of classic concurrency patterns, built
on Python threads, queues, conditions and events. Each pattern is a module
with a `run_*` function that narrates what its threads are doing on standard
output and returns what it collected, and the building blocks behind the
patterns can be used on their own.

## Patterns

| Option                    | Module                              | Entry function               |
|---------------------------|-------------------------------------|------------------------------|
| `--pipeline`              | `concpatterns.pipeline`             | `run_pipeline()`             |
| `--fan`                   | `concpatterns.fan`                  | `run_fan()`                  |
| `--pools`                 | `concpatterns.pools`                | `run_pools()`                |
| `--producer-consumer`     | `concpatterns.producer_consumer`    | `run_producer_consumer()`    |
| `--supervisor`            | `concpatterns.supervisor`           | `run_supervisor()`           |
| `--pubsub`                | `concpatterns.pubsub`               | `run_pubsub()`               |
| `--timeout-cancellation`  | `concpatterns.timeout_cancellation` | `run_timeout_cancellation()` |
| `--rate-limiting`         | `concpatterns.rate_limiting`        | `run_rate_limiting()`        |
| `--mapreduce`             | `concpatterns.mapreduce`            | `run_mapreduce()`            |
| `--singleflight`          | `concpatterns.singleflight`         | `run_singleflight()`         |
| `--event-loop`            | `concpatterns.event_loop`           | `run_event_loop()`           |
| `--resource-pooling`      | `concpatterns.resource_pooling`     | `run_resource_pooling()`     |

## Command line

Installing the package provides the `cmp-pattern` command. Pick one pattern
to run:

```
cmp-pattern --pipeline
cmp-pattern --fan
cmp-pattern --singleflight
```

If several options are given, the first one in the table above runs. With no
option, the command prints the usage text and exits with status 1.

## Library use

Every `run_*` function takes a `time_scale` that multiplies all simulated
delays, so `time_scale=0` runs a demonstration almost instantly. Functions
that make random choices also take an `rng` (for example a `random.Random`),
which makes their random values reproducible.

```python
import random

from concpatterns.mapreduce import run_mapreduce
from concpatterns.rate_limiting import TokenBucketLimiter
from concpatterns.singleflight import Group

counts = run_mapreduce(["hello world", "hello go"], random.Random(1), 0)
# counts == {"hello": 2, "world": 1, "go": 1}

group = Group()
value = group.do("user:123", lambda: "expensive result")

limiter = TokenBucketLimiter(3, 5)
if limiter.allow():
    ...
limiter.stop()
```

Building blocks available on their own:

- `pipeline.generate_numbers()`, `square()` and `add_ten()`: pipeline stages,
  each running in its own thread and returning an iterator.
- `fan.generate_work_items()`, `fan_out()` and `fan_in()`: split a stream
  across workers and merge the results; `WorkItem` and `Result` are the
  records passed along.
- `pubsub.Broadcaster`: `subscribe()` returns an iterator of messages,
  `publish()` delivers to every subscriber, `close()` ends all subscriptions.
- `supervisor.worker_with_failure()`: a worker that returns `"failed"`,
  `"completed"` or `"stopped"`.
- `mapreduce.map_phase()`, `shuffle_phase()` and `reduce_phase()`, with
  `KeyValue` pairs.
- `event_loop.event_loop()` with the producers `user_event_producer()`,
  `system_event_producer()` and `timer_event_producer()`, and `EventKind`.
- `rate_limiting.FixedRateLimiter` and `TokenBucketLimiter`, both usable as
  context managers that stop the limiter on exit.
- `resource_pooling.ResourcePool`: `acquire()`, `release()` and `close()`
  over `Resource` objects, creating new ones up to `max_size`.
- `singleflight.Group`: concurrent `do()` calls for the same key share one
  execution and its result or exception.
- `timeout_cancellation.Context`, made with `with_timeout()` or
  `with_cancel()`: `cancel()`, `wait()`, `done()` and `error()`, which gives
  `CancelledError` or `DeadlineExceededError` once the context has ended.

## Tests

```
pip install -e ".[test]"
pytest
```