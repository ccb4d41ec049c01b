# aequa

Small building blocks for a distributed-validator node. The package has no
dependencies beyond the standard library.

## Modules

### `aequa.bus`

This is a bounded in-process event bus.

- `Kind` is a string enum with the members `DUTY` (`"duty"`), `CONSENSUS`
  (`"consensus"`) and `TX` (`"tx"`).
- `Event` is a dataclass with the fields `kind`, `height`, `round`, `body` and
  `trace_id`.
- `Bus(size=128)` holds at most `size` events. A `size` of zero or less falls
  back to 128.
- `Bus.publish(event)` enqueues the event. When the bus is full it drops the
  event without raising. It returns `True` if the event was enqueued and `False`
  if it was dropped.
- `Bus.subscribe()` returns the `queue.Queue` that events are delivered on. Every
  subscriber gets the same queue.

### `aequa.config`

`load_cluster_lock(path)` reads a JSON file into a `ClusterLock`. The result has
the fields `name`, `threshold` and `operators`. Each operator is an `Operator`
with the fields `index` and `peer_id`.

- Keys are matched exactly first, then without regard to case.
- Missing fields take their zero values.
- A file that cannot be read raises `OSError`.
- Contents that are not valid JSON, or values of the wrong type, raise
  `ValueError`.

### `aequa.lifecycle`

- `Service` is an abstract base class. It has a `name` attribute and the methods
  `start()` and `stop()`, which raise on failure.
- `Manager.add(service)` registers a service.
- `Manager.start_all()` starts the services in the order they were added. If one
  fails, the services already started are stopped in reverse order. The start
  error is raised on its own if no stop failed. Otherwise it is raised together
  with the stop errors as an `ExceptionGroup`.
- `Manager.stop_all()` stops every service in reverse order. One failure is
  raised as it is. Several failures are raised together as an `ExceptionGroup`.

### `aequa.logger`

- `info`, `warn` and `error` write text lines of the form
  `<RFC 3339 local time> INFO|WARN|ERRO <msg>`.
- `info_j`, `warn_j` and `error_j` write one JSON object per line.
  - The object holds the given fields plus `level`, `ts` and `msg`, with keys
    sorted.
  - `<`, `>`, `&`, U+2028 and U+2029 are written as `\u` escapes.
  - Values that JSON cannot encode are written as strings.
- Output goes to standard output. `set_output(stream)` sends it to another
  stream, and `set_output(None)` restores standard output.

### `aequa.metrics`

A `Registry` holds counters, gauges and summaries. Each is identified by a name
and an optional mapping of labels. All methods are thread-safe.

- `inc(name, labels=None)` increments a counter by one.
- `add_gauge(name, labels, delta)` adds `delta` to a gauge, and
  `set_gauge(name, labels, value)` sets it.
- `observe_summary(name, labels, value)` adds the integer part of `value` to the
  summary's sum and increments its count. NaN and infinite values are ignored.
- `dump_prom()` returns Prometheus exposition text. It starts with a `dvt_up 1`
  gauge. Then come the counters, the gauges, and finally each summary as a
  `_sum` / `_count` pair. Each group is sorted by name and then by labels.
- `reset()` clears counters and summaries. Gauges are kept.

Module-level functions with the same names work on a shared default registry.

### `aequa.trace`

- `with_trace_id(trace_id)` is a context manager that sets the current trace id
  for the duration of the block. An empty id leaves things as they are.
- `current_trace_id()` returns the id in effect, or `None` if no id is set.

The id is stored in a `contextvars.ContextVar`, so it follows threads' and
tasks' own contexts.

## Example

```python
from aequa import metrics
from aequa.bus import Bus, Event, Kind
from aequa.lifecycle import Manager, Service
from aequa.trace import current_trace_id, with_trace_id


class Worker(Service):
    name = "worker"

    def start(self) -> None:
        print("started")

    def stop(self) -> None:
        print("stopped")


manager = Manager()
manager.add(Worker())
manager.start_all()

bus = Bus(16)
bus.publish(Event(Kind.DUTY, height=1))
print(bus.subscribe().get_nowait())

metrics.inc("dvt_duties_total", {"kind": "attest"})
metrics.set_gauge("dvt_peers", None, 4)
metrics.observe_summary("dvt_latency_ms", None, 12.0)
print(metrics.dump_prom())

with with_trace_id("req-1"):
    assert current_trace_id() == "req-1"

manager.stop_all()
```

## What it does not do

This is a library of parts, not a node.

- It has no command-line program.
- It has no network transport, no consensus and no key generation.
- It has no HTTP server. `dump_prom()` only returns the metrics text, and serving
  it is up to you.

## Install and test

```
pip install ".[test]"
pytest
```