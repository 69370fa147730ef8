# wsengine

wsengine is a small WebSocket echo server. It reads its listening port from
a JSON configuration file, writes coloured log lines to the console and
plain lines to a log file, and takes commands on standard input while the
server runs.

## Installation

```
pip install .
```

Add the `test` extra to get the test dependencies:

```
pip install ".[test]"
```

## Configuration

The engine reads `config.json` from the working directory, or the file
given with `--config`:

```json
{
  "general": {
    "communication": { "port": 8080 },
    "logging": { "logLevel": 3 },
    "isDebug": false
  }
}
```

- `general.communication.port` is the port the WebSocket server listens on.
  It must be an unsigned 32-bit integer.
- `general.logging.logLevel` is the value `ConfigReader.get_log_level()`
  returns.
- `general.isDebug` is the value `ConfigReader.is_debug()` returns. It is
  `false` when it is not set.

The file is read again on every query. A missing file, invalid JSON or a
missing or malformed value raises `wsengine.config.ConfigError` (only a
missing `isDebug` falls back to `false`, with a warning).

## Running

```
wsengine
wsengine --config path/to/config.json
```

The server listens on all interfaces at the configured port and sends every
message back unchanged, as text or binary to match what came in. Each
connected client is served until it disconnects.

While it runs, the program reads words from standard input:

- `info` logs that the command was received.
- `exit` stops the server and ends the program.

Any other word is logged as an unknown command. The program also stops when
standard input ends. If the configuration cannot be read, it logs a
critical error and exits with status 1.

Log lines are appended to `log/default.log`, in the form:

```
[ 2025-01-01 12:00:00 | INFO: ] Entering main loop
```

The `log` directory must exist; if the file cannot be opened, that is
reported on standard error and logging carries on to the console only.

## Library use

```python
import threading

from wsengine.config import ConfigReader
from wsengine.logsys import get_log
from wsengine.server import EchoServer

log = get_log()
reader = ConfigReader("config.json", log)
server = EchoServer(reader.get_port(), log, "0.0.0.0")
thread = threading.Thread(target=server.run)
thread.start()
server.ready.wait()   # set once the server is bound (or failed to bind)
print(server.port)    # the actual port, useful when 0 was given
server.stop()
thread.join()
```

Other modules:

- `wsengine.logsys.Log` writes coloured console lines and mirrors them to a
  `LogFile`. Info, error, critical and severe messages are always shown;
  debug needs level 1 or more, warning level 2 and trace level 3
  (`set_log_level()` sets it; the default is 1). Error messages go to the
  console only. `get_log()` returns one shared `Log` for the process, and
  `current_date_time()` gives the timestamp format used.
- `wsengine.logfile.LogFile` appends lines such as
  `[ <time> | INFO: ] <message>` to a file, with one method per level
  (`write_info`, `write_warning`, `write_fatal`, ...). `set_log_path()`
  switches file, and it can be used as a context manager.
- `wsengine.threadpool.ThreadPool` runs callables on worker threads.
  `submit(func, priority, task_id)` returns a `concurrent.futures.Future`;
  higher priorities run first, and a failing task is retried up to three
  times before its last exception is set on the future. Tasks wait in a
  bounded `TaskQueue` (100 entries by default; `push()` raises `queue.Full`
  beyond that). `shutdown()` lets the workers finish what is queued.

## What it does not do

The server speaks WebSocket only: it echoes messages and serves no HTTP
pages or other requests. The command-line program starts a 32-worker thread
pool, but nothing is submitted to it; the log level and debug flag in the
configuration are read only when asked for through `ConfigReader`, and the
program does not apply them.