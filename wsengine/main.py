"""Command-line entry point: start the echo server and read commands."""

from __future__ import annotations

import argparse
import sys
import threading
from typing import Optional, Sequence

from wsengine.config import ConfigError, ConfigReader
from wsengine.logsys import Log, get_log
from wsengine.server import EchoServer
from wsengine.threadpool import ThreadPool


def handle_command(command: str, log: Log) -> bool:
    """Act on one console command; False means the program should exit."""
    if command == "exit":
        return False
    if command == "info":
        log.info("Received info command")
    else:
        log.warning(f"Unknown command: {command}")
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="wsengine", description="Run the WebSocket echo engine.")
    parser.add_argument("--config", default="config.json", help="path of the JSON config file")
    args = parser.parse_args(argv)

    log = get_log()
    log.info("LogSys started successfully")
    try:
        port = ConfigReader(args.config, log).get_port()
    except ConfigError as exc:
        log.critical(str(exc))
        return 1

    server = EchoServer(port, log)
    log.set_log_level(6)
    pool = ThreadPool(32, log)
    server_thread = threading.Thread(target=server.run, name="echo-server", daemon=True)
    server_thread.start()

    log.info("Entering main loop")
    try:
        for line in sys.stdin:
            for command in line.split():
                if not handle_command(command, log):
                    return 0
    finally:
        log.info("Shutting down system...")
        server.stop()
        server_thread.join(timeout=5)
        pool.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())