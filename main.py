"""Entry point for the router syslog server."""

import logging
import signal
import sys
import threading

from router_syslog.config import load_config
from router_syslog.dashboard import create_dashboard_app, run_dashboard
from router_syslog.server import UDPSyslogServer


def main():
    config = load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )

    shutdown_event = threading.Event()

    def signal_handler(signum, frame):
        logging.getLogger(__name__).info("Received signal %d, shutting down...", signum)
        shutdown_event.set()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    server = UDPSyslogServer(config, shutdown_event)

    if config.dashboard_enabled:
        app = create_dashboard_app(server.metrics, server.reject_tracker)
        dash_thread = threading.Thread(target=run_dashboard, args=(app, config.dashboard_port), daemon=True)
        dash_thread.start()
        logging.getLogger(__name__).info("Dashboard running on port %d", config.dashboard_port)

    try:
        server.start()
    finally:
        server.stop()


if __name__ == "__main__":
    main()
