"""CLI entry point for the sample syslog sender."""

import argparse
import logging
import sys

from router_syslog.client import SyslogSender


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        stream=sys.stderr,
    )

    parser = argparse.ArgumentParser(description="Router-style syslog sender")
    parser.add_argument("--server", default="localhost", help="Server host")
    parser.add_argument("--port", type=int, default=5514, help="Server port")
    parser.add_argument("--count", type=int, default=20, help="Number of datagrams to send")
    parser.add_argument("--interval", type=float, default=0.1, help="Seconds between datagrams")
    parser.add_argument("--hostname", default="IBR1700-f11", help="Hostname field")
    parser.add_argument("--bom", action="store_true", help="Prefix the payload with a UTF-8 BOM")
    parser.add_argument("--with-timezone", action="store_true",
                        help="Send timestamps with a numeric UTC offset")
    args = parser.parse_args()

    sender = SyslogSender(args.server, args.port, args.hostname,
                          bom=args.bom, with_timezone=args.with_timezone)
    try:
        sender.generate_sample_logs(args.count, args.interval)
    finally:
        sender.close()


if __name__ == "__main__":
    main()
