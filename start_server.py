"""Production server startup script for the comment reply notification service.

Starts the Django application under Gunicorn, logging to stdout/stderr so
container runtimes can collect the output.
"""

import os
import sys

from gunicorn.app.wsgiapp import run


def main():
    """Start the service using Gunicorn.

    Bind address and worker count come from GUNICORN_BIND (default
    0.0.0.0:8000) and GUNICORN_WORKERS (default 2).
    """
    sys.argv = [
        "gunicorn",
        "reply_notification_service.wsgi:application",
        "--bind",
        os.getenv("GUNICORN_BIND", "0.0.0.0:8000"),
        "--workers",
        os.getenv("GUNICORN_WORKERS", "2"),
        "--timeout",
        "60",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]
    run()


if __name__ == "__main__":
    main()
