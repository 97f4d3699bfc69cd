"""
Gunicorn configuration for the habitlog API.

    gunicorn -c gunicorn.conf.py

Env vars that override defaults:
  PORT     TCP port to bind
  WORKERS  number of worker processes (default: 2)
"""
import os

wsgi_app = "habitlog.main:app"

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# With SQLite keep this at 1; PostgreSQL deployments can raise it.
workers = int(os.environ.get("WORKERS", "2"))

# Each worker runs Uvicorn's ASGI event loop inside Gunicorn's process manager.
worker_class = "uvicorn.workers.UvicornWorker"

keepalive = 5
timeout = 120

# stdout only; application logs are configured in habitlog/core/logging.py.
loglevel = os.environ.get("LOG_LEVEL", "info").lower()
accesslog = "-"
errorlog = "-"
access_log_format = '%(h)s "%(r)s" %(s)s %(b)sB %(D)sµs'

graceful_timeout = 30
