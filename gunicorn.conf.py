"""Gunicorn configuration for the ClubSpace API."""

import os

# Server socket
bind = os.environ.get('CLUBSPACE_BIND', '0.0.0.0:8000')

# SQLite allows one writer at a time; keep the worker count small
workers = int(os.environ.get('CLUBSPACE_WORKERS', 2))
threads = 4
worker_class = 'gthread'

timeout = 30
graceful_timeout = 30
keepalive = 5

# Logging
accesslog = os.environ.get('CLUBSPACE_ACCESS_LOG', 'logs/gunicorn-access.log')
errorlog = os.environ.get('CLUBSPACE_ERROR_LOG', 'logs/gunicorn-error.log')
loglevel = 'info'
access_log_format = '%(h)s %(u)s %(t)s "%(r)s" %(s)s %(b)s %(D)s'

proc_name = 'clubspace'

preload_app = True

max_requests = 1000
max_requests_jitter = 50

limit_request_line = 8190
limit_request_fields = 100
limit_request_field_size = 8190
