"""Global server state for the IconRandomizer status server.

Tracks open connections and served status requests for the admin console.
Uses a threading lock for thread-safe updates.
"""

import threading

# Open client connections and total STATUS requests answered
connections = 0
status_requests = 0
counters_lock = threading.Lock()

# Server port tracking (set by the server at startup)
SERVER_PORT = None


def connection_opened():
    global connections
    with counters_lock:
        connections += 1


def connection_closed():
    global connections
    with counters_lock:
        connections = max(0, connections - 1)


def status_served():
    global status_requests
    with counters_lock:
        status_requests += 1


def reset():
    global connections, status_requests, SERVER_PORT
    with counters_lock:
        connections = 0
        status_requests = 0
    SERVER_PORT = None
