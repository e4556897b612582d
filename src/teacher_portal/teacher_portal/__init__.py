"""Teacher Sheet Portal package.

Teachers log in, then get links to their school's attendance sheets.
Organized by feature modules (teachers, sheets, sessions, relay, ...) with a
thin Flask controller layer over service/repository layers.
"""
