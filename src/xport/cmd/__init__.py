"""Command line interface modules.

This package provides the ``xport`` command and its terminal output:
- Listing and filtering bound ports
- Stopping processes by PID or by port
- Confirmation prompts and result reporting
"""
