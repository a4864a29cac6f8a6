"""Test configuration and fixtures."""

import logfire

# Keep telemetry local while tests run
logfire.configure(send_to_logfire=False, console=False)
