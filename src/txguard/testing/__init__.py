"""Test-runner integration for txguard."""
