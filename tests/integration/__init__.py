"""
Integration tests for sdk-retry.

Drive a minimal retry loop with strategies obtained through the
environment-configured selection path, across every retry mode.
"""
