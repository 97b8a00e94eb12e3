"""
Unit tests for sdk-retry.

Test individual components in isolation:
- Retry conditions and failure classification
- Strategy builders (registration, de-duplication, delay tiers)
- configure() / configure_strategy() and the "sdk" defaults bundle
- Strategy selection and reverse lookup
- Environment settings (SDK_RETRY_MODE, SDK_MAX_ATTEMPTS)
"""
