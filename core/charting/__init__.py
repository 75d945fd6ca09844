"""Chart configuration and JSON payload helpers.

The analytics engine returns DTOs; this package reads chart settings from
Django configuration and turns engine results into JSON-ready payloads used by
the dashboard views.
"""
