"""RESTful service access package.

Module split:
    - `options`: immutable client configuration and environment loading.
    - `request`: wire request model and body serialization.
    - `transport`: `requests`-based HTTP calls and status handling.
    - `hanlp`: endpoint facade (`HanLPClient`).
"""
