"""Command-line entrypoint package.

Composition:
    - `cli`: argparse adapter over `HanLPClient` (`hanlp-client` script).
"""
