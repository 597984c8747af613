"""pytest-benchmark configuration for parsecore benchmarks.

Adds project metadata to the saved benchmark JSON.

Python 3.13+.
"""

from __future__ import annotations


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Add parsecore metadata to benchmark results.

    Args:
        config: pytest config (required by pytest-benchmark hook signature)
        benchmarks: benchmark results (required by pytest-benchmark hook signature)
        output_json: JSON output dict to modify
    """
    output_json["project"] = "parsecore"
    output_json["python_version"] = "3.13+"

