"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants, source protocol
    ├── models.py         # Dataclasses for samples
    └── {feature}.py      # Fetch / generate functions

Adding a new sample source
--------------------------
1. Write a function matching ``SampleSource``::

       def fetch_something(
           lat: float, lon: float, start: date, end: date, index_type: IndexType
       ) -> list[Sample]:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return [Sample(...) for row in resp.json()["rows"]]

2. Return samples ordered by date with no duplicate dates.

3. Re-export it in ``vegetation/__init__.py`` and register it in
   ``SOURCES`` so the CLI and flows can select it by name.

4. Add tests in ``tests/test_{name}.py``.
"""
