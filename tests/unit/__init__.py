"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with in-memory records.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_query_params.py: Query parameter coercion
    - test_sort_spec.py: Sort spec parsing
    - test_exact_match_filter.py: Exact-match filter stages
    - test_query_pipeline.py: Filter, sort and paginate
    - test_record_validator.py: Presence checks on listings
    - test_config_loader.py: Configuration loading/validation
    - test_rapidapi_provider.py: HTTP provider over a mock transport
"""
