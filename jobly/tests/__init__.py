'''
Jobly Backend Test Suite

Test Modules:
-------------
- test_partial_update.py: SET clause compilation, placeholder alignment
- test_filters.py: job/company filter composition, range validation
- test_job_service.py / test_company_service.py: access layer against a
  mock asyncpg connection
- test_auth.py: bearer tokens and authorization gates
- test_database.py: pool lifecycle
- test_api_jobs.py / test_api_companies.py: HTTP contract through TestClient

Running Tests:
--------------
    pip install -e ".[test]"
    pytest -v

See conftest.py for shared fixtures.
'''

__all__ = []
