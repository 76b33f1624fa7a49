from tests.fixtures.fixture_engines import counting_engine, engine, rng  # noqa: F401
